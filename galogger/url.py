"""Measurement Protocol v1 URL construction.

    v=1              // Version.
    &tid=UA-XXXXX-Y  // Tracking ID / Property ID.
    &ds=GAlogger     // Data source.
    &cid=...&uid=... // Client and user id.

followed by the hit parameters for an event or a pageview. See
https://developers.google.com/analytics/devguides/collection/protocol/v1/parameters
"""
from __future__ import annotations

from galogger.errors import ValidationError
from galogger.identity import escape
from galogger.models import DEFAULT_HOSTNAME, Identity

COLLECT_ENDPOINT = "http://www.google-analytics.com/collect"
DATA_SOURCE = "GAlogger"
BASE_URL_TEMPLATE = COLLECT_ENDPOINT + "?v=1&tid={tid}&ds=" + DATA_SOURCE


def set_tracking_id(tracking_id: str | None = None) -> str:
    """Validate a tracking id such as UA-25938715-4. Only the type is checked."""
    if tracking_id is None or not isinstance(tracking_id, str):
        raise ValidationError(
            "You forgot to set up a proper tracking id. "
            f"You currently set: {tracking_id!r}"
        )
    return tracking_id


def set_hostname(hostname: str | None = DEFAULT_HOSTNAME) -> str:
    if hostname is None:
        return DEFAULT_HOSTNAME
    if not isinstance(hostname, str) or not hostname:
        raise ValidationError(f"hostname was not specified correctly: {hostname!r}")
    return hostname


def build_base_url(tracking_id: str | None) -> str:
    """Base collect URL for a tracking id."""
    if tracking_id is None:
        raise ValidationError("You must specify a Google Analytics property ID (tracking_id)")
    return BASE_URL_TEMPLATE.format(tid=escape(tracking_id))


def _with_identity(url: str, identity: Identity | None) -> str:
    if identity is None:
        raise ValidationError("Set the user first with set_user_id()")
    return f"{url}&cid={identity.client_id}&uid={identity.user_id or ''}"


def build_event_url(
    base_url: str,
    identity: Identity | None,
    category: str = "stats",
    action: str = "calculate",
    label=None,
    value=None,
) -> str:
    """Append event hit parameters (ec, ea and optionally el, ev) to base_url."""
    url = _with_identity(base_url, identity)
    url = f"{url}&t=event&ec={escape(category)}&ea={escape(action)}"
    if label is not None:
        url = f"{url}&el={escape(label)}"
    if value is not None:
        url = f"{url}&ev={escape(value)}"
    return url


def build_pageview_url(
    base_url: str,
    identity: Identity | None,
    page_url: str | None = None,
    page: str | None = None,
    title: str | None = None,
    hostname: str | None = None,
    default_hostname: str = DEFAULT_HOSTNAME,
) -> str:
    """Append pageview hit parameters to base_url.

    Exactly one group is sent: dh+dp when there is no page_url, else dt when
    a title is given, else dl.
    """
    url = _with_identity(f"{base_url}&t=pageview", identity)
    if hostname is None:
        hostname = default_hostname

    if page_url is None:
        url = f"{url}&dh={escape(hostname)}&dp={escape(page if page is not None else '')}"
    elif title is not None:
        url = f"{url}&dt={escape(title)}"
    else:
        url = f"{url}&dl={escape(page_url)}"
    return url
