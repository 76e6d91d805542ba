"""Caller-owned tracking session.

A Session bundles the settings, the identity and the base collect URL. Build
one with initialize() and pass it around; there is no module-level state.
Sessions do no locking, so threads sharing one must serialize access.
"""
from __future__ import annotations

import logging
import os

from rich.console import Console

from galogger import consent as consent_mod
from galogger import dispatch, url
from galogger.identity import set_client_id, set_user_id
from galogger.models import DispatchResult, Identity, SETTINGS_FIELDS, Settings
from galogger.settings import load_settings, save_settings

logger = logging.getLogger(__name__)

TELEMETRY_ENV = "GALOG_TELEMETRY"


def _telemetry_disabled() -> bool:
    return os.environ.get(TELEMETRY_ENV, "").lower() == "off"


class Session:
    """Settings, identity and base URL for one tracking property."""

    def __init__(
        self,
        settings: Settings,
        identity: Identity | None = None,
        message: str | None = None,
    ):
        self.settings = settings
        self.identity = identity or set_user_id()
        self.message = consent_mod.set_approval_message(message)
        self.url = url.build_base_url(settings.tracking_id)

    @property
    def enabled(self) -> bool:
        """True when hits would actually be sent."""
        return self.settings.tracking_id is not None and self.settings.consent is True

    # ── Setters ──────────────────────────────────────────────────────

    def set_tracking_id(self, tracking_id: str) -> str:
        self.settings.tracking_id = url.set_tracking_id(tracking_id)
        self.url = url.build_base_url(self.settings.tracking_id)
        return self.settings.tracking_id

    def set_hostname(self, hostname: str | None = None) -> str:
        self.settings.hostname = url.set_hostname(hostname)
        return self.settings.hostname

    def set_consent(self, granted: bool) -> bool:
        self.settings.consent = bool(granted) and not _telemetry_disabled()
        return self.settings.consent

    def set_user_id(self, user_id: str | None = None) -> Identity:
        """Attach user_id to the session, keeping its client id."""
        self.identity = set_user_id(user_id, client_id=self.identity.client_id)
        return self.identity

    def set_client_id(self, client_id: str | None = None) -> str:
        self.identity = Identity(
            client_id=set_client_id(client_id),
            user_id=self.identity.user_id,
        )
        return self.identity.client_id

    def request_approval(self, consent: bool = False, prompt=None,
                         console: Console | None = None) -> bool:
        granted = consent_mod.request_approval(
            message=self.message, consent=consent, prompt=prompt, console=console,
        )
        return self.set_consent(granted)

    # ── Hits ─────────────────────────────────────────────────────────

    def event_url(self, category: str = "stats", action: str = "calculate",
                  label=None, value=None) -> str:
        return url.build_event_url(self.url, self.identity, category, action,
                                   label=label, value=value)

    def pageview_url(self, page_url: str | None = None, page: str | None = None,
                     title: str | None = None, hostname: str | None = None,
                     user: Identity | None = None) -> str:
        return url.build_pageview_url(
            self.url, user or self.identity,
            page_url=page_url, page=page, title=title, hostname=hostname,
            default_hostname=self.settings.hostname,
        )

    def send(self, hit_url: str) -> DispatchResult:
        return dispatch.send(hit_url, self.settings)

    def collect_event(self, category: str = "stats", action: str = "calculate",
                      label=None, value=None) -> DispatchResult:
        """Send an event hit.

        Events show up under Behaviour > Events and in the Real-Time view,
        e.g. collect_event("Start", "shiny app launched").
        """
        return self.send(self.event_url(category, action, label=label, value=value))

    def collect_pageview(self, page_url: str | None = None, page: str | None = None,
                         title: str | None = None, hostname: str | None = None,
                         user: Identity | None = None) -> DispatchResult:
        """Send a pageview hit, attributed to user when given."""
        return self.send(self.pageview_url(page_url, page, title, hostname, user))

    def save(self, path: str | None = None) -> dict:
        """Persist tracking_id, hostname and consent to the settings file."""
        data = self.settings.to_dict()
        return save_settings(path, **{k: data[k] for k in SETTINGS_FIELDS})


def initialize(
    path: str | None = None,
    tracking_id: str | None = None,
    consent: bool = True,
    hostname: str | None = None,
    message: str | None = None,
    prompt=None,
    console: Console | None = None,
) -> Session:
    """Create a Session. This must run before any hit is collected.

    Args:
        path: Settings file to load. When given, the other arguments are ignored.
        tracking_id: Google Analytics property ID (UA-XXXXXXXX-X).
        consent: True when the developer grants consent on the user's behalf.
            False asks the user through prompt.
        hostname: Default hostname for pageviews.
        message: Custom text shown when asking for approval.
        prompt: Prompt provider used when consent is False.
        console: Where the approval message is printed.
    """
    if path is not None:
        settings = load_settings(path)
        session = Session(settings)
    else:
        settings = Settings(
            tracking_id=url.set_tracking_id(tracking_id),
            hostname=url.set_hostname(hostname),
        )
        session = Session(settings, message=message)
        session.request_approval(consent=consent, prompt=prompt, console=console)

    if _telemetry_disabled() and session.settings.consent:
        logger.info("%s=off, consent withdrawn for this session", TELEMETRY_ENV)
        session.settings.consent = False
    return session
