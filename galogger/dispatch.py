"""One-way collect dispatch. GET only, response body never read.

send() is the only network call in galogger. Missing configuration and
missing consent raise; anything that goes wrong on the wire is returned as
a failed DispatchResult so that analytics never takes down the host program.
"""
from __future__ import annotations

import http.client
import logging
import urllib.error
import urllib.request

from galogger.errors import ConfigError, ConsentError, TransportError
from galogger.models import DispatchResult, Settings

logger = logging.getLogger(__name__)

TIMEOUT_SECONDS = 5


def send(url: str, settings: Settings | None, timeout: float = TIMEOUT_SECONDS) -> DispatchResult:
    """Send a collect URL once.

    Raises:
        ConfigError: no tracking id has been configured.
        ConsentError: consent was not granted. Nothing is sent.
    """
    if settings is None or settings.tracking_id is None:
        raise ConfigError(
            "You forgot to set the tracking_id which looks like UA-XXXXXXXX-X, "
            "see set_tracking_id() or `galog settings save`"
        )
    if settings.consent is not True:
        raise ConsentError("No consent given to send data to Google")

    try:
        req = urllib.request.Request(url, method="GET")
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            status = resp.status
            logger.debug("Collect GET %s: HTTP %d", url, status)
            return DispatchResult(ok=200 <= status < 300, url=url, status=status)
    except urllib.error.HTTPError as e:
        logger.debug("Collect GET %s: HTTP %d", url, e.code)
        e.close()
        return DispatchResult(ok=False, url=url, status=e.code, error=TransportError(url, e))
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as e:
        logger.debug("Collect GET %s failed: %s", url, e)
        return DispatchResult(ok=False, url=url, error=TransportError(url, e))
