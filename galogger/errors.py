"""Error types raised by galogger.

Configuration mistakes (missing settings file, bad tracking id, no consent)
are raised to the caller. TransportError is never raised out of
dispatch.send(); it is returned inside a DispatchResult.
"""
from __future__ import annotations

from typing import Any


class GALoggerError(Exception):
    """Base class for all galogger errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class NotFoundError(GALoggerError):
    """Settings file does not exist."""

    def __init__(self, path: str):
        super().__init__(
            f"No settings file found at {path}. Specify the correct path "
            "or save your settings first with `galog settings save`",
            context={"path": path},
        )
        self.path = path


class ValidationError(GALoggerError):
    """A tracking id, hostname, identity or settings document is invalid."""


class ConfigError(GALoggerError):
    """A hit was sent before a tracking id was configured."""


class ConsentError(GALoggerError):
    """A hit was sent without the user's consent."""


class TransportError(GALoggerError):
    """The collect request failed on the network."""

    def __init__(self, url: str, cause: BaseException):
        super().__init__(f"Collect request failed: {cause}", context={"url": url})
        self.url = url
        self.cause = cause
