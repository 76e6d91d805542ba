from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from galogger.errors import TransportError

DEFAULT_HOSTNAME = "Google.com"

# Keys written back to the settings file by Session.save().
SETTINGS_FIELDS = ("tracking_id", "hostname", "consent")


@dataclass
class Settings:
    """User configuration for one tracking property.

    extra holds keys found in a settings file that are not one of the
    known fields, so they survive a load/save cycle.
    """
    tracking_id: str | None = None
    hostname: str = DEFAULT_HOSTNAME
    consent: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        known = {k: data[k] for k in SETTINGS_FIELDS if k in data}
        extra = {k: v for k, v in data.items() if k not in SETTINGS_FIELDS}
        settings = cls(**known, extra=extra)
        if settings.hostname is None:
            settings.hostname = DEFAULT_HOSTNAME
        return settings

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.extra)
        out["tracking_id"] = self.tracking_id
        out["hostname"] = self.hostname
        out["consent"] = self.consent
        return out


@dataclass
class Identity:
    """Who a hit is attributed to. Both values are already percent-encoded."""
    client_id: str
    user_id: str | None = None


@dataclass
class DispatchResult:
    """Outcome of a single collect request.

    A transport failure is reported here instead of being raised.
    """
    ok: bool
    url: str
    status: int | None = None
    error: TransportError | None = None

    def __bool__(self) -> bool:
        return self.ok
