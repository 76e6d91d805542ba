"""galogger - send usage events and pageviews to Google Analytics."""

__version__ = "0.1.0"

from galogger.errors import (
    ConfigError,
    ConsentError,
    GALoggerError,
    NotFoundError,
    TransportError,
    ValidationError,
)
from galogger.models import DispatchResult, Identity, Settings
from galogger.session import Session, initialize
from galogger.settings import delete_settings, load_settings, save_settings

__all__ = [
    "__version__",
    "ConfigError",
    "ConsentError",
    "DispatchResult",
    "GALoggerError",
    "Identity",
    "NotFoundError",
    "Session",
    "Settings",
    "TransportError",
    "ValidationError",
    "delete_settings",
    "initialize",
    "load_settings",
    "save_settings",
]
