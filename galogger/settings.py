"""Flat JSON settings file: tracking_id, hostname, consent.

The default location is ~/galog_settings.json. Set GALOG_SETTINGS to use
another file without passing a path everywhere.
"""
from __future__ import annotations

import json
import logging
import os

from galogger.errors import NotFoundError, ValidationError
from galogger.models import SETTINGS_FIELDS, Settings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = os.path.join("~", "galog_settings.json")
SETTINGS_ENV = "GALOG_SETTINGS"


def settings_path(path: str | None = None) -> str:
    """Resolve the settings file path: explicit, then $GALOG_SETTINGS, then default."""
    if path is None:
        path = os.environ.get(SETTINGS_ENV) or DEFAULT_SETTINGS_PATH
    return os.path.expanduser(str(path))


def _read(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(f"Settings file {path} is not valid UTF-8 JSON: {e}",
                              context={"path": path}) from e
    if not isinstance(data, dict):
        raise ValidationError(f"Settings file {path} must hold a JSON object",
                              context={"path": path})
    # Array-boxing JSON writers store the known scalars as [value].
    return {k: v[0] if k in SETTINGS_FIELDS and isinstance(v, list) and len(v) == 1 else v
            for k, v in data.items()}


def load_raw(path: str | None = None) -> dict:
    """Return the stored key-value pairs without converting them to Settings."""
    path = settings_path(path)
    if not os.path.exists(path):
        raise NotFoundError(path)
    return _read(path)


def load_settings(path: str | None = None) -> Settings:
    """Load Settings from path. Raises NotFoundError if the file is missing."""
    data = load_raw(path)
    settings = Settings.from_dict(data)
    if settings.extra:
        logger.debug("Unknown settings keys kept as-is: %s", sorted(settings.extra))
    logger.info("Settings have been loaded from %s", settings_path(path))
    return settings


def save_settings(path: str | None = None, **settings) -> dict:
    """Merge settings into the file at path and rewrite it.

    Keys already in the file are kept unless a new value is given for them.
    Returns the merged document.
    """
    path = settings_path(path)
    merged: dict = {}
    if os.path.exists(path):
        merged.update(_read(path))
    merged.update(settings)

    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(merged, f, indent=2)
    logger.info("Settings have been saved to %s", path)
    return merged


def delete_settings(path: str | None = None) -> bool:
    """Remove the settings file. Returns False when there was nothing to delete."""
    path = settings_path(path)
    if not os.path.exists(path):
        logger.info("No settings file to delete at %s", path)
        return False
    os.remove(path)
    logger.info("Settings have been deleted from %s", path)
    return True
