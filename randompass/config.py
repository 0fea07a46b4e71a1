"""
Persisted default generation settings for randompass.
Settings saved as JSON in %APPDATA%/RandomPass/config.json (Windows) or ~/.randompass/config.json (fallback)
"""

import logging
import os
from typing import Any, Dict, Optional

from .errors import ValidationError
from .models import DEFAULT_COUNT, DEFAULT_LENGTH, MIN_LENGTH
from .storage import data_dir, read_json, write_json

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": DEFAULT_LENGTH,
    "count": DEFAULT_COUNT,
    "exportable": False,
    "specials": None,  # None means the full special character set
}

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def config_path() -> str:
    return os.path.join(data_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        data = read_json(p)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults, dropping unknown keys and badly typed values
    out = DEFAULTS.copy()
    for key, value in data.items():
        if key not in DEFAULTS:
            continue
        if not valid_setting(key, value):
            logger.warning("Ignoring invalid %s=%r in config %s; using %r", key, value, p, DEFAULTS[key])
            continue
        out[key] = value
    return out


def valid_setting(key: str, value: Any) -> bool:
    """Check a loaded JSON value against the type and bounds of `key`."""
    if key in ("length", "count"):
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return value >= (MIN_LENGTH if key == "length" else 1)
    if key == "exportable":
        return isinstance(value, bool)
    if key == "specials":
        return value is None or isinstance(value, str)
    return False


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    write_json(p, cfg)
    return p


def parse_setting(key: str, raw: str) -> Any:
    """Convert a command-line string into the typed value for `key`."""
    if key not in DEFAULTS:
        raise ValidationError(f"Unknown setting '{key}' (expected one of: {', '.join(DEFAULTS)})")
    if key in ("length", "count"):
        try:
            value = int(raw)
        except ValueError:
            raise ValidationError(f"{key} must be an integer (got '{raw}')") from None
        minimum = MIN_LENGTH if key == "length" else 1
        if value < minimum:
            raise ValidationError(f"{key} must be >= {minimum} (got {value})")
        return value
    if key == "exportable":
        lowered = raw.lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValidationError(f"exportable must be true or false (got '{raw}')")
    # specials: empty string resets to the full set
    return raw or None


def set_setting(key: str, raw: str, path: Optional[str] = None) -> Dict[str, Any]:
    cfg = load_config(path)
    cfg[key] = parse_setting(key, raw)
    save_config(cfg, path)
    return cfg
