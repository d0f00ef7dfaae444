"""Settings read from an optional config.yaml in the data directory."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.yaml"
HOME_ENV = "BLITZIT_HOME"

BLITZIT_DEFAULTS = {
    "storage-key": "blitzit_dnd_state_v1",
    "log-level": "warning",
    "confirm-scheduled": True,
}


def _python_key(key: str) -> str:
    """Convert config-style key (hyphenated) to Python-style (underscored)."""
    return key.replace("-", "_")


def _coerce_value(key: str, raw: Any) -> Any:
    """Type-coerce values using the defaults' types."""
    default = BLITZIT_DEFAULTS.get(key)
    if default is None:
        return raw
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        return str(raw).lower() in ("true", "yes", "on", "1")
    return str(raw)


def default_data_dir() -> Path:
    """$BLITZIT_HOME, else ~/.local/share/blitzit."""
    home = os.environ.get(HOME_ENV)
    if home:
        return Path(home)
    return Path.home() / ".local" / "share" / "blitzit"


def read_config(data_dir: str | Path) -> dict[str, Any]:
    """Read config.yaml into a dict of underscored keys, merged over the defaults.

    A missing or malformed file yields the defaults.
    """
    path = Path(data_dir) / CONFIG_FILE
    raw: Any = {}
    if path.exists():
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError):
            logger.warning("ignoring unreadable config %s", path, exc_info=True)
            raw = {}
    if not isinstance(raw, dict):
        logger.warning("ignoring config %s: not a mapping", path)
        raw = {}

    result: dict[str, Any] = {}
    for key, value in raw.items():
        key = str(key).replace("_", "-")
        try:
            result[_python_key(key)] = _coerce_value(key, value)
        except (TypeError, ValueError):
            logger.warning("ignoring bad config value %s=%r", key, value)
    for key, default in BLITZIT_DEFAULTS.items():
        result.setdefault(_python_key(key), default)
    return result
