"""Persistent JSON config helpers.

Stores the pager command, the fallback separator width, and the color default.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .terminal import DEFAULT_SEPARATOR_WIDTH

APP_NAME = "si"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_PAGER = "less -RFX"


@dataclass(frozen=True)
class Settings:
    pager: str = DEFAULT_PAGER
    default_width: int = DEFAULT_SEPARATOR_WIDTH
    color: bool = True


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _coerce_positive_int(value: object, default: int) -> int:
    """Booleans and non-positive or non-integer values fall back to ``default``."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


def load_settings() -> Settings:
    """Build settings from config, dropping values of the wrong type."""
    data = load_config()
    pager = data.get("pager")
    color = data.get("color")
    return Settings(
        pager=pager if isinstance(pager, str) else DEFAULT_PAGER,
        default_width=_coerce_positive_int(data.get("default_width"), DEFAULT_SEPARATOR_WIDTH),
        color=color if isinstance(color, bool) else True,
    )


def save_settings(settings: Settings) -> None:
    config = load_config()
    config["pager"] = settings.pager
    config["default_width"] = settings.default_width
    config["color"] = bool(settings.color)
    save_config(config)
