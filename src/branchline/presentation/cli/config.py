"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict

from branchline.core.types import TextDisplayMode

logger = logging.getLogger(__name__)

_DEFAULT_TEXT_MODE: TextDisplayMode = "typewriter"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Branchline"
        return Path.home() / "Branchline"
    return Path.home() / ".config" / "branchline"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def get_save_path() -> Path:
    """Return the file holding the saved session slots."""
    return get_user_data_dir() / "session.json"


def debug_enabled() -> bool:
    """Return True only when BRANCHLINE_DEBUG is explicitly set to '1'."""
    return os.getenv("BRANCHLINE_DEBUG") == "1"


def _normalize_text_mode(value: object) -> TextDisplayMode:
    return "instant" if value == "instant" else _DEFAULT_TEXT_MODE


def _defaults() -> Dict[str, str | None]:
    return {"text_display_mode": _DEFAULT_TEXT_MODE, "content_dir": None}


def load_config(path: Path | None = None) -> Dict[str, str | None]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return _defaults()
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        logger.warning("Ignoring unreadable config file %s", config_path)
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    content_dir = raw.get("content_dir")
    return {
        "text_display_mode": _normalize_text_mode(raw.get("text_display_mode")),
        "content_dir": content_dir if isinstance(content_dir, str) and content_dir else None,
    }


def save_config(config: Dict[str, str | None], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "text_display_mode": _normalize_text_mode(config.get("text_display_mode")),
        "content_dir": config.get("content_dir"),
    }
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
