"""Helpers for resolving content file locations."""
from __future__ import annotations

import os
from pathlib import Path

STORY_FILE_SUFFIX = ".json"
DEFAULT_STORY_FILE = "story.json"
CHARACTERS_FILE = "characters.json"
STATS_FILE = "stats.json"


def get_repo_root() -> Path:
    """Return the repository root."""
    return Path(__file__).resolve().parents[3]


def get_content_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing JSON content files."""
    if base_path is not None:
        return Path(base_path)
    override = os.environ.get("BRANCHLINE_CONTENT_DIR")
    if override:
        return Path(override)
    return get_repo_root() / "data" / "content"


def is_story_file_reference(target: str) -> bool:
    """Return True when a choice target names another story file."""
    return target.endswith(STORY_FILE_SUFFIX)


def resolve_content_file(name: str, base_path: Path | str | None = None) -> Path:
    """Resolve a content file name (as written in content) to a path."""
    return get_content_path(base_path) / name
