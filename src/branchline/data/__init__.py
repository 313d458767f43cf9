"""Data layer utilities for loading story content."""

from .content_store import ContentStore, Roster
from .errors import DataError, DataLoadError, DataValidationError
from .paths import (
    DEFAULT_STORY_FILE,
    STORY_FILE_SUFFIX,
    get_content_path,
    get_repo_root,
    is_story_file_reference,
)

__all__ = [
    "ContentStore",
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "DEFAULT_STORY_FILE",
    "Roster",
    "STORY_FILE_SUFFIX",
    "get_content_path",
    "get_repo_root",
    "is_story_file_reference",
]
