"""Base repository implementation for JSON content data."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, List, TypeVar

from branchline.data.errors import DataValidationError
from branchline.data.json_loader import load_json
from branchline.data import paths

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Common caching and loading behavior for repositories."""

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    @property
    def filename(self) -> str:
        return self._filename

    def _get_file_path(self) -> Path:
        return paths.resolve_content_file(self._filename, self._base_path)

    def _load_raw(self) -> dict[str, object]:
        file_path = self._get_file_path()
        raw = load_json(file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {file_path}")
        return raw

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def _ensure_loaded(self) -> Dict[str, T]:
        if self._definitions is None:
            raw = self._load_raw()
            self._definitions = self._build(raw)
        return self._definitions

    def all(self) -> List[T]:
        """Return all definitions in authored order."""
        return list(self._ensure_loaded().values())

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_optional_str(value: object, context: str) -> str | None:
        if value is None:
            return None
        return RepositoryBase._require_str(value, context)

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        # bool is an int subclass; content must use real numbers.
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context} must be an integer.")
        return value

    @staticmethod
    def _require_int_in_range(value: object, lower: int, upper: int, context: str) -> int:
        number = RepositoryBase._require_int(value, context)
        if not lower <= number <= upper:
            raise DataValidationError(f"{context} must be between {lower} and {upper}.")
        return number

    @staticmethod
    def _require_int_map(value: object, context: str) -> Dict[str, int]:
        """Parse an optional ``id -> int`` object; None means empty."""
        if value is None:
            return {}
        mapping = RepositoryBase._require_mapping(value, context)
        return {key: RepositoryBase._require_int(entry, f"{context}.{key}") for key, entry in mapping.items()}
