"""File-system slot store for the saved session."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Dict

from branchline.presentation.cli import config

logger = logging.getLogger(__name__)

DEFAULT_LIFETIME_DAYS = 30


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FileSlotStore:
    """Keeps string slots in one JSON file, each with an expiry time.

    Expired, malformed or unreadable entries read as absent.
    """

    def __init__(
        self,
        path: Path | str | None = None,
        *,
        lifetime_days: int = DEFAULT_LIFETIME_DAYS,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._path = Path(path) if path is not None else config.get_save_path()
        self._lifetime = timedelta(days=lifetime_days)
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        entry = self._read_entries().get(key)
        if not isinstance(entry, dict):
            return None
        value = entry.get("value")
        if not isinstance(value, str):
            return None
        if self._is_expired(entry.get("expires_at")):
            return None
        return value

    def set(self, key: str, value: str) -> None:
        entries = self._read_entries()
        entries[key] = {
            "value": value,
            "expires_at": (self._clock() + self._lifetime).isoformat(),
        }
        self._write_entries(entries)

    def delete(self, key: str) -> None:
        entries = self._read_entries()
        if key not in entries:
            return
        del entries[key]
        if entries:
            self._write_entries(entries)
            return
        try:
            self._path.unlink()
        except FileNotFoundError:
            return

    def _is_expired(self, raw_expiry: object) -> bool:
        if not isinstance(raw_expiry, str):
            return True
        try:
            expires_at = datetime.fromisoformat(raw_expiry)
        except ValueError:
            return True
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at <= self._clock()

    def _read_entries(self) -> Dict[str, object]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError:
            logger.warning("Discarding corrupt save file %s", self._path)
            return {}
        try:
            payload = json.loads(text)
        except json.JSONDecodeError:
            logger.warning("Discarding corrupt save file %s", self._path)
            return {}
        return payload if isinstance(payload, dict) else {}

    def _write_entries(self, entries: Dict[str, object]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(entries, indent=2, sort_keys=True), encoding="utf-8")
