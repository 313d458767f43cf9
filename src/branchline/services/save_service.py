"""Snapshot persistence over a string key-value slot store."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Protocol

from branchline.core.types import SnapshotSlot
from branchline.domain.bounds import clamp_affinity, clamp_stat
from branchline.domain.state import PlayerState
from branchline.services.errors import SaveLoadError

logger = logging.getLogger(__name__)

SLOT_STORY_PATH: SnapshotSlot = "storyPath"
SLOT_CURRENT_NODE: SnapshotSlot = "currentNode"
SLOT_CHARACTERS: SnapshotSlot = "characters"
SLOT_STATS: SnapshotSlot = "stats"
SNAPSHOT_SLOTS: tuple[SnapshotSlot, ...] = (SLOT_STORY_PATH, SLOT_CURRENT_NODE, SLOT_CHARACTERS, SLOT_STATS)


class SlotStore(Protocol):
    """Durable key-value storage holding string values."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class MemorySlotStore:
    """In-process slot store; contents last as long as the object."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._values)


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Everything needed to resume a session."""

    story_file: str
    node_id: str
    affinities: Dict[str, int] = field(default_factory=dict)
    stats: Dict[str, int] = field(default_factory=dict)


class SaveService:
    """Writes and restores session snapshots.

    Store failures never interrupt play: a failed write is logged and the
    session simply becomes non-resumable.
    """

    def __init__(self, store: SlotStore | None = None) -> None:
        self._store: SlotStore = store if store is not None else MemorySlotStore()

    def serialize(self, state: PlayerState) -> Dict[SnapshotSlot, str]:
        """Return the slot payloads for ``state``."""
        return {
            SLOT_STORY_PATH: state.story_file,
            SLOT_CURRENT_NODE: state.current_node_id,
            SLOT_CHARACTERS: json.dumps(state.affinities(), sort_keys=True),
            SLOT_STATS: json.dumps(state.stat_values(), sort_keys=True),
        }

    def deserialize(self, slots: Mapping[str, str | None]) -> Snapshot:
        """Build a Snapshot from raw slot values, raising SaveLoadError when incomplete."""
        missing = [slot for slot in SNAPSHOT_SLOTS if not slots.get(slot)]
        if missing:
            raise SaveLoadError(f"Snapshot is missing slots: {', '.join(missing)}")
        return Snapshot(
            story_file=str(slots[SLOT_STORY_PATH]),
            node_id=str(slots[SLOT_CURRENT_NODE]),
            affinities=self._decode_int_map(slots[SLOT_CHARACTERS], SLOT_CHARACTERS),
            stats=self._decode_int_map(slots[SLOT_STATS], SLOT_STATS),
        )

    def save(self, state: PlayerState) -> bool:
        """Persist ``state``; returns False when the store rejected the write."""
        payload = self.serialize(state)
        try:
            # storyPath goes last so a partial write reads as no saved session.
            self._store.delete(SLOT_STORY_PATH)
            for slot in SNAPSHOT_SLOTS[1:]:
                self._store.set(slot, payload[slot])
            self._store.set(SLOT_STORY_PATH, payload[SLOT_STORY_PATH])
        except OSError:
            logger.warning("Could not persist session snapshot", exc_info=True)
            return False
        return True

    def load(self) -> Snapshot | None:
        """Return the stored snapshot, or None when there is no usable one."""
        try:
            slots = {slot: self._store.get(slot) for slot in SNAPSHOT_SLOTS}
        except OSError:
            logger.warning("Could not read session snapshot", exc_info=True)
            return None
        if not any(slots.values()):
            return None
        try:
            return self.deserialize(slots)
        except SaveLoadError as exc:
            logger.info("Ignoring saved session: %s", exc)
            return None

    def clear(self) -> None:
        """Remove every snapshot slot so a later load() returns None."""
        for slot in SNAPSHOT_SLOTS:
            try:
                self._store.delete(slot)
            except OSError:
                logger.warning("Could not clear snapshot slot '%s'", slot, exc_info=True)

    @staticmethod
    def restore_roster(snapshot: Snapshot, state: PlayerState) -> None:
        """Copy snapshot roster values onto ``state``; unknown ids are skipped."""
        for char_id, affinity in snapshot.affinities.items():
            character = state.characters.get(char_id)
            if character is not None:
                character.affinity = clamp_affinity(affinity)
        for stat_id, value in snapshot.stats.items():
            stat = state.stats.get(stat_id)
            if stat is not None:
                stat.value = clamp_stat(value)

    @staticmethod
    def _decode_int_map(raw: object, slot: str) -> Dict[str, int]:
        try:
            payload = json.loads(str(raw))
        except json.JSONDecodeError as exc:
            raise SaveLoadError(f"Snapshot slot '{slot}' is not valid JSON.") from exc
        if not isinstance(payload, dict):
            raise SaveLoadError(f"Snapshot slot '{slot}' must be an object.")
        result: Dict[str, int] = {}
        for key, value in payload.items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise SaveLoadError(f"Snapshot slot '{slot}' entry '{key}' must be an integer.")
            result[key] = value
        return result
