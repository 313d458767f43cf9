"""Skill stat roster repository."""
from __future__ import annotations

from pathlib import Path
from typing import Dict

from branchline.data.paths import STATS_FILE
from branchline.data.repositories.base import RepositoryBase
from branchline.domain.bounds import STAT_MAX, STAT_MIN
from branchline.domain.defs import StatDef


class StatsRepository(RepositoryBase[StatDef]):
    """Loads skill stats and their starting values."""

    def __init__(self, base_path: Path | str | None = None) -> None:
        super().__init__(STATS_FILE, base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, StatDef]:
        stats: Dict[str, StatDef] = {}
        for raw_id, payload in raw.items():
            data = self._require_mapping(payload, f"stat '{raw_id}'")
            stats[raw_id] = StatDef(
                id=raw_id,
                name=self._require_str(data.get("name"), f"stat '{raw_id}' name"),
                value=self._require_int_in_range(data.get("value"), STAT_MIN, STAT_MAX, f"stat '{raw_id}' value"),
            )
        return stats
