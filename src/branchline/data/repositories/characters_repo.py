"""Character roster repository."""
from __future__ import annotations

from pathlib import Path
from typing import Dict

from branchline.data.paths import CHARACTERS_FILE
from branchline.data.repositories.base import RepositoryBase
from branchline.domain.bounds import AFFINITY_MAX, AFFINITY_MIN
from branchline.domain.defs import CharacterDef


class CharactersRepository(RepositoryBase[CharacterDef]):
    """Loads the characters whose affinity the player can earn."""

    def __init__(self, base_path: Path | str | None = None) -> None:
        super().__init__(CHARACTERS_FILE, base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CharacterDef]:
        characters: Dict[str, CharacterDef] = {}
        for raw_id, payload in raw.items():
            data = self._require_mapping(payload, f"character '{raw_id}'")
            characters[raw_id] = CharacterDef(
                id=raw_id,
                name=self._require_str(data.get("name"), f"character '{raw_id}' name"),
                affinity=self._require_int_in_range(
                    data.get("affinity"), AFFINITY_MIN, AFFINITY_MAX, f"character '{raw_id}' affinity"
                ),
                portrait=self._require_optional_str(data.get("portrait"), f"character '{raw_id}' portrait"),
            )
        return characters
