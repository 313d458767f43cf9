"""Domain-level player state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable

from branchline.domain.defs import CharacterDef, StatDef
from branchline.domain.entities import Character, Stat


@dataclass
class PlayerState:
    """Mutable session core: position in the story plus live roster values."""

    story_file: str
    current_node_id: str
    characters: Dict[str, Character] = field(default_factory=dict)
    stats: Dict[str, Stat] = field(default_factory=dict)

    @classmethod
    def from_roster(
        cls,
        story_file: str,
        current_node_id: str,
        character_defs: Iterable[CharacterDef],
        stat_defs: Iterable[StatDef],
    ) -> "PlayerState":
        """Build a state whose roster values are the authored initial values."""
        return cls(
            story_file=story_file,
            current_node_id=current_node_id,
            characters={definition.id: Character.from_def(definition) for definition in character_defs},
            stats={definition.id: Stat.from_def(definition) for definition in stat_defs},
        )

    def affinities(self) -> Dict[str, int]:
        return {char_id: character.affinity for char_id, character in self.characters.items()}

    def stat_values(self) -> Dict[str, int]:
        return {stat_id: stat.value for stat_id, stat in self.stats.items()}
