"""Runtime roster entities carrying live values."""
from __future__ import annotations

from dataclasses import dataclass

from branchline.domain.defs import CharacterDef, StatDef


@dataclass(slots=True)
class Character:
    """Character with a mutable affinity score."""

    id: str
    name: str
    affinity: int
    portrait: str | None = None

    @classmethod
    def from_def(cls, definition: CharacterDef) -> "Character":
        return cls(
            id=definition.id,
            name=definition.name,
            affinity=definition.affinity,
            portrait=definition.portrait,
        )


@dataclass(slots=True)
class Stat:
    """Skill stat with a mutable value."""

    id: str
    name: str
    value: int

    @classmethod
    def from_def(cls, definition: StatDef) -> "Stat":
        return cls(id=definition.id, name=definition.name, value=definition.value)
