"""Character and stat roster definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CharacterDef:
    """Authored character entry with its starting affinity."""

    id: str
    name: str
    affinity: int
    portrait: str | None = None


@dataclass(frozen=True, slots=True)
class StatDef:
    """Authored skill stat entry with its starting value."""

    id: str
    name: str
    value: int
