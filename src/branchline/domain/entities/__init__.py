"""Runtime entity exports."""

from .roster import Character, Stat

__all__ = [
    "Character",
    "Stat",
]
