"""Shared type aliases for the core and domain layers."""
from typing import Literal

TextDisplayMode = Literal["instant", "typewriter"]
SnapshotSlot = Literal["storyPath", "currentNode", "characters", "stats"]

__all__ = ["SnapshotSlot", "TextDisplayMode"]
