"""Service layer exports."""

from .errors import InvalidSelectionError, SaveLoadError
from .save_service import MemorySlotStore, SaveService, SlotStore, Snapshot
from .story_service import (
    MAX_VISIBLE_CHOICES,
    START_NODE_ID,
    CharacterView,
    ChoiceResult,
    ChoiceView,
    LoadFailedEvent,
    NodeEnteredEvent,
    StatView,
    StoryEvent,
    StoryNodeView,
    StoryPresenter,
    StoryService,
)

__all__ = [
    "CharacterView",
    "ChoiceResult",
    "ChoiceView",
    "InvalidSelectionError",
    "LoadFailedEvent",
    "MAX_VISIBLE_CHOICES",
    "MemorySlotStore",
    "NodeEnteredEvent",
    "SaveLoadError",
    "SaveService",
    "SlotStore",
    "Snapshot",
    "START_NODE_ID",
    "StatView",
    "StoryEvent",
    "StoryNodeView",
    "StoryPresenter",
    "StoryService",
]
