"""Domain definition exports."""

from .roster_def import CharacterDef, StatDef
from .story_def import StoryChoiceDef, StoryGraphDef, StoryLineDef, StoryNodeDef

__all__ = [
    "CharacterDef",
    "StatDef",
    "StoryChoiceDef",
    "StoryGraphDef",
    "StoryLineDef",
    "StoryNodeDef",
]
