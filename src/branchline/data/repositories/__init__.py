"""Repository exports."""

from .characters_repo import CharactersRepository
from .stats_repo import StatsRepository
from .story_repo import StoryRepository

__all__ = [
    "CharactersRepository",
    "StatsRepository",
    "StoryRepository",
]
