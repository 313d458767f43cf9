"""Content store holding the active story graph and the session rosters."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from branchline.data.paths import DEFAULT_STORY_FILE
from branchline.data.repositories import CharactersRepository, StatsRepository, StoryRepository
from branchline.domain.defs import CharacterDef, StatDef, StoryGraphDef

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Roster:
    """Authored characters and stats, in file order."""

    characters: List[CharacterDef]
    stats: List[StatDef]


class ContentStore:
    """Loads story files on demand and the rosters once per session.

    Switching story files only replaces the graph; the rosters keep the
    values parsed on first load.
    """

    def __init__(
        self,
        base_path: Path | str | None = None,
        *,
        default_story_file: str = DEFAULT_STORY_FILE,
    ) -> None:
        self._base_path = Path(base_path) if base_path is not None else None
        self._default_story_file = default_story_file
        self._characters_repo = CharactersRepository(self._base_path)
        self._stats_repo = StatsRepository(self._base_path)
        self._story: StoryGraphDef | None = None

    @property
    def default_story_file(self) -> str:
        return self._default_story_file

    @property
    def story(self) -> StoryGraphDef | None:
        """The story graph currently in use, if one has loaded."""
        return self._story

    def load_story(self, path: str) -> StoryGraphDef:
        """Parse ``path`` and make it the active story graph.

        Raises DataLoadError or DataValidationError; the previous graph stays
        active in that case.
        """
        graph = StoryRepository(path, self._base_path).graph()
        logger.info("Loaded story file '%s' with %d nodes", path, len(graph.nodes))
        self._story = graph
        return graph

    def load_roster(self) -> Roster:
        """Return the character and stat rosters, parsing them on first use."""
        return Roster(characters=self._characters_repo.all(), stats=self._stats_repo.all())
