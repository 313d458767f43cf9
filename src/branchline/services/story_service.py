"""Story progression services."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import List, Protocol, Sequence, Tuple

from branchline.data import ContentStore, DataError, Roster, is_story_file_reference
from branchline.domain.defs import StoryChoiceDef, StoryGraphDef, StoryNodeDef
from branchline.domain.effects import apply_affinity_change, apply_stat_change
from branchline.domain.gating import can_choose, requirement_hint
from branchline.domain.state import PlayerState
from branchline.services.errors import InvalidSelectionError
from branchline.services.save_service import SaveService, Snapshot

logger = logging.getLogger(__name__)

START_NODE_ID = "start"
MAX_VISIBLE_CHOICES = 3


@dataclass(slots=True)
class ChoiceView:
    """A choice as offered to the player."""

    index: int
    text: str
    enabled: bool
    requirement_hint: str = ""


@dataclass(slots=True)
class StoryNodeView:
    """Data returned to the presentation layer for rendering."""

    node_id: str
    speaker: str
    text: str
    choices: List[ChoiceView] = field(default_factory=list)
    speaker_id: str | None = None
    portrait: str | None = None


@dataclass(slots=True)
class CharacterView:
    id: str
    name: str
    affinity: int
    portrait: str | None = None


@dataclass(slots=True)
class StatView:
    id: str
    name: str
    value: int


@dataclass(slots=True)
class StoryEvent:
    """Base class for story events."""


@dataclass(slots=True)
class NodeEnteredEvent(StoryEvent):
    view: StoryNodeView


@dataclass(slots=True)
class LoadFailedEvent(StoryEvent):
    reason: str
    path: str = ""


@dataclass(slots=True)
class ChoiceResult:
    """Result returned after applying a choice."""

    events: List[StoryEvent] = field(default_factory=list)
    node_view: StoryNodeView | None = None


class StoryPresenter(Protocol):
    """Receives engine notifications; must never mutate engine state."""

    def node_entered(self, event: NodeEnteredEvent) -> None:
        ...

    def load_failed(self, event: LoadFailedEvent) -> None:
        ...


class StoryService:
    """Application service that drives the story graph.

    Owns the player state and the list of choices offered by the most recent
    node entry; every selection is validated against that list.
    """

    def __init__(
        self,
        content_store: ContentStore,
        save_service: SaveService,
        *,
        presenter: StoryPresenter | None = None,
        start_node_id: str = START_NODE_ID,
    ) -> None:
        self._content = content_store
        self._save_service = save_service
        self._presenter = presenter
        self._start_node_id = start_node_id
        self._state: PlayerState | None = None
        self._offered: List[Tuple[ChoiceView, StoryChoiceDef]] = []
        self._current_view: StoryNodeView | None = None
        self._transition_in_flight = False

    @property
    def state(self) -> PlayerState | None:
        return self._state

    @property
    def offered_choices(self) -> List[ChoiceView]:
        return [view for view, _ in self._offered]

    def resume(self) -> List[StoryEvent]:
        """Start the session, continuing from the saved snapshot when it is usable."""
        events: List[StoryEvent] = []
        snapshot = self._save_service.load()
        self._start(snapshot, events)
        return events

    def reset_session(self) -> List[StoryEvent]:
        """Forget the saved session and restart the default story from its start node."""
        self._save_service.clear()
        self._state = None
        self._offered = []
        self._current_view = None
        events: List[StoryEvent] = []
        self._start(None, events)
        return events

    def enter(self, node_id: str) -> bool:
        """Move to ``node_id`` in the current graph; returns False when refused."""
        if self._state is None:
            return False
        events: List[StoryEvent] = []
        return self._enter_node(self._state, node_id, events)

    def select_choice(self, choice_index: int) -> ChoiceResult:
        """Apply the offered choice at ``choice_index`` and advance the story."""
        if self._transition_in_flight:
            raise InvalidSelectionError("A choice is already being resolved.")
        state = self._state
        offered = self._find_offered(choice_index)
        if state is None or offered is None:
            raise InvalidSelectionError(f"Choice index {choice_index} is not currently offered.")
        choice_view, choice = offered
        if not choice_view.enabled:
            raise InvalidSelectionError(f"Choice index {choice_index} is disabled.")

        self._spend_offered_choices()
        self._transition_in_flight = True
        events: List[StoryEvent] = []
        try:
            apply_affinity_change(choice.affinity_change, state)
            apply_stat_change(choice.skill_change, state)
            target = choice.next_target
            if is_story_file_reference(target):
                graph = self._load_story(target, events)
                if graph is not None:
                    state.story_file = target
                    self._enter_node(state, self._start_node_id, events)
            else:
                self._enter_node(state, target, events)
        finally:
            self._transition_in_flight = False
        return ChoiceResult(events=events, node_view=self.get_current_node_view())

    def get_current_node_view(self) -> StoryNodeView | None:
        """Return the view of the current node with the choices still on offer."""
        return self._current_view

    def get_character_views(self) -> List[CharacterView]:
        if self._state is None:
            return []
        return [
            CharacterView(id=char.id, name=char.name, affinity=char.affinity, portrait=char.portrait)
            for char in self._state.characters.values()
        ]

    def get_stat_views(self) -> List[StatView]:
        if self._state is None:
            return []
        return [StatView(id=stat.id, name=stat.name, value=stat.value) for stat in self._state.stats.values()]

    def _start(self, snapshot: Snapshot | None, events: List[StoryEvent]) -> None:
        roster = self._load_roster(events)
        if roster is None:
            return
        story_file = snapshot.story_file if snapshot is not None else self._content.default_story_file
        graph = self._load_story(story_file, events)
        if graph is None:
            return
        state = PlayerState.from_roster(story_file, self._start_node_id, roster.characters, roster.stats)
        node_id = self._start_node_id
        if snapshot is not None and snapshot.node_id in graph:
            SaveService.restore_roster(snapshot, state)
            node_id = snapshot.node_id
            logger.info("Resuming '%s' at node '%s'", story_file, node_id)
        elif snapshot is not None:
            logger.info("Saved node '%s' not found in '%s'; starting fresh", snapshot.node_id, story_file)
        if not self._enter_node(state, node_id, events):
            logger.warning("Story '%s' has no '%s' node", story_file, node_id)

    def _enter_node(self, state: PlayerState, node_id: str, events: List[StoryEvent]) -> bool:
        graph = self._content.story
        node = graph.find(node_id) if graph is not None else None
        if node is None:
            logger.debug("Refusing transition to unknown node '%s'", node_id)
            return False
        state.current_node_id = node_id
        self._state = state
        self._save_service.save(state)
        view = self._build_view(node, state)
        self._offered = list(zip(view.choices, node.choices[:MAX_VISIBLE_CHOICES]))
        self._current_view = view
        self._emit(NodeEnteredEvent(view=view), events)
        return True

    def _build_view(self, node: StoryNodeDef, state: PlayerState) -> StoryNodeView:
        line = node.last_line
        speaker = ""
        speaker_id: str | None = None
        portrait: str | None = None
        if not line.is_narration:
            character = state.characters.get(line.character or "")
            if character is not None:
                speaker = character.name
                speaker_id = character.id
                portrait = character.portrait
        return StoryNodeView(
            node_id=node.id,
            speaker=speaker,
            text=line.text,
            choices=self._build_choice_views(node.choices[:MAX_VISIBLE_CHOICES], state),
            speaker_id=speaker_id,
            portrait=portrait,
        )

    @staticmethod
    def _build_choice_views(choices: Sequence[StoryChoiceDef], state: PlayerState) -> List[ChoiceView]:
        views: List[ChoiceView] = []
        for index, choice in enumerate(choices):
            enabled = can_choose(choice, state)
            views.append(
                ChoiceView(
                    index=index,
                    text=choice.text,
                    enabled=enabled,
                    requirement_hint="" if enabled else requirement_hint(choice, state),
                )
            )
        return views

    def _find_offered(self, choice_index: int) -> Tuple[ChoiceView, StoryChoiceDef] | None:
        for view, choice in self._offered:
            if view.index == choice_index:
                return view, choice
        return None

    def _spend_offered_choices(self) -> None:
        self._offered = []
        if self._current_view is not None:
            self._current_view = replace(self._current_view, choices=[])

    def _load_roster(self, events: List[StoryEvent]) -> Roster | None:
        try:
            return self._content.load_roster()
        except DataError as exc:
            self._report_load_failure(exc, "", events)
            return None

    def _load_story(self, path: str, events: List[StoryEvent]) -> StoryGraphDef | None:
        try:
            return self._content.load_story(path)
        except DataError as exc:
            self._report_load_failure(exc, path, events)
            return None

    def _report_load_failure(self, exc: DataError, path: str, events: List[StoryEvent]) -> None:
        logger.error("Failed to load game data: %s", exc)
        self._emit(LoadFailedEvent(reason=str(exc), path=path), events)

    def _emit(self, event: StoryEvent, events: List[StoryEvent]) -> None:
        events.append(event)
        if self._presenter is None:
            return
        if isinstance(event, NodeEnteredEvent):
            self._presenter.node_entered(event)
        elif isinstance(event, LoadFailedEvent):
            self._presenter.load_failed(event)
