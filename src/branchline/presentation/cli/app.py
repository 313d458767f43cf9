"""Console-driven UI loop for Branchline."""
from __future__ import annotations

import logging
from typing import Literal, Sequence

from branchline.core.types import TextDisplayMode
from branchline.data import ContentStore
from branchline.presentation.cli import config
from branchline.presentation.cli.render import (
    render_choices,
    render_load_failed,
    render_node,
    render_stats,
)
from branchline.presentation.cli.save_slots import FileSlotStore
from branchline.services import (
    ChoiceView,
    InvalidSelectionError,
    LoadFailedEvent,
    NodeEnteredEvent,
    SaveService,
    StoryService,
)

MenuAction = Literal["reset", "quit"]


class CliPresenter:
    """Prints engine notifications to the console."""

    def __init__(self, text_mode: TextDisplayMode) -> None:
        self._text_mode = text_mode

    def node_entered(self, event: NodeEnteredEvent) -> None:
        print()
        render_node(event.view, self._text_mode)
        render_choices(event.view.choices)

    def load_failed(self, event: LoadFailedEvent) -> None:
        render_load_failed(event.reason)


def main() -> None:
    """Start the interactive CLI session."""
    _configure_logging()
    settings = config.load_config()
    text_mode: TextDisplayMode = "instant" if settings.get("text_display_mode") == "instant" else "typewriter"
    story_service = _build_story_service(CliPresenter(text_mode), settings.get("content_dir"))
    print("=== Branchline ===")
    print("Enter a choice number, 'r' to restart the story or 'q' to quit.")
    story_service.resume()
    _run_story_loop(story_service)
    print("Goodbye!")


def _configure_logging() -> None:
    level = logging.DEBUG if config.debug_enabled() else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _build_story_service(presenter: CliPresenter, content_dir: str | None = None) -> StoryService:
    """Construct the StoryService with the on-disk content and save file."""
    return StoryService(
        content_store=ContentStore(content_dir),
        save_service=SaveService(FileSlotStore()),
        presenter=presenter,
    )


def _run_story_loop(story_service: StoryService) -> None:
    while True:
        render_stats(story_service.get_stat_views())
        choices = story_service.offered_choices
        if not choices:
            print("\nThe story stops here.")
        action = _prompt_action(choices)
        if action == "quit":
            return
        if action == "reset":
            story_service.reset_session()
            continue
        try:
            story_service.select_choice(action)
        except InvalidSelectionError:
            print("That choice is no longer available.")


def _prompt_action(choices: Sequence[ChoiceView]) -> int | MenuAction:
    enabled = {choice.index for choice in choices if choice.enabled}
    while True:
        raw = input("> ").strip().lower()
        if raw == "q":
            return "quit"
        if raw == "r":
            return "reset"
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number, 'r' or 'q'.")
            continue
        if index in enabled:
            return index
        if any(choice.index == index for choice in choices):
            print("That choice is locked.")
            continue
        print("Please pick one of the listed choices.")
