"""Shared CLI rendering helpers."""
from __future__ import annotations

import random
import sys
import textwrap
import time
from typing import Callable, Iterator, Sequence, TextIO

from branchline.core.types import TextDisplayMode
from branchline.presentation.cli.config import debug_enabled
from branchline.services import ChoiceView, StatView, StoryNodeView

DIALOGUE_WIDTH = 72
_MIN_CHAR_DELAY = 0.015
_CHAR_DELAY_JITTER = 0.025

STAT_SYMBOLS = {
    "hacking": ("💻", "\033[96m"),
    "persuasion": ("🗣️", "\033[33m"),
    "combat": ("⚔️", "\033[91m"),
    "stealth": ("🕵️", "\033[35m"),
    "tech": ("🔧", "\033[36m"),
}
DEFAULT_STAT_SYMBOL = ("🔧", "")
_RESET_COLOR = "\033[0m"


def wrap_text_for_box(text: str, width: int, *, indent_continuation: bool = False) -> list[str]:
    """
    Wrap text to fit within a fixed width, breaking on word boundaries.

    Args:
        text: The text to wrap
        width: Maximum width per line
        indent_continuation: If True, indent continuation lines with 2 spaces

    Returns:
        List of wrapped lines, each <= width characters
    """
    if not text or width <= 0:
        return [text] if text else [""]
    subsequent_indent = "  " if indent_continuation else ""
    wrapped = textwrap.fill(
        text,
        width=width,
        initial_indent="",
        subsequent_indent=subsequent_indent,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return wrapped.split("\n")


class TextReveal:
    """Character-by-character reveal of one dialogue line.

    Purely visual: skipping or cancelling it has no effect on the story.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._shown = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def done(self) -> bool:
        return self._shown >= len(self._text)

    def chunks(self) -> Iterator[str]:
        """Yield the not-yet-shown text one character at a time."""
        while not self.done:
            char = self._text[self._shown]
            self._shown += 1
            yield char

    def skip(self) -> str:
        """Mark the text fully shown and return what was still hidden."""
        remainder = self._text[self._shown:]
        self._shown = len(self._text)
        return remainder


def reveal_text(
    text: str,
    mode: TextDisplayMode,
    *,
    out: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Print ``text``; in typewriter mode Ctrl+C skips straight to the end."""
    stream = out or sys.stdout
    if mode == "instant":
        stream.write(text + "\n")
        return
    reveal = TextReveal(text)
    try:
        for char in reveal.chunks():
            stream.write(char)
            stream.flush()
            sleep(_MIN_CHAR_DELAY + random.random() * _CHAR_DELAY_JITTER)
    except KeyboardInterrupt:
        stream.write(reveal.skip())
    stream.write("\n")


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_node(view: StoryNodeView, mode: TextDisplayMode) -> None:
    """Render the speaker and dialogue line of a node."""
    if debug_enabled():
        print(f"[{view.node_id}]")
    if view.speaker:
        print(f"{view.speaker}:")
    reveal_text("\n".join(wrap_text_for_box(view.text, DIALOGUE_WIDTH)), mode)


def format_choice(choice: ChoiceView) -> str:
    label = f"{choice.index + 1}. {choice.text}"
    if not choice.enabled:
        label += " (locked)"
    if choice.requirement_hint:
        label += f" [{choice.requirement_hint}]"
    return label


def render_choices(choices: Sequence[ChoiceView]) -> None:
    """Display numbered story choices, marking locked ones."""
    if not choices:
        return
    render_heading("Choices")
    for choice in choices:
        print(format_choice(choice))


def format_stat(stat: StatView, width: int, *, colored: bool = False) -> str:
    """Return one stat panel row; unknown stats get the default symbol."""
    symbol, color = STAT_SYMBOLS.get(stat.id, DEFAULT_STAT_SYMBOL)
    row = f"{symbol} {stat.name.ljust(width)}  {stat.value:>2}"
    if colored and color:
        return f"{color}{row}{_RESET_COLOR}"
    return row


def render_stats(stats: Sequence[StatView]) -> None:
    """Print the stat panel."""
    if not stats:
        return
    width = max(len(stat.name) for stat in stats)
    render_heading("Stats")
    colored = sys.stdout.isatty()
    for stat in stats:
        print(format_stat(stat, width, colored=colored))


def render_load_failed(reason: str) -> None:
    print("Failed to load game data.")
    if debug_enabled():
        print(reason)
