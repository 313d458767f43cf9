from __future__ import annotations

import json
from pathlib import Path
from typing import List

from branchline.data import ContentStore
from branchline.services import (
    LoadFailedEvent,
    MemorySlotStore,
    NodeEnteredEvent,
    SaveService,
    StoryService,
)

CHARACTERS = {
    "nova": {"name": "Nova", "affinity": 50, "portrait": "nova.png"},
    "rook": {"name": "Rook", "affinity": 30},
}

STATS = {
    "hacking": {"name": "Hacking", "value": 5},
    "persuasion": {"name": "Persuasion", "value": 4},
}

STORY = {
    "start": {
        "lines": [
            {"character": "system", "text": "Rain on neon."},
            {"character": "nova", "text": "Are you in?"},
        ],
        "choices": [
            {"text": "Yes.", "next": "plan", "affinityChange": {"nova": 5}},
            {"text": "Go to the lab.", "next": "lab.json", "skillChange": {"hacking": 2}},
            {"text": "Sweet-talk Rook.", "next": "plan", "affinityReq": {"rook": 60}},
            {"text": "Hidden fourth option.", "next": "plan"},
        ],
    },
    "plan": {
        "lines": [{"character": "rook", "text": "Pick a way in."}],
        "choices": [
            {"text": "Hack the door.", "next": "inside", "skillReq": {"hacking": 6}},
            {"text": "Ask the ghost.", "next": "inside", "affinityReq": {"ghost": 1}},
            {"text": "Follow a broken lead.", "next": "nowhere"},
        ],
    },
    "inside": {"lines": [{"character": "", "text": "You are in."}]},
}

LAB_STORY = {
    "start": {
        "lines": [{"character": "system", "text": "Server racks hum."}],
        "choices": [{"text": "Find the terminal.", "next": "lab_02", "skillChange": {"hacking": 1}}],
    },
    "lab_02": {
        "lines": [{"character": "nova", "text": "The core terminal."}],
        "choices": [{"text": "Leave.", "next": "story.json"}],
    },
}


class RecordingPresenter:
    """Collects every event the engine emits."""

    def __init__(self) -> None:
        self.entered: List[NodeEnteredEvent] = []
        self.failures: List[LoadFailedEvent] = []

    def node_entered(self, event: NodeEnteredEvent) -> None:
        self.entered.append(event)

    def load_failed(self, event: LoadFailedEvent) -> None:
        self.failures.append(event)


def write_json(path: Path, data: object) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def make_content_dir(tmp_path: Path, *, story: dict | None = None, lab: dict | None = None) -> Path:
    content_dir = tmp_path / "content"
    content_dir.mkdir()
    write_json(content_dir / "characters.json", CHARACTERS)
    write_json(content_dir / "stats.json", STATS)
    write_json(content_dir / "story.json", story if story is not None else STORY)
    write_json(content_dir / "lab.json", lab if lab is not None else LAB_STORY)
    return content_dir


def make_story_service(
    content_dir: Path,
    store: MemorySlotStore | None = None,
    presenter: RecordingPresenter | None = None,
) -> StoryService:
    return StoryService(
        content_store=ContentStore(content_dir),
        save_service=SaveService(store if store is not None else MemorySlotStore()),
        presenter=presenter,
    )
