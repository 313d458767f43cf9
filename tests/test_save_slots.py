from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

from branchline.data import ContentStore
from branchline.presentation.cli.save_slots import FileSlotStore
from branchline.services import SaveService, StoryService
from tests.helpers.story_fixtures import make_content_dir

_NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


class _Clock:
    def __init__(self) -> None:
        self.now = _NOW

    def __call__(self) -> datetime:
        return self.now


def test_set_and_get_round_trip(tmp_path: Path) -> None:
    store = FileSlotStore(tmp_path / "saves" / "session.json", clock=_Clock())
    store.set("currentNode", "lab_02")

    assert store.get("currentNode") == "lab_02"
    assert store.get("storyPath") is None


def test_entries_expire_after_lifetime(tmp_path: Path) -> None:
    clock = _Clock()
    store = FileSlotStore(tmp_path / "session.json", lifetime_days=30, clock=clock)
    store.set("currentNode", "start")

    clock.now = _NOW + timedelta(days=29)
    assert store.get("currentNode") == "start"
    clock.now = _NOW + timedelta(days=30)
    assert store.get("currentNode") is None


def test_delete_last_slot_removes_file(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    store = FileSlotStore(path, clock=_Clock())
    store.set("a", "1")
    store.set("b", "2")
    store.delete("a")
    assert path.exists()
    store.delete("b")
    store.delete("b")

    assert not path.exists()


def test_corrupt_file_reads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_text("not json", encoding="utf-8")
    store = FileSlotStore(path, clock=_Clock())

    assert store.get("currentNode") is None
    store.set("currentNode", "start")
    assert store.get("currentNode") == "start"


def test_undecodable_file_reads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_bytes(b"\xff\xfe garbage")
    store = FileSlotStore(path, clock=_Clock())

    assert store.get("storyPath") is None
    store.set("storyPath", "story.json")
    assert store.get("storyPath") == "story.json"


def test_undecodable_save_file_starts_fresh(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_bytes(b"\xff\xfe garbage")
    service = StoryService(ContentStore(make_content_dir(tmp_path)), SaveService(FileSlotStore(path)))
    service.resume()

    assert service.state is not None
    assert service.state.story_file == "story.json"
    assert service.state.current_node_id == "start"


def test_save_service_survives_process_restart(tmp_path: Path) -> None:
    from branchline.domain.defs import CharacterDef, StatDef
    from branchline.domain.state import PlayerState

    path = tmp_path / "session.json"
    state = PlayerState.from_roster(
        "story.json",
        "plan",
        [CharacterDef(id="nova", name="Nova", affinity=55)],
        [StatDef(id="hacking", name="Hacking", value=3)],
    )
    SaveService(FileSlotStore(path)).save(state)
    snapshot = SaveService(FileSlotStore(path)).load()

    assert snapshot is not None
    assert snapshot.node_id == "plan"
    assert snapshot.affinities == {"nova": 55}
