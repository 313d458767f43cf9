from pathlib import Path

from branchline.presentation.cli import config


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    settings = config.load_config(tmp_path / "config.json")
    assert settings == {"text_display_mode": "typewriter", "content_dir": None}


def test_load_config_defaults_when_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")
    assert config.load_config(path)["text_display_mode"] == "typewriter"


def test_load_config_defaults_when_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_bytes(b'{"text_display_mode": "\xff\xfe"}')
    assert config.load_config(path) == {"text_display_mode": "typewriter", "content_dir": None}


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    config.save_config({"text_display_mode": "instant", "content_dir": "/srv/story"}, path)

    assert config.load_config(path) == {"text_display_mode": "instant", "content_dir": "/srv/story"}


def test_unknown_text_mode_normalizes_to_default(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"text_display_mode": "sideways"}', encoding="utf-8")
    assert config.load_config(path)["text_display_mode"] == "typewriter"


def test_debug_flag_requires_exact_value(monkeypatch) -> None:
    monkeypatch.setenv("BRANCHLINE_DEBUG", "true")
    assert not config.debug_enabled()
    monkeypatch.setenv("BRANCHLINE_DEBUG", "1")
    assert config.debug_enabled()
