import json
from pathlib import Path

from army import MAX_CREATURES
from cli.config import Config, DEFAULT_SOURCE, load_settings, save_settings


def test_defaults_when_no_settings_file(isolated_settings):
    assert not isolated_settings.exists()
    config = load_settings()
    assert config.source_path == DEFAULT_SOURCE
    assert config.capacity == MAX_CREATURES


def test_save_then_load(isolated_settings, tmp_path):
    source = tmp_path / "army.txt"
    assert save_settings(Config(source_path=source, capacity=4))

    data = json.loads(isolated_settings.read_text())
    assert data == {'source_path': str(source), 'capacity': 4}

    config = load_settings()
    assert config.source_path == source
    assert config.capacity == 4


def test_corrupt_settings_fall_back_to_defaults(isolated_settings, capsys):
    isolated_settings.parent.mkdir(parents=True)
    isolated_settings.write_text("{not json")

    config = load_settings()

    assert config == Config()
    assert "Warning: Failed to load settings" in capsys.readouterr().out


def test_negative_capacity_is_ignored(isolated_settings, capsys):
    isolated_settings.parent.mkdir(parents=True)
    isolated_settings.write_text(json.dumps({'source_path': 'x.txt', 'capacity': -3}))

    config = load_settings()

    assert config.source_path == Path('x.txt')
    assert config.capacity == MAX_CREATURES
    assert "Warning" in capsys.readouterr().out


def test_save_failure_returns_false(isolated_settings, capsys):
    # Parent "directory" is a file, so mkdir fails
    isolated_settings.parent.write_text("blocker")
    assert save_settings(Config()) is False
    assert "Warning: Failed to save settings" in capsys.readouterr().out
