import io
import json

import pytest
from rich.console import Console

from army import Creature, SortOption
from cli.app import CreatureArmyCLI
from cli.config import Config
from creature_army_cli import main


DRAGON = Creature("Dragon", "Flying").render()
CENTAUR = Creature("Centaur", "Ground").render()
PARROT = Creature("Parrot", "Flying").render()


def test_app_loads_configured_source(creatures_file, console, err_console):
    app = CreatureArmyCLI(console, Config(source_path=creatures_file), err_console)
    assert app.army.count == 3
    assert app.sort(SortOption.NAME) == 0
    out = console.file.getvalue()
    assert out.index(CENTAUR) < out.index(DRAGON) < out.index(PARROT)


def test_app_missing_source_is_not_fatal(tmp_path, console, err_console):
    config = Config(source_path=tmp_path / "missing.txt")
    app = CreatureArmyCLI(console, config, err_console, stream=io.StringIO("1\n4\n"))

    assert app.army.count == 0
    assert "Error opening file" in err_console.file.getvalue()
    assert app.run() == 0
    assert "Exiting program..." in console.file.getvalue()


def test_app_says_goodbye_on_end_of_input(creatures_file, console, err_console):
    app = CreatureArmyCLI(console, Config(source_path=creatures_file), err_console, stream=io.StringIO(""))
    assert app.run() == 0
    assert "Goodbye!" in console.file.getvalue()


def test_main_print(creatures_file, console):
    assert main(["--source", str(creatures_file), "print"], console=console) == 0
    out = console.file.getvalue()
    assert out.index(DRAGON) < out.index(CENTAUR) < out.index(PARROT)


def test_main_sort_by_type(creatures_file, console):
    assert main(["-s", str(creatures_file), "sort", "--by", "type"], console=console) == 0
    out = console.file.getvalue()
    assert out.index(DRAGON) < out.index(PARROT) < out.index(CENTAUR)


def test_main_search(creatures_file, console):
    assert main(["-s", str(creatures_file), "search", "PARR"], console=console) == 0
    out = console.file.getvalue()
    assert PARROT in out
    assert DRAGON not in out


def test_main_capacity_override(creatures_file, console):
    main(["-s", str(creatures_file), "-c", "1", "print"], console=console)
    out = console.file.getvalue()
    assert DRAGON in out
    assert CENTAUR not in out


def test_main_rejects_negative_capacity(creatures_file, console):
    with pytest.raises(SystemExit) as exc:
        main(["-s", str(creatures_file), "-c", "-2", "print"], console=console)
    assert exc.value.code == 2


def test_main_config_saves_settings(creatures_file, console, isolated_settings):
    assert main(["config", "--set-source", str(creatures_file), "--set-capacity", "5"], console=console) == 0

    assert json.loads(isolated_settings.read_text()) == {
        'source_path': str(creatures_file),
        'capacity': 5,
    }
    out = console.file.getvalue()
    assert "Settings saved" in out
    assert "Capacity:" in out
    assert "3 creature(s)" in out


def test_main_uses_saved_source(creatures_file, console):
    main(["config", "--set-source", str(creatures_file)], console=console)
    assert main(["search", "ground"], console=console) == 0
    assert CENTAUR in console.file.getvalue()


def test_main_interactive_reads_stdin(creatures_file, console, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\ndragon\n4\n"))
    assert main(["-s", str(creatures_file)], console=console) == 0
    out = console.file.getvalue()
    assert "Matching Creatures:" in out
    assert DRAGON in out
    assert "Exiting program..." in out


def test_main_config_with_brackets_in_source(tmp_path):
    console = Console(file=io.StringIO(), width=400, color_system=None)
    source = tmp_path / "armies[/b].txt"

    assert main(["config", "--set-source", str(source)], console=console) == 0

    out = console.file.getvalue()
    assert "armies[/b].txt (not found)" in out
    assert "Loaded:" in out
