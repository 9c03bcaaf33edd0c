"""Pytest configuration and fixtures for creature army tests."""

import io

import pytest
from rich.console import Console

import cli.config


def make_console() -> Console:
    """Console that records plain text output."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep tests away from the real settings file."""
    path = tmp_path / "settings" / "settings.json"
    monkeypatch.setattr(cli.config, "SETTINGS_FILE", path)
    return path


@pytest.fixture
def console():
    return make_console()


@pytest.fixture
def err_console():
    return make_console()


@pytest.fixture
def write_creatures(tmp_path):
    """Write a creatures file and return its path."""
    def _write(text: str, name: str = "creatures.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def creatures_file(write_creatures):
    return write_creatures("Dragon Flying\nCentaur Ground\nParrot Flying\n")
