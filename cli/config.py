"""
Configuration management for the Creature Army CLI.

Handles loading/saving settings from ~/.creature_army/settings.json
"""

import json
from dataclasses import dataclass
from pathlib import Path

from army import MAX_CREATURES

# Settings file path
SETTINGS_FILE = Path.home() / ".creature_army" / "settings.json"

# Default creatures file, relative to the working directory
DEFAULT_SOURCE = Path("creatures.txt")


@dataclass
class Config:
    """Configuration state for CLI."""
    source_path: Path = DEFAULT_SOURCE
    capacity: int = MAX_CREATURES


def load_settings() -> Config:
    """
    Load settings from disk.

    Returns:
        Config object with loaded settings
    """
    config = Config()

    if not SETTINGS_FILE.exists():
        return config

    try:
        settings = json.loads(SETTINGS_FILE.read_text())

        if 'source_path' in settings:
            config.source_path = Path(settings['source_path'])

        if 'capacity' in settings:
            capacity = int(settings['capacity'])
            if capacity < 0:
                raise ValueError(f"negative capacity {capacity}")
            config.capacity = capacity

    except (OSError, ValueError, TypeError) as e:
        print(f"Warning: Failed to load settings: {e}")

    return config


def save_settings(config: Config) -> bool:
    """
    Save settings to disk.

    Args:
        config: Config object to save

    Returns:
        True if successful
    """
    try:
        SETTINGS_FILE.parent.mkdir(parents=True, exist_ok=True)

        settings = {
            'source_path': str(config.source_path),
            'capacity': config.capacity,
        }

        SETTINGS_FILE.write_text(json.dumps(settings, indent=2))
        return True

    except OSError as e:
        print(f"Warning: Failed to save settings: {e}")
        return False
