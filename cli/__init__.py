"""
Creature Army CLI - Command-line interface for browsing a creature roster.
"""

from .config import Config, load_settings, save_settings
from .display import show_config, show_table
from .menus import MainMenu, MenuPrompt, SortMenu
from .app import CreatureArmyCLI

__all__ = [
    'Config',
    'load_settings',
    'save_settings',
    'show_config',
    'show_table',
    'MainMenu',
    'MenuPrompt',
    'SortMenu',
    'CreatureArmyCLI',
]
