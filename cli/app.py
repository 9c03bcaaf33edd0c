"""
Main CLI application for the Creature Army manager.

Loads the roster once and hands it to the menu loop or a one-shot command.
"""

from typing import Optional, TextIO

from rich.console import Console

from army import Army, SortOption
from .config import Config, load_settings
from .display import show_table
from .menus import MainMenu


class CreatureArmyCLI:
    """
    Main CLI application class.

    Usage:
        cli = CreatureArmyCLI()
        cli.run()  # Interactive mode

        # Or one-shot commands:
        cli.sort(SortOption.NAME)
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        config: Optional[Config] = None,
        err_console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ):
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.config = config or load_settings()
        self.stream = stream
        self.army = Army(capacity=self.config.capacity, err_console=self.err_console)
        self.army.load(self.config.source_path)

    def run(self) -> int:
        """Run interactive mode with menu. Always returns exit status 0."""
        menu = MainMenu(self.army, self.console, self.stream)
        result = menu.run()

        if result == 'eof':
            self.console.print("[dim]Goodbye![/dim]")
        return 0

    def print_all(self) -> int:
        """Print every creature."""
        show_table(self.console, self.army.print_all())
        return 0

    def sort(self, field: SortOption) -> int:
        """Print creatures sorted by the given field."""
        show_table(self.console, self.army.sort(field))
        return 0

    def search(self, query: str) -> int:
        """Print creatures matching the query."""
        show_table(self.console, self.army.search(query))
        return 0
