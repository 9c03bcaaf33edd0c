"""
Interactive menu system for the Creature Army CLI.

Uses rich library for styled prompts and displays.
"""

from typing import Optional, TextIO

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt

from army import Army, MenuOption, SortOption
from .display import show_table


class MenuPrompt(Prompt):
    """Prompt that re-asks on invalid choices and treats end of input as EOF."""

    illegal_choice_message = "[prompt.invalid.choice]Invalid choice. Try again."

    @classmethod
    def get_input(
        cls,
        console: Console,
        prompt,
        password: bool,
        stream: Optional[TextIO] = None,
    ) -> str:
        result = console.input(prompt, password=password, stream=stream)
        # readline() returns "" only at end of stream
        if stream is not None and result == "":
            raise EOFError
        return result


class SortMenu:
    """
    Sort submenu. Loops until the user goes back.

    Usage:
        SortMenu(army, console).run()
    """

    def __init__(self, army: Army, console: Optional[Console] = None, stream: Optional[TextIO] = None):
        self.army = army
        self.console = console or Console()
        self.stream = stream

    def run(self):
        """Run the sort loop until 'Back' is chosen."""
        while True:
            choice = self._show_options()

            if choice is SortOption.BACK:
                self.console.print("Returning to main menu...")
                return

            show_table(self.console, self.army.sort(choice))

    def _show_options(self) -> SortOption:
        """Show sort options and get choice."""
        self.console.print("\n[bold]Sort Menu:[/bold]")
        self.console.print("  [cyan]1[/cyan] Sort by Name")
        self.console.print("  [cyan]2[/cyan] Sort by Type")
        self.console.print("  [cyan]3[/cyan] Go Back to Main Menu")

        choice = MenuPrompt.ask(
            "Enter choice",
            choices=SortOption.choices(),
            console=self.console,
            stream=self.stream,
        )
        return SortOption.parse(choice)


class MainMenu:
    """
    Main interactive menu for the Creature Army CLI.

    Usage:
        menu = MainMenu(army, console)
        menu.run()  # Blocking loop until exit
    """

    def __init__(self, army: Army, console: Optional[Console] = None, stream: Optional[TextIO] = None):
        self.army = army
        self.console = console or Console()
        self.stream = stream

    def run(self) -> str:
        """
        Run the main menu loop.

        Returns:
            'exit' if user chose to exit
            'eof' if input ran out
        """
        self._show_header()

        try:
            while True:
                choice = self._show_main_options()

                if choice is MenuOption.PRINT:
                    show_table(self.console, self.army.print_all())
                elif choice is MenuOption.SORT:
                    SortMenu(self.army, self.console, self.stream).run()
                elif choice is MenuOption.SEARCH:
                    show_table(self.console, self.army.search(self._ask_query()))
                elif choice is MenuOption.EXIT:
                    self.console.print("Exiting program...")
                    return 'exit'
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            return 'eof'

    def _show_header(self):
        """Show the header."""
        self.console.print(Panel(
            "[bold cyan]Creature Army[/bold cyan]\n"
            f"[dim]{self.army.count} of {self.army.capacity} creatures loaded[/dim]",
            border_style="blue"
        ))

    def _show_main_options(self) -> MenuOption:
        """Show main menu options and get choice."""
        self.console.print("\n[bold]Menu:[/bold]")
        self.console.print("  [cyan]1[/cyan] Print Creatures")
        self.console.print("  [cyan]2[/cyan] Sort Creatures")
        self.console.print("  [cyan]3[/cyan] Search Creatures")
        self.console.print("  [cyan]4[/cyan] Exit")

        choice = MenuPrompt.ask(
            "Enter choice",
            choices=MenuOption.choices(),
            console=self.console,
            stream=self.stream,
        )
        return MenuOption.parse(choice)

    def _ask_query(self) -> str:
        """Ask for a search token, re-prompting on blank input."""
        while True:
            reply = MenuPrompt.ask(
                "Enter partial name or type to search",
                console=self.console,
                stream=self.stream,
            )
            tokens = reply.split()
            if tokens:
                return tokens[0]
