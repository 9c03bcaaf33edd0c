"""
Terminal display helpers for the Creature Army CLI.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import config as settings
from .config import Config


def show_table(console: Console, text: str):
    """Print a pre-rendered fixed-width table exactly as given."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def show_config(console: Console, config: Config, loaded: int):
    """Show current configuration."""
    console.print("[bold]Current Configuration:[/bold]")
    console.print()

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="dim")
    table.add_column("Value")

    if config.source_path.exists():
        table.add_row("Source File:", f"[green]{escape(str(config.source_path))}[/green]")
    else:
        table.add_row("Source File:", f"[red]{escape(str(config.source_path))} (not found)[/red]")

    table.add_row("Capacity:", str(config.capacity))
    table.add_row("Loaded:", f"{loaded} creature(s)")
    table.add_row("Settings:", f"[dim]{escape(str(settings.SETTINGS_FILE))}[/dim]")

    console.print(table)
