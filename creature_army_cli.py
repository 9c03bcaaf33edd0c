#!/usr/bin/env python3
"""
Creature Army CLI - Browse a roster of creatures loaded from a text file.

The creatures file holds whitespace-separated name/type pairs, e.g.

    Dragon Flying
    Centaur Ground
    Parrot Flying

Usage:
    # Interactive mode (menu-driven)
    python creature_army_cli.py

    # One-shot commands
    python creature_army_cli.py print
    python creature_army_cli.py sort --by type
    python creature_army_cli.py search drag

    # Show or change configuration
    python creature_army_cli.py config
    python creature_army_cli.py config --set-source ~/armies/creatures.txt
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console


def non_negative_int(value: str) -> int:
    """argparse type for capacities."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid capacity: {value}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"Capacity must be >= 0: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Creature Army CLI - Print, sort and search a creature roster",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  python creature_army_cli.py

  # Use another roster file for one run
  python creature_army_cli.py --source my_creatures.txt print

  # Sort by type
  python creature_army_cli.py sort --by type
        """
    )
    parser.add_argument(
        '--source', '-s',
        type=Path,
        help='Path to creatures file (uses saved setting if not specified)'
    )
    parser.add_argument(
        '--capacity', '-c',
        type=non_negative_int,
        help='Maximum number of creatures to load (uses saved setting if not specified)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Print command
    subparsers.add_parser('print', help='Print all creatures')

    # Sort command
    sort_parser = subparsers.add_parser('sort', help='Print creatures sorted by a field')
    sort_parser.add_argument(
        '--by', '-b',
        choices=['name', 'type'],
        default='name',
        help='Field to sort by (default: name)'
    )

    # Search command
    search_parser = subparsers.add_parser('search', help='Print creatures matching a partial name or type')
    search_parser.add_argument('query', help='Case-insensitive partial name or type')

    # Config command
    config_parser = subparsers.add_parser('config', help='Show current configuration')
    config_parser.add_argument(
        '--set-source',
        type=Path,
        help='Set creatures file path'
    )
    config_parser.add_argument(
        '--set-capacity',
        type=non_negative_int,
        help='Set maximum number of creatures'
    )

    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    console = console or Console()

    # Import CLI modules (after parsing to avoid import errors on --help)
    from army import SortOption
    from cli.app import CreatureArmyCLI
    from cli.config import load_settings, save_settings
    from cli.display import show_config

    config = load_settings()

    if args.command == 'config':
        changed = False
        if args.set_source is not None:
            config.source_path = args.set_source.expanduser()
            changed = True
        if args.set_capacity is not None:
            config.capacity = args.set_capacity
            changed = True

        if changed:
            if save_settings(config):
                console.print("[green]Settings saved[/green]")
            else:
                console.print("[red]Error: Could not save settings[/red]")

    # Overrides apply to this run only
    if args.source is not None:
        config.source_path = args.source.expanduser()
    if args.capacity is not None:
        config.capacity = args.capacity

    cli = CreatureArmyCLI(console, config)

    if args.command == 'print':
        return cli.print_all()
    elif args.command == 'sort':
        field = SortOption.NAME if args.by == 'name' else SortOption.TYPE
        return cli.sort(field)
    elif args.command == 'search':
        return cli.search(args.query)
    elif args.command == 'config':
        show_config(console, config, cli.army.count)
        return 0
    else:
        # Interactive mode (no command specified)
        return cli.run()


if __name__ == '__main__':
    sys.exit(main())
