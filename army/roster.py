"""
Army Roster - Load, display, sort and search a bounded list of creatures.
"""

import re
from operator import attrgetter
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from rich.console import Console
from rich.markup import escape

from .types import Creature, SortOption


# Maximum number of creatures held by default
MAX_CREATURES = 10

# Total width of a rendered table
TABLE_WIDTH = 35
RULE = "-" * TABLE_WIDTH
HEADER = Creature("Name", "Type").render()

NO_MATCH_MESSAGE = "No matching creatures found."

# Tokens are separated by ASCII whitespace only
TOKEN_PATTERN = re.compile(r"[^ \t\n\r\f\v]+")


def render_table(creatures: Iterable[Creature], title: Optional[str] = None) -> str:
    """
    Render creatures as a fixed-width table.

    Args:
        creatures: Rows in display order
        title: Optional line printed above the table

    Returns:
        Table text, one row per line
    """
    lines = [""]
    if title:
        lines.append(title)
    lines.extend([RULE, HEADER, RULE])
    lines.extend(creature.render() for creature in creatures)
    lines.append(RULE)
    return "\n".join(lines)


# =============================================================================
# ARMY
# =============================================================================

class Army:
    """
    A bounded, ordered collection of creatures.

    Example:
        army = Army()
        army.load("creatures.txt")
        print(army.print_all())
        print(army.sort(SortOption.NAME))
        print(army.search("drag"))
    """

    def __init__(self, capacity: int = MAX_CREATURES, err_console: Optional[Console] = None):
        """
        Initialize an empty army.

        Args:
            capacity: Maximum number of creatures kept
            err_console: Console for error output (stderr by default)
        """
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self.err_console = err_console or Console(stderr=True)
        self._creatures: List[Creature] = []

    def __len__(self) -> int:
        return len(self._creatures)

    def __iter__(self) -> Iterator[Creature]:
        return iter(self._creatures)

    @property
    def count(self) -> int:
        return len(self._creatures)

    @property
    def is_full(self) -> bool:
        return len(self._creatures) >= self.capacity

    def add(self, creature: Creature) -> bool:
        """Append a creature. Returns False if the army is already full."""
        if self.is_full:
            return False
        self._creatures.append(creature)
        return True

    # =========================================================================
    # LOADING
    # =========================================================================

    def load(self, source: str | Path) -> bool:
        """
        Load creatures from a whitespace-delimited text file.

        Tokens are read pairwise as (name, type) until the file runs out or
        the army is full. A trailing unpaired token is ignored, as are pairs
        beyond capacity.

        Args:
            source: Path to the creatures file

        Returns:
            True if the file was read, False if it could not be opened
        """
        path = Path(source)
        try:
            with open(path, 'r', encoding='utf-8', errors='replace') as f:
                tokens = TOKEN_PATTERN.findall(f.read())
        except OSError:
            self.err_console.print(f"[red]Error opening file: {escape(str(path))}[/red]")
            return False

        pairs = zip(tokens[0::2], tokens[1::2])
        for name, creature_type in pairs:
            if not self.add(Creature(name, creature_type)):
                break
        return True

    # =========================================================================
    # QUERIES
    # =========================================================================

    def find(self, query: str) -> List[Creature]:
        """Creatures matching the query, in insertion order."""
        return [creature for creature in self._creatures if creature.matches(query)]

    def sorted_by(self, field: SortOption) -> List[Creature]:
        """Stable ascending snapshot ordered by the given field."""
        return sorted(self._creatures, key=attrgetter(field.attribute))

    # =========================================================================
    # RENDERING
    # =========================================================================

    def print_all(self) -> str:
        """Table of every creature in insertion order."""
        return render_table(self._creatures)

    def search(self, query: str) -> str:
        """Table of creatures matching the query, or a no-match message."""
        matches = self.find(query)
        if not matches:
            return f"\n{NO_MATCH_MESSAGE}"
        return render_table(matches, title="Matching Creatures:")

    def sort(self, field: SortOption) -> str:
        """Table of all creatures ordered by the given field."""
        return render_table(self.sorted_by(field), title="Sorted Creatures:")
