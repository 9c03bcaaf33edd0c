"""
Army Types - Data structures for the creature roster.

Defines the creature record and the closed sets of menu and sort choices.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


# Column widths used when rendering a creature row
MAX_NAME_LENGTH = 15
MAX_TYPE_LENGTH = 15


# =============================================================================
# CREATURES
# =============================================================================

@dataclass(frozen=True)
class Creature:
    """A single creature in the army.

    Both fields are free-form tokens taken from the source file. Values longer
    than the column width are rendered in full, so very long names push the
    table out of alignment.
    """
    name: str = "Unknown"
    type: str = "Unknown"

    def matches(self, query: str) -> bool:
        """Case-insensitive partial match against name or type."""
        q = query.lower()
        return q in self.name.lower() or q in self.type.lower()

    def render(self) -> str:
        """Render as a fixed-width table row."""
        return f"| {self.name:<{MAX_NAME_LENGTH}}| {self.type:<{MAX_TYPE_LENGTH}}|"


# =============================================================================
# MENU CHOICES
# =============================================================================

class _Choice(IntEnum):
    """Numbered menu choice parsed from user input."""

    @classmethod
    def parse(cls, text: str) -> Optional['_Choice']:
        """
        Parse a menu choice.

        Args:
            text: Raw user input

        Returns:
            The matching choice, or None if the input is not one of the options
        """
        text = text.strip()
        if not text.isdigit():
            return None
        try:
            return cls(int(text))
        except ValueError:
            return None

    @classmethod
    def choices(cls) -> list:
        """Option numbers as strings, for prompts."""
        return [str(member.value) for member in cls]


class MenuOption(_Choice):
    """Main menu options."""
    PRINT = 1
    SORT = 2
    SEARCH = 3
    EXIT = 4


class SortOption(_Choice):
    """Sort submenu options."""
    NAME = 1
    TYPE = 2
    BACK = 3

    @property
    def attribute(self) -> str:
        """Creature attribute this option sorts by."""
        if self is SortOption.BACK:
            raise ValueError("BACK is not a sort field")
        return self.name.lower()
