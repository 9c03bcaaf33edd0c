"""
Army - Bounded in-memory creature roster.

Example:
    from army import Army, SortOption

    army = Army()
    army.load("creatures.txt")
    print(army.sort(SortOption.TYPE))
    print(army.search("fly"))
"""

from .types import (
    Creature,
    MenuOption,
    SortOption,
    MAX_NAME_LENGTH,
    MAX_TYPE_LENGTH,
)
from .roster import (
    Army,
    render_table,
    MAX_CREATURES,
    NO_MATCH_MESSAGE,
    TABLE_WIDTH,
)

__all__ = [
    # Types
    'Creature',
    'MenuOption',
    'SortOption',
    'MAX_NAME_LENGTH',
    'MAX_TYPE_LENGTH',
    # Classes
    'Army',
    'render_table',
    'MAX_CREATURES',
    'NO_MATCH_MESSAGE',
    'TABLE_WIDTH',
]
