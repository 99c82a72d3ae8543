"""
Cell module for Minesweeper.

Represents individual cells on the game board: their content
(mine or adjacent count), whether they are revealed, and the
player's mark.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class Mark(Enum):
    """Player annotation on a cell."""

    NONE = auto()
    FLAGGED = auto()
    UNCERTAIN = auto()

    def next(self) -> "Mark":
        """Return the following mark in the NONE -> FLAGGED -> UNCERTAIN cycle."""
        return _MARK_CYCLE[self]


_MARK_CYCLE = {
    Mark.NONE: Mark.FLAGGED,
    Mark.FLAGGED: Mark.UNCERTAIN,
    Mark.UNCERTAIN: Mark.NONE,
}

# Observation codes
HIDDEN = -1
FLAGGED = -2
UNCERTAIN = -3
MINE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        revealed: Whether the cell has been uncovered. Only goes
            from False to True until the board is set up again.
        mark: Player's mark, independent of ``revealed``.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    revealed: bool = False
    mark: Mark = Mark.NONE

    def reset(self, is_mine: bool = False) -> None:
        """Return the cell to its freshly set up state."""
        self.is_mine = is_mine
        self.adjacent_mines = 0
        self.revealed = False
        self.mark = Mark.NONE

    def cycle_mark(self) -> Mark:
        """Advance the mark one step and return the new mark."""
        self.mark = self.mark.next()
        return self.mark

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.mark == Mark.FLAGGED

    @property
    def is_uncertain(self) -> bool:
        """Check if cell is marked uncertain."""
        return self.mark == Mark.UNCERTAIN

    @property
    def is_marked(self) -> bool:
        """Check if cell carries any mark."""
        return self.mark != Mark.NONE

    def to_observation(self) -> int:
        """
        Convert cell to its snapshot value.

        Returns:
            -1: Hidden, unmarked cell
            -2: Hidden, flagged cell
            -3: Hidden, uncertain cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if not self.revealed:
            if self.mark == Mark.FLAGGED:
                return FLAGGED
            if self.mark == Mark.UNCERTAIN:
                return UNCERTAIN
            return HIDDEN
        if self.is_mine:
            return MINE
        return self.adjacent_mines
