"""
Board module for Minesweeper.

Implements the game board with mine placement, cascading reveal,
marking, cursor handling and win/lose state.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Tuple

import numpy as np

from .cell import Cell, Mark
from .sampler import MineSampler, RandomSampler


Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class ConfigError(ValueError):
    """Board configuration that cannot be played."""


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 8
    height: int = 8
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ConfigError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigError("Number of mines cannot be negative")
        max_mines = self.width * self.height
        if self.num_mines > max_mines:
            raise ConfigError(f"Too many mines (max {max_mines})")

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @classmethod
    def from_difficulty(cls, name: str) -> "BoardConfig":
        """Look up a preset by name (easy, medium, hard)."""
        try:
            return DIFFICULTIES[name]
        except KeyError:
            raise ConfigError(f"Invalid difficulty: {name!r}") from None


# Preset difficulty levels
EASY = BoardConfig(8, 8, 10)
MEDIUM = BoardConfig(16, 16, 40)
HARD = BoardConfig(30, 16, 99)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}

_OFFSETS = [
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if (dx, dy) != (0, 0)
]


# ============================================================================
# Snapshot
# ============================================================================

@dataclass(frozen=True)
class BoardSnapshot:
    """
    Read-only view of the board for renderers and agents.

    ``observation`` is indexed ``[y, x]`` and uses the codes from
    :meth:`Cell.to_observation`.
    """

    width: int
    height: int
    num_mines: int
    cursor: Position
    state: GameState
    observation: np.ndarray
    flags: int


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells (row-major, addressed by ``(x, y)``), the
    cursor and the game state. The grid starts with no mines; call
    :meth:`setup` before playing and again to restart.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    sampler: MineSampler = field(default_factory=RandomSampler, repr=False)
    _cells: List[Cell] = field(default_factory=list, repr=False)
    _cursor: Position = (0, 0)
    _game_state: GameState = GameState.PLAYING

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._cells = [Cell() for _ in range(self.config.cell_count)]

    # ========================================================================
    # Position Utilities (Low-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def position_to_index(self, x: int, y: int) -> int:
        """Convert ``(x, y)`` to a flat row-major index."""
        if not self.is_valid_position(x, y):
            raise IndexError(f"Position ({x}, {y}) outside {self.width}x{self.height} board")
        return x + y * self.width

    def index_to_position(self, index: int) -> Position:
        """Convert a flat index back to ``(x, y)``."""
        if not 0 <= index < self.config.cell_count:
            raise IndexError(f"Index {index} outside board")
        return index % self.width, index // self.width

    def get_cell(self, x: int, y: int) -> Cell:
        """Get cell at position. Raises IndexError when out of bounds."""
        return self._cells[self.position_to_index(x, y)]

    def neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighboring positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            Up to eight ``(x, y)`` tuples, clipped to the board.
        """
        result = []
        for dx, dy in _OFFSETS:
            nx, ny = x + dx, y + dy
            if self.is_valid_position(nx, ny):
                result.append((nx, ny))
        return result

    # ========================================================================
    # Setup (Mid-level)
    # ========================================================================

    def setup(self) -> None:
        """
        Place mines and reset every cell and the game state.

        Mine positions come from the sampler, so every call
        re-randomizes the board. Dimensions never change.
        """
        mine_indices = set(self.sampler(self.config.cell_count, self.num_mines))
        for index, cell in enumerate(self._cells):
            cell.reset(is_mine=index in mine_indices)
        self._calculate_adjacent_mines()
        self._game_state = GameState.PLAYING

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all empty cells."""
        for index, cell in enumerate(self._cells):
            if cell.is_mine:
                continue
            x, y = self.index_to_position(index)
            cell.adjacent_mines = sum(
                1 for nx, ny in self.neighbors(x, y)
                if self.get_cell(nx, ny).is_mine
            )

    # ========================================================================
    # Cursor
    # ========================================================================

    @property
    def cursor(self) -> Position:
        return self._cursor

    def move_cursor(self, x: int, y: int) -> None:
        """Move the cursor; out-of-range targets are ignored."""
        if self.is_valid_position(x, y):
            self._cursor = (x, y)

    def move_cursor_x(self, x: int) -> None:
        self.move_cursor(x, self._cursor[1])

    def move_cursor_y(self, y: int) -> None:
        self.move_cursor(self._cursor[0], y)

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal_cell(self, x: int, y: int, user_initiated: bool = True) -> int:
        """
        Reveal a cell and cascade through satisfied neighbors.

        Marked cells (flagged or uncertain) are never revealed. A
        revealed empty cell whose flagged-neighbor count equals its
        number reveals every unmarked neighbor, and so on outward.
        Uncertain neighbors block the cascade but do not count as
        flags. A user-initiated reveal of an already revealed cell
        re-runs this check, so flagging around a number and revealing
        it again clears the rest of its neighbors.

        Revealing a mine sets the game to LOST.

        Args:
            x: Column to reveal.
            y: Row to reveal.
            user_initiated: False for cascade steps, which skip cells
                that are already revealed.

        Returns:
            Number of cells that went from hidden to revealed.
        """
        self.position_to_index(x, y)
        newly_revealed = 0
        pending = [(x, y, user_initiated)]
        queued = {(x, y)}

        while pending:
            cx, cy, forced = pending.pop()
            cell = self.get_cell(cx, cy)
            if cell.is_marked:
                continue
            if not forced and cell.revealed:
                continue
            if not cell.revealed:
                cell.revealed = True
                newly_revealed += 1

            if cell.is_mine:
                self._game_state = GameState.LOST
                continue

            adjacent = self.neighbors(cx, cy)
            if self._count_adjacent_flags(adjacent) != cell.adjacent_mines:
                continue
            for nx, ny in adjacent:
                neighbor = self.get_cell(nx, ny)
                if neighbor.mark != Mark.NONE or neighbor.revealed:
                    continue
                if (nx, ny) in queued:
                    continue
                queued.add((nx, ny))
                pending.append((nx, ny, False))

        return newly_revealed

    def _count_adjacent_flags(self, positions: List[Position]) -> int:
        """Count flagged cells among the given positions."""
        return sum(1 for nx, ny in positions if self.get_cell(nx, ny).is_flagged)

    def cycle_mark(self, x: int, y: int) -> Mark:
        """Rotate the mark NONE -> FLAGGED -> UNCERTAIN -> NONE."""
        return self.get_cell(x, y).cycle_mark()

    def check_win_condition(self) -> bool:
        """
        Set the state to WON when the counts line up.

        The game is won when the number of unrevealed cells and the
        number of flagged cells both equal the mine count. Whether
        the flags sit on the mines is not checked. A finished game
        is left alone.

        Returns:
            True if the game was won by this check.
        """
        if not self.is_playing:
            return False
        if self.unrevealed_count == self.num_mines and self.flag_count == self.num_mines:
            self._game_state = GameState.WON
            return True
        return False

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._game_state == GameState.LOST

    @property
    def unrevealed_count(self) -> int:
        return sum(1 for cell in self._cells if not cell.revealed)

    @property
    def flag_count(self) -> int:
        return sum(1 for cell in self._cells if cell.is_flagged)

    @property
    def mine_positions(self) -> List[Position]:
        """Positions of all mines, in row-major order."""
        return [
            self.index_to_position(index)
            for index, cell in enumerate(self._cells)
            if cell.is_mine
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array indexed ``[y, x]``.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                -3 = uncertain
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        values = [cell.to_observation() for cell in self._cells]
        return np.array(values, dtype=np.int8).reshape(self.height, self.width)

    def snapshot(self) -> BoardSnapshot:
        """Capture everything a renderer needs."""
        obs = self.get_observation()
        obs.flags.writeable = False
        return BoardSnapshot(
            width=self.width,
            height=self.height,
            num_mines=self.num_mines,
            cursor=self._cursor,
            state=self._game_state,
            observation=obs,
            flags=self.flag_count,
        )
