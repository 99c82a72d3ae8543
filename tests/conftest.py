"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, FixedSampler, Mark


def make_board(width: int, height: int, mines) -> Board:
    """Build and set up a board with mines at the given (x, y) positions."""
    indices = [x + y * width for x, y in mines]
    board = Board(BoardConfig(width, height, len(indices)), sampler=FixedSampler(indices))
    board.setup()
    return board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def board_factory():
    """Factory for boards with a fixed mine placement."""
    return make_board


@pytest.fixture
def default_board() -> Board:
    """Create a default easy board (8x8, 10 mines), set up."""
    board = Board()
    board.setup()
    return board


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine at (2, 2)."""
    return make_board(3, 3, [(2, 2)])


@pytest.fixture
def small_board() -> Board:
    """2x2 board with its single mine at (1, 1)."""
    return make_board(2, 2, [(1, 1)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return make_board(5, 5, [])


@pytest.fixture
def row_board() -> Board:
    """
    5x3 board with mines at (4, 0) and (4, 2).

    Column 3 holds the numbers 1, 2, 1; columns 0-2 are zeros.
    """
    return make_board(5, 3, [(4, 0), (4, 2)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def flagged_cell() -> Cell:
    """Create a hidden, flagged cell."""
    return Cell(mark=Mark.FLAGGED)
