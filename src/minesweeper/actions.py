"""
Player actions and the controller that applies them to a board.

Input adapters (terminal keys, the Gymnasium environment) translate
their events into these actions; :class:`Game` gates them by game
state and forwards them to :class:`Board`.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Union

from .board import Board, GameState


# ============================================================================
# Actions
# ============================================================================

@dataclass(frozen=True)
class MoveCursor:
    """Nudge the cursor by ``dx``, ``dy`` (each -1, 0 or 1)."""

    dx: int = 0
    dy: int = 0

    def __post_init__(self) -> None:
        if self.dx not in (-1, 0, 1) or self.dy not in (-1, 0, 1):
            raise ValueError(f"Cursor step must be -1, 0 or 1, got ({self.dx}, {self.dy})")


@dataclass(frozen=True)
class Reveal:
    """Reveal the cell under the cursor."""


@dataclass(frozen=True)
class ToggleMark:
    """Cycle the mark on the cell under the cursor."""


@dataclass(frozen=True)
class Restart:
    """Set the board up again."""


@dataclass(frozen=True)
class Quit:
    """Stop the game loop."""


Action = Union[MoveCursor, Reveal, ToggleMark, Restart, Quit]


KEY_BINDINGS: Dict[str, Action] = {
    "h": MoveCursor(dx=-1),
    "l": MoveCursor(dx=1),
    "k": MoveCursor(dy=-1),
    "j": MoveCursor(dy=1),
    " ": Reveal(),
    "f": Reveal(),
    "d": ToggleMark(),
    "r": Restart(),
    "q": Quit(),
}


def parse_key(key: str) -> Optional[Action]:
    """Map a single key to its action, or None if unbound."""
    return KEY_BINDINGS.get(key)


# ============================================================================
# Game Controller
# ============================================================================

class Game:
    """
    Applies actions to a board the way the interactive loop does.

    While the game is over only Restart and Quit have any effect.
    The win condition is checked after every action.
    """

    def __init__(self, board: Board) -> None:
        self.board = board

    def start(self) -> None:
        """Set up the board for the first game."""
        self.board.setup()

    def apply(self, action: Action) -> bool:
        """
        Apply one action.

        Args:
            action: The action to apply at the current cursor.

        Returns:
            False if the action was Quit, True otherwise.
        """
        if isinstance(action, Quit):
            return False

        if self.board.game_state != GameState.PLAYING:
            if isinstance(action, Restart):
                self.board.setup()
        else:
            self._apply_playing(action)

        self.board.check_win_condition()
        return True

    def _apply_playing(self, action: Action) -> None:
        x, y = self.board.cursor
        if isinstance(action, MoveCursor):
            new_x, new_y = x + action.dx, y + action.dy
            # The board only bounds-checks the upper edge
            if new_x >= 0 and new_y >= 0:
                self.board.move_cursor(new_x, new_y)
        elif isinstance(action, Reveal):
            self.board.reveal_cell(x, y, user_initiated=True)
        elif isinstance(action, ToggleMark):
            self.board.cycle_mark(x, y)
        elif isinstance(action, Restart):
            self.board.setup()
        else:
            raise TypeError(f"Unknown action: {action!r}")

    def press(self, key: str) -> bool:
        """Apply the action bound to ``key``; unbound keys are ignored."""
        action = parse_key(key)
        if action is None:
            return True
        return self.apply(action)
