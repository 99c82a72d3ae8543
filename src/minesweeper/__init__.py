"""
Minesweeper game module.

Provides the board model, player actions, text rendering and a
Gymnasium environment.
"""
from .cell import Cell, Mark
from .sampler import FixedSampler, MineSampler, RandomSampler
from .board import (
    Board,
    BoardConfig,
    BoardSnapshot,
    ConfigError,
    GameState,
    DIFFICULTIES,
    EASY,
    MEDIUM,
    HARD,
)
from .actions import (
    Game,
    MoveCursor,
    Reveal,
    ToggleMark,
    Restart,
    Quit,
    KEY_BINDINGS,
    parse_key,
)
from .render import render_board, render_ascii
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "Mark",
    "FixedSampler",
    "MineSampler",
    "RandomSampler",
    "Board",
    "BoardConfig",
    "BoardSnapshot",
    "ConfigError",
    "GameState",
    "DIFFICULTIES",
    "EASY",
    "MEDIUM",
    "HARD",
    "Game",
    "MoveCursor",
    "Reveal",
    "ToggleMark",
    "Restart",
    "Quit",
    "KEY_BINDINGS",
    "parse_key",
    "render_board",
    "render_ascii",
    "MinesweeperEnv",
]
