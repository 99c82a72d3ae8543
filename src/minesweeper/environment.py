"""
Gymnasium environment wrapper for Minesweeper.

Drives a board through the same cursor-based actions a player
uses at the keyboard.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .actions import Action, Game, MoveCursor, Reveal, ToggleMark
from .board import Board, BoardConfig
from .cell import MINE, UNCERTAIN
from .render import render_ascii
from .sampler import RandomSampler


# ============================================================================
# Action Table
# ============================================================================

ACTIONS: Tuple[Action, ...] = (
    MoveCursor(dx=-1),
    MoveCursor(dx=1),
    MoveCursor(dy=-1),
    MoveCursor(dy=1),
    Reveal(),
    ToggleMark(),
)

ACTION_NAMES = ("left", "right", "up", "down", "reveal", "mark")


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        Dict with
        - "board": 2D array (height, width) where
          -1 = hidden, -2 = flagged, -3 = uncertain,
          0-8 = revealed count, 9 = revealed mine
        - "cursor": (x, y) of the cursor

    Actions:
        Discrete(6): left, right, up, down, reveal, mark.

    Rewards:
        - +1 for a step that reveals at least one cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for a step that changes nothing
        - 0 otherwise (cursor moves, mark changes)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: easy preset).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self._sampler = RandomSampler()
        self.board = Board(self.config, sampler=self._sampler)
        self.game = Game(self.board)
        self.render_mode = render_mode

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(
                    low=UNCERTAIN,
                    high=MINE,
                    shape=(self.config.height, self.config.width),
                    dtype=np.int8,
                ),
                "cursor": spaces.MultiDiscrete(
                    [self.config.width, self.config.height]
                ),
            }
        )
        self.action_space = spaces.Discrete(len(ACTIONS))

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._sampler.reseed(seed)
        self.game.start()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[Dict[str, np.ndarray], SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Index into the action table.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action: {action!r}")
        self._steps += 1

        before = self.board.get_observation()
        cursor_before = self.board.cursor
        hidden_before = self.board.unrevealed_count

        self.game.apply(ACTIONS[int(action)])

        reward = self._calculate_reward(before, cursor_before, hidden_before)
        terminated = not self.board.is_playing
        return self._get_obs(), reward, terminated, False, self._get_info()

    def _calculate_reward(
        self,
        before: np.ndarray,
        cursor_before: Tuple[int, int],
        hidden_before: int,
    ) -> float:
        """Reward for the transition that just happened."""
        if self.board.is_won:
            return 10.0
        if self.board.is_lost:
            return -10.0
        if self.board.unrevealed_count < hidden_before:
            return 1.0
        if self.board.cursor == cursor_before and np.array_equal(
            before, self.board.get_observation()
        ):
            return -0.1
        return 0.0

    def _get_obs(self) -> Dict[str, np.ndarray]:
        return {
            "board": self.board.get_observation(),
            "cursor": np.array(self.board.cursor, dtype=np.int64),
        }

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.config.cell_count - self.board.unrevealed_count,
            "flags": self.board.flag_count,
            "game_state": self.board.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = render_ascii(self.board.snapshot())
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None
