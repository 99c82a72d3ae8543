"""
Unit tests for the Gymnasium environment.
"""
import numpy as np
import pytest
from minesweeper import BoardConfig, FixedSampler, MinesweeperEnv
from minesweeper.environment import ACTION_NAMES, ACTIONS

LEFT, RIGHT, UP, DOWN, REVEAL, MARK = range(6)


@pytest.fixture
def env() -> MinesweeperEnv:
    """Seeded easy environment, reset."""
    environment = MinesweeperEnv(render_mode="ansi")
    environment.reset(seed=0)
    return environment


@pytest.fixture
def fixed_env() -> MinesweeperEnv:
    """2x2 environment with the mine at (1, 1)."""
    environment = MinesweeperEnv(BoardConfig(2, 2, 1))
    environment.board.sampler = FixedSampler([3])
    environment.reset()
    return environment


class TestSpaces:
    """Test action and observation spaces."""

    def test_action_table(self) -> None:
        """One name per action."""
        assert len(ACTIONS) == len(ACTION_NAMES) == 6

    def test_reset_observation_in_space(self, env: MinesweeperEnv) -> None:
        """Reset observation is valid and all hidden."""
        obs, info = env.reset(seed=1)
        assert env.observation_space.contains(obs)
        assert np.all(obs["board"] == -1)
        assert info["game_state"] == "PLAYING"
        assert info["steps"] == 0

    def test_same_seed_same_mines(self) -> None:
        """Seeding reset reproduces the mine placement."""
        first, second = MinesweeperEnv(), MinesweeperEnv()
        first.reset(seed=3)
        second.reset(seed=3)
        assert first.board.mine_positions == second.board.mine_positions

    def test_invalid_action_raises(self, env: MinesweeperEnv) -> None:
        """Actions outside the table are rejected."""
        with pytest.raises(ValueError):
            env.step(6)


class TestRewards:
    """Test reward shaping and termination."""

    def test_no_op_move_is_penalized(self, env: MinesweeperEnv) -> None:
        """Moving into the wall changes nothing."""
        _, reward, terminated, _, _ = env.step(LEFT)
        assert reward == pytest.approx(-0.1)
        assert terminated is False

    def test_move_is_neutral(self, env: MinesweeperEnv) -> None:
        """A real cursor move earns nothing."""
        obs, reward, _, _, _ = env.step(RIGHT)
        assert reward == 0.0
        assert tuple(obs["cursor"]) == (1, 0)

    def test_safe_reveal_rewarded(self, fixed_env: MinesweeperEnv) -> None:
        """Revealing a safe cell earns +1."""
        _, reward, terminated, _, info = fixed_env.step(REVEAL)
        assert reward == 1.0
        assert terminated is False
        assert info["revealed"] == 1

    def test_mine_ends_episode(self, fixed_env: MinesweeperEnv) -> None:
        """Hitting the mine is -10 and terminal."""
        fixed_env.step(RIGHT)
        fixed_env.step(DOWN)
        _, reward, terminated, _, info = fixed_env.step(REVEAL)
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"

    def test_win_ends_episode(self, fixed_env: MinesweeperEnv) -> None:
        """Flagging the mine and clearing the rest wins."""
        fixed_env.step(RIGHT)
        fixed_env.step(DOWN)
        _, reward, _, _, _ = fixed_env.step(MARK)
        assert reward == 0.0
        fixed_env.step(LEFT)
        _, reward, terminated, _, info = fixed_env.step(REVEAL)
        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"
        assert info["flags"] == 1


class TestRender:
    """Test render modes."""

    def test_ansi_returns_text(self, env: MinesweeperEnv) -> None:
        """ansi mode returns the grid."""
        text = env.render()
        assert text.splitlines()[0] == " ".join("." * 8)

    def test_human_prints(self, capsys) -> None:
        """human mode prints and returns None."""
        environment = MinesweeperEnv(BoardConfig(2, 2, 0), render_mode="human")
        environment.reset(seed=0)
        assert environment.render() is None
        assert ". ." in capsys.readouterr().out
