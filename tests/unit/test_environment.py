"""
Unit tests for the gymnasium environment wrapper.
"""
import numpy as np
import pytest
from minefield import ActionType, BoardConfig, MinesweeperEnv


@pytest.fixture
def env() -> MinesweeperEnv:
    """Beginner environment."""
    return MinesweeperEnv(BoardConfig(9, 9, 10))


class TestEnvironment:
    """Test reset/step behavior."""

    def test_reset_returns_hidden_board(self, env: MinesweeperEnv) -> None:
        """Reset should return a fully hidden board."""
        obs, info = env.reset(seed=0)
        assert obs.shape == (9, 9)
        assert obs.dtype == np.int8
        assert (obs == -1).all()
        assert info["game_state"] == "NOT_STARTED"
        assert info["total_safe"] == 71

    def test_action_space_covers_three_families(self, env: MinesweeperEnv) -> None:
        """Action space should hold open, flag and chord blocks."""
        assert env.action_space.n == 3 * 81

    def test_action_encoding(self, env: MinesweeperEnv) -> None:
        """Encoding then decoding an action should give it back."""
        action = env.encode_action(ActionType.CHORD, (2, 7))
        assert action == 2 * 81 + 2 * 9 + 7
        assert env.decode_action(action) == (ActionType.CHORD, (2, 7))

    def test_first_open_is_rewarded(self, env: MinesweeperEnv) -> None:
        """First open should earn a positive reward."""
        env.reset(seed=3)
        _, reward, terminated, truncated, info = env.step(
            env.encode_action(ActionType.OPEN, (4, 4))
        )
        assert reward in (1.0, 10.0)
        assert truncated is False
        assert info["revealed"] >= 9
        assert terminated == (info["game_state"] == "WON")

    def test_repeated_open_is_penalized(self, env: MinesweeperEnv) -> None:
        """Opening a revealed cell should cost a small penalty."""
        env.reset(seed=3)
        action = env.encode_action(ActionType.OPEN, (4, 4))
        env.step(action)
        _, reward, _, _, _ = env.step(action)
        assert reward == pytest.approx(-0.1)

    def test_flag_toggle(self, env: MinesweeperEnv) -> None:
        """Flag toggle should be free and update the observation."""
        env.reset(seed=3)
        env.step(env.encode_action(ActionType.OPEN, (4, 4)))
        hidden = env.game.hidden_cells()[0]
        obs, reward, _, _, info = env.step(env.encode_action(ActionType.FLAG, hidden))
        assert reward == 0.0
        assert obs[hidden] == -2
        assert info["mines_remaining"] == 9

    def test_seeded_reset_is_reproducible(self) -> None:
        """Same seed should give the same episode."""
        first = MinesweeperEnv(BoardConfig(9, 9, 10))
        second = MinesweeperEnv(BoardConfig(9, 9, 10))
        first.reset(seed=11)
        second.reset(seed=11)
        action = first.encode_action(ActionType.OPEN, (0, 0))
        obs_a, *_ = first.step(action)
        obs_b, *_ = second.step(action)
        assert (obs_a == obs_b).all()


class TestActionMask:
    """Test valid action masks."""

    def test_fresh_board_allows_only_opens(self, env: MinesweeperEnv) -> None:
        """Before the first open only open actions should be valid."""
        env.reset(seed=0)
        mask = env.get_action_mask()
        assert mask[:81].all()
        assert not mask[81:].any()

    def test_mask_after_first_open(self, env: MinesweeperEnv) -> None:
        """Mask should drop revealed cells after the first open."""
        env.reset(seed=0)
        env.step(env.encode_action(ActionType.OPEN, (4, 4)))
        mask = env.get_action_mask()
        assert not mask[env.encode_action(ActionType.OPEN, (4, 4))]
        assert not mask[env.encode_action(ActionType.FLAG, (4, 4))]
        hidden = env.game.hidden_cells()
        assert mask[:81].sum() == len(hidden)
        for coord in hidden:
            assert mask[env.encode_action(ActionType.FLAG, coord)]

    def test_finished_game_has_empty_mask(self) -> None:
        """Finished game should allow no actions."""
        env = MinesweeperEnv(BoardConfig(4, 4, 0))
        env.reset(seed=0)
        _, reward, terminated, _, _ = env.step(0)
        assert terminated is True
        assert reward == 10.0
        assert not env.get_action_mask().any()
