"""
Unit tests for agents and evaluation.
"""
import numpy as np
from agents import Evaluator, RandomAgent
from minefield import ActionType, BoardConfig


class TestRandomAgent:
    """Test random action selection."""

    def test_picks_open_on_hidden_cell(self) -> None:
        """Agent should pick an open action on a hidden cell."""
        agent = RandomAgent(3, 3, seed=0)
        obs = np.full((3, 3), -1, dtype=np.int8)
        obs[1, 1] = 2
        action = agent.select_action(obs)
        action_type, coord = agent.decode_action(action)
        assert action_type == ActionType.OPEN
        assert coord != (1, 1)

    def test_respects_allowed_families(self) -> None:
        """Agent should only choose from its allowed action types."""
        agent = RandomAgent(3, 3, seed=0, action_types=[ActionType.FLAG])
        mask = np.ones(27, dtype=bool)
        for _ in range(20):
            action_type, _ = agent.decode_action(agent.select_action(None, mask))
            assert action_type == ActionType.FLAG

    def test_no_valid_actions_returns_zero(self) -> None:
        """Agent should fall back to action 0 when nothing is valid."""
        agent = RandomAgent(3, 3, seed=0)
        assert agent.select_action(None, np.zeros(27, dtype=bool)) == 0

    def test_encode_decode(self) -> None:
        agent = RandomAgent(4, 5)
        action = agent.encode_action(ActionType.CHORD, (3, 4))
        assert agent.decode_action(action) == (ActionType.CHORD, (3, 4))


class TestEvaluator:
    """Test seeded evaluation runs."""

    def test_evaluate_reports_metrics(self) -> None:
        """Evaluation should report every summary metric."""
        config = BoardConfig(5, 5, 3)
        evaluator = Evaluator(config, num_episodes=10, seed=0)
        results = evaluator.evaluate(RandomAgent(5, 5, seed=0))
        assert results["games"] == 10
        assert 0 <= results["wins"] <= 10
        assert 0.0 <= results["win_rate"] <= 1.0
        assert results["avg_steps"] >= 1.0

    def test_evaluation_is_reproducible(self) -> None:
        """Same seed should give the same evaluation."""
        config = BoardConfig(5, 5, 3)
        first = Evaluator(config, num_episodes=5, seed=7).evaluate(
            RandomAgent(5, 5, seed=7)
        )
        second = Evaluator(config, num_episodes=5, seed=7).evaluate(
            RandomAgent(5, 5, seed=7)
        )
        assert first == second

    def test_board_without_mines_always_wins(self) -> None:
        """A mine-free board should be won every game."""
        evaluator = Evaluator(BoardConfig(3, 3, 0), num_episodes=3, seed=1)
        results = evaluator.evaluate(RandomAgent(3, 3, seed=1))
        assert results["win_rate"] == 1.0
        assert results["avg_steps"] == 1.0
