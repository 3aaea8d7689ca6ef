"""
Random agent for Minesweeper.

Serves as a baseline by selecting random valid actions.
"""
from typing import Iterable, Optional

import numpy as np

from minefield import ActionType

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects actions uniformly at random.

    By default it only opens cells, which gives the usual guessing
    baseline. Expected win rate on beginner: ~1%.
    """

    def __init__(
        self,
        board_height: int = 9,
        board_width: int = 9,
        seed: Optional[int] = None,
        action_types: Iterable[ActionType] = (ActionType.OPEN,),
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for reproducibility.
            action_types: Action families the agent may pick from.
        """
        super().__init__(board_height, board_width)
        self.rng = np.random.default_rng(seed)
        self.allowed = np.zeros(len(ActionType) * self.total_cells, dtype=bool)
        for action_type in action_types:
            start = int(action_type) * self.total_cells
            self.allowed[start:start + self.total_cells] = True

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions & self.allowed)

        if len(valid_indices) == 0:
            # No valid actions, return any action (will be a no-op)
            return 0

        return int(self.rng.choice(valid_indices))
