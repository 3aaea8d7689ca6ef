"""
Base agent interface for automated Minesweeper players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from minefield import ActionType, Coord
from minefield.cell import OBS_HIDDEN


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Agents pick a flat action index for ``MinesweeperEnv`` from the
    current observation and, optionally, the environment's action mask.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        """
        Initialize the agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
        """
        self.board_height = board_height
        self.board_width = board_width
        self.total_cells = board_height * board_width

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Flat action index.
        """

    def decode_action(self, action: int) -> Tuple[ActionType, Coord]:
        """Convert flat action index to (action type, (row, col))."""
        action_type, index = divmod(int(action), self.total_cells)
        row, col = divmod(index, self.board_width)
        return ActionType(action_type), (row, col)

    def encode_action(self, action_type: ActionType, coord: Coord) -> int:
        """Convert (action type, (row, col)) to a flat action index."""
        row, col = coord
        return int(action_type) * self.total_cells + row * self.board_width + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get a mask of open actions on hidden cells.

        Args:
            observation: 2D array of cell states.

        Returns:
            Boolean mask over the full action space.
        """
        mask = np.zeros(len(ActionType) * self.total_cells, dtype=bool)
        mask[: self.total_cells] = observation.flatten() == OBS_HIDDEN
        return mask

    def reset(self) -> None:
        """Reset agent state for new episode."""
