"""
Gymnasium environment wrapper for the minefield engine.

Lets automated players drive a game through the standard
reset/step interface.
"""
import random
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import OBS_MINE, OBS_QUESTIONED, CellState
from .config import BoardConfig
from .game import Game, Phase
from .grid import Coord


class ActionType(IntEnum):
    """Action families; each spans one block of width * height actions."""

    OPEN = 0
    FLAG = 1
    CHORD = 2


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array, see ``Cell.to_observation``.

    Actions:
        Discrete action space of size 3 * width * height. Action i acts
        on cell (i % cells) // width, (i % cells) % width with action
        type i // cells (open, toggle flag, chord).

    Rewards:
        - +1 for an open or chord that revealed safe cells
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for a flag toggle
        - -0.1 for an action that changed nothing
    """

    metadata = {"render_modes": []}

    def __init__(self, config: Optional[BoardConfig] = None) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.game = Game(self.config)

        self.observation_space = spaces.Box(
            low=OBS_QUESTIONED,
            high=OBS_MINE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(
            len(ActionType) * self.config.total_cells
        )

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        # Mine placement draws from a stdlib generator seeded off np_random
        rng = random.Random(int(self.np_random.integers(2**32)))
        self.game = Game(self.config, rng=rng, options=self.game.options)
        self._steps = 0

        return self.game.observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        action_type, coord = self.decode_action(action)
        self._steps += 1

        reward = self._apply(action_type, coord)

        terminated = self.game.phase.is_over
        return self.game.observation(), reward, terminated, False, self._get_info()

    def decode_action(self, action: int) -> Tuple[ActionType, Coord]:
        """Convert flat action index to (action type, (row, col))."""
        action_type, index = divmod(int(action), self.config.total_cells)
        row, col = divmod(index, self.config.width)
        return ActionType(action_type), (row, col)

    def encode_action(self, action_type: ActionType, coord: Coord) -> int:
        """Convert (action type, (row, col)) to a flat action index."""
        row, col = coord
        return (
            int(action_type) * self.config.total_cells
            + row * self.config.width
            + col
        )

    def _apply(self, action_type: ActionType, coord: Coord) -> float:
        """Perform an action and score its outcome."""
        if action_type == ActionType.FLAG:
            state = self.game.toggle_flag(coord)
            return 0.0 if state is not None else -0.1

        if action_type == ActionType.OPEN:
            result = self.game.open(coord)
        else:
            result = self.game.chord(coord)

        if self.game.phase == Phase.LOST:
            return -10.0
        if not result.changed:
            return -0.1
        if self.game.phase == Phase.WON:
            return 10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.game.revealed_count,
            "total_safe": self.config.safe_cells,
            "game_state": self.game.phase.name,
            "mines_remaining": self.game.mines_remaining,
        }

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.game.phase.is_over:
            return mask
        for coord in self.game.hidden_cells():
            mask[self.encode_action(ActionType.OPEN, coord)] = True
        if self.game.phase != Phase.IN_PROGRESS:
            return mask
        for row in range(self.config.height):
            for col in range(self.config.width):
                coord = (row, col)
                if self.game.cell_view(coord).state != CellState.REVEALED:
                    mask[self.encode_action(ActionType.FLAG, coord)] = True
                elif self.game.can_chord(coord):
                    mask[self.encode_action(ActionType.CHORD, coord)] = True
        return mask
