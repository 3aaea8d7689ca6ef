"""
Game state machine.

Drives one game at a time through NOT_STARTED -> IN_PROGRESS -> WON/LOST,
placing mines on the first open and adjudicating every action.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional

import numpy as np

from .cell import CellState, CellView
from .config import BoardConfig, GameOptions
from .grid import Coord, Grid
from .placer import place_around
from .reveal import RevealResult, can_chord, chord, open_cell

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class Phase(Enum):
    """Top-level lifecycle of a game."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_over(self) -> bool:
        return self in (Phase.WON, Phase.LOST)


# ============================================================================
# Timer
# ============================================================================

@dataclass
class Timer:
    """
    Elapsed-time counter advanced by the host's frame callback.

    Attributes:
        elapsed: Seconds counted so far.
        running: Whether ``tick`` currently advances the counter.
    """

    elapsed: float = 0.0
    running: bool = False

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False

    def tick(self, seconds: float) -> None:
        """Advance by ``seconds`` if running."""
        if self.running and seconds > 0:
            self.elapsed += seconds


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single game of Minesweeper.

    Inbound actions (``open``, ``chord``, ``reveal_chord``,
    ``toggle_flag``) validate coordinates and then silently do nothing
    when the phase does not allow them. Outbound state is read through
    properties and ``cell_view`` each frame.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        options: Optional[GameOptions] = None,
    ) -> None:
        """
        Create a game waiting for its first open.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            rng: Random source for mine placement.
            options: Gameplay switches.
        """
        self.config = config or BoardConfig()
        self.options = options or GameOptions()
        self._rng = rng
        self._reset(Grid.from_config(self.config))

    @classmethod
    def from_layout(
        cls,
        width: int,
        height: int,
        mines: Iterable[Coord],
        options: Optional[GameOptions] = None,
    ) -> "Game":
        """
        Create a game on a fixed mine layout.

        The first open skips mine placement, so it may hit a mine.
        """
        grid = Grid.from_mines(width, height, mines)
        game = cls(BoardConfig(width, height, grid.mine_count), options=options)
        game._reset(grid)
        return game

    def _reset(self, grid: Grid) -> None:
        self._grid = grid
        self._phase = Phase.NOT_STARTED
        self._timer = Timer()
        self._paused = False
        self._detonated: Optional[Coord] = None

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def new_game(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        mine_count: Optional[int] = None,
    ) -> None:
        """
        Discard the current grid and start over.

        Omitted arguments keep the current configuration's values.

        Raises:
            InvalidConfiguration: If the new shape is unplayable. The
                current game is left untouched.
        """
        config = BoardConfig(
            self.config.width if width is None else width,
            self.config.height if height is None else height,
            self.config.num_mines if mine_count is None else mine_count,
        )
        self.config = config
        self._reset(Grid.from_config(config))
        logger.info("New %dx%d game with %d mines",
                    config.height, config.width, config.num_mines)

    def restart(self) -> None:
        """Start over on a fresh grid with the same mine layout."""
        if self._grid.mines_placed:
            grid = Grid.from_mines(
                self.config.width,
                self.config.height,
                self._grid.mine_coordinates(),
            )
        else:
            grid = Grid.from_config(self.config)
        self._reset(grid)

    def _begin(self, coord: Coord) -> None:
        """Handle first open: place mines and start the clock."""
        if not self._grid.mines_placed:
            place_around(
                self._grid,
                coord,
                self._rng,
                protect_neighbors=self.options.protect_first_neighborhood,
            )
        self._phase = Phase.IN_PROGRESS
        self._timer.start()
        logger.debug("Game started at %s", coord)

    def _settle(self, result: RevealResult) -> RevealResult:
        """Apply win/loss transitions after a reveal."""
        if result.mine_triggered:
            self._lose(result.exploded)
        elif self._grid.is_cleared:
            self._win()
        return result

    def _lose(self, coord: Coord) -> None:
        self._phase = Phase.LOST
        self._detonated = coord
        self._timer.stop()
        for mine in self._grid.mine_coordinates():
            cell = self._grid.get(mine)
            if not cell.is_revealed and not cell.is_flagged:
                self._grid.set_visibility(mine, CellState.REVEALED)
        logger.info("Game lost at %s after %.1fs", coord, self.elapsed_time)

    def _win(self) -> None:
        self._phase = Phase.WON
        self._timer.stop()
        for mine in self._grid.mine_coordinates():
            self._grid.set_visibility(mine, CellState.FLAGGED)
        logger.info("Game won in %.1fs", self.elapsed_time)

    @property
    def _accepts_actions(self) -> bool:
        return self._phase == Phase.IN_PROGRESS and not self._paused

    # ========================================================================
    # Inbound Actions
    # ========================================================================

    def open(self, coord: Coord) -> RevealResult:
        """
        Open a cell, starting the game on the first call.

        Args:
            coord: (row, col) to open.

        Returns:
            What was revealed; empty if nothing changed.

        Raises:
            OutOfBounds: If coord is outside the grid.
        """
        cell = self._grid.get(coord)
        if self._phase == Phase.NOT_STARTED and cell.is_hidden:
            self._begin(coord)
        if not self._accepts_actions:
            return RevealResult()
        return self._settle(open_cell(self._grid, coord))

    def chord(self, coord: Coord) -> RevealResult:
        """
        Chord a revealed numbered cell.

        Raises:
            OutOfBounds: If coord is outside the grid.
        """
        self._grid.get(coord)
        if not self._accepts_actions:
            return RevealResult()
        return self._settle(chord(self._grid, coord))

    def reveal_chord(self, coord: Coord) -> RevealResult:
        """Open a cell and then chord it in one action."""
        result = self.open(coord)
        if self._accepts_actions:
            result.merge(self.chord(coord))
        return result

    def primary_action(self, coord: Coord) -> RevealResult:
        """Open, or reveal-chord when ``left_click_chord`` is set."""
        if self.options.left_click_chord:
            return self.reveal_chord(coord)
        return self.open(coord)

    def toggle_flag(self, coord: Coord) -> Optional[CellState]:
        """
        Cycle a cell through hidden -> flagged -> questioned -> hidden.

        Returns:
            The new state, or None if the toggle did not apply.

        Raises:
            OutOfBounds: If coord is outside the grid.
        """
        next_state = self._grid.get(coord).next_mark()
        if not self._accepts_actions or next_state is None:
            return None
        self._grid.set_visibility(coord, next_state)
        return next_state

    # ========================================================================
    # Pause and Timer
    # ========================================================================

    def pause(self) -> bool:
        """Pause a running game. Returns True if the game was paused."""
        if not self._accepts_actions:
            return False
        self._paused = True
        self._timer.stop()
        return True

    def resume(self) -> bool:
        """Resume a paused game. Returns True if the game was resumed."""
        if not self._paused:
            return False
        self._paused = False
        self._timer.start()
        return True

    def toggle_pause(self) -> bool:
        """Flip pause state. Returns the resulting ``is_paused``."""
        if self._paused:
            self.resume()
        else:
            self.pause()
        return self._paused

    def tick(self, seconds: float) -> None:
        """Advance the game clock; only counts while in progress."""
        self._timer.tick(seconds)

    # ========================================================================
    # Outbound State
    # ========================================================================

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def mine_count(self) -> int:
        return self._grid.mine_count

    @property
    def revealed_count(self) -> int:
        return self._grid.revealed_count

    @property
    def flag_count(self) -> int:
        return self._grid.flag_count

    @property
    def mines_remaining(self) -> int:
        """Mine count minus flags placed; negative when over-flagged."""
        return self._grid.mine_count - self._grid.flag_count

    @property
    def elapsed_time(self) -> float:
        return self._timer.elapsed

    @property
    def detonated(self) -> Optional[Coord]:
        """Coordinate of the mine that ended the game, if lost."""
        return self._detonated

    def cell_view(self, coord: Coord) -> CellView:
        """
        Get the visible state of a cell.

        Raises:
            OutOfBounds: If coord is outside the grid.
        """
        return self._grid.get(coord).view()

    def can_chord(self, coord: Coord) -> bool:
        """Check whether ``chord(coord)`` would open anything."""
        return self._accepts_actions and can_chord(self._grid, coord)

    def neighbors(self, coord: Coord) -> List[Coord]:
        return self._grid.neighbors(coord)

    def hidden_cells(self) -> List[Coord]:
        """Get coordinates that can still be opened."""
        return self._grid.hidden_coordinates()

    def observation(self) -> np.ndarray:
        """Get the visible board as an int8 array."""
        return self._grid.observation()
