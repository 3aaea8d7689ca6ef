"""
Cell module for the minefield engine.

Represents individual cells on the grid with their content (mine or
hint count) and their visibility (hidden/revealed/flagged/questioned).
"""
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Exclusive visibility states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()
    QUESTIONED = auto()


# Right-click cycle: hidden -> flagged -> questioned -> hidden
MARK_CYCLE = {
    CellState.HIDDEN: CellState.FLAGGED,
    CellState.FLAGGED: CellState.QUESTIONED,
    CellState.QUESTIONED: CellState.HIDDEN,
}

OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_QUESTIONED = -3
OBS_MINE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    A single cell of the grid.

    Cells are immutable; the grid swaps in a new cell on every change so
    no caller can hold a reference that mutates behind the grid's back.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visibility state.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def with_state(self, state: CellState) -> "Cell":
        return replace(self, state=state)

    def next_mark(self) -> Optional[CellState]:
        """
        Get the state a flag toggle moves this cell to.

        Returns:
            Next state in the mark cycle, or None for a revealed cell.
        """
        return MARK_CYCLE.get(self.state)

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unmarked."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_questioned(self) -> bool:
        """Check if cell carries a question mark."""
        return self.state == CellState.QUESTIONED

    def view(self) -> "CellView":
        """Get what a player is allowed to see of this cell."""
        if not self.is_revealed:
            return CellView(self.state)
        if self.is_mine:
            return CellView(self.state, is_mine=True)
        return CellView(self.state, hint=self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            -3: Questioned cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return OBS_HIDDEN
        if self.state == CellState.FLAGGED:
            return OBS_FLAGGED
        if self.state == CellState.QUESTIONED:
            return OBS_QUESTIONED
        if self.is_mine:
            return OBS_MINE
        return self.adjacent_mines


@dataclass(frozen=True)
class CellView:
    """
    Render-facing view of a cell.

    Content is only populated for revealed cells.

    Attributes:
        state: Visibility state.
        hint: Adjacent mine count of a revealed safe cell.
        is_mine: True for a revealed mine.
    """

    state: CellState
    hint: Optional[int] = None
    is_mine: bool = False
