"""
Reveal engine: opening cells, flood-fill and chording.

Flood-fill runs on an explicit queue. A cell is marked revealed as
soon as it is queued, so the revealed state doubles as the visited set
and no cell is processed twice.
"""
from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional

from .cell import CellState
from .grid import Coord, Grid


@dataclass
class RevealResult:
    """
    Outcome of an open or chord.

    Attributes:
        revealed: Newly revealed coordinates, in reveal order.
        exploded: First mine revealed by the action, if any.
    """

    revealed: List[Coord] = field(default_factory=list)
    exploded: Optional[Coord] = None

    @property
    def mine_triggered(self) -> bool:
        return self.exploded is not None

    @property
    def changed(self) -> bool:
        return bool(self.revealed)

    def merge(self, other: "RevealResult") -> "RevealResult":
        """Append another result to this one."""
        self.revealed.extend(other.revealed)
        if self.exploded is None:
            self.exploded = other.exploded
        return self


def _reveal(grid: Grid, coord: Coord, result: RevealResult) -> None:
    cell = grid.set_visibility(coord, CellState.REVEALED)
    result.revealed.append(coord)
    if cell.is_mine and result.exploded is None:
        result.exploded = coord


def _expand(grid: Grid, coord: Coord, result: RevealResult) -> None:
    """Reveal a cell that is neither revealed nor flagged, flooding from zeros."""
    cell = grid.get(coord)
    if cell.is_revealed or cell.is_flagged:
        return

    _reveal(grid, coord, result)
    if cell.is_mine or cell.adjacent_mines > 0:
        return

    queue = deque([coord])
    while queue:
        current = queue.popleft()
        for neighbor in grid.neighbors(current):
            neighbor_cell = grid.get(neighbor)
            if neighbor_cell.is_revealed or neighbor_cell.is_flagged:
                continue
            _reveal(grid, neighbor, result)
            if neighbor_cell.adjacent_mines == 0:
                queue.append(neighbor)


def open_cell(
    grid: Grid, coord: Coord, result: Optional[RevealResult] = None
) -> RevealResult:
    """
    Open a cell.

    Flagged, questioned and already revealed cells are left alone. A
    mine is revealed and reported through ``exploded``. A numbered cell
    is revealed on its own; a zero cell floods outwards until the
    region is bounded by numbered cells or the grid edge. The flood
    passes over question marks but stops at flags.

    Args:
        grid: Populated grid.
        coord: Cell to open.
        result: Result to accumulate into.

    Returns:
        What the open revealed.

    Raises:
        OutOfBounds: If coord is outside the grid.
    """
    if result is None:
        result = RevealResult()
    if grid.get(coord).is_hidden:
        _expand(grid, coord, result)
    return result


def can_chord(grid: Grid, coord: Coord) -> bool:
    """
    Check whether a chord at coord would open its neighbors.

    Only a revealed numbered cell whose flagged-neighbor count equals its
    hint qualifies. Flag correctness is not checked.
    """
    cell = grid.get(coord)
    if not cell.is_revealed or cell.is_mine or cell.adjacent_mines == 0:
        return False
    flags = grid.count_neighbors(coord, lambda c: c.is_flagged)
    return flags == cell.adjacent_mines


def chord(
    grid: Grid, coord: Coord, result: Optional[RevealResult] = None
) -> RevealResult:
    """
    Open every unflagged neighbor of a satisfied numbered cell.

    Question-marked neighbors are opened too. Zero cells cascade and
    a misplaced flag can expose a mine.

    Returns:
        What the chord revealed; empty when the chord does not apply.
    """
    if result is None:
        result = RevealResult()
    if not can_chord(grid, coord):
        return result
    for neighbor in grid.neighbors(coord):
        _expand(grid, neighbor, result)
    return result
