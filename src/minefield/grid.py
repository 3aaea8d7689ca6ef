"""
Grid module for the minefield engine.

Owns the 2-D array of cells, validates coordinates, enumerates
neighbors and keeps the revealed/flagged counters in step with every
visibility change.
"""
from typing import Callable, Iterable, Iterator, List, Tuple

import numpy as np

from .cell import Cell, CellState
from .config import BoardConfig, validate_dimensions
from .errors import OutOfBounds

Coord = Tuple[int, int]

# Row-major Moore neighborhood offsets
NEIGHBOR_OFFSETS: Tuple[Coord, ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Rectangular minefield addressed by (row, col).

    The grid is created empty; mines are added once by the mine placer
    and hint counts are computed right after. All cell changes pass
    through ``set_visibility`` so the counters stay exact.
    """

    def __init__(self, width: int, height: int, mine_count: int) -> None:
        """
        Create an empty grid.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_count: Mines the grid will hold once populated.

        Raises:
            InvalidConfiguration: If the shape or mine count is unplayable.
        """
        validate_dimensions(width, height, mine_count)
        self.width = width
        self.height = height
        self.mine_count = mine_count
        self._cells: List[List[Cell]] = [
            [Cell() for _ in range(width)] for _ in range(height)
        ]
        self._mines_placed = False
        self._revealed_count = 0
        self._flag_count = 0

    @classmethod
    def from_config(cls, config: BoardConfig) -> "Grid":
        return cls(config.width, config.height, config.num_mines)

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Coord]
    ) -> "Grid":
        """
        Build a populated grid from a known mine layout.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: Coordinates holding a mine; duplicates are ignored.

        Returns:
            Grid with mines placed and hints computed.
        """
        layout = set(mines)
        grid = cls(width, height, len(layout))
        for coord in layout:
            grid.place_mine(coord)
        grid.finish_placement()
        return grid

    # ========================================================================
    # Coordinates (Low-level)
    # ========================================================================

    def in_bounds(self, coord: Coord) -> bool:
        """Check if coordinate is within grid bounds."""
        row, col = coord
        return 0 <= row < self.height and 0 <= col < self.width

    def _check(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise OutOfBounds(coord, self.width, self.height)

    def coordinates(self) -> Iterator[Coord]:
        """Iterate over every coordinate in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield row, col

    def neighbors(self, coord: Coord) -> List[Coord]:
        """
        Get the in-bounds Moore neighborhood of a coordinate.

        Args:
            coord: Center (row, col).

        Returns:
            Up to 8 coordinates, always in the same row-major order.
        """
        self._check(coord)
        row, col = coord
        result = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            neighbor = (row + delta_row, col + delta_col)
            if self.in_bounds(neighbor):
                result.append(neighbor)
        return result

    def count_neighbors(
        self, coord: Coord, predicate: Callable[[Cell], bool]
    ) -> int:
        """Count neighbors whose cell satisfies ``predicate``."""
        return sum(
            1 for row, col in self.neighbors(coord)
            if predicate(self._cells[row][col])
        )

    # ========================================================================
    # Cell Access
    # ========================================================================

    def get(self, coord: Coord) -> Cell:
        """
        Get the cell at a coordinate.

        Raises:
            OutOfBounds: If coord is outside the grid.
        """
        self._check(coord)
        row, col = coord
        return self._cells[row][col]

    def set_visibility(self, coord: Coord, state: CellState) -> Cell:
        """
        Change the visibility of a cell.

        Revealed safe cells count towards ``revealed_count``; revealed
        mines do not. Flagged cells count towards ``flag_count``.

        Returns:
            The updated cell.

        Raises:
            OutOfBounds: If coord is outside the grid.
            ValueError: If a revealed cell would be hidden again.
        """
        old = self.get(coord)
        if old.state == state:
            return old
        if old.is_revealed:
            raise ValueError(f"Cell {coord} is already revealed")

        cell = old.with_state(state)
        row, col = coord
        self._cells[row][col] = cell

        if old.is_flagged:
            self._flag_count -= 1
        if cell.is_flagged:
            self._flag_count += 1
        if cell.is_revealed and not cell.is_mine:
            self._revealed_count += 1
        return cell

    # ========================================================================
    # Mine Layout
    # ========================================================================

    @property
    def mines_placed(self) -> bool:
        return self._mines_placed

    def place_mine(self, coord: Coord) -> None:
        """Put a mine on a cell. Only valid before placement finishes."""
        if self._mines_placed:
            raise RuntimeError("Mines already placed on this grid")
        self._check(coord)
        row, col = coord
        self._cells[row][col] = Cell(is_mine=True)

    def finish_placement(self) -> None:
        """Compute every hint count and seal the mine layout."""
        if self._mines_placed:
            raise RuntimeError("Mines already placed on this grid")
        for row, col in self.coordinates():
            cell = self._cells[row][col]
            if not cell.is_mine:
                count = self.count_neighbors((row, col), lambda c: c.is_mine)
                self._cells[row][col] = Cell(adjacent_mines=count)
        self._mines_placed = True

    def mine_coordinates(self) -> List[Coord]:
        """Get every coordinate holding a mine, in row-major order."""
        return [
            coord for coord in self.coordinates() if self.get(coord).is_mine
        ]

    # ========================================================================
    # Counters and Snapshots
    # ========================================================================

    @property
    def revealed_count(self) -> int:
        """Number of revealed safe cells."""
        return self._revealed_count

    @property
    def flag_count(self) -> int:
        return self._flag_count

    @property
    def safe_cells(self) -> int:
        """Cells that must be revealed to clear the grid."""
        return self.width * self.height - self.mine_count

    @property
    def is_cleared(self) -> bool:
        return self._revealed_count == self.safe_cells

    def hidden_coordinates(self) -> List[Coord]:
        """Get coordinates of cells still hidden and unmarked."""
        return [
            coord for coord in self.coordinates() if self.get(coord).is_hidden
        ]

    def observation(self) -> np.ndarray:
        """
        Get the visible grid as a numpy array.

        Returns:
            2D int8 array, see ``Cell.to_observation`` for the encoding.
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for row, col in self.coordinates():
            obs[row, col] = self._cells[row][col].to_observation()
        return obs
