"""
Error types raised by the minefield engine.

Player mistakes (opening a flagged cell, acting after the game ended)
are not errors; they are silent no-ops handled by the game itself.
"""


class MinefieldError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(MinefieldError, ValueError):
    """Board dimensions or mine count cannot form a playable board."""


class OutOfBounds(MinefieldError, IndexError):
    """A coordinate lies outside the grid."""

    def __init__(self, coord, width: int, height: int) -> None:
        super().__init__(
            f"Coordinate {coord} outside {height}x{width} grid"
        )
        self.coord = coord


class InsufficientSpace(MinefieldError):
    """Not enough eligible cells to hold the requested mines."""
