"""
Board configuration and difficulty presets.
"""
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidConfiguration


# ============================================================================
# Constants
# ============================================================================

class Difficulty(Enum):
    """Standard difficulty levels."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    EXPERT = "Expert"


def validate_dimensions(width: int, height: int, num_mines: int) -> None:
    """
    Ensure a board of the given shape can be played.

    Raises:
        InvalidConfiguration: If the board has no cells, a negative mine
            count, or no safe cell left after placing the mines.
    """
    if width < 1 or height < 1:
        raise InvalidConfiguration("Board dimensions must be positive")
    if num_mines < 0:
        raise InvalidConfiguration("Number of mines cannot be negative")
    max_mines = width * height - 1
    if num_mines > max_mines:
        raise InvalidConfiguration(f"Too many mines (max {max_mines})")


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a minefield.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate_dimensions(self.width, self.height, self.num_mines)

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Cells that must be revealed to win."""
        return self.total_cells - self.num_mines

    @classmethod
    def for_difficulty(cls, difficulty: Difficulty) -> "BoardConfig":
        """Get the preset configuration for a difficulty level."""
        return PRESETS[difficulty]


@dataclass
class GameOptions:
    """
    Gameplay switches that do not change the board shape.

    Attributes:
        left_click_chord: Primary open action also chords the cell.
        protect_first_neighborhood: Keep the neighbors of the first
            opened cell free of mines, not just the cell itself.
    """

    left_click_chord: bool = False
    protect_first_neighborhood: bool = True


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

PRESETS = {
    Difficulty.BEGINNER: BEGINNER,
    Difficulty.INTERMEDIATE: INTERMEDIATE,
    Difficulty.EXPERT: EXPERT,
}
