"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import BoardConfig, Cell, Game, Grid, Session


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def seeded_rng() -> random.Random:
    """Fixed random source for reproducible layouts."""
    return random.Random(1234)


@pytest.fixture
def beginner_game(seeded_rng: random.Random) -> Game:
    """Create a seeded beginner game."""
    return Game(BoardConfig(9, 9, 10), rng=seeded_rng)


@pytest.fixture
def corner_mine_game() -> Game:
    """3x3 game with a single mine in the top-left corner."""
    return Game.from_layout(3, 3, [(0, 0)])


@pytest.fixture
def two_mine_game() -> Game:
    """4x4 game with mines in opposite corners."""
    return Game.from_layout(4, 4, [(0, 0), (3, 3)])


@pytest.fixture
def empty_game() -> Game:
    """Create a game with no mines for cascade testing."""
    return Game(BoardConfig(5, 5, 0))


@pytest.fixture
def session(seeded_rng: random.Random) -> Session:
    """Create a seeded session on a beginner board."""
    return Session(BoardConfig(9, 9, 10), rng=seeded_rng)


# ============================================================================
# Grid and Cell Fixtures
# ============================================================================

@pytest.fixture
def empty_grid() -> Grid:
    """Create an unpopulated 5x4 grid (width 5, height 4)."""
    return Grid(5, 4, 3)


@pytest.fixture
def corner_mine_grid() -> Grid:
    """3x3 grid with a single mine at (0, 0)."""
    return Grid.from_mines(3, 3, [(0, 0)])


@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)
