"""
Minefield engine.

Provides the grid model, mine placement, reveal logic and the game
state machine that a host UI drives.
"""
from .cell import Cell, CellState, CellView
from .config import (
    BoardConfig,
    Difficulty,
    GameOptions,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .errors import (
    MinefieldError,
    InvalidConfiguration,
    OutOfBounds,
    InsufficientSpace,
)
from .grid import Coord, Grid
from .placer import place, place_around
from .reveal import RevealResult, can_chord, chord, open_cell
from .game import Game, Phase, Timer
from .session import (
    BestTime,
    LeaderBoard,
    PlayEntry,
    PlayLog,
    PlayType,
    Session,
)
from .environment import ActionType, MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "BoardConfig",
    "Difficulty",
    "GameOptions",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "MinefieldError",
    "InvalidConfiguration",
    "OutOfBounds",
    "InsufficientSpace",
    "Coord",
    "Grid",
    "place",
    "place_around",
    "RevealResult",
    "can_chord",
    "chord",
    "open_cell",
    "Game",
    "Phase",
    "Timer",
    "BestTime",
    "LeaderBoard",
    "PlayEntry",
    "PlayLog",
    "PlayType",
    "Session",
    "ActionType",
    "MinesweeperEnv",
]
