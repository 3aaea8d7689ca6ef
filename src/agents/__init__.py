"""
Automated Minesweeper players.

Provides agents that play through ``MinesweeperEnv``:
- RandomAgent: Baseline random selection

and an Evaluator that scores them over many seeded games.
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .evaluation import EpisodeStats, Evaluator

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "EpisodeStats",
    "Evaluator",
]
