"""
Evaluation of agents over many seeded games.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from minefield import BoardConfig, MinesweeperEnv

from .base_agent import BaseAgent


@dataclass
class EpisodeStats:
    """Statistics for a single episode."""

    total_reward: float = 0.0
    steps: int = 0
    won: bool = False
    revealed_cells: int = 0


class Evaluator:
    """Plays an agent through a fixed number of games and averages results."""

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 1000,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            config: Board configuration.
            num_episodes: Games to play per evaluation.
            max_steps: Step cap per game before it is truncated.
            seed: Seed for the first game; later games follow from it.
        """
        self.config = config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def play_episode(
        self, agent: BaseAgent, env: MinesweeperEnv, seed: Optional[int] = None
    ) -> EpisodeStats:
        """Play one game to the end or to the step cap."""
        observation, info = env.reset(seed=seed)
        agent.reset()
        stats = EpisodeStats()

        for _ in range(self.max_steps):
            action = agent.select_action(observation, env.get_action_mask())
            observation, reward, terminated, truncated, info = env.step(action)
            stats.total_reward += reward
            stats.steps += 1
            if terminated or truncated:
                break

        stats.won = info.get("game_state") == "WON"
        stats.revealed_cells = info.get("revealed", 0)
        return stats

    def evaluate(self, agent: BaseAgent) -> Dict[str, Any]:
        """
        Evaluate an agent.

        Returns:
            Dictionary with evaluation metrics.
        """
        env = MinesweeperEnv(config=self.config)
        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.num_episodes):
            seed = self.seed + episode if self.seed is not None else None
            stats = self.play_episode(agent, env, seed)
            wins += stats.won
            total_reward += stats.total_reward
            total_steps += stats.steps
            total_revealed += stats.revealed_cells

        return {
            "games": self.num_episodes,
            "wins": wins,
            "win_rate": wins / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }
