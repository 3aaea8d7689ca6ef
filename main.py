#!/usr/bin/env python3
"""
Minefield - command-line entry point.

Usage:
    python main.py evaluate [--difficulty {beginner,intermediate,expert}]
                            [--games N] [--seed S] [--chord]
    python main.py presets
"""
import argparse
import logging

from minefield import ActionType, BoardConfig, Difficulty
from agents import Evaluator, RandomAgent


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Board from a preset, overridden by explicit dimensions."""
    preset = BoardConfig.for_difficulty(Difficulty[args.difficulty.upper()])
    return BoardConfig(
        width=args.width or preset.width,
        height=args.height or preset.height,
        num_mines=preset.num_mines if args.mines is None else args.mines,
    )


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random agent and print results."""
    config = build_config(args)
    action_types = [ActionType.OPEN]
    if args.chord:
        action_types.append(ActionType.CHORD)
    agent = RandomAgent(config.height, config.width, seed=args.seed,
                        action_types=action_types)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(f"Evaluating Random agent on {config.height}x{config.width} "
          f"with {config.num_mines} mines over {args.games} games...")
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Wins: {results['wins']}/{results['games']}")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def presets(args: argparse.Namespace) -> None:
    """Print the difficulty presets."""
    print(f"{'Difficulty':<14} {'Rows':>5} {'Cols':>5} {'Mines':>6}")
    print("-" * 33)
    for difficulty in Difficulty:
        config = BoardConfig.for_difficulty(difficulty)
        print(f"{difficulty.value:<14} {config.height:>5} "
              f"{config.width:>5} {config.num_mines:>6}")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Minesweeper engine tools"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine events"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    eval_parser = subparsers.add_parser(
        "evaluate", help="Play seeded games with the random agent"
    )
    eval_parser.add_argument(
        "--difficulty",
        choices=[d.name.lower() for d in Difficulty],
        default="beginner",
        help="Board preset",
    )
    eval_parser.add_argument("--width", type=int, help="Override columns")
    eval_parser.add_argument("--height", type=int, help="Override rows")
    eval_parser.add_argument("--mines", type=int, help="Override mine count")
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    eval_parser.add_argument(
        "--chord", action="store_true", help="Let the agent chord too"
    )

    subparsers.add_parser("presets", help="List difficulty presets")

    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "evaluate":
        evaluate(args)
    elif args.command == "presets":
        presets(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
