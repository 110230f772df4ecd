#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py demo [--games N] [--delay SECONDS]
    python main.py evaluate [--games N]
"""
import argparse
import logging
import os
import random
import sys
import time

from minesweeper import BoardConfig, ConsoleShell, InvalidConfiguration, MinesweeperEnv
from minesweeper.agents import RandomAgent
from minesweeper.evaluation import Evaluator


def clear_screen() -> None:
    os.system('cls' if os.name == 'nt' else 'clear')


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def board_config(args: argparse.Namespace) -> BoardConfig:
    """Build the board configuration from command line flags."""
    return BoardConfig(width=args.width, height=args.height, num_mines=args.mines)


def play(args: argparse.Namespace) -> None:
    """Play interactively in the terminal."""
    rng = random.Random(args.seed) if args.seed is not None else None
    shell = ConsoleShell(board_config(args), rng=rng)
    outcomes = shell.run()

    wins = sum(1 for outcome in outcomes if outcome.name == "WON")
    print(f"\nRounds finished: {len(outcomes)} | Wins: {wins}")


def demo(args: argparse.Namespace) -> None:
    """Watch the random agent play."""
    config = board_config(args)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent(config.height, config.width, seed=args.seed)

    wins = 0
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        obs, _ = env.reset(seed=seed)
        agent.reset()

        done = False
        step = 0
        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            row, col = agent.action_to_position(action)
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {col})\n")
            print(env.render())

            if done:
                if info["game_state"] == "WON":
                    wins += 1
                    print("\n*** WIN! ***")
                else:
                    print("\n*** LOST (hit mine) ***")

            time.sleep(args.delay)

    print(f"\n=== Final: {wins}/{args.games} wins ({100 * wins / args.games:.0f}%) ===")


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random baseline and print results."""
    config = board_config(args)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)
    agents = {"Random": RandomAgent(config.height, config.width, seed=args.seed)}

    results = evaluator.compare(agents)

    print("\n" + "=" * 50)
    print("Agent Evaluation Results")
    print("=" * 50)
    print(f"{'Agent':<12} {'Win Rate':<10} {'Avg Reward':<12} {'Avg Revealed':<12}")
    print("-" * 50)

    for name, result in results.items():
        print(
            f"{name:<12} {result.win_rate:>8.1%} "
            f"{result.avg_reward:>12.2f} "
            f"{result.avg_revealed:>12.1f}"
        )


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the board dimension flags shared by every command."""
    defaults = BoardConfig()
    parser.add_argument(
        "--width", type=int, default=defaults.width, help="Number of columns"
    )
    parser.add_argument(
        "--height", type=int, default=defaults.height, help="Number of rows"
    )
    parser.add_argument(
        "--mines", type=int, default=defaults.num_mines, help="Number of mines"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    demo_parser = subparsers.add_parser("demo", help="Watch the random agent play")
    add_board_arguments(demo_parser)
    demo_parser.add_argument(
        "--games", type=positive_int, default=5, help="Number of games"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    eval_parser = subparsers.add_parser("evaluate", help="Evaluate the random agent")
    add_board_arguments(eval_parser)
    eval_parser.add_argument(
        "--games", type=positive_int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    commands = {"play": play, "demo": demo, "evaluate": evaluate}
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return

    try:
        command(args)
    except InvalidConfiguration as exc:
        print(f"Invalid board: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
