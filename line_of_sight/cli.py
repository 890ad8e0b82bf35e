"""
Command line entry point: print the daily puzzle, a solve or a hint as JSON.

    line-of-sight daily --date 2024-01-01
    line-of-sight solve --seed 20240101 --placements '[{"row": 0, "col": 0, "type": "queen"}]'
    line-of-sight hint --seed 20240101 --placements '[...]'
"""

import argparse
import logging
import sys
from datetime import date

from .config import DAILY_SEARCH_NODES, DEFAULT_BLOCK_RATIO, DEFAULT_SIZE, MAX_ATTEMPTS
from .hints import find_hint
from .logging_utils import get_logger, set_level
from .models import HintResponse, PuzzleResponse, SolveResponse, parse_placements
from .search import daily_puzzle
from .seed import make_daily_seed
from .solver import solve

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="line-of-sight",
        description="Daily non-attacking chess piece puzzle",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_puzzle_options(p: argparse.ArgumentParser) -> None:
        which = p.add_mutually_exclusive_group()
        which.add_argument("--date", type=date.fromisoformat, help="Day as YYYY-MM-DD (default: today, UTC)")
        which.add_argument("--seed", help="Seed string (default: derived from the date)")
        p.add_argument("--size", type=int, default=DEFAULT_SIZE, help="Board edge length")
        p.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS, help="Board variants to try")
        p.add_argument("--block-ratio", type=float, default=DEFAULT_BLOCK_RATIO, help="Chance a cell is blocked")
        p.add_argument(
            "--max-nodes", type=int, default=DAILY_SEARCH_NODES,
            help="Solver budget per board attempt and per hint solve",
        )

    daily = sub.add_parser("daily", help="Print the puzzle for a day")
    add_puzzle_options(daily)
    daily.add_argument("--with-solution", action="store_true", help="Include the known solution")

    solve_cmd = sub.add_parser("solve", help="Complete a position on the day's board")
    add_puzzle_options(solve_cmd)
    solve_cmd.add_argument("--placements", default="[]", help="JSON list of {row, col, type}")

    hint = sub.add_parser("hint", help="Hint for a position on the day's board")
    add_puzzle_options(hint)
    hint.add_argument("--placements", required=True, help="JSON list of {row, col, type}")

    return parser


def run(args: argparse.Namespace) -> str:
    """Execute a parsed command and return the JSON to print."""
    seed = args.seed or make_daily_seed(args.date)
    puzzle = daily_puzzle(
        seed=seed,
        max_attempts=args.max_attempts,
        block_ratio=args.block_ratio,
        size=args.size,
        max_nodes=args.max_nodes,
    )

    if args.command == "daily":
        return PuzzleResponse.from_puzzle(puzzle, include_solution=args.with_solution).model_dump_json(indent=2)

    placements = parse_placements(args.placements, puzzle.board)
    logger.debug("Seed %s with %d placements", seed, len(placements))
    if args.command == "solve":
        result = solve(puzzle.board, puzzle.inventory, placements, max_nodes=args.max_nodes)
        return SolveResponse.from_result(result).model_dump_json(indent=2)

    hint = find_hint(puzzle.board, puzzle.inventory, placements, max_nodes=args.max_nodes)
    return HintResponse.from_hint(hint, puzzle.board).model_dump_json(indent=2)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)

    try:
        output = run(args)
    except ValueError as e:  # includes pydantic.ValidationError
        parser.error(str(e))
    sys.stdout.write(output + "\n")
    return 0
