"""
Search for a solvable board, and the daily puzzle built on it.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date as Date, datetime

from .board import Board, generate_board
from .config import DAILY_SEARCH_NODES, DEFAULT_BLOCK_RATIO, DEFAULT_SIZE, MAX_ATTEMPTS
from .logging_utils import get_logger
from .pieces import Inventory, PiecePlacement, PieceType, inventory_for_seed, normalize_inventory
from .seed import make_daily_seed
from .solver import SolveStatus, solve

logger = get_logger("search")


@dataclass(frozen=True)
class SolvableBoard:
    board: Board
    solution: tuple[PiecePlacement, ...] | None
    attempts: int = 0


@dataclass(frozen=True)
class DailyPuzzle:
    """Everything a front end needs for one day: seed, board, inventory and a known solution."""
    seed: str
    board: Board
    inventory: Inventory
    solution: tuple[PiecePlacement, ...] | None

    @property
    def solvable(self) -> bool:
        return self.solution is not None


def attempt_seed(seed: str, attempt: int) -> str:
    """Seed used for a given attempt: the base seed first, then "seed-1", "seed-2", ..."""
    return seed if attempt == 0 else f"{seed}-{attempt}"


def find_solvable_board(
    seed: str,
    inventory: Mapping["PieceType | str", int],
    max_attempts: int = MAX_ATTEMPTS,
    block_ratio: float = DEFAULT_BLOCK_RATIO,
    size: int = DEFAULT_SIZE,
    max_nodes: int | None = DAILY_SEARCH_NODES,
) -> SolvableBoard:
    """
    Regenerate board variants until the full inventory fits on one.

    Returns the first (board, solution) found. If every attempt fails, the
    base-seed board is generated again and returned with solution=None: the
    board exists but may not be completable.

    Args:
        seed: Base seed
        inventory: Pieces that must all fit, nothing preplaced
        max_attempts: Number of seed variants to try
        block_ratio: Passed to generate_board
        size: Passed to generate_board
        max_nodes: Solver budget per attempt; a board that exhausts it counts as unsolved
    """
    inventory = normalize_inventory(inventory)
    for attempt in range(max_attempts):
        board = generate_board(attempt_seed(seed, attempt), size=size, block_ratio=block_ratio)
        result = solve(board, inventory, max_nodes=max_nodes)
        if result.solved:
            logger.info("Seed %s: solvable board on attempt %d (%d nodes)", seed, attempt, result.nodes)
            return SolvableBoard(board=board, solution=result.placements, attempts=attempt + 1)
        if result.status is SolveStatus.GAVE_UP:
            logger.debug("Seed %s attempt %d: solver gave up", seed, attempt)
        else:
            logger.debug("Seed %s attempt %d: no solution", seed, attempt)

    logger.warning("Seed %s: no solvable board in %d attempts", seed, max_attempts)
    board = generate_board(seed, size=size, block_ratio=block_ratio)
    return SolvableBoard(board=board, solution=None, attempts=max_attempts)


def daily_puzzle(
    seed: str | None = None,
    when: Date | datetime | None = None,
    max_attempts: int = MAX_ATTEMPTS,
    block_ratio: float = DEFAULT_BLOCK_RATIO,
    size: int = DEFAULT_SIZE,
    max_nodes: int | None = DAILY_SEARCH_NODES,
) -> DailyPuzzle:
    """
    Build the puzzle for a seed, or for a day (today by default).

    The inventory is rolled from the seed first, then the board search runs
    with that inventory.
    """
    if seed is None:
        seed = make_daily_seed(when)
    inventory = inventory_for_seed(seed)
    found = find_solvable_board(
        seed,
        inventory,
        max_attempts=max_attempts,
        block_ratio=block_ratio,
        size=size,
        max_nodes=max_nodes,
    )
    return DailyPuzzle(seed=seed, board=found.board, inventory=inventory, solution=found.solution)
