"""
Hints: point at a piece that cannot be part of any solution, or at a square
some solution needs.

Every call works from scratch; nothing is cached between hints.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from .board import Board, Square
from .config import DAILY_SEARCH_NODES
from .conflicts import evaluate_conflicts
from .logging_utils import get_logger
from .pieces import PiecePlacement, PieceType, normalize_inventory
from .session import all_placed
from .solver import SolveStatus, solve

logger = get_logger("hints")


class HintKind(str, Enum):
    CONFLICTS = "conflicts"   # Current pieces attack each other; resolve that first
    WRONG = "wrong"           # This placed piece blocks every solution
    SUGGEST = "suggest"       # A solution uses this square
    COMPLETE = "complete"     # Everything placed, no conflicts
    NONE = "none"             # Nothing useful to say
    GAVE_UP = "gave_up"       # Solver budget ran out


HINT_MESSAGES: dict[HintKind, str] = {
    HintKind.CONFLICTS: "Some pieces attack each other. Fix the highlighted conflicts first.",
    HintKind.WRONG: "This piece cannot fit a solution.",
    HintKind.SUGGEST: "This square shows a needed placement.",
    HintKind.COMPLETE: "Puzzle solved. Every piece is placed without conflict.",
    HintKind.NONE: "All current pieces can fit a solution.",
    HintKind.GAVE_UP: "No hint available right now.",
}


@dataclass(frozen=True)
class Hint:
    kind: HintKind
    square: Square | None = None

    @property
    def message(self) -> str:
        return HINT_MESSAGES[self.kind]


def find_wrong_placement(
    board: Board,
    inventory: Mapping[PieceType, int],
    placements: Sequence[PiecePlacement],
    max_nodes: int | None = DAILY_SEARCH_NODES,
) -> Hint:
    """
    Remove one placement at a time, in order, until the rest becomes solvable.

    The first such placement is reported. This is first-found, not a minimal
    culprit: ties go to the earliest placement.
    """
    for i, placement in enumerate(placements):
        rest = [p for j, p in enumerate(placements) if j != i]
        result = solve(board, inventory, rest, max_nodes=max_nodes)
        if result.status is SolveStatus.GAVE_UP:
            return Hint(HintKind.GAVE_UP)
        if result.solved:
            logger.debug("Placement %d (%s at %s) blocks every solution", i, placement.type.value, placement.key)
            return Hint(HintKind.WRONG, placement.key)
    return Hint(HintKind.NONE)


def find_hint(
    board: Board,
    inventory: Mapping["PieceType | str", int],
    placements: Sequence[PiecePlacement],
    max_nodes: int | None = DAILY_SEARCH_NODES,
) -> Hint:
    """
    Hint for the current position.

    - conflicting position: CONFLICTS (the caller normally disables hints then)
    - no completion exists: WRONG at the first placement whose removal fixes it
    - all pieces placed without conflict: COMPLETE
    - otherwise: SUGGEST the first square of a full solution not already
      holding the same piece
    """
    inventory = normalize_inventory(inventory)
    if evaluate_conflicts(board, placements).has_conflicts:
        return Hint(HintKind.CONFLICTS)

    result = solve(board, inventory, placements, max_nodes=max_nodes)
    if result.status is SolveStatus.GAVE_UP:
        return Hint(HintKind.GAVE_UP)
    if not result.solved:
        return find_wrong_placement(board, inventory, placements, max_nodes=max_nodes)

    if all_placed(inventory, placements):
        return Hint(HintKind.COMPLETE)

    current = set(placements)
    for placement in result.placements:
        if placement not in current:
            return Hint(HintKind.SUGGEST, placement.key)
    return Hint(HintKind.NONE)
