"""
Pairwise conflict detection over a list of placed pieces.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from .attacks import mutual_attack
from .board import Board, Square
from .pieces import PiecePlacement


@dataclass(frozen=True)
class ConflictResult:
    """Squares involved in at least one attack, and the number of attacking pairs."""
    positions: frozenset[Square]
    pair_count: int

    @property
    def has_conflicts(self) -> bool:
        return bool(self.positions)


def evaluate_conflicts(board: Board, placements: Sequence[PiecePlacement]) -> ConflictResult:
    """
    Test every unordered pair of placements in both directions.

    All placed pieces block sight lines. Cost is O(n^2) attack tests, fine
    for inventories of a few dozen pieces.
    """
    occupied = {p.key for p in placements}
    positions: set[Square] = set()
    pair_count = 0

    for i, a in enumerate(placements):
        for b in placements[i + 1:]:
            if mutual_attack(board, a, b, occupied):
                positions.add(a.key)
                positions.add(b.key)
                pair_count += 1

    return ConflictResult(positions=frozenset(positions), pair_count=pair_count)


def is_legal_placement(board: Board, placements: Sequence[PiecePlacement]) -> bool:
    """True if no placed piece attacks another."""
    return not evaluate_conflicts(board, placements).positions
