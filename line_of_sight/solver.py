"""
Line of Sight solver using backtracking.

Given a board, an inventory and optionally some pieces already on the board,
find squares for every remaining piece so that no two pieces attack each other.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .attacks import mutual_attack
from .board import Board, Square, is_valid_square
from .config import MAX_SEARCH_NODES
from .conflicts import is_legal_placement
from .logging_utils import get_logger
from .pieces import PiecePlacement, PieceType, count_pieces, expand_inventory, normalize_inventory

logger = get_logger("solver")


class SolveStatus(str, Enum):
    SOLVED = "solved"
    INFEASIBLE = "infeasible"   # Proven: no completion exists (or bad preplaced input)
    GAVE_UP = "gave_up"         # Node budget ran out before an answer


@dataclass(frozen=True)
class SolveResult:
    status: SolveStatus
    placements: tuple[PiecePlacement, ...] = ()
    nodes: int = 0

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED


@dataclass
class _Frame:
    """One level of the search: which piece we are placing and the next candidate to try."""
    piece: PieceType
    cursor: int = 0


@dataclass
class _SearchState:
    placed: list[PiecePlacement]
    occupied: set[Square] = field(init=False)

    def __post_init__(self):
        self.occupied = {p.key for p in self.placed}

    def push(self, placement: PiecePlacement) -> None:
        self.placed.append(placement)
        self.occupied.add(placement.key)

    def pop(self) -> PiecePlacement:
        placement = self.placed.pop()
        self.occupied.discard(placement.key)
        return placement


def _preplaced_ok(board: Board, inventory: Mapping[PieceType, int], preplaced: Sequence[PiecePlacement]) -> bool:
    """Preplaced pieces must sit on distinct valid squares within the inventory counts."""
    seen: set[Square] = set()
    for p in preplaced:
        if not is_valid_square(board, p.row, p.col):
            logger.debug("Preplaced %s at %s is not on a valid square", p.type.value, p.key)
            return False
        if p.key in seen:
            logger.debug("Two preplaced pieces share square %s", p.key)
            return False
        seen.add(p.key)

    used = count_pieces(preplaced)
    for piece, count in used.items():
        if count > inventory.get(piece, 0):
            logger.debug("Preplaced %d %s(s) but inventory allows %d", count, piece.value, inventory.get(piece, 0))
            return False
    return True


def remaining_pieces(inventory: Mapping[PieceType, int], preplaced: Sequence[PiecePlacement]) -> list[PieceType]:
    """Inventory minus preplaced pieces, per type, in solve priority order."""
    used = count_pieces(preplaced)
    remaining = {piece: count - used[piece] for piece, count in inventory.items()}
    return expand_inventory(remaining)


def _is_safe(board: Board, candidate: PiecePlacement, state: _SearchState) -> bool:
    for placed in state.placed:
        if mutual_attack(board, candidate, placed, state.occupied):
            return False
    return True


def solve(
    board: Board,
    inventory: Mapping["PieceType | str", int],
    preplaced: Sequence[PiecePlacement] = (),
    max_nodes: int | None = MAX_SEARCH_NODES,
) -> SolveResult:
    """
    Backtracking solver. Returns a SolveResult; never raises for unsolvable input.

    Strategy:
    - Validate preplaced pieces (valid, distinct squares, within inventory, no conflicts)
    - Place remaining pieces in fixed priority: queen, rook, bishop, knight, pawn, king
    - For each piece, try the valid empty squares in row-major order
    - Accept a square if the new piece and every placed piece leave each other alone
    - When a piece has no square left, undo the previous piece and move it on

    The search uses an explicit stack of frames instead of recursion, so deep
    inventories cannot hit the recursion limit and the node budget is checked
    at every step. No pruning beyond the ordering: the answer is exact.

    Args:
        board: Board to fill
        inventory: Piece counts that must all be placed
        preplaced: Pieces already on the board (kept, in order, at the start of the result)
        max_nodes: Give up after this many accepted placements (None: no limit)
    """
    if max_nodes is not None and max_nodes < 0:
        raise ValueError(f"max_nodes must be non-negative, got {max_nodes}")
    inventory = normalize_inventory(inventory)
    preplaced = list(preplaced)

    if not _preplaced_ok(board, inventory, preplaced):
        return SolveResult(SolveStatus.INFEASIBLE)
    if not is_legal_placement(board, preplaced):
        logger.debug("Preplaced pieces already attack each other")
        return SolveResult(SolveStatus.INFEASIBLE)

    pieces = remaining_pieces(inventory, preplaced)
    state = _SearchState(placed=preplaced)
    if not pieces:
        return SolveResult(SolveStatus.SOLVED, placements=tuple(state.placed))

    cells = board.valid_cells()
    stack = [_Frame(pieces[0])]
    nodes = 0

    while stack:
        frame = stack[-1]
        accepted = False
        while frame.cursor < len(cells):
            square = cells[frame.cursor]
            frame.cursor += 1
            if square in state.occupied:
                continue
            candidate = PiecePlacement(square[0], square[1], frame.piece)
            if not _is_safe(board, candidate, state):
                continue
            nodes += 1
            if max_nodes is not None and nodes > max_nodes:
                logger.info("Solver gave up after %d nodes", max_nodes)
                return SolveResult(SolveStatus.GAVE_UP, nodes=max_nodes)
            state.push(candidate)
            accepted = True
            break

        if accepted:
            if len(stack) == len(pieces):
                logger.debug("Solved after %d nodes", nodes)
                return SolveResult(SolveStatus.SOLVED, placements=tuple(state.placed), nodes=nodes)
            stack.append(_Frame(pieces[len(stack)]))
            continue

        # No square left for this piece: drop its frame and move the parent's piece on.
        stack.pop()
        if stack:
            state.pop()

    logger.debug("Search exhausted after %d nodes", nodes)
    return SolveResult(SolveStatus.INFEASIBLE, nodes=nodes)


def solve_with_inventory(
    board: Board,
    inventory: Mapping["PieceType | str", int],
    preplaced: Sequence[PiecePlacement] = (),
    max_nodes: int | None = MAX_SEARCH_NODES,
) -> list[PiecePlacement] | None:
    """Complete placement list (preplaced first) or None if none was found."""
    result = solve(board, inventory, preplaced, max_nodes=max_nodes)
    return list(result.placements) if result.solved else None
