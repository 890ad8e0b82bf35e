"""
Attack rules for the six piece types.

Sliding pieces (rook, bishop, queen) need a clear line: every square strictly
between attacker and target must be valid and empty. Knights jump. Kings
reach the eight neighbours. Pawns all attack "up" the board (toward row 0),
one square diagonally, wherever they stand.

A piece never attacks its own square.
"""

from collections.abc import Collection

from .board import Board, Square
from .pieces import PiecePlacement, PieceType


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def path_clear(board: Board, start: Square, end: Square, occupied: Collection[Square]) -> bool:
    """True if no blocked or occupied square lies strictly between start and end.

    start and end must share a row, a column or a diagonal. The endpoints
    themselves are not checked, and squares off the board never block.
    """
    dr = _sign(end[0] - start[0])
    dc = _sign(end[1] - start[1])
    row, col = start[0] + dr, start[1] + dc
    while (row, col) != end:
        if board.in_bounds(row, col) and board.is_blocked(row, col):
            return False
        if (row, col) in occupied:
            return False
        row += dr
        col += dc
    return True


def pieces_attack(
    board: Board,
    attacker: PiecePlacement,
    target: PiecePlacement,
    occupied: Collection[Square],
) -> bool:
    """Does attacker attack target's square?

    Args:
        board: Board used for blocked cells
        attacker: Piece whose movement rule applies
        target: Square under test (its type is irrelevant)
        occupied: Squares holding pieces; they block sliding pieces
    """
    dr = target.row - attacker.row
    dc = target.col - attacker.col
    if dr == 0 and dc == 0:
        return False
    adr, adc = abs(dr), abs(dc)
    straight = dr == 0 or dc == 0
    diagonal = adr == adc

    kind = attacker.type
    if kind is PieceType.ROOK:
        return straight and path_clear(board, attacker.key, target.key, occupied)
    if kind is PieceType.BISHOP:
        return diagonal and path_clear(board, attacker.key, target.key, occupied)
    if kind is PieceType.QUEEN:
        return (straight or diagonal) and path_clear(board, attacker.key, target.key, occupied)
    if kind is PieceType.KNIGHT:
        return (adr, adc) in ((2, 1), (1, 2))
    if kind is PieceType.KING:
        return adr <= 1 and adc <= 1
    if kind is PieceType.PAWN:
        return dr == -1 and adc == 1
    raise ValueError(f"Unknown piece type: {kind!r}")


def mutual_attack(
    board: Board,
    a: PiecePlacement,
    b: PiecePlacement,
    occupied: Collection[Square],
) -> bool:
    """True if either piece attacks the other."""
    return pieces_attack(board, a, b, occupied) or pieces_attack(board, b, a, occupied)
