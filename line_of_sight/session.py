"""
Helpers for a play session: counting, toggling and naming placements.

The caller owns the placement list. Nothing here mutates it; every
operation that changes the position returns a new list.
"""

from collections.abc import Mapping, Sequence

from .board import Board, is_valid_square, Square
from .conflicts import is_legal_placement
from .pieces import PIECE_VALUES, PiecePlacement, PieceType, count_pieces, piece_type

FILES = "abcdefghijklmnopqrstuvwxyz"


def placed_counts(placements: Sequence[PiecePlacement]) -> dict[PieceType, int]:
    """How many of each type are on the board (every type present)."""
    return count_pieces(placements)


def remaining_count(
    inventory: Mapping[PieceType, int],
    placements: Sequence[PiecePlacement],
    kind: "PieceType | str",
) -> int:
    """Pieces of this type still to place (negative if over-placed)."""
    kind = piece_type(kind)
    return inventory.get(kind, 0) - placed_counts(placements)[kind]


def total_pieces(inventory: Mapping[PieceType, int]) -> int:
    return sum(inventory.values())


def inventory_value(inventory: Mapping[PieceType, int]) -> int:
    """Total point value of an inventory (queen 9 ... king 0)."""
    return sum(PIECE_VALUES[piece] * count for piece, count in inventory.items())


def all_placed(inventory: Mapping[PieceType, int], placements: Sequence[PiecePlacement]) -> bool:
    """Exactly the inventory is on the board, type by type."""
    if len(placements) != total_pieces(inventory):
        return False
    counts = placed_counts(placements)
    return all(counts[piece] == count for piece, count in inventory.items())


def is_solved(board: Board, inventory: Mapping[PieceType, int], placements: Sequence[PiecePlacement]) -> bool:
    """All pieces placed and none attacking another."""
    return all_placed(inventory, placements) and is_legal_placement(board, placements)


def toggle_placement(
    board: Board,
    inventory: Mapping[PieceType, int],
    placements: Sequence[PiecePlacement],
    row: int,
    col: int,
    kind: "PieceType | str",
) -> list[PiecePlacement]:
    """
    Apply a click on (row, col) with `kind` selected.

    Blocked or off-board squares do nothing. A square holding a piece is
    cleared, whatever its type. An empty square gets the selected piece if any
    of that type are left.
    """
    placements = list(placements)
    if not is_valid_square(board, row, col):
        return placements
    for i, placement in enumerate(placements):
        if placement.key == (row, col):
            del placements[i]
            return placements
    if remaining_count(inventory, placements, kind) <= 0:
        return placements
    placements.append(PiecePlacement(row, col, piece_type(kind)))
    return placements


def undo_last(placements: Sequence[PiecePlacement]) -> list[PiecePlacement]:
    """Drop the most recent placement."""
    return list(placements[:-1])


def square_name(board: Board, row: int, col: int) -> str:
    """Algebraic name of a square: file letter from the column, rank counted from the bottom."""
    if not board.in_bounds(row, col):
        raise ValueError(f"Square ({row}, {col}) is off a {board.width}x{board.height} board")
    if col >= len(FILES):
        raise ValueError(f"Column {col} has no file letter (boards up to {len(FILES)} wide are named)")
    return f"{FILES[col]}{board.height - row}"


def parse_square(board: Board, name: str) -> Square:
    """Inverse of square_name: "a8" -> (0, 0) on an 8x8 board."""
    text = name.strip().lower()
    if len(text) < 2 or text[0] not in FILES or not text[1:].isdigit():
        raise ValueError(f"Not a square name: {name!r}")
    col = FILES.index(text[0])
    row = board.height - int(text[1:])
    if not board.in_bounds(row, col):
        raise ValueError(f"Square {name!r} is off a {board.width}x{board.height} board")
    return (row, col)
