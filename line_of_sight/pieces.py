"""
Piece definitions for Line of Sight: piece types, placements and the daily inventory.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from .config import INVENTORY_RANGES, KING_COUNT
from .seed import Mulberry32


class PieceType(str, Enum):
    QUEEN = "queen"
    ROOK = "rook"
    BISHOP = "bishop"
    KNIGHT = "knight"
    PAWN = "pawn"
    KING = "king"

    @property
    def value_points(self) -> int:
        return PIECE_VALUES[self]

    @property
    def label(self) -> str:
        return PIECE_LABELS[self]

    @property
    def fen(self) -> str:
        return PIECE_FEN[self]


# Fixed order: inventory draws, solver priority and display all follow it.
# Higher-mobility pieces come first so the solver prunes early.
PIECE_ORDER: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
    PieceType.KING,
)

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.QUEEN: 9,
    PieceType.ROOK: 5,
    PieceType.BISHOP: 3,
    PieceType.KNIGHT: 3,
    PieceType.PAWN: 1,
    PieceType.KING: 0,
}

PIECE_LABELS: dict[PieceType, str] = {
    PieceType.QUEEN: "Queen",
    PieceType.ROOK: "Rook",
    PieceType.BISHOP: "Bishop",
    PieceType.KNIGHT: "Knight",
    PieceType.PAWN: "Pawn",
    PieceType.KING: "King",
}

# Piece codes used by chessboard widgets (all pieces are white)
PIECE_FEN: dict[PieceType, str] = {
    PieceType.QUEEN: "wQ",
    PieceType.ROOK: "wR",
    PieceType.BISHOP: "wB",
    PieceType.KNIGHT: "wN",
    PieceType.PAWN: "wP",
    PieceType.KING: "wK",
}

Inventory = dict[PieceType, int]


def piece_type(value: "PieceType | str") -> PieceType:
    """Coerce a name like "queen" to a PieceType, failing loudly on unknown names."""
    if isinstance(value, PieceType):
        return value
    try:
        return PieceType(value)
    except ValueError:
        raise ValueError(f"Unknown piece type: {value!r}") from None


@dataclass(frozen=True)
class PiecePlacement:
    """A piece standing on one square."""
    row: int
    col: int
    type: PieceType

    def __post_init__(self):
        # Accept plain names ("rook") but store the enum.
        object.__setattr__(self, "type", piece_type(self.type))

    @property
    def key(self) -> tuple[int, int]:
        return (self.row, self.col)


def normalize_inventory(inventory: Mapping["PieceType | str", int]) -> Inventory:
    """
    Validate an inventory and return a fresh dict keyed by PieceType in PIECE_ORDER.

    Raises ValueError for unknown piece types and for negative or
    non-integer counts. Zero counts are kept as given.
    """
    counts: dict[PieceType, int] = {}
    for key, count in inventory.items():
        piece = piece_type(key)
        if not isinstance(count, int) or isinstance(count, bool):
            raise ValueError(f"Count for {piece.value} must be an integer, got {count!r}")
        if count < 0:
            raise ValueError(f"Count for {piece.value} must be non-negative, got {count}")
        counts[piece] = count
    return {piece: counts[piece] for piece in PIECE_ORDER if piece in counts}


def expand_inventory(inventory: Mapping[PieceType, int]) -> list[PieceType]:
    """One entry per piece, in PIECE_ORDER."""
    pieces = []
    for piece in PIECE_ORDER:
        pieces.extend([piece] * inventory.get(piece, 0))
    return pieces


def count_pieces(placements: Iterable[PiecePlacement]) -> dict[PieceType, int]:
    """Per-type counts for a placement list (every type present, zero by default)."""
    counts = {piece: 0 for piece in PIECE_ORDER}
    for placement in placements:
        counts[placement.type] += 1
    return counts


def inventory_for_seed(seed: str) -> Inventory:
    """
    Roll the day's piece counts.

    Uses its own fresh RNG on the seed (independent of the board's stream) and
    draws in PIECE_ORDER; changing the order changes every inventory.
    """
    rng = Mulberry32.from_seed(seed)
    inventory: Inventory = {}
    for piece in PIECE_ORDER:
        if piece is PieceType.KING:
            inventory[piece] = KING_COUNT
            continue
        low, high = INVENTORY_RANGES[piece.value]
        inventory[piece] = rng.randint(low, high)
    return inventory
