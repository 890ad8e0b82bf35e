"""
Line of Sight board model.

Coordinate system:
- (row, col), row 0 is the top rank as displayed, col 0 the "a" file
- cells are stored row-major: cells[row][col]
- a cell is either valid (a piece may stand there) or blocked
  (no piece, and sliding pieces cannot see through it)

Boards are square and immutable once generated.
"""

import math
from dataclasses import dataclass
from enum import Enum

from .config import DEFAULT_BLOCK_RATIO, DEFAULT_SIZE, MIN_VALID_RATIO
from .seed import Mulberry32

Square = tuple[int, int]  # (row, col)


class CellState(str, Enum):
    VALID = "valid"
    BLOCKED = "blocked"


# Characters used by Board.from_rows / Board.to_rows
CELL_CHARS: dict[CellState, str] = {
    CellState.VALID: ".",
    CellState.BLOCKED: "#",
}


@dataclass(frozen=True)
class Board:
    """A square grid of valid/blocked cells and the seed that produced it."""
    width: int
    height: int
    cells: tuple[tuple[CellState, ...], ...]
    seed: str = ""

    def __post_init__(self):
        if not isinstance(self.width, int) or not isinstance(self.height, int):
            raise ValueError("Board dimensions must be integers")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}")
        if self.width != self.height:
            raise ValueError(f"Board must be square, got {self.width}x{self.height}")
        if len(self.cells) != self.height:
            raise ValueError(f"Expected {self.height} rows, got {len(self.cells)}")
        for row, row_cells in enumerate(self.cells):
            if len(row_cells) != self.width:
                raise ValueError(f"Row {row} has {len(row_cells)} cells, expected {self.width}")
            for cell in row_cells:
                if not isinstance(cell, CellState):
                    raise ValueError(f"Unknown cell state {cell!r} in row {row}")

    @classmethod
    def from_rows(cls, rows: list[str], seed: str = "") -> "Board":
        """Build a board from strings, '.' for valid and '#' for blocked.

        Handy for hand-made boards:

            Board.from_rows([
                "....",
                ".#..",
                "....",
                "....",
            ])
        """
        by_char = {char: state for state, char in CELL_CHARS.items()}
        cells = []
        for row, text in enumerate(rows):
            try:
                cells.append(tuple(by_char[char] for char in text))
            except KeyError as e:
                raise ValueError(f"Unknown cell character {e.args[0]!r} in row {row}") from None
        width = len(cells[0]) if cells else 0
        return cls(width=width, height=len(cells), cells=tuple(cells), seed=seed)

    def to_rows(self) -> list[str]:
        """Inverse of from_rows."""
        return ["".join(CELL_CHARS[cell] for cell in row_cells) for row_cells in self.cells]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def is_blocked(self, row: int, col: int) -> bool:
        return self.cells[row][col] is CellState.BLOCKED

    def valid_cells(self) -> list[Square]:
        """All valid squares in row-major order (the solver's candidate order)."""
        return [
            (row, col)
            for row in range(self.height)
            for col in range(self.width)
            if self.cells[row][col] is CellState.VALID
        ]

    def valid_count(self) -> int:
        return sum(1 for row_cells in self.cells for cell in row_cells if cell is CellState.VALID)


def is_valid_square(board: Board, row: int, col: int) -> bool:
    """True if (row, col) is on the board and not blocked."""
    return board.in_bounds(row, col) and board.cells[row][col] is CellState.VALID


def min_valid_cells(size: int, min_valid_ratio: float = MIN_VALID_RATIO) -> int:
    """Smallest number of valid cells a generated board may have."""
    return math.ceil(size * size * min_valid_ratio)


def generate_board(
    seed: str,
    size: int = DEFAULT_SIZE,
    block_ratio: float = DEFAULT_BLOCK_RATIO,
    min_valid_ratio: float = MIN_VALID_RATIO,
) -> Board:
    """
    Generate the board for a seed.

    One RNG draw per cell in row-major order; a draw below block_ratio blocks
    the cell. If too few cells end up valid, the row-major earliest blocked
    cells are flipped back to valid until the floor is reached. The repair
    pass uses no randomness, so the result depends on the seed only.

    Args:
        seed: Seed string (usually from make_daily_seed)
        size: Edge length of the square board
        block_ratio: Probability that a cell starts blocked, in [0, 1]
        min_valid_ratio: Minimum share of valid cells, in [0, 1]
    """
    if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
        raise ValueError(f"Board size must be a positive integer, got {size!r}")
    if not 0.0 <= block_ratio <= 1.0:
        raise ValueError(f"block_ratio must be in [0, 1], got {block_ratio}")
    if not 0.0 <= min_valid_ratio <= 1.0:
        raise ValueError(f"min_valid_ratio must be in [0, 1], got {min_valid_ratio}")

    rng = Mulberry32.from_seed(seed)
    grid: list[list[CellState]] = []
    valid = 0
    for _ in range(size):
        row_cells = []
        for _ in range(size):
            cell = CellState.BLOCKED if rng.random() < block_ratio else CellState.VALID
            row_cells.append(cell)
            if cell is CellState.VALID:
                valid += 1
        grid.append(row_cells)

    floor = min_valid_cells(size, min_valid_ratio)
    for row_cells in grid:
        for col, cell in enumerate(row_cells):
            if valid >= floor:
                break
            if cell is CellState.BLOCKED:
                row_cells[col] = CellState.VALID
                valid += 1

    return Board(
        width=size,
        height=size,
        cells=tuple(tuple(row_cells) for row_cells in grid),
        seed=seed,
    )
