"""
Line of Sight - JSON response models

Plain data shapes for handing engine results to a front end (the CLI prints them).
"""

from pydantic import BaseModel, TypeAdapter

from .board import Board
from .hints import Hint
from .pieces import Inventory, PiecePlacement, PieceType
from .search import DailyPuzzle
from .session import square_name, total_pieces
from .solver import SolveResult, SolveStatus


class PlacementModel(BaseModel):
    row: int
    col: int
    type: PieceType

    @classmethod
    def from_placement(cls, placement: PiecePlacement) -> "PlacementModel":
        return cls(row=placement.row, col=placement.col, type=placement.type)

    def to_placement(self) -> PiecePlacement:
        return PiecePlacement(self.row, self.col, self.type)


class PuzzleResponse(BaseModel):
    seed: str
    size: int
    rows: list[str]  # '.' valid, '#' blocked, top row first
    inventory: dict[str, int]
    total_pieces: int
    solvable: bool
    solution: list[PlacementModel] | None = None

    @classmethod
    def from_puzzle(cls, puzzle: DailyPuzzle, include_solution: bool = False) -> "PuzzleResponse":
        solution = None
        if include_solution and puzzle.solution is not None:
            solution = [PlacementModel.from_placement(p) for p in puzzle.solution]
        return cls(
            seed=puzzle.seed,
            size=puzzle.board.width,
            rows=puzzle.board.to_rows(),
            inventory=_inventory_json(puzzle.inventory),
            total_pieces=total_pieces(puzzle.inventory),
            solvable=puzzle.solvable,
            solution=solution,
        )


class SolveResponse(BaseModel):
    success: bool
    status: str
    nodes: int = 0
    solution: list[PlacementModel] | None = None  # Preplaced pieces first
    error: str | None = None

    @classmethod
    def from_result(cls, result: SolveResult) -> "SolveResponse":
        if result.solved:
            return cls(
                success=True,
                status=result.status.value,
                nodes=result.nodes,
                solution=[PlacementModel.from_placement(p) for p in result.placements],
            )
        return cls(
            success=False,
            status=result.status.value,
            nodes=result.nodes,
            error="No solution found" if result.status is SolveStatus.INFEASIBLE else "Search budget exhausted",
        )


class HintResponse(BaseModel):
    kind: str
    square: tuple[int, int] | None = None
    square_name: str | None = None
    message: str

    @classmethod
    def from_hint(cls, hint: Hint, board: Board) -> "HintResponse":
        name = None
        if hint.square is not None:
            try:
                name = square_name(board, *hint.square)
            except ValueError:
                # Off the board, or past the last file letter
                name = None
        return cls(kind=hint.kind.value, square=hint.square, square_name=name, message=hint.message)


_placements_adapter = TypeAdapter(list[PlacementModel])


def parse_placements(json_text: str, board: Board | None = None) -> list[PiecePlacement]:
    """
    Parse caller-supplied placements, e.g. '[{"row": 0, "col": 3, "type": "rook"}]'.

    Raises pydantic.ValidationError on malformed JSON, unknown piece types
    or non-integer coordinates. With a board, squares off that board raise
    ValueError.
    """
    placements = [model.to_placement() for model in _placements_adapter.validate_json(json_text)]
    if board is not None:
        for placement in placements:
            if not board.in_bounds(placement.row, placement.col):
                raise ValueError(
                    f"Placement {placement.key} is off the {board.width}x{board.height} board"
                )
    return placements


def _inventory_json(inventory: Inventory) -> dict[str, int]:
    return {piece.value: count for piece, count in inventory.items()}
