import json

import pytest
from pydantic import ValidationError

from line_of_sight.board import Board
from line_of_sight.hints import Hint, HintKind
from line_of_sight.models import HintResponse, PuzzleResponse, SolveResponse, parse_placements
from line_of_sight.pieces import PiecePlacement, PieceType
from line_of_sight.search import DailyPuzzle
from line_of_sight.solver import SolveResult, SolveStatus

BOARD = Board.from_rows(["..#", "...", "#.."], seed="test")
SOLUTION = (PiecePlacement(0, 0, PieceType.KING), PiecePlacement(2, 2, PieceType.KING))


def test_parse_placements():
    placements = parse_placements('[{"row": 0, "col": 3, "type": "rook"}, {"row": 2, "col": 1, "type": "pawn"}]')
    assert placements == [PiecePlacement(0, 3, PieceType.ROOK), PiecePlacement(2, 1, PieceType.PAWN)]
    assert parse_placements("[]") == []


@pytest.mark.parametrize("text", [
    "not json",
    '[{"row": 0, "col": 0, "type": "dragon"}]',
    '[{"row": "a", "col": 0, "type": "king"}]',
    '[{"row": 0, "type": "king"}]',
    '{"row": 0, "col": 0, "type": "king"}',
])
def test_parse_placements_rejects_bad_input(text):
    with pytest.raises(ValidationError):
        parse_placements(text)


def test_puzzle_response():
    puzzle = DailyPuzzle(seed="test", board=BOARD, inventory={PieceType.KING: 2}, solution=SOLUTION)
    hidden = PuzzleResponse.from_puzzle(puzzle)
    assert hidden.rows == ["..#", "...", "#.."]
    assert hidden.size == 3
    assert hidden.inventory == {"king": 2}
    assert hidden.total_pieces == 2
    assert hidden.solvable
    assert hidden.solution is None

    shown = json.loads(PuzzleResponse.from_puzzle(puzzle, include_solution=True).model_dump_json())
    assert shown["solution"] == [
        {"row": 0, "col": 0, "type": "king"},
        {"row": 2, "col": 2, "type": "king"},
    ]


def test_unsolvable_puzzle_response():
    puzzle = DailyPuzzle(seed="test", board=BOARD, inventory={PieceType.KING: 5}, solution=None)
    response = PuzzleResponse.from_puzzle(puzzle, include_solution=True)
    assert not response.solvable
    assert response.solution is None


def test_solve_response():
    ok = SolveResponse.from_result(SolveResult(SolveStatus.SOLVED, SOLUTION, nodes=2))
    assert ok.success
    assert ok.status == "solved"
    assert [p.to_placement() for p in ok.solution] == list(SOLUTION)
    assert ok.error is None

    failed = SolveResponse.from_result(SolveResult(SolveStatus.INFEASIBLE, nodes=7))
    assert not failed.success
    assert failed.status == "infeasible"
    assert failed.solution is None
    assert failed.error == "No solution found"

    gave_up = SolveResponse.from_result(SolveResult(SolveStatus.GAVE_UP, nodes=100))
    assert gave_up.status == "gave_up"
    assert gave_up.error == "Search budget exhausted"


def test_hint_response():
    response = HintResponse.from_hint(Hint(HintKind.WRONG, (2, 1)), BOARD)
    assert response.kind == "wrong"
    assert response.square == (2, 1)
    assert response.square_name == "b1"
    assert response.message == Hint(HintKind.WRONG).message

    empty = HintResponse.from_hint(Hint(HintKind.NONE), BOARD)
    assert empty.square is None
    assert empty.square_name is None

    off_board = HintResponse.from_hint(Hint(HintKind.WRONG, (9, 0)), BOARD)
    assert off_board.square_name is None


def test_parse_placements_rejects_squares_off_the_board():
    text = '[{"row": 0, "col": 0, "type": "rook"}, {"row": 0, "col": 9, "type": "rook"}]'
    assert len(parse_placements(text)) == 2
    with pytest.raises(ValueError):
        parse_placements(text, BOARD)
    with pytest.raises(ValueError):
        parse_placements('[{"row": -1, "col": 0, "type": "king"}]', BOARD)
    assert parse_placements('[{"row": 2, "col": 2, "type": "king"}]', BOARD) == [SOLUTION[1]]


def test_hint_response_on_a_board_wider_than_the_alphabet():
    wide = Board.from_rows(["." * 30] * 30)
    response = HintResponse.from_hint(Hint(HintKind.SUGGEST, (0, 27)), wide)
    assert response.square == (0, 27)
    assert response.square_name is None
    assert HintResponse.from_hint(Hint(HintKind.SUGGEST, (29, 25)), wide).square_name == "z1"
