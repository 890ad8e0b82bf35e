import pytest

from line_of_sight.board import Board
from line_of_sight.hints import HINT_MESSAGES, Hint, HintKind, find_hint, find_wrong_placement
from line_of_sight.pieces import PiecePlacement, PieceType

# Four kings on an open 3x3 board only fit in the corners
OPEN_3 = Board.from_rows(["..."] * 3)
FOUR_KINGS = {PieceType.KING: 4}


def kings(*squares):
    return [PiecePlacement(r, c, PieceType.KING) for r, c in squares]


def test_center_king_is_wrong():
    hint = find_hint(OPEN_3, FOUR_KINGS, kings((1, 1)))
    assert hint == Hint(HintKind.WRONG, (1, 1))


def test_wrong_placement_is_the_first_that_fixes_the_position():
    hint = find_hint(OPEN_3, FOUR_KINGS, kings((0, 0), (1, 2)))
    assert hint == Hint(HintKind.WRONG, (1, 2))


def test_no_single_removal_helps():
    hint = find_hint(OPEN_3, FOUR_KINGS, kings((0, 1), (2, 1)))
    assert hint.kind is HintKind.NONE
    assert hint.square is None


def test_suggests_next_square_of_a_solution():
    hint = find_hint(OPEN_3, FOUR_KINGS, kings((0, 0)))
    assert hint == Hint(HintKind.SUGGEST, (0, 2))


def test_suggestion_skips_pieces_already_placed():
    hint = find_hint(OPEN_3, FOUR_KINGS, kings((2, 2), (0, 0)))
    assert hint == Hint(HintKind.SUGGEST, (0, 2))


def test_empty_position_gets_a_suggestion():
    hint = find_hint(OPEN_3, {"king": 4}, [])
    assert hint == Hint(HintKind.SUGGEST, (0, 0))


def test_complete_position():
    hint = find_hint(OPEN_3, FOUR_KINGS, kings((0, 0), (0, 2), (2, 0), (2, 2)))
    assert hint.kind is HintKind.COMPLETE


def test_conflicting_position():
    hint = find_hint(OPEN_3, FOUR_KINGS, kings((0, 0), (0, 1)))
    assert hint.kind is HintKind.CONFLICTS


def test_budget_exhaustion():
    hint = find_hint(OPEN_3, FOUR_KINGS, kings((0, 0)), max_nodes=0)
    assert hint.kind is HintKind.GAVE_UP


def test_find_wrong_placement_directly():
    assert find_wrong_placement(OPEN_3, FOUR_KINGS, kings((1, 0))) == Hint(HintKind.WRONG, (1, 0))
    assert find_wrong_placement(OPEN_3, FOUR_KINGS, []) == Hint(HintKind.NONE)


@pytest.mark.parametrize("kind", list(HintKind))
def test_every_kind_has_a_message(kind):
    assert Hint(kind).message == HINT_MESSAGES[kind]
    assert Hint(kind).message


def test_off_board_placements_give_hints_not_errors():
    open_8 = Board.from_rows(["........"] * 8)
    # The rook on (0, 9) still sees along row 0
    conflicting = [PiecePlacement(0, 0, PieceType.KING), PiecePlacement(0, 9, PieceType.ROOK)]
    assert find_hint(open_8, {"king": 2}, conflicting).kind is HintKind.CONFLICTS

    stray = kings((0, 0), (9, 9))
    assert find_hint(open_8, {"king": 2}, stray) == Hint(HintKind.WRONG, (9, 9))
