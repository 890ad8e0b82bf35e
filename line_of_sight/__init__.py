"""
line_of_sight - daily non-attacking pieces puzzle engine

Core components:
- generate_board / inventory_for_seed: the day's board and pieces from a seed
- pieces_attack / evaluate_conflicts: attack rules and conflict detection
- solve: backtracking solver
- find_solvable_board / daily_puzzle: regenerate until the inventory fits
- find_hint: wrong-piece / needed-square hints
"""

from .board import Board, CellState, generate_board, is_valid_square
from .pieces import (
    PIECE_ORDER, PIECE_VALUES, Inventory, PiecePlacement, PieceType,
    inventory_for_seed, normalize_inventory,
)
from .seed import Mulberry32, hash_seed, make_daily_seed
from .attacks import path_clear, pieces_attack
from .conflicts import ConflictResult, evaluate_conflicts, is_legal_placement
from .solver import SolveResult, SolveStatus, solve, solve_with_inventory
from .search import DailyPuzzle, SolvableBoard, daily_puzzle, find_solvable_board
from .hints import Hint, HintKind, find_hint
from .session import (
    all_placed, inventory_value, is_solved, parse_square, placed_counts,
    remaining_count, square_name, toggle_placement, total_pieces, undo_last,
)
