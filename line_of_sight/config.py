"""
Configuration for the Line of Sight puzzle engine.

Defaults for board generation, the daily board search and logging.
Edit these to change what a "normal" daily puzzle looks like.
"""

import logging

# Board generation
DEFAULT_SIZE: int = 8               # Edge length of the square board
DEFAULT_BLOCK_RATIO: float = 0.28   # Probability that a cell starts blocked
MIN_VALID_RATIO: float = 0.45       # Floor on the share of valid cells

# Inventory: inclusive (min, max) count per piece type, rolled in this order.
# The king is not rolled, there is always exactly one.
INVENTORY_RANGES: dict[str, tuple[int, int]] = {
    "queen": (1, 2),
    "rook": (3, 4),
    "bishop": (2, 3),
    "knight": (2, 3),
    "pawn": (4, 6),
}
KING_COUNT: int = 1

# Solvable board search
MAX_ATTEMPTS: int = 80              # Seed variants tried before giving up

# Solver budget (accepted placements). None means search until proven.
MAX_SEARCH_NODES: int | None = None

# Budget per board attempt in the daily search, and per solve in hints.
# A board that exhausts it counts as unsolved.
DAILY_SEARCH_NODES: int = 20_000

# Logging
LOG_LEVEL: int = logging.INFO
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
