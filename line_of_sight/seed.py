"""
Daily seeds and the deterministic random stream.

A calendar date becomes a seed string (YYYYMMDD, UTC). The seed string is
hashed to 32 bits and fed to a mulberry32 generator. Everything random in a
daily puzzle comes from this stream, so the same seed always produces the
same board and inventory.

All arithmetic is done on unsigned 32-bit values (masking after every
operation), so the stream matches JavaScript number arithmetic bit for bit.
"""

from datetime import date as Date, datetime, timezone

MASK_32 = 0xFFFFFFFF

# Mixing constants for hash_seed
HASH_INIT = 1779033703      # 0x6A09E667
HASH_MULTIPLIER = 3432918353  # 0xCC9E2D51

# mulberry32 increment
MULBERRY_STEP = 0x6D2B79F5


def _imul(a: int, b: int) -> int:
    """32-bit multiply, low 32 bits kept (like Math.imul, unsigned)."""
    return (a * b) & MASK_32


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & MASK_32


def _utf16_units(text: str) -> list[int]:
    """Code units of text in UTF-16, so astral characters count as two."""
    raw = text.encode("utf-16-le")
    return [int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)]


def make_daily_seed(when: Date | datetime | None = None) -> str:
    """
    Build the canonical seed for a day: zero-padded YYYYMMDD in UTC.

    Aware datetimes are converted to UTC first; naive datetimes are taken as
    UTC already. Plain dates are used as they are. Defaults to now.
    """
    if when is None:
        when = datetime.now(timezone.utc)
    elif isinstance(when, datetime) and when.tzinfo is not None:
        when = when.astimezone(timezone.utc)
    return f"{when.year:04d}{when.month:02d}{when.day:02d}"


def hash_seed(seed: str) -> int:
    """Fold a seed string into an unsigned 32-bit integer."""
    units = _utf16_units(seed)
    h = (HASH_INIT ^ len(units)) & MASK_32
    for unit in units:
        h = _imul(h ^ unit, HASH_MULTIPLIER)
        h = _rotl(h, 13)
    return (h ^ (h >> 16)) & MASK_32


class Mulberry32:
    """
    Small 32-bit state generator producing floats in [0, 1).

    The position in the stream is part of the contract: two consumers that
    need reproducible draws must each build their own instance.
    """

    def __init__(self, state: int):
        if not isinstance(state, int) or isinstance(state, bool):
            raise ValueError(f"RNG state must be an int, got {state!r}")
        if not 0 <= state <= MASK_32:
            raise ValueError(f"RNG state must fit in 32 bits, got {state}")
        self._state = state
        self.draws = 0

    @classmethod
    def from_seed(cls, seed: str) -> "Mulberry32":
        """Fresh generator for a seed string."""
        return cls(hash_seed(seed))

    def random(self) -> float:
        """Next float in [0, 1)."""
        self._state = (self._state + MULBERRY_STEP) & MASK_32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK_32
        self.draws += 1
        return ((t ^ (t >> 14)) & MASK_32) / 4294967296

    def randint(self, low: int, high: int) -> int:
        """Integer in [low, high], both ends inclusive. Uses one draw."""
        if low > high:
            raise ValueError(f"Empty range: randint({low}, {high})")
        return int(self.random() * (high - low + 1)) + low
