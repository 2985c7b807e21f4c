# dice/errors.py
"""Errors raised while turning a notation string into dice.

All of them derive from ``NotationError`` (itself a ``ValueError``) so callers
can catch the whole family at once or pick out a single ``kind``.
"""

from __future__ import annotations

from .constants import DIE_SIZES, MAX_DICE_COUNT, MIN_DICE_COUNT


class NotationError(ValueError):
    """Base class for every notation failure."""

    kind: str = "notation"


class NotationFormatError(NotationError):
    kind = "format"

    def __init__(self, notation: object, reason: str):
        self.notation = notation
        self.reason = reason
        super().__init__(f'Invalid dice notation "{notation}": {reason}')


class DiceCountError(NotationError):
    kind = "count"

    def __init__(self, count: int | str):
        # str only when the count is too long to be worth converting
        self.count = count
        super().__init__(
            f"Invalid dice count {count}: must be between {MIN_DICE_COUNT} and {MAX_DICE_COUNT}"
        )


class DieSizeError(NotationError):
    kind = "die_size"

    def __init__(self, sides: int | str, legal_sizes: tuple[int, ...] = DIE_SIZES):
        self.sides = sides
        self.legal_sizes = tuple(legal_sizes)
        listed = ", ".join(f"d{s}" for s in self.legal_sizes)
        super().__init__(f"Invalid die size d{sides}: must be one of {listed}")
