"""Dice notation parsing and roll resolution."""

# ruff: noqa: N999  # Package name uses project-specific casing 'DiceRoller'

from .constants import DIE_SIZES, MAX_DICE_COUNT, MIN_DICE_COUNT, NOTATION_RE
from .errors import DiceCountError, DieSizeError, NotationError, NotationFormatError
from .parser import format_notation, parse_notation
from .rng import DefaultRandom, RandomSource, SeededRandom, make_generator, sample_int
from .roller import roll, roll_detailed
from .types import DetailedRollResult, DiceNotation, RollOptions, RollResult
from .validators import (
    get_legal_die_sizes,
    is_valid_dice_count,
    is_valid_die_size,
    is_valid_notation,
)

__all__ = [
    "DIE_SIZES",
    "MAX_DICE_COUNT",
    "MIN_DICE_COUNT",
    "NOTATION_RE",
    "DefaultRandom",
    "DetailedRollResult",
    "DiceCountError",
    "DiceNotation",
    "DieSizeError",
    "NotationError",
    "NotationFormatError",
    "RandomSource",
    "RollOptions",
    "RollResult",
    "SeededRandom",
    "format_notation",
    "get_legal_die_sizes",
    "is_valid_dice_count",
    "is_valid_die_size",
    "is_valid_notation",
    "make_generator",
    "parse_notation",
    "roll",
    "roll_detailed",
    "sample_int",
]
