# dice/validators.py

from __future__ import annotations

from .constants import (
    DIE_SIZE_SET,
    DIE_SIZES,
    MAX_COMPONENT_DIGITS,
    MAX_DICE_COUNT,
    MAX_MODIFIER_DIGITS,
    MIN_DICE_COUNT,
    NOTATION_RE,
)


def significant_digits(digits: str) -> str:
    """Drop leading zeros; ``"000"`` -> ``"0"``."""
    return digits.lstrip("0") or "0"


def modifier_too_long(group: str | None) -> bool:
    # group is the signed match, e.g. "+0003"
    return bool(group) and len(significant_digits(group[1:])) > MAX_MODIFIER_DIGITS


def is_valid_die_size(sides: int) -> bool:
    return sides in DIE_SIZE_SET


def is_valid_dice_count(count: int) -> bool:
    return MIN_DICE_COUNT <= count <= MAX_DICE_COUNT


def is_valid_notation(notation: str) -> bool:
    """True when ``notation`` would parse cleanly. Never raises."""
    if not isinstance(notation, str):
        return False
    m = NOTATION_RE.match(notation.strip())
    if not m or modifier_too_long(m.group(3)):
        return False
    count = significant_digits(m.group(1))
    sides = significant_digits(m.group(2))
    if len(count) > MAX_COMPONENT_DIGITS or len(sides) > MAX_COMPONENT_DIGITS:
        return False
    return is_valid_dice_count(int(count)) and is_valid_die_size(int(sides))


def get_legal_die_sizes() -> tuple[int, ...]:
    return DIE_SIZES
