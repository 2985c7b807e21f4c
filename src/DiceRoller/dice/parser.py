# dice/parser.py

from __future__ import annotations

import structlog

from DiceRoller.metrics import inc_counter

from .constants import DIE_SIZES, MAX_COMPONENT_DIGITS, MAX_MODIFIER_DIGITS, NOTATION_RE
from .errors import DiceCountError, DieSizeError, NotationError, NotationFormatError
from .types import DiceNotation
from .validators import (
    is_valid_dice_count,
    is_valid_die_size,
    modifier_too_long,
    significant_digits,
)

log = structlog.get_logger()

FORMAT_REASON = 'format must be XdY or XdY±Z (e.g., "2d6", "1d20+3", "3d8-2")'
MODIFIER_REASON = f"modifier must have at most {MAX_MODIFIER_DIGITS} digits"


def _reject(err: NotationError) -> NotationError:
    inc_counter(f"dice.parse.error.{err.kind}")
    log.debug("dice.parse.rejected", kind=err.kind, error=str(err))
    return err


def parse_notation(notation: str) -> DiceNotation:
    """Parse ``XdY`` / ``XdY+Z`` / ``XdY-Z`` into a ``DiceNotation``.

    Checks run in a fixed order (format, then count, then die size) so the
    same bad input always yields the same error.

    Raises:
        NotationFormatError: input does not match the grammar once trimmed,
            or the modifier is longer than MAX_MODIFIER_DIGITS.
        DiceCountError: count outside 1..100.
        DieSizeError: sides not one of d4, d6, d8, d10, d12, d20, d100.
    """
    if not isinstance(notation, str):
        raise _reject(NotationFormatError(notation, "notation must be a string"))

    m = NOTATION_RE.match(notation.strip())
    if not m:
        raise _reject(NotationFormatError(notation, FORMAT_REASON))

    if modifier_too_long(m.group(3)):
        raise _reject(NotationFormatError(notation, MODIFIER_REASON))

    # Oversized groups are reported by their digits, never converted.
    count_digits = significant_digits(m.group(1))
    if len(count_digits) > MAX_COMPONENT_DIGITS:
        raise _reject(DiceCountError(count_digits))
    count = int(count_digits)
    if not is_valid_dice_count(count):
        raise _reject(DiceCountError(count))

    sides_digits = significant_digits(m.group(2))
    if len(sides_digits) > MAX_COMPONENT_DIGITS:
        raise _reject(DieSizeError(sides_digits, DIE_SIZES))
    sides = int(sides_digits)
    if not is_valid_die_size(sides):
        raise _reject(DieSizeError(sides, DIE_SIZES))

    modifier = 0
    if m.group(3):
        sign, digits = m.group(3)[0], m.group(3)[1:]
        modifier = int(sign + significant_digits(digits))

    return DiceNotation(count=count, sides=sides, modifier=modifier)


def format_notation(parsed: DiceNotation) -> str:
    """Canonical string for a parsed notation; ``parse_notation`` reads it back."""
    return str(parsed)
