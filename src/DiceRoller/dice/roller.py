# dice/roller.py

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from DiceRoller.metrics import inc_counter, observe_histogram

from .parser import parse_notation
from .rng import RandomSource, make_generator, sample_int
from .types import DetailedRollResult, DiceNotation, RollOptions, RollResult

log = structlog.get_logger()

_DICE_BUCKETS = [1, 2, 5, 10, 20, 50, 100]

Options = RollOptions | Mapping[str, Any] | None


def _draw(parsed: DiceNotation, rng: RandomSource) -> list[int]:
    # One sample per die, in index order; seeded callers depend on this.
    return [sample_int(1, parsed.sides, rng) for _ in range(parsed.count)]


def _resolve(notation: str, options: Options) -> tuple[DiceNotation, list[int], str]:
    parsed = parse_notation(notation)
    rng = make_generator(options)
    rolls = _draw(parsed, rng)
    inc_counter("dice.roll.count")
    observe_histogram("dice.roll.dice", parsed.count, buckets=_DICE_BUCKETS)
    return parsed, rolls, notation.strip()


def roll(notation: str, options: Options = None) -> RollResult:
    """Roll ``notation`` and return only the total.

    Parser errors propagate unchanged.
    """
    parsed, rolls, trimmed = _resolve(notation, options)
    total = sum(rolls) + parsed.modifier
    log.debug("dice.roll.result", notation=trimmed, total=total)
    return RollResult(total=total, notation=trimmed)


def roll_detailed(notation: str, options: Options = None) -> DetailedRollResult:
    """Roll ``notation`` and keep every die in draw order."""
    parsed, rolls, trimmed = _resolve(notation, options)
    total = sum(rolls) + parsed.modifier
    out = DetailedRollResult(
        rolls=tuple(rolls), modifier=parsed.modifier, total=total, notation=trimmed
    )
    log.debug("dice.roll.result", notation=trimmed, rolls=list(out.rolls), total=total)
    return out
