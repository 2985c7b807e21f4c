# dice/rng.py
"""Uniform [0, 1) sources and an integer sampler built on them.

``SeededRandom`` reproduces Mulberry32 bit-for-bit so a seed gives the same
rolls here as in any other Mulberry32 implementation. The 32-bit wraparound
arithmetic below is load-bearing; keep every mask.
"""

from __future__ import annotations

import math
import random
from collections.abc import Mapping
from typing import Any, Protocol

from .types import RollOptions

_MASK32 = 0xFFFFFFFF
_TWO_POW_32 = 4294967296
_GOLDEN = 0x6D2B79F5


class RandomSource(Protocol):
    def next(self) -> float:
        ...


def _imul(a: int, b: int) -> int:
    # Low 32 bits of the product, like Math.imul without the sign.
    return (a * b) & _MASK32


class SeededRandom:
    """Mulberry32 stream derived from a single 32-bit seed."""

    def __init__(self, seed: int):
        self.seed = int(seed)
        self._state = self.seed & _MASK32

    def next(self) -> float:
        self._state = (self._state + _GOLDEN) & _MASK32
        s = self._state
        t = _imul(s ^ (s >> 15), s | 1)
        t = ((t + _imul(t ^ (t >> 7), t | 61)) & _MASK32) ^ t
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed})"


class DefaultRandom:
    """Ambient-entropy source; each instance owns its own generator."""

    def __init__(self) -> None:
        self._rng = random.Random()

    def next(self) -> float:
        return self._rng.random()


def sample_int(min_value: int, max_value: int, generator: RandomSource | None = None) -> int:
    """Uniform integer in ``[min_value, max_value]`` drawn from ``generator``."""
    if min_value > max_value:
        raise ValueError(f"min_value {min_value} is greater than max_value {max_value}")
    if generator is None:
        generator = DefaultRandom()
    span = max_value - min_value + 1
    value = math.floor(generator.next() * span) + min_value
    # Float rounding on very wide spans can land one past the top.
    return min(max(value, min_value), max_value)


def make_generator(options: RollOptions | Mapping[str, Any] | None = None) -> RandomSource:
    """Resolve per-call options into a fresh generator. Nothing is cached."""
    if options is None:
        return DefaultRandom()
    if not isinstance(options, RollOptions):
        options = RollOptions.model_validate(dict(options))
    if options.seed is None:
        return DefaultRandom()
    return SeededRandom(options.seed)
