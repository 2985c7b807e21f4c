# dice/types.py

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class DiceNotation:
    count: int
    sides: int
    modifier: int = 0

    def __str__(self) -> str:
        out = f"{self.count}d{self.sides}"
        if self.modifier:
            out += f"{self.modifier:+d}"
        return out


@dataclass(frozen=True)
class RollResult:
    total: int
    notation: str


@dataclass(frozen=True)
class DetailedRollResult:
    # Draw order is preserved; index 0 is the first die rolled.
    rolls: tuple[int, ...]
    modifier: int
    total: int
    notation: str


class RollOptions(BaseModel):
    """Per-call roll configuration.

    ``seed`` set -> a fresh Mulberry32 stream for this call only.
    ``seed`` unset -> ambient entropy.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    seed: int | None = Field(default=None, description="Seed for deterministic rolls")
