from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

@dataclass(frozen=True)
class MovableFeast:
    name: str
    offset: int  # days from Easter Sunday, negative before

class Rank(str, Enum):
    """Liturgical rank of a feast under the pre-1962 rubrics."""
    DOUBLE = "Double"
    GREATER_DOUBLE = "Greater Double"
    SEMIDOUBLE = "Semidouble"
    SIMPLE = "Simple"

@dataclass(frozen=True)
class FixedDay:
    """A feast or fast kept on a fixed calendar date. Pure data."""
    name: str
    month: int  # 1=January ... 12=December
    day: int
    rank: Rank
    optional: bool = False

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")
        if not 1 <= self.day <= 31:
            raise ValueError(f"day must be in 1..31, got {self.day}")
