"""Render records produced by aggregation and completed by resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from src.lexicon.records import Coordinate


@dataclass(frozen=True)
class AggregatedWord:
    """One distinct normalized word with its occurrence statistics."""

    word: str
    count: int
    position_signal: int
    coordinate: Optional[Coordinate] = None
    color: Optional[bytes] = None

    @property
    def resolved(self) -> bool:
        """True once both a coordinate and a color are attached."""
        return self.coordinate is not None and self.color is not None
