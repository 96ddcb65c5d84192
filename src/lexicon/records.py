"""Shared records for the word-coordinate lexicon."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """Normalized 2D embedding position of a word."""

    x: float
    y: float


@dataclass(frozen=True)
class LexiconEntry:
    """Single dictionary word and its coordinate."""

    word: str
    coordinate: Coordinate


@dataclass(frozen=True)
class LexiconMatch:
    """Candidate returned by an approximate lookup."""

    word: str
    coordinate: Coordinate
    distance: int
