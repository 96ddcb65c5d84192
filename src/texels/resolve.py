"""Attach lexicon coordinates and hash-derived colors to aggregated words."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence

from src.lexicon.index import LexiconIndex
from src.lexicon.records import Coordinate

from .config import DEFAULT_COLOR_SIZE, DEFAULT_MAX_DISTANCE
from .records import AggregatedWord


@dataclass(frozen=True)
class ResolveResult:
    """Resolved words plus counters for diagnostics."""

    words: Sequence[AggregatedWord]
    unknown: int
    approximate: int


def derive_color(word: str, size: int = DEFAULT_COLOR_SIZE) -> bytes:
    """Return a `size`-byte BLAKE2b digest of the UTF-8 encoded word."""
    return hashlib.blake2b(word.encode("utf-8"), digest_size=size).digest()


def lookup_coordinate(
    index: LexiconIndex,
    word: str,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> tuple[Optional[Coordinate], bool]:
    """
    Find a coordinate for `word`, reporting whether the fallback was used.

    Exact hits win. Otherwise the approximate candidates are ordered by
    distance and the LAST one is taken, i.e. the farthest match inside the
    bound. Rendered output depends on this choice, so it is kept as is.
    """
    coordinate = index.exact_lookup(word)
    if coordinate is not None:
        return coordinate, False
    candidates = index.approximate_lookup(word, max_distance)
    if not candidates:
        return None, True
    return candidates[-1].coordinate, True


def _resolve(
    index: LexiconIndex,
    word: AggregatedWord,
    max_distance: int,
    color_size: int,
) -> tuple[Optional[AggregatedWord], bool]:
    coordinate, used_fallback = lookup_coordinate(index, word.word, max_distance)
    if coordinate is None:
        return None, used_fallback
    return replace(word, coordinate=coordinate, color=derive_color(word.word, color_size)), used_fallback


def resolve_word(
    index: LexiconIndex,
    word: AggregatedWord,
    max_distance: int = DEFAULT_MAX_DISTANCE,
    color_size: int = DEFAULT_COLOR_SIZE,
) -> Optional[AggregatedWord]:
    """Return a completed copy of `word`, or None when no coordinate is found."""
    resolved, _ = _resolve(index, word, max_distance, color_size)
    return resolved


def resolve_words(
    index: LexiconIndex,
    words: Iterable[AggregatedWord],
    max_distance: int = DEFAULT_MAX_DISTANCE,
    color_size: int = DEFAULT_COLOR_SIZE,
) -> ResolveResult:
    """Resolve every word, dropping and counting the ones with no match."""
    resolved: List[AggregatedWord] = []
    unknown = 0
    approximate = 0
    for word in words:
        completed, used_fallback = _resolve(index, word, max_distance, color_size)
        if completed is None:
            unknown += 1
            continue
        if used_fallback:
            approximate += 1
        resolved.append(completed)

    print(f"[texels] Resolved {len(resolved)} words ({approximate} approximate, {unknown} unknown)")
    return ResolveResult(words=resolved, unknown=unknown, approximate=approximate)
