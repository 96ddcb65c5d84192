"""Fold raw tokens into one AggregatedWord per distinct normalized word."""

from __future__ import annotations

from typing import AbstractSet, Dict, Iterable, List, Optional

from .config import TOKEN_STRIP_CHARS
from .records import AggregatedWord


def lower_per_char(text: str) -> str:
    """
    Lowercase one character at a time, keeping one output character per input.

    `str.lower` applies full case mapping ("İ" becomes "i" plus a combining
    dot, a final "Σ" becomes "ς"). Words must hash and match the same way as
    in dictionaries built with simple per-character mapping, so only the first
    character of each mapping is kept and no context rules apply.
    """
    return "".join(char.lower()[0] for char in text)


def normalize_token(raw: str, strip_chars: AbstractSet[str] = TOKEN_STRIP_CHARS) -> str:
    """Trim, drop every strip character found anywhere in the token, and lowercase."""
    table = str.maketrans("", "", "".join(strip_chars))
    return lower_per_char(raw.strip().translate(table))


def fold_occurrence(existing: Optional[AggregatedWord], word: str, occurrence_index: int) -> AggregatedWord:
    """
    Merge one more occurrence of `word` into its running record.

    The position signal is a sequential halving average: each new occurrence
    replaces it with floor((occurrence_index + previous) / 2). It drifts toward
    recent occurrences and is not the arithmetic mean of all positions.
    """
    if existing is None:
        return AggregatedWord(word=word, count=1, position_signal=int(occurrence_index))
    return AggregatedWord(
        word=word,
        count=existing.count + 1,
        position_signal=(occurrence_index + existing.position_signal) // 2,
    )


def aggregate_tokens(tokens: Iterable[str]) -> List[AggregatedWord]:
    """
    Aggregate raw tokens into unresolved records.

    Empty and whitespace-only tokens are dropped before they receive an
    occurrence index. Tokens that normalize to the empty string still consume
    an index but produce no record. Records are returned in first-seen order.
    """
    words: Dict[str, AggregatedWord] = {}
    occurrence_index = 0
    for raw in tokens:
        if not raw.strip():
            continue
        word = normalize_token(raw)
        if word:
            words[word] = fold_occurrence(words.get(word), word, occurrence_index)
        occurrence_index += 1
    return list(words.values())
