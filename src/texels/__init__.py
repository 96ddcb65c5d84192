"""Texel construction: tokenization, aggregation and lexicon resolution."""

from .aggregate import aggregate_tokens, fold_occurrence, normalize_token
from .document import read_document, split_document
from .records import AggregatedWord
from .resolve import ResolveResult, derive_color, lookup_coordinate, resolve_word, resolve_words

__all__ = [
    "AggregatedWord",
    "ResolveResult",
    "aggregate_tokens",
    "derive_color",
    "fold_occurrence",
    "lookup_coordinate",
    "normalize_token",
    "read_document",
    "resolve_word",
    "resolve_words",
    "split_document",
]
