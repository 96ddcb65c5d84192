"""Static text-cleanup tables and defaults for texel construction."""

from __future__ import annotations

from typing import FrozenSet, Tuple

# Literals replaced by a space in the raw document before splitting.
DOCUMENT_SUBSTITUTIONS: Tuple[str, ...] = ("-", ".", ",", "\n")
TOKEN_SEPARATOR = " "

# Characters removed from anywhere inside a token during normalization.
TOKEN_STRIP_CHARS: FrozenSet[str] = frozenset({'"', "'", ",", ".", "!", "?"})

# Edit-distance bound used when a word is missing from the lexicon.
DEFAULT_MAX_DISTANCE = 3

# BLAKE2b digest size; the three bytes map to red, green and blue.
DEFAULT_COLOR_SIZE = 3


__all__ = [
    "DEFAULT_COLOR_SIZE",
    "DEFAULT_MAX_DISTANCE",
    "DOCUMENT_SUBSTITUTIONS",
    "TOKEN_SEPARATOR",
    "TOKEN_STRIP_CHARS",
]
