"""Word-coordinate lexicon with exact and edit-distance lookups."""

from .index import LexiconIndex
from .loader import DictionaryLoad, load_dictionary, parse_dictionary_line
from .records import Coordinate, LexiconEntry, LexiconMatch

__all__ = [
    "Coordinate",
    "DictionaryLoad",
    "LexiconEntry",
    "LexiconIndex",
    "LexiconMatch",
    "load_dictionary",
    "parse_dictionary_line",
]
