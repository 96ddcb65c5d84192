"""Read `word x y` dictionaries into a LexiconIndex."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np
from tqdm import tqdm

from .index import LexiconIndex
from .records import Coordinate, LexiconEntry


@dataclass(frozen=True)
class DictionaryLoad:
    """Index built from a dictionary file plus per-line bookkeeping."""

    index: LexiconIndex
    loaded: int
    skipped: int


def parse_dictionary_line(line: str) -> Optional[LexiconEntry]:
    """Parse one `word x y` record, returning None when it cannot be used."""
    fields = line.split()
    if len(fields) < 3:
        return None
    try:
        x = float(fields[1])
        y = float(fields[2])
    except ValueError:
        return None
    if not (np.isfinite(x) and np.isfinite(y)):
        return None
    return LexiconEntry(word=fields[0], coordinate=Coordinate(x=x, y=y))


def load_dictionary(path: Path) -> DictionaryLoad:
    """Stream a dictionary file into a fresh index, skipping malformed lines."""
    if not path.is_file():
        raise FileNotFoundError(f"Dictionary file not found: {path}")

    index = LexiconIndex()
    loaded = 0
    skipped = 0
    # Decoded per line so one bad byte sequence only costs its own record.
    with path.open("rb") as handle:
        for raw in tqdm(handle, desc="Loading dictionary", unit=" lines", leave=False):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                skipped += 1
                continue
            if not line.strip():
                continue
            entry = parse_dictionary_line(line)
            if entry is None:
                skipped += 1
                continue
            index.add(entry.word, entry.coordinate)
            loaded += 1

    print(f"[lexicon] Loaded {loaded} dictionary lines ({len(index)} distinct words, {skipped} skipped) from {path}")
    return DictionaryLoad(index=index, loaded=loaded, skipped=skipped)
