"""Prefix-tree index mapping words to 2D coordinates.

The index is built once from dictionary entries and then queried read-only.
Exact lookups walk the tree character by character. Approximate lookups
compute one Levenshtein row per visited node, so every word sharing a prefix
reuses the rows computed for that prefix, and whole branches are pruned once
the smallest value in a row exceeds the distance bound.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .records import Coordinate, LexiconEntry, LexiconMatch


class _Node:
    __slots__ = ("children", "coordinate")

    def __init__(self) -> None:
        self.children: Dict[str, _Node] = {}
        self.coordinate: Optional[Coordinate] = None


class LexiconIndex:
    """Character trie supporting exact and bounded edit-distance retrieval."""

    def __init__(self) -> None:
        self._root = _Node()
        self._size = 0

    @classmethod
    def build(cls, entries: Iterable[Tuple[str, Coordinate] | LexiconEntry]) -> "LexiconIndex":
        """Create an index from `(word, coordinate)` pairs; later duplicates win."""
        index = cls()
        for entry in entries:
            if isinstance(entry, LexiconEntry):
                index.add(entry.word, entry.coordinate)
            else:
                word, coordinate = entry
                index.add(word, coordinate)
        return index

    def add(self, word: str, coordinate: Coordinate) -> None:
        """Insert or overwrite the coordinate stored for `word`."""
        if not word:
            raise ValueError("Lexicon words must be non-empty strings.")
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                child = _Node()
                node.children[char] = child
            node = child
        if node.coordinate is None:
            self._size += 1
        node.coordinate = coordinate

    def exact_lookup(self, word: str) -> Optional[Coordinate]:
        """Return the coordinate stored for `word`, or None if it was never inserted."""
        node = self._root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return None
        return node.coordinate

    def approximate_lookup(self, word: str, max_distance: int) -> List[LexiconMatch]:
        """
        Return every indexed word within Levenshtein distance `max_distance` of `word`.

        Parameters
        ----------
        word:
            Query string; it does not need to be present in the index.
        max_distance:
            Inclusive upper bound on the edit distance.

        Returns
        -------
        List[LexiconMatch]
            Matches ordered by non-decreasing distance. Matches at the same
            distance keep the order in which the tree walk reached them
            (depth-first, children in insertion order, a word before its
            extensions).
        """
        if max_distance < 0:
            raise ValueError("max_distance must be non-negative.")

        first_row = list(range(len(word) + 1))
        matches: List[LexiconMatch] = []
        for char, child in self._root.children.items():
            self._walk(child, char, char, word, first_row, max_distance, matches)

        # sorted() is stable, so equal distances retain walk order.
        return sorted(matches, key=lambda match: match.distance)

    def _walk(
        self,
        node: _Node,
        char: str,
        prefix: str,
        word: str,
        previous_row: Sequence[int],
        max_distance: int,
        matches: List[LexiconMatch],
    ) -> None:
        current_row = [previous_row[0] + 1]
        for column in range(1, len(word) + 1):
            insert_cost = current_row[column - 1] + 1
            delete_cost = previous_row[column] + 1
            replace_cost = previous_row[column - 1] + (word[column - 1] != char)
            current_row.append(min(insert_cost, delete_cost, replace_cost))

        distance = current_row[-1]
        if node.coordinate is not None and distance <= max_distance:
            matches.append(LexiconMatch(word=prefix, coordinate=node.coordinate, distance=distance))

        if min(current_row) <= max_distance:
            for next_char, child in node.children.items():
                self._walk(child, next_char, prefix + next_char, word, current_row, max_distance, matches)

    def iter_entries(self) -> Iterator[LexiconEntry]:
        """Yield every stored entry in structural (depth-first) order."""
        stack: List[Tuple[str, _Node]] = [("", self._root)]
        while stack:
            prefix, node = stack.pop()
            if node.coordinate is not None:
                yield LexiconEntry(word=prefix, coordinate=node.coordinate)
            for char, child in reversed(list(node.children.items())):
                stack.append((prefix + char, child))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.exact_lookup(word) is not None

    def __len__(self) -> int:
        return self._size
