"""Tests for the lexicon index and dictionary loader."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.lexicon.index import LexiconIndex
from src.lexicon.loader import load_dictionary, parse_dictionary_line
from src.lexicon.records import Coordinate, LexiconEntry


def _make_index() -> LexiconIndex:
    return LexiconIndex.build(
        [
            ("cat", Coordinate(0.1, 0.2)),
            ("cart", Coordinate(0.3, 0.4)),
            ("car", Coordinate(0.5, 0.6)),
            ("dog", Coordinate(0.7, 0.8)),
            ("catalog", Coordinate(0.9, 0.1)),
        ]
    )


# ---------------------------------------------------------------------------
# Exact lookup


def test_exact_lookup_returns_stored_coordinate() -> None:
    index = _make_index()
    assert index.exact_lookup("cat") == Coordinate(0.1, 0.2)
    assert index.exact_lookup("catalog") == Coordinate(0.9, 0.1)


def test_exact_lookup_ignores_prefixes_and_missing_words() -> None:
    index = _make_index()
    assert index.exact_lookup("ca") is None
    assert index.exact_lookup("cats") is None
    assert index.exact_lookup("") is None


def test_duplicate_words_keep_last_write() -> None:
    index = LexiconIndex.build(
        [
            LexiconEntry("bank", Coordinate(0.1, 0.1)),
            LexiconEntry("bank", Coordinate(0.9, 0.9)),
        ]
    )
    assert index.exact_lookup("bank") == Coordinate(0.9, 0.9)
    assert len(index) == 1


def test_add_rejects_empty_word() -> None:
    with pytest.raises(ValueError):
        LexiconIndex().add("", Coordinate(0.0, 0.0))


def test_contains_and_iter_entries_follow_insertion_structure() -> None:
    index = _make_index()
    assert "dog" in index
    assert "do" not in index
    words = [entry.word for entry in index.iter_entries()]
    assert words == ["cat", "catalog", "car", "cart", "dog"]


# ---------------------------------------------------------------------------
# Approximate lookup


def test_approximate_lookup_orders_by_distance() -> None:
    index = _make_index()
    matches = index.approximate_lookup("cas", 3)

    distances = [match.distance for match in matches]
    assert distances == sorted(distances)
    assert {match.word for match in matches} == {"cat", "cart", "car", "dog"}
    assert matches[0].distance == 1
    assert matches[-1].word == "dog"


def test_approximate_lookup_includes_exact_match_at_distance_zero() -> None:
    index = _make_index()
    matches = index.approximate_lookup("cat", 1)
    assert matches[0].word == "cat"
    assert matches[0].distance == 0
    assert [match.word for match in matches] == ["cat", "car", "cart"]


def test_approximate_lookup_ties_keep_tree_order() -> None:
    index = LexiconIndex.build(
        [
            ("bat", Coordinate(0.0, 0.0)),
            ("hat", Coordinate(0.1, 0.1)),
            ("rat", Coordinate(0.2, 0.2)),
        ]
    )
    matches = index.approximate_lookup("mat", 1)
    assert [match.word for match in matches] == ["bat", "hat", "rat"]


def test_approximate_lookup_empty_when_out_of_bound() -> None:
    index = _make_index()
    assert index.approximate_lookup("zebrafish", 3) == []


def test_approximate_lookup_rejects_negative_bound() -> None:
    with pytest.raises(ValueError):
        _make_index().approximate_lookup("cat", -1)


def test_approximate_lookup_matches_brute_force_distances() -> None:
    def levenshtein(a: str, b: str) -> int:
        row = list(range(len(b) + 1))
        for i, ca in enumerate(a, start=1):
            prev, row[0] = row[0], i
            for j, cb in enumerate(b, start=1):
                prev, row[j] = row[j], min(row[j] + 1, row[j - 1] + 1, prev + (ca != cb))
        return row[-1]

    index = _make_index()
    vocabulary = ["cat", "cart", "car", "dog", "catalog"]
    for query in ("kitten", "catlog", "dig", "c", "carts"):
        found = {match.word: match.distance for match in index.approximate_lookup(query, 3)}
        expected = {word: levenshtein(query, word) for word in vocabulary if levenshtein(query, word) <= 3}
        assert found == expected


# ---------------------------------------------------------------------------
# Dictionary loading


def test_parse_dictionary_line_accepts_valid_record() -> None:
    entry = parse_dictionary_line("kucing 0.25 0.75\n")
    assert entry == LexiconEntry("kucing", Coordinate(0.25, 0.75))


@pytest.mark.parametrize("line", ["kucing abc 0.5", "kucing 0.5", "kucing 0.5 nan", ""])
def test_parse_dictionary_line_rejects_bad_records(line: str) -> None:
    assert parse_dictionary_line(line) is None


def test_load_dictionary_skips_malformed_lines(tmp_path: Path) -> None:
    path = tmp_path / "dict.txt"
    path.write_text("cat 0.1 0.2\nbroken x 0.3\ndog 0.7 0.8\n\ncat 0.5 0.5\n", encoding="utf-8")

    result = load_dictionary(path)

    assert result.loaded == 3
    assert result.skipped == 1
    assert len(result.index) == 2
    assert result.index.exact_lookup("cat") == Coordinate(0.5, 0.5)


def test_load_dictionary_skips_undecodable_lines(tmp_path: Path) -> None:
    path = tmp_path / "dict.txt"
    path.write_bytes(b"cat 0.1 0.1\ncaf\xe9 0.2 0.2\ndog 0.3 0.3\n")

    result = load_dictionary(path)

    assert result.loaded == 2
    assert result.skipped == 1
    assert result.index.exact_lookup("cat") == Coordinate(0.1, 0.1)
    assert result.index.exact_lookup("dog") == Coordinate(0.3, 0.3)


def test_load_dictionary_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "missing.txt")
