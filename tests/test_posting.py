"""Tests for binary-search insertion and the keyword index."""

import random

import pytest

from keyword_search.posting import InvertedIndex, Occurrence, insert_last_occurrence


def _occurrences(*frequencies):
    return [Occurrence(f"doc{i}", f) for i, f in enumerate(frequencies)]


def _frequencies(occurrences):
    return [o.frequency for o in occurrences]


class TestInsertLastOccurrence:
    @pytest.mark.parametrize(
        "frequencies, new, expected_midpoints, expected_order",
        [
            ([12, 8, 7, 5, 3, 2], 6, [2, 4, 3], [12, 8, 7, 6, 5, 3, 2]),
            ([3], 1, [0], [3, 1]),
            ([3], 5, [0], [5, 3]),
            ([5, 4, 3], 2, [1, 2], [5, 4, 3, 2]),
            ([10, 2], 5, [0, 1], [10, 5, 2]),
            ([10, 2], 9, [0, 1], [10, 9, 2]),
            ([10, 8, 2], 1, [1, 2], [10, 8, 2, 1]),
            ([10, 8, 2], 20, [1, 0], [20, 10, 8, 2]),
        ],
    )
    def test_probe_trajectory(self, frequencies, new, expected_midpoints, expected_order):
        occurrences = _occurrences(*frequencies)
        occurrences.append(Occurrence("new", new))

        assert insert_last_occurrence(occurrences) == expected_midpoints
        assert _frequencies(occurrences) == expected_order

    def test_equal_frequency_stops_at_first_midpoint(self):
        occurrences = _occurrences(5, 4, 4, 4, 1)
        occurrences.append(Occurrence("new", 4))

        assert insert_last_occurrence(occurrences) == [2]
        assert occurrences[2].document == "new"
        assert _frequencies(occurrences) == [5, 4, 4, 4, 4, 1]

    def test_single_occurrence_has_no_probes(self):
        occurrences = _occurrences(7)
        assert insert_last_occurrence(occurrences) == []
        assert _frequencies(occurrences) == [7]

    def test_empty_list(self):
        with pytest.raises(ValueError):
            insert_last_occurrence([])

    def test_decreasing_insertions_append_at_end(self):
        occurrences = []
        for i, f in enumerate([9, 7, 4, 2, 1]):
            occurrences.append(Occurrence(f"doc{i}", f))
            insert_last_occurrence(occurrences)
        assert [o.document for o in occurrences] == ["doc0", "doc1", "doc2", "doc3", "doc4"]

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_descending_after_every_insertion(self, seed):
        rng = random.Random(seed)
        occurrences = []
        for i in range(200):
            occurrences.append(Occurrence(f"doc{i}", rng.randint(1, 15)))
            insert_last_occurrence(occurrences)
            freqs = _frequencies(occurrences)
            assert all(a >= b for a, b in zip(freqs, freqs[1:]))
        assert len({o.document for o in occurrences}) == 200


class TestInvertedIndex:
    def test_merge_creates_and_orders_lists(self):
        index = InvertedIndex()
        index.merge_keywords({"rain": Occurrence("doc1", 2), "spain": Occurrence("doc1", 1)})
        index.merge_keywords({"rain": Occurrence("doc2", 5)})
        index.merge_keywords({"rain": Occurrence("doc3", 1)})

        assert len(index) == 2
        assert "rain" in index
        assert set(index.keywords()) == {"rain", "spain"}
        assert [o.document for o in index.get_occurrences("rain")] == ["doc2", "doc1", "doc3"]
        assert index.document_count() == 3

    def test_unknown_keyword_is_absent(self):
        index = InvertedIndex()
        assert index.get_occurrences("zzz") is None
        assert "zzz" not in index
