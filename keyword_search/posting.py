"""
Occurrence and keyword index data structures.

An occurrence records how many times a keyword appears in one document.
Each keyword's occurrence list is kept in DESCENDING order of frequency.
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass
class Occurrence:
    """
    A keyword's occurrence in a document.
    - document: document identifier (usually the path it was read from)
    - frequency: number of times the keyword appears in the document
    """

    document: str
    frequency: int = 1

    def __repr__(self) -> str:
        return f"Occurrence(document={self.document!r}, frequency={self.frequency})"


def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int]:
    """
    Move the last occurrence of the list into place by binary search.

    occurrences[0..n-2] must already be in descending order of frequency.
    The search stops on the first midpoint with an equal frequency, so the
    position of ties depends on the search path.

    Returns the midpoint indexes probed, in probing order (empty when the
    list holds a single occurrence).
    """
    if not occurrences:
        raise ValueError("Cannot insert into an empty occurrence list")

    midpoints: list[int] = []
    target = occurrences[-1]
    low = 0
    high = len(occurrences) - 2
    mid = 0
    while low <= high:
        mid = (low + high) // 2
        midpoints.append(mid)
        probe = occurrences[mid].frequency
        if target.frequency < probe:
            low = mid + 1
            if high <= mid:
                mid += 1
        elif target.frequency > probe:
            high = mid - 1
        else:
            break

    occurrences.insert(mid, target)
    occurrences.pop()
    return midpoints


class InvertedIndex:
    """
    Keyword index: map from keyword -> occurrence list, descending by frequency.
    Keywords are added on first occurrence and never removed.
    """

    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}

    def merge_keywords(self, keywords: dict[str, Occurrence]) -> None:
        """
        Merge one document's keyword occurrences into the index.
        Each occurrence is appended to its keyword's list and moved into place.
        """
        for keyword, occurrence in keywords.items():
            occurrences = self._index.get(keyword)
            if occurrences is None:
                self._index[keyword] = [occurrence]
                continue
            occurrences.append(occurrence)
            insert_last_occurrence(occurrences)

    def get_occurrences(self, keyword: str) -> list[Occurrence] | None:
        """Return the occurrence list for a keyword, or None if it is not indexed."""
        return self._index.get(keyword)

    def keywords(self) -> Iterator[str]:
        """Iterate over all keywords in the index."""
        return iter(self._index)

    def document_count(self) -> int:
        """Number of distinct documents that contributed at least one keyword."""
        return len({o.document for occurrences in self._index.values() for o in occurrences})

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self._index
