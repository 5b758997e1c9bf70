"""
Search component for the keyword index.

Answers "kw1 or kw2" queries: a document matches if either keyword occurs in
it. Matches are ranked by descending frequency, ties going to the first
keyword, and at most TOP_K distinct documents are returned.

Usage (from repo root):
    python -m keyword_search.search_cli \
        --docs data/docs.txt \
        --noise data/noisewords.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import AbstractSet, Iterable, List, Optional, Tuple

from .tokenizer import SourceUnavailable, get_keyword, load_noise_words
from .posting import InvertedIndex, Occurrence
from .index_builder import build_index_from_directory, make_index

logger = logging.getLogger(__name__)

TOP_K = 5
DEFAULT_NOISE = Path("data/noisewords.txt")


def merge_occurrences(
    occurrences1: List[Occurrence],
    occurrences2: List[Occurrence],
) -> List[Occurrence]:
    """
    Merge two occurrence lists sorted by descending frequency into one.
    On equal frequencies the occurrence from the first list comes first.
    """
    merged: List[Occurrence] = []
    i = j = 0
    while i < len(occurrences1) and j < len(occurrences2):
        if occurrences1[i].frequency >= occurrences2[j].frequency:
            merged.append(occurrences1[i])
            i += 1
        else:
            merged.append(occurrences2[j])
            j += 1
    merged.extend(occurrences1[i:])
    merged.extend(occurrences2[j:])
    return merged


def top5search(
    index: InvertedIndex,
    kw1: str,
    kw2: str,
    top_k: int = TOP_K,
) -> Optional[List[str]]:
    """
    Return documents in which kw1 or kw2 occurs, by descending frequency.

    Each document appears once, at its first (highest-ranked) position, and
    at most top_k documents are returned. Keywords are looked up as given, so
    callers pass lower-case keywords. Returns None if neither keyword is indexed.
    Raises ValueError if top_k is less than 1.
    """
    if top_k < 1:
        raise ValueError(f"top_k must be at least 1, got {top_k}")
    occurrences1 = index.get_occurrences(kw1) or []
    occurrences2 = index.get_occurrences(kw2) or []
    if not occurrences1 and not occurrences2:
        return None

    results: List[str] = []
    seen = set()
    for occurrence in merge_occurrences(occurrences1, occurrences2):
        if len(results) == top_k:
            break
        if occurrence.document not in seen:
            seen.add(occurrence.document)
            results.append(occurrence.document)
    return results


def parse_query(raw_query: str, noise_words: AbstractSet[str] = frozenset()) -> Tuple[str, str]:
    """
    Split a raw query into two keywords.

    Accepts "kw1 or kw2" or "kw1 kw2"; a single word is paired with itself.
    Words are normalized like document tokens. A word that is not a keyword
    becomes "" which never matches.
    """
    words = raw_query.split()
    if len(words) == 3 and words[1].lower() == "or":
        words = [words[0], words[2]]
    if not words or len(words) > 2:
        raise ValueError(f"Expected one or two keywords, got: {raw_query!r}")
    if len(words) == 1:
        words = words * 2
    kw1, kw2 = (get_keyword(w, noise_words) or "" for w in words)
    return kw1, kw2


def run_search_loop(
    index: InvertedIndex,
    noise_words: AbstractSet[str] = frozenset(),
    top_k: int = TOP_K,
) -> None:
    """
    Interactive command-line search loop.
    """
    print(f"Loaded index with {len(index)} keywords.")
    print("Enter queries as 'kw1 or kw2'. Empty line or Ctrl+C to exit.")

    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break

        try:
            kw1, kw2 = parse_query(raw_query, noise_words)
        except ValueError as e:
            print(e)
            continue

        results = top5search(index, kw1, kw2, top_k=top_k)
        logger.debug("Query %r or %r: %s", kw1, kw2, results)
        if results is None:
            print("No documents matched the query.")
            continue

        print(f"Top {len(results)} results:")
        for rank, document in enumerate(results, start=1):
            print(f"{rank:2d}. {document}")


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Keyword search CLI ('kw1 or kw2' queries).")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("data/docs.txt"),
        help="Manifest file listing the documents to index.",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=None,
        help=(
            "File of noise words excluded from the index "
            f"(default: {DEFAULT_NOISE}; optional with --data-dir)."
        ),
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Index every .txt/.html file under this directory instead of a manifest.",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Directory that relative manifest entries are opened from.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=TOP_K,
        help="Number of documents to show per query.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-document indexing details.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.top < 1:
        parser.error("--top must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.data_dir is not None:
            noise_words = load_noise_words(args.noise) if args.noise is not None else frozenset()
            index, documents = build_index_from_directory(args.data_dir, noise_words)
            logger.info("Indexed %d documents from %s", len(documents), args.data_dir)
        else:
            index, noise_words = make_index(args.docs, args.noise or DEFAULT_NOISE, root_dir=args.root)
    except SourceUnavailable as e:
        print(e)
        sys.exit(1)

    run_search_loop(index, noise_words, top_k=args.top)


if __name__ == "__main__":
    main()
