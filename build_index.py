"""
Build the keyword index and print index analytics.

Usage:
    python build_index.py

Put the documents, a manifest listing them (data/docs.txt) and the noise
words (data/noisewords.txt) into the data/ folder, then run this script.
Manifest entries are opened relative to the manifest's folder.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from keyword_search.index_builder import make_index
from keyword_search.tokenizer import SourceUnavailable


def main() -> None:
    import argparse
    parser = argparse.ArgumentParser(description="Build keyword index and print analytics")
    parser.add_argument(
        "--docs",
        type=Path,
        default=None,
        help="Manifest of documents to index (default: data/docs.txt)",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=None,
        help="Noise-word file (default: data/noisewords.txt)",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="Number of most widespread keywords to list",
    )
    args = parser.parse_args()

    base = Path(__file__).resolve().parent
    data_dir = base / "data"
    docs_path = args.docs or data_dir / "docs.txt"
    noise_path = args.noise or data_dir / "noisewords.txt"

    try:
        index, noise_words = make_index(docs_path, noise_path, root_dir=docs_path.parent)
    except SourceUnavailable as e:
        print(e)
        sys.exit(1)

    if len(index) == 0:
        print("No keywords found in the listed documents.")
        sys.exit(1)

    widespread = sorted(
        index.keywords(),
        key=lambda kw: (-len(index.get_occurrences(kw)), kw),
    )[: args.top]

    print("\n" + "=" * 50)
    print("KEYWORD INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                      | Value |")
    print("|-----------------------------|-------|")
    print(f"| Number of indexed documents | {index.document_count()} |")
    print(f"| Number of unique keywords   | {len(index)} |")
    print(f"| Number of noise words       | {len(noise_words)} |")
    print()
    print("| Keyword | Documents | Top document |")
    print("|---------|-----------|--------------|")
    for keyword in widespread:
        occurrences = index.get_occurrences(keyword)
        top = occurrences[0]
        print(f"| {keyword} | {len(occurrences)} | {top.document} ({top.frequency}) |")
    print()
    print("=" * 50)


if __name__ == "__main__":
    main()
