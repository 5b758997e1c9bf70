"""
Index builder: constructs the keyword index from text and HTML documents.
Each document is scanned into a keyword -> occurrence table, which is then
merged into the index one keyword at a time.
"""

import logging
from pathlib import Path
from typing import AbstractSet, Iterable

from .tokenizer import (
    SUPPORTED_SUFFIXES,
    SourceUnavailable,
    get_keyword,
    load_noise_words,
    read_manifest,
    scan_document,
)
from .posting import InvertedIndex, Occurrence

logger = logging.getLogger(__name__)


def index_document(
    document: str,
    tokens: Iterable[str],
    noise_words: AbstractSet[str] = frozenset(),
) -> dict[str, Occurrence]:
    """
    Count the keywords among a document's tokens.
    Returns keyword -> Occurrence(document, frequency), one entry per keyword.
    """
    keywords: dict[str, Occurrence] = {}
    for token in tokens:
        keyword = get_keyword(token, noise_words)
        if keyword is None:
            continue
        if keyword in keywords:
            keywords[keyword].frequency += 1
        else:
            keywords[keyword] = Occurrence(document, 1)
    return keywords


def load_keywords_from_document(
    document: str,
    noise_words: AbstractSet[str] = frozenset(),
    *,
    root_dir: Path | None = None,
) -> dict[str, Occurrence]:
    """
    Scan a document file and return its keyword occurrences.
    The document identifier is kept as given; root_dir only affects where
    a relative identifier is opened from.
    Raises SourceUnavailable if the document cannot be opened.
    """
    path = Path(document)
    if root_dir is not None and not path.is_absolute():
        path = Path(root_dir) / path
    tokens = scan_document(path)
    keywords = index_document(document, tokens, noise_words)
    logger.debug("Scanned %s: %d tokens, %d keywords", document, len(tokens), len(keywords))
    return keywords


def build_index(
    noise_words: Iterable[str],
    documents: Iterable[str],
    *,
    root_dir: Path | None = None,
) -> InvertedIndex:
    """
    Build a keyword index over documents, in the order given.
    A document that cannot be opened aborts the build with SourceUnavailable;
    nothing is merged for that document.
    """
    noise_words = frozenset(noise_words)
    index = InvertedIndex()
    num_docs = 0
    for document in documents:
        keywords = load_keywords_from_document(document, noise_words, root_dir=root_dir)
        index.merge_keywords(keywords)
        num_docs += 1
    logger.info("Indexed %d documents, %d keywords", num_docs, len(index))
    return index


def make_index(
    docs_file: Path | str,
    noise_words_file: Path | str,
    *,
    root_dir: Path | None = None,
) -> tuple[InvertedIndex, frozenset[str]]:
    """
    Build an index from a manifest file (one document identifier per token)
    and a noise-word file.
    Returns (index, noise words) so queries can be normalized the same way.
    """
    noise_words = load_noise_words(noise_words_file)
    documents = read_manifest(docs_file)
    index = build_index(noise_words, documents, root_dir=root_dir)
    return index, noise_words


def build_index_from_directory(
    data_dir: Path | str,
    noise_words: AbstractSet[str] = frozenset(),
) -> tuple[InvertedIndex, list[str]]:
    """
    Build a keyword index from all text/HTML files under a directory (recursive).
    Document identifiers are paths relative to data_dir, with "/" separators.
    Returns (index, document identifiers in indexing order).
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise SourceUnavailable(data_dir, "not a directory")

    doc_files = sorted(
        (p for p in data_dir.rglob("*") if p.is_file() and p.suffix.lower() in SUPPORTED_SUFFIXES),
        key=lambda p: str(p),
    )
    documents = [str(p.relative_to(data_dir)).replace("\\", "/") for p in doc_files]
    index = build_index(noise_words, documents, root_dir=data_dir)
    return index, documents
