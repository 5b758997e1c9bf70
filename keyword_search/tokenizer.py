"""
Keyword extraction and text sources for the keyword index.
Reads noise-word lists, document manifests and documents (plain text or HTML),
splits them into whitespace-delimited tokens and turns tokens into keywords.
"""

import logging
import warnings
from pathlib import Path
from typing import AbstractSet

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk.tokenize import WhitespaceTokenizer

logger = logging.getLogger(__name__)

# Trailing characters stripped from a token before the keyword test
PUNCTUATION = ".,?:;!"

HTML_SUFFIXES = {".html", ".htm"}
SUPPORTED_SUFFIXES = {".txt"} | HTML_SUFFIXES
ENCODINGS = ("utf-8", "latin-1", "cp1252")

_TOKENIZER = WhitespaceTokenizer()


class SourceUnavailable(FileNotFoundError):
    """A noise-word file, manifest, document or data directory could not be opened."""

    def __init__(self, path: Path | str, reason: str | None = None) -> None:
        message = f"Source not found: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = str(path)


def get_keyword(word: str, noise_words: AbstractSet[str] = frozenset()) -> str | None:
    """
    Return word as a keyword, or None if it fails the keyword test.

    The word is lower-cased and stripped of trailing punctuation (. , ? : ; !).
    What remains must be non-empty, consist only of letters, and not be a
    noise word. Leading and interior punctuation is never removed.
    """
    word = word.lower()
    while word and word[-1] in PUNCTUATION:
        word = word[:-1]
    if not word or not word.isalpha():
        return None
    if word in noise_words:
        return None
    return word


def tokenize(text: str) -> list[str]:
    """Split text on runs of whitespace."""
    if not text:
        return []
    return _TOKENIZER.tokenize(text)


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_text_file(filepath: Path | str) -> str:
    """
    Read a text file, trying the usual encodings in turn.
    Raises SourceUnavailable if the file cannot be opened.
    """
    filepath = Path(filepath)
    for encoding in ENCODINGS:
        try:
            return filepath.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
        except OSError as e:
            raise SourceUnavailable(filepath, e.strerror) from e
    raise ValueError(f"Could not decode file: {filepath}")


def read_document(filepath: Path | str) -> str:
    """Return the text content of a document; HTML documents are reduced to visible text."""
    filepath = Path(filepath)
    content = read_text_file(filepath)
    if filepath.suffix.lower() in HTML_SUFFIXES:
        return extract_text_from_html(content)
    return content


def scan_document(filepath: Path | str) -> list[str]:
    """Return the raw whitespace-delimited tokens of a document."""
    return tokenize(read_document(filepath))


def load_noise_words(filepath: Path | str) -> frozenset[str]:
    """
    Load noise words, one per whitespace-delimited token.
    Tokens are kept verbatim (no lower-casing or punctuation stripping).
    """
    words = frozenset(tokenize(read_text_file(filepath)))
    logger.debug("Loaded %d noise words from %s", len(words), filepath)
    return words


def read_manifest(filepath: Path | str) -> list[str]:
    """Return the document identifiers listed in a manifest file, in order."""
    return tokenize(read_text_file(filepath))
