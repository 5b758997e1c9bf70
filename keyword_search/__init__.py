"""Keyword search index package."""

from .posting import Occurrence, InvertedIndex, insert_last_occurrence
from .index_builder import build_index, build_index_from_directory, index_document, make_index
from .tokenizer import SourceUnavailable, get_keyword, load_noise_words
from .search_cli import top5search
