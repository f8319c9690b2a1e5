"""Word corpus and filtering primitives for the Spelling Bee server."""

from .corpus import CORPUS_FILENAME, CorpusLoader, default_corpus_path, read_corpus
from .errors import (
    ErrorKind,
    InvalidArgumentError,
    MethodNotFoundError,
    ResourceUnavailableError,
    SpellingBeeError,
)
from .word_filter import (
    NO_VALID_WORDS,
    build_letter_set,
    filter_candidates,
    is_formable,
    longest_word,
    select_longest,
)

__all__ = [
    "CORPUS_FILENAME",
    "CorpusLoader",
    "default_corpus_path",
    "read_corpus",
    "ErrorKind",
    "InvalidArgumentError",
    "MethodNotFoundError",
    "ResourceUnavailableError",
    "SpellingBeeError",
    "NO_VALID_WORDS",
    "build_letter_set",
    "filter_candidates",
    "is_formable",
    "longest_word",
    "select_longest",
]
