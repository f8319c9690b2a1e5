"""Loader for the newline-delimited word corpus bundled with the server."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional, Tuple

from .errors import ResourceUnavailableError
from .word_filter import normalize_word

CORPUS_FILENAME = "corpora.txt"


def default_corpus_path() -> Path:
    """Return the corpus shipped next to this module."""

    return Path(__file__).resolve().with_name(CORPUS_FILENAME)


def read_corpus(path: Path | str) -> Tuple[str, ...]:
    """Read ``path`` and return its trimmed, lowercased, non-blank lines.

    Raises :class:`ResourceUnavailableError` when the file is missing,
    unreadable, or not valid UTF-8. A leading byte-order mark is ignored.
    """

    corpus_path = Path(path)
    try:
        text = corpus_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceUnavailableError(corpus_path, exc) from exc

    words = (normalize_word(line) for line in text.splitlines())
    return tuple(word for word in words if word)


class CorpusLoader:
    """Lazy loader for the word corpus.

    With ``cache`` enabled the parsed corpus is kept after the first
    successful read. A failed read leaves the loader unloaded so the next call
    retries.
    """

    def __init__(self, corpus_path: Optional[Path | str] = None, *, cache: bool = True) -> None:
        self.corpus_path: Path = (
            Path(corpus_path) if corpus_path is not None else default_corpus_path()
        )
        self.cache = cache
        self._words: Optional[Tuple[str, ...]] = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._words is not None

    def load(self) -> Tuple[str, ...]:
        if not self.cache:
            return self._read()

        with self._lock:
            if self._words is None:
                self._words = self._read()
            return self._words

    def clear_cached_results(self) -> None:
        """Drop the cached corpus so the next :meth:`load` rereads the file."""

        with self._lock:
            self._words = None

    def _read(self) -> Tuple[str, ...]:
        return read_corpus(self.corpus_path)


__all__ = ["CORPUS_FILENAME", "CorpusLoader", "default_corpus_path", "read_corpus"]
