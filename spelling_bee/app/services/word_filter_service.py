"""Service answering longest-word queries against the corpus."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from spelling_bee.core import (
    CorpusLoader,
    InvalidArgumentError,
    NO_VALID_WORDS,
    longest_word,
)

from ...utils.observability import create_counter, get_logger


def _coerce_string_list(value: Any, field: str) -> List[str]:
    """Return ``value`` as a list of strings or raise :class:`InvalidArgumentError`.

    A bare string is rejected rather than iterated character by character.
    """

    if value is None:
        raise InvalidArgumentError(f"'{field}' is required")
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InvalidArgumentError(
            f"'{field}' must be an array of strings, got {type(value).__name__}"
        )
    items: List[str] = []
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise InvalidArgumentError(
                f"'{field}[{index}]' must be a string, got {type(item).__name__}"
            )
        items.append(item)
    return items


class WordFilterService:
    """Pick the longest corpus word playable with a set of letters."""

    def __init__(self, corpus_loader: Optional[CorpusLoader] = None) -> None:
        self.corpus_loader = corpus_loader or CorpusLoader()
        self._logger = get_logger(__name__).bind(component="word_filter_service")
        self._metric_no_match = create_counter(
            "spelling_bee_no_match_total",
            "Longest-word queries that found no playable word.",
        )

    def get_longest_word(
        self,
        used_words: Sequence[str],
        letters_array: Sequence[str],
    ) -> str:
        """Return the longest unused word spelled only with ``letters_array``.

        Returns :data:`~spelling_bee.core.NO_VALID_WORDS` when nothing
        qualifies. Raises :class:`~spelling_bee.core.ResourceUnavailableError`
        when the corpus cannot be read.
        """

        used = _coerce_string_list(used_words, "used_words")
        letters = _coerce_string_list(letters_array, "letters_array")

        words = self.corpus_loader.load()
        result = longest_word(words, letters, used)

        if result == NO_VALID_WORDS:
            self._metric_no_match.inc()
        self._logger.debug(
            "Longest word resolved",
            context={
                "letters": sorted({letter.lower() for letter in letters}),
                "used_count": len(used),
                "corpus_size": len(words),
                "result": result,
            },
        )
        return result

    def get_longest_word_from_arguments(self, arguments: Optional[Mapping[str, Any]]) -> str:
        """Validate a raw tool-call payload and answer it."""

        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise InvalidArgumentError(
                f"arguments must be an object, got {type(arguments).__name__}"
            )
        missing = [key for key in ("used_words", "letters_array") if key not in arguments]
        if missing:
            raise InvalidArgumentError(
                "Missing required argument(s): " + ", ".join(missing)
            )
        return self.get_longest_word(arguments["used_words"], arguments["letters_array"])

    def clear_cached_results(self) -> None:
        self.corpus_loader.clear_cached_results()


__all__ = ["WordFilterService"]
