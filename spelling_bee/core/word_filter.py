"""Longest-word selection over a corpus and a set of allowed letters.

Spelling Bee rules apply: a word is playable when every one of its characters
is an allowed letter. Letters may be reused any number of times, so there is no
per-letter count check.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

NO_VALID_WORDS = "No valid words found"


def build_letter_set(letters: Iterable[str]) -> frozenset[str]:
    """Return the lowercase membership set for ``letters``."""

    return frozenset(letter.lower() for letter in letters)


def normalize_word(line: str) -> str:
    """Trim and lowercase a raw corpus line."""

    return line.strip().lower()


def is_formable(word: str, letter_set: frozenset[str]) -> bool:
    """Return True when every character of ``word`` belongs to ``letter_set``."""

    if not word:
        return False
    return all(char in letter_set for char in word)


def filter_candidates(
    words: Iterable[str],
    letter_set: frozenset[str],
    used_words: Iterable[str] = (),
) -> List[str]:
    """Return the playable, unused words of ``words`` in their original order.

    ``words`` are normalized before the letter check; ``used_words`` are
    compared verbatim against the normalized word.
    """

    used = frozenset(used_words)
    out: List[str] = []
    for raw in words:
        word = normalize_word(raw)
        if not is_formable(word, letter_set):
            continue
        if word in used:
            continue
        out.append(word)
    return out


def select_longest(candidates: Iterable[str]) -> Optional[str]:
    """Return the longest candidate; the earliest one wins a tie."""

    best: Optional[str] = None
    for word in candidates:
        # Strictly longer only, so equal lengths keep the earlier word.
        if best is None or len(word) > len(best):
            best = word
    return best


def longest_word(
    words: Iterable[str],
    letters: Iterable[str],
    used_words: Iterable[str] = (),
) -> str:
    """Return the longest playable unused word, or :data:`NO_VALID_WORDS`."""

    letter_set = build_letter_set(letters)
    best = select_longest(filter_candidates(words, letter_set, used_words))
    return best if best is not None else NO_VALID_WORDS


__all__ = [
    "NO_VALID_WORDS",
    "build_letter_set",
    "normalize_word",
    "is_formable",
    "filter_candidates",
    "select_longest",
    "longest_word",
]
