"""Edit-distance scoring for "did you mean" suggestions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from .errors import InvalidWordError, TrieInputError

if TYPE_CHECKING:  # pragma: no cover - import only for annotations
    from .trie import Trie

logger = logging.getLogger(__name__)

DEFAULT_MAX_DISTANCE = 2

__all__ = [
    "DEFAULT_MAX_DISTANCE",
    "levenshtein_distance",
    "spelling_suggestions",
]


def levenshtein_distance(source: str, target: str) -> int:
    """Return the minimum number of single-character edits between two strings.

    Insertions, deletions and substitutions each cost one; the result is the
    bottom-right cell of an ``(m + 1) x (n + 1)`` dynamic programming table.
    """

    m = len(source)
    n = len(target)
    table: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        table[i][0] = i
    for j in range(n + 1):
        table[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if source[i - 1] == target[j - 1] else 1
            table[i][j] = min(
                table[i - 1][j] + 1,
                table[i][j - 1] + 1,
                table[i - 1][j - 1] + cost,
            )
    return table[m][n]


def spelling_suggestions(
    trie: "Trie", word: str, *, max_distance: int = DEFAULT_MAX_DISTANCE
) -> List[str]:
    """Return words in *trie* within *max_distance* edits of *word*.

    Candidates are the stored words sharing the first character of *word*, in
    lexicographic order; the order is preserved after filtering.

    Raises:
        TypeError: if *word* is not a string.
        InvalidWordError: if *word* is empty.
        TrieInputError: if *max_distance* is not a non-negative integer.
    """

    if not isinstance(word, str):
        raise TypeError("word must be a string")
    if not word:
        raise InvalidWordError("spelling suggestions require a non-empty word")
    if (
        not isinstance(max_distance, int)
        or isinstance(max_distance, bool)
        or max_distance < 0
    ):
        raise TrieInputError("max_distance must be a non-negative integer")

    candidates = trie.auto_suggest(word[0])
    if not candidates:
        logger.debug("No stored words start with %r", word[0])
        return []

    return [
        candidate
        for candidate in candidates
        if levenshtein_distance(word, candidate) <= max_distance
    ]
