"""Prefix-tree dictionary with autocomplete and pruning deletion.

The :class:`Trie` stores words one character per node.  Lookups walk the tree
from the root, autocompletion enumerates every terminal descendant of a prefix
in lexicographic order and deletion clears the terminal marker of a word before
pruning every node on its path that no longer leads to a stored word.

The implementation favours predictable behaviour over cleverness:

* Inputs are validated so non-string payloads fail loudly with ``TypeError``.
* Enumeration sorts children at traversal time, so results never depend on the
  insertion order of the underlying ``dict``.
* Word and node counts are tracked eagerly so callers can inspect the size of
  the structure without re-traversing it.

The trie is not thread-safe.  Read-only calls may share an instance, but any
mutation requires exclusive access.
"""

from __future__ import annotations

from enum import Enum
import logging
from typing import Iterable, Iterator, List, Optional

from .fuzzy import DEFAULT_MAX_DISTANCE, spelling_suggestions
from .node import TrieNode

logger = logging.getLogger(__name__)

__all__ = [
    "DeleteOutcome",
    "Trie",
]


class DeleteOutcome(Enum):
    """Result of :meth:`Trie.remove`."""

    DELETED = "deleted"
    KEPT_AS_PREFIX = "kept_as_prefix"
    NOT_FOUND = "not_found"

    def __bool__(self) -> bool:
        return self is not DeleteOutcome.NOT_FOUND


class Trie:
    """Trie supporting insertion, lookup, deletion and prefix enumeration."""

    __slots__ = ("root", "_size", "_node_count")

    def __init__(self, words: Optional[Iterable[str]] = None) -> None:
        self.root = TrieNode()
        self._size = 0
        self._node_count = 1
        if words is not None:
            self.bulk_insert(words)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert(self, word: str) -> bool:
        """Insert *word* and return ``True`` when it was not already stored.

        A duplicate insertion returns ``False``.  Inserting the empty string
        marks the root as terminal.
        """

        node = self.root
        for char in self._normalize_word(word):
            child = node.children.get(char)
            if child is None:
                child = TrieNode(char)
                node.children[char] = child
                self._node_count += 1
            node = child
        if node.is_terminal:
            return False
        node.is_terminal = True
        self._size += 1
        return True

    def bulk_insert(self, words: Iterable[str]) -> int:
        """Insert multiple *words* and return how many were new.

        The iterable is eagerly consumed to surface TypeErrors deterministically
        even when the caller provides a generator.
        """

        return sum(1 for word in list(words) if self.insert(word))

    def delete(self, word: str) -> bool:
        """Delete *word*, pruning nodes that no longer lead to a stored word.

        The return value is the pruning signal of the root call: ``True`` only
        when the deletion left the root non-terminal and childless.  A word that
        was absent and a word that was removed while other words survive both
        yield ``False``; use :meth:`remove` to tell them apart.
        """

        return self._delete(self.root, self._normalize_word(word), 0)

    def remove(self, word: str) -> DeleteOutcome:
        """Delete *word* and report what happened to its landing node."""

        normalized = self._normalize_word(word)
        node = self._walk(normalized)
        if node is None or not node.is_terminal:
            return DeleteOutcome.NOT_FOUND
        retained = bool(node.children)
        self._delete(self.root, normalized, 0)
        if retained:
            return DeleteOutcome.KEPT_AS_PREFIX
        return DeleteOutcome.DELETED

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def search(self, word: str) -> bool:
        """Return ``True`` if *word* was inserted and not deleted since."""

        node = self._walk(self._normalize_word(word))
        return node is not None and node.is_terminal

    def starts_with(self, prefix: str) -> bool:
        """Return ``True`` when any stored word shares the supplied *prefix*."""

        return self._walk(self._normalize_word(prefix)) is not None

    def auto_suggest(self, prefix: str) -> List[str]:
        """Return every stored word beginning with *prefix* in sorted order.

        An unknown prefix yields an empty list.
        """

        normalized = self._normalize_word(prefix)
        node = self._walk(normalized)
        if node is None:
            return []
        return self._collect_words(node, normalized)

    def get_all_words(self) -> List[str]:
        """Return all stored words in lexicographical order."""

        return self._collect_words(self.root, "")

    def iter_words(self) -> Iterator[str]:
        """Yield all stored words in lexicographical order."""

        def _walk(node: TrieNode, prefix: List[str]) -> Iterator[str]:
            if node.is_terminal:
                yield "".join(prefix)
            for char in sorted(node.children):
                prefix.append(char)
                yield from _walk(node.children[char], prefix)
                prefix.pop()

        yield from _walk(self.root, [])

    def get_spelling_suggestions(
        self, word: str, max_distance: int = DEFAULT_MAX_DISTANCE
    ) -> List[str]:
        """Return stored words within *max_distance* edits of *word*.

        Only words sharing the first character of *word* are considered.  See
        :func:`trie_dictionary.fuzzy.spelling_suggestions`.
        """

        return spelling_suggestions(self, word, max_distance=max_distance)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Trie(words={self._size}, nodes={self._node_count})"

    @property
    def node_count(self) -> int:
        """Total number of nodes currently allocated, root included."""

        return self._node_count

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _normalize_word(word: str) -> str:
        if not isinstance(word, str):
            raise TypeError("word must be a string")
        return word

    def _walk(self, fragment: str) -> Optional[TrieNode]:
        node = self.root
        for char in fragment:
            if not node.has_child(char):
                return None
            node = node.children[char]
        return node

    def _delete(self, node: TrieNode, word: str, index: int) -> bool:
        """Return ``True`` when *node* may be pruned by its parent."""

        if index == len(word):
            if not node.is_terminal:
                return False
            node.is_terminal = False
            self._size -= 1
            return not node.children

        char = word[index]
        if not node.has_child(char):
            return False

        if self._delete(node.children[char], word, index + 1):
            del node.children[char]
            self._node_count -= 1
            logger.debug("Pruned node %r at depth %d of %r", char, index + 1, word)
            return not node.is_terminal and not node.children
        return False

    def _collect_words(self, start: TrieNode, prefix: str) -> List[str]:
        words: List[str] = []
        if start.is_terminal:
            words.append(prefix)
        for char in sorted(start.children):
            words.extend(self._collect_words(start.children[char], prefix + char))
        return words
