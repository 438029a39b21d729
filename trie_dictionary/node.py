"""Node type shared by the trie core and the diagnostic renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

__all__ = ["TrieNode"]


@dataclass(slots=True)
class TrieNode:
    """A single character position along one or more stored words.

    The root node carries ``character=None``; every other node stores the
    character that leads to it from its parent.
    """

    character: Optional[str] = None
    children: Dict[str, "TrieNode"] = field(default_factory=dict)
    is_terminal: bool = False

    def __post_init__(self) -> None:
        if self.character is not None and (
            not isinstance(self.character, str) or len(self.character) != 1
        ):
            raise TypeError("TrieNode.character must be a single-character string")
        for key, child in self.children.items():
            if not isinstance(key, str) or len(key) != 1:
                raise TypeError(
                    "TrieNode children must be keyed by single-character strings"
                )
            if not isinstance(child, TrieNode):
                raise TypeError("TrieNode children must be TrieNode instances")
        if not isinstance(self.is_terminal, bool):
            raise TypeError("TrieNode.is_terminal must be a boolean")

    def has_child(self, char: str) -> bool:
        """Return ``True`` when *char* leads to a child node."""

        return char in self.children
