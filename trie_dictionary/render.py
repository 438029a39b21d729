"""Human-readable dump of a trie's node structure.

``render_trie`` produces a deterministic tree drawing suitable for debugging
sessions and regression artefacts::

    root
     └─c
       └─a
         ├─r
         └─t

Children are always visited in ascending character order, so two tries holding
the same words render identically regardless of insertion order.
"""

from __future__ import annotations

from typing import List

from .node import TrieNode
from .trie import Trie

__all__ = ["render_trie"]

ROOT_LABEL = "root"
LAST_BRANCH = "└─"
BRANCH = "├─"


def _render_node(node: TrieNode, indent: str, is_last: bool, lines: List[str]) -> None:
    marker = LAST_BRANCH if is_last else BRANCH
    lines.append(f"{indent}{marker}{node.character}")
    child_indent = indent + ("  " if is_last else "│ ")
    _render_children(node, child_indent, lines)


def _render_children(node: TrieNode, indent: str, lines: List[str]) -> None:
    keys = sorted(node.children)
    for position, char in enumerate(keys, start=1):
        _render_node(node.children[char], indent, position == len(keys), lines)


def render_trie(trie: Trie) -> str:
    """Render *trie* as an indented tree, one node per line."""

    lines: List[str] = [ROOT_LABEL]
    _render_children(trie.root, " ", lines)
    return "\n".join(lines)
