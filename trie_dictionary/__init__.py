"""Prefix-tree dictionary with autocomplete and spelling suggestions."""

from .config import DictionaryConfig, load_config
from .errors import ConfigError, InvalidWordError, TrieError, TrieInputError
from .fuzzy import DEFAULT_MAX_DISTANCE, levenshtein_distance, spelling_suggestions
from .node import TrieNode
from .render import render_trie
from .trie import DeleteOutcome, Trie

__all__ = [
    "ConfigError",
    "DEFAULT_MAX_DISTANCE",
    "DeleteOutcome",
    "DictionaryConfig",
    "InvalidWordError",
    "Trie",
    "TrieError",
    "TrieInputError",
    "TrieNode",
    "levenshtein_distance",
    "load_config",
    "render_trie",
    "spelling_suggestions",
]
