"""Exception hierarchy for the trie dictionary."""

from __future__ import annotations

__all__ = [
    "ConfigError",
    "InvalidWordError",
    "TrieError",
    "TrieInputError",
]


class TrieError(Exception):
    """Base class for recoverable trie dictionary failures."""


class TrieInputError(TrieError, ValueError):
    """Raised when an operation receives an argument outside its domain."""


class InvalidWordError(TrieInputError):
    """Raised when a word cannot be used for the requested lookup."""


class ConfigError(TrieError, ValueError):
    """Raised when a configuration file is missing, unreadable or malformed."""
