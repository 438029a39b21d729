"""Configuration loading for the trie dictionary command line tool.

Configuration files may be JSON (``.json``) or YAML (any other suffix, parsed
with :func:`yaml.safe_load`, which also accepts JSON documents).  Supported
keys:

``max_distance``
    Edit-distance threshold for spelling suggestions (non-negative integer).
``words``
    Inline list of words to seed the dictionary with.
``word_file``
    Path to a newline separated word list, resolved relative to the
    configuration file.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Iterator, List, Mapping, Optional, Tuple, Union

import yaml

from .errors import ConfigError
from .fuzzy import DEFAULT_MAX_DISTANCE

logger = logging.getLogger(__name__)

__all__ = [
    "DictionaryConfig",
    "iter_word_file",
    "load_config",
]

_KNOWN_KEYS = frozenset({"max_distance", "words", "word_file"})


@dataclass(frozen=True)
class DictionaryConfig:
    """Settings resolved from a configuration file or defaults."""

    max_distance: int = DEFAULT_MAX_DISTANCE
    words: Tuple[str, ...] = ()
    word_file: Optional[Path] = None

    def load_words(self) -> List[str]:
        """Return the inline words followed by the contents of ``word_file``."""

        words = list(self.words)
        if self.word_file is not None:
            words.extend(iter_word_file(self.word_file))
        return words


def iter_word_file(path: Union[str, Path]) -> Iterator[str]:
    """Yield stripped, non-blank lines from the word list at *path*."""

    word_path = Path(path)
    try:
        with word_path.open("r", encoding="utf-8") as handle:
            for line in handle:
                word = line.strip()
                if word:
                    yield word
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unable to read word list {word_path}: {exc}") from exc


def _parse_document(path: Path) -> object:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unable to read configuration {path}: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Configuration {path} could not be parsed: {exc}") from exc


def _validate(payload: Mapping[str, object], base_dir: Path) -> DictionaryConfig:
    unknown = sorted(set(payload) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError("Unknown configuration keys: " + ", ".join(unknown))

    max_distance = payload.get("max_distance", DEFAULT_MAX_DISTANCE)
    if (
        not isinstance(max_distance, int)
        or isinstance(max_distance, bool)
        or max_distance < 0
    ):
        raise ConfigError("max_distance must be a non-negative integer")

    words = payload.get("words", [])
    if words is None:
        words = []
    if not isinstance(words, list) or not all(isinstance(word, str) for word in words):
        raise ConfigError("words must be a list of strings")

    word_file_value = payload.get("word_file")
    word_file: Optional[Path] = None
    if word_file_value is not None:
        if not isinstance(word_file_value, str) or not word_file_value.strip():
            raise ConfigError("word_file must be a non-empty path string")
        word_file = Path(word_file_value)
        if not word_file.is_absolute():
            word_file = base_dir / word_file

    return DictionaryConfig(
        max_distance=max_distance,
        words=tuple(words),
        word_file=word_file,
    )


def load_config(path: Union[str, Path, None]) -> DictionaryConfig:
    """Load configuration from *path*, returning defaults when it is ``None``."""

    if path is None:
        return DictionaryConfig()

    config_path = Path(path)
    payload = _parse_document(config_path)
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Configuration {config_path} must contain a mapping")

    config = _validate(payload, config_path.parent)
    logger.debug("Loaded configuration from %s: %s", config_path, config)
    return config
