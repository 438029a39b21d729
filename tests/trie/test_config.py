"""Tests for configuration loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from trie_dictionary import ConfigError, DictionaryConfig, load_config
from trie_dictionary.config import iter_word_file


def test_load_config_defaults() -> None:
    config = load_config(None)
    assert config == DictionaryConfig()
    assert config.max_distance == 2
    assert config.load_words() == []


def test_load_config_from_json(tmp_path: Path) -> None:
    config_path = tmp_path / "dictionary.json"
    config_path.write_text(
        json.dumps({"max_distance": 1, "words": ["cat", "car"]}), encoding="utf-8"
    )

    config = load_config(config_path)

    assert config.max_distance == 1
    assert config.words == ("cat", "car")
    assert config.word_file is None


def test_load_config_from_yaml_resolves_word_file(tmp_path: Path) -> None:
    (tmp_path / "words.txt").write_text("apple\n\n  banana  \n", encoding="utf-8")
    config_path = tmp_path / "dictionary.yaml"
    config_path.write_text(
        """
        max_distance: 3
        words:
          - cherry
        word_file: words.txt
        """,
        encoding="utf-8",
    )

    config = load_config(str(config_path))

    assert config.max_distance == 3
    assert config.word_file == tmp_path / "words.txt"
    assert config.load_words() == ["cherry", "apple", "banana"]


def test_load_config_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")
    assert load_config(config_path) == DictionaryConfig()


@pytest.mark.parametrize(
    "config_text, expected_message",
    [
        ("max_distance: -1", "max_distance must be a non-negative integer"),
        ("max_distance: true", "max_distance must be a non-negative integer"),
        ("words: cat", "words must be a list of strings"),
        ("words: [1, 2]", "words must be a list of strings"),
        ("word_file: ''", "word_file must be a non-empty path string"),
        ("colour: blue", "Unknown configuration keys: colour"),
        ("- just\n- a list", "must contain a mapping"),
        ("max_distance: [unclosed", "could not be parsed"),
    ],
)
def test_load_config_rejects_invalid(
    tmp_path: Path, config_text: str, expected_message: str
) -> None:
    config_path = tmp_path / "invalid.yaml"
    config_path.write_text(config_text, encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_config(config_path)
    assert expected_message in str(excinfo.value)


def test_load_config_rejects_invalid_json(tmp_path: Path) -> None:
    config_path = tmp_path / "broken.json"
    config_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(config_path)


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.yaml")


def test_iter_word_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        list(iter_word_file(tmp_path / "absent.txt"))


def test_iter_word_file_rejects_invalid_utf8(tmp_path: Path) -> None:
    word_path = tmp_path / "latin1.txt"
    word_path.write_bytes(b"caf\xe9\n")
    with pytest.raises(ConfigError) as excinfo:
        list(iter_word_file(word_path))
    assert "Unable to read word list" in str(excinfo.value)


def test_load_config_rejects_invalid_utf8(tmp_path: Path) -> None:
    config_path = tmp_path / "latin1.yaml"
    config_path.write_bytes(b"words: [caf\xe9]\n")
    with pytest.raises(ConfigError) as excinfo:
        load_config(config_path)
    assert "Unable to read configuration" in str(excinfo.value)
