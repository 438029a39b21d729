"""Command line front end for the trie dictionary.

Examples::

    python -m trie_dictionary complete cat
    python -m trie_dictionary --words words.txt suggest caterpilar
    python -m trie_dictionary --config dictionary.yaml dump

Without ``--words`` or a configured word source the built-in sample
vocabulary is loaded.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Sequence

from .config import DictionaryConfig, iter_word_file, load_config
from .errors import TrieError
from .render import render_trie
from .trie import Trie

logger = logging.getLogger(__name__)

SAMPLE_WORDS = (
    "cat",
    "catastrophe",
    "catatonic",
    "caterpillar",
    "hell",
    "hello",
    "help",
    "helium",
    "hero",
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trie-dictionary",
        description="Query a prefix-tree dictionary.",
    )
    parser.add_argument(
        "--words",
        type=Path,
        default=None,
        help="Newline separated word list. Overrides configured word sources.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON or YAML configuration file.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    search = commands.add_parser("search", help="Report whether words are stored.")
    search.add_argument("queries", nargs="+", metavar="WORD")
    complete = commands.add_parser("complete", help="List completions of a prefix.")
    complete.add_argument("prefix")
    suggest = commands.add_parser("suggest", help="Suggest spellings for a word.")
    suggest.add_argument("word")
    suggest.add_argument(
        "--max-distance",
        type=int,
        default=None,
        help="Override the configured edit-distance threshold.",
    )
    commands.add_parser("list", help="List every stored word.")
    commands.add_parser("dump", help="Render the node structure.")
    delete = commands.add_parser(
        "delete", help="Delete words, then list the remaining vocabulary."
    )
    delete.add_argument("queries", nargs="+", metavar="WORD")
    return parser


def _load_trie(words_path: Path | None, config: DictionaryConfig) -> Trie:
    if words_path is not None:
        words: List[str] = list(iter_word_file(words_path))
        source = str(words_path)
    else:
        words = config.load_words()
        source = "configuration"
        if not words:
            words = list(SAMPLE_WORDS)
            source = "built-in sample"
    trie = Trie()
    added = trie.bulk_insert(words)
    logger.info("Loaded %d words from %s (%d duplicates)", added, source, len(words) - added)
    return trie


def _run(args: argparse.Namespace, config: DictionaryConfig) -> List[str]:
    trie = _load_trie(args.words, config)

    if args.command == "search":
        return [f"{word}: {'found' if trie.search(word) else 'missing'}" for word in args.queries]
    if args.command == "complete":
        return trie.auto_suggest(args.prefix)
    if args.command == "suggest":
        max_distance = (
            args.max_distance if args.max_distance is not None else config.max_distance
        )
        return trie.get_spelling_suggestions(args.word, max_distance=max_distance)
    if args.command == "list":
        return trie.get_all_words()
    if args.command == "dump":
        return [render_trie(trie)]
    if args.command == "delete":
        lines = [f"{word}: {trie.remove(word).value}" for word in args.queries]
        return lines + trie.get_all_words()
    raise AssertionError(f"Unhandled command {args.command!r}")


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point returning a process exit code."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        config = load_config(args.config)
        lines = _run(args, config)
    except TrieError as exc:
        logger.error("%s", exc)
        return 1

    for line in lines:
        print(line)
    return 0


__all__ = ["SAMPLE_WORDS", "main"]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
