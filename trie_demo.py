"""Command line demonstration of the trie dictionary.

Running the module builds a small dictionary, prints its node structure and
walks through autocompletion, spelling suggestions and a pruning deletion so
the behaviour of ``trie_dictionary`` can be inspected without writing code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence

from trie_dictionary import Trie, render_trie


@dataclass(frozen=True)
class DemoCase:
    """A vocabulary together with the queries shown for it."""

    name: str
    words: Sequence[str]
    prefix: str
    misspelling: str
    deletion: str

    def build(self) -> Trie:
        """Materialise the trie associated with this demo case."""

        return Trie(self.words)


def _iter_demo_cases() -> Iterator[DemoCase]:
    """Yield the built-in demonstration cases."""

    yield DemoCase(
        name="Animals",
        words=("cat", "catastrophe", "catatonic", "caterpillar"),
        prefix="cata",
        misspelling="caterpilar",
        deletion="cat",
    )
    yield DemoCase(
        name="Greetings",
        words=("hell", "hello", "help"),
        prefix="hel",
        misspelling="jello",
        deletion="hello",
    )


def _format_report(case: DemoCase, trie: Trie) -> List[str]:
    """Return formatted output lines for *case* and its *trie*."""

    completions = ", ".join(trie.auto_suggest(case.prefix)) or "<none>"
    suggestions = ", ".join(trie.get_spelling_suggestions(case.misspelling)) or "<none>"
    before = render_trie(trie)
    outcome = trie.remove(case.deletion)
    return [
        f"{case.name} ({len(case.words)} words)",
        before,
        f"complete {case.prefix!r}: {completions}",
        f"suggest {case.misspelling!r}: {suggestions}",
        f"delete {case.deletion!r}: {outcome.value}",
        render_trie(trie),
    ]


def main() -> None:
    """Execute the demonstration flow for all configured cases."""

    for case in _iter_demo_cases():
        for line in _format_report(case, case.build()):
            print(line)
        print()


if __name__ == "__main__":
    main()
