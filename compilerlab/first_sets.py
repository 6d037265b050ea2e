"""FIRST sets for a small expression grammar written as ``X->rhs`` strings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

EPSILON = "@"
ARROW = "->"

DEFAULT_PRODUCTIONS: tuple[str, ...] = (
    "E->TC",
    "C->+TC",
    "C->@",
    "T->FD",
    "D->*FD",
    "D->@",
    "F->(E)",
    "F->i",
)

REPORT_ORDER = "FCDTE"

GRAMMAR_DESCRIPTION = (
    "E -> TC\n"
    "C -> +TC | epsilon\n"
    "T -> FD\n"
    "D -> *FD | epsilon\n"
    "F -> (E) | id\n"
)

_TERMINAL_MARKERS = frozenset("(@+*")


def _split(production: str) -> tuple[str, str]:
    if len(production) < 3 or production[1:3] != ARROW:
        raise ValueError(f"malformed production: {production!r}")
    return production[0], production[3:]


def _is_terminal(symbol: str) -> bool:
    return (symbol.isascii() and symbol.islower()) or symbol in _TERMINAL_MARKERS


def _is_nonterminal(symbol: str) -> bool:
    return symbol.isascii() and symbol.isupper()


def _first(
    productions: Sequence[tuple[str, str]], non_terminal: str, visiting: frozenset[str]
) -> list[str]:
    found: list[str] = []
    inner = visiting | {non_terminal}
    for lhs, rhs in productions:
        if lhs != non_terminal or not rhs:
            continue
        head = rhs[0]
        if _is_terminal(head):
            if head not in found:
                found.append(head)
        elif _is_nonterminal(head) and head not in inner:
            for symbol in _first(productions, head, inner):
                if symbol != EPSILON and symbol not in found:
                    found.append(symbol)
    return found


def compute_first(productions: Iterable[str], non_terminal: str) -> tuple[str, ...]:
    """Return the FIRST set of ``non_terminal`` in order of discovery.

    ``@`` stands for epsilon and ``i`` for the token ``id``.
    """
    parsed = [_split(production) for production in productions]
    return tuple(_first(parsed, non_terminal, frozenset()))


def _display(symbol: str) -> str:
    if symbol == "i":
        return "'id'"
    if symbol == EPSILON:
        return "epsilon"
    return f"'{symbol}'"


def format_first(non_terminal: str, first_set: Iterable[str]) -> str:
    """Render a FIRST set as ``FIRST(X) = { ... }``."""
    items = ", ".join(_display(symbol) for symbol in first_set)
    return f"FIRST({non_terminal}) = {{ {items} }}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the FIRST sets of the built-in grammar."""
    print("Computing First Sets for the Grammar:")
    print(GRAMMAR_DESCRIPTION)
    for non_terminal in REPORT_ORDER:
        print(format_first(non_terminal, compute_first(DEFAULT_PRODUCTIONS, non_terminal)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())