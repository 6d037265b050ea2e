"""FOLLOW sets for grammars written as ``X=rhs`` with ``$`` for epsilon."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

EPSILON = "$"
END_MARKER = "$"
REPORT_SYMBOLS = "EDTSF"

Production = tuple[str, str]


def parse_productions(lines: Iterable[str]) -> list[Production]:
    """Parse ``X=rhs`` lines into ``(lhs, rhs)`` pairs, skipping blank lines."""
    productions: list[Production] = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if len(line) < 3 or line[1] != "=":
            raise ValueError(f"malformed production: {line!r}")
        productions.append((line[0], line[2:]))
    return productions


def _is_nonterminal(symbol: str) -> bool:
    return symbol.isascii() and symbol.isupper()


def _extend(target: list[str], items: Iterable[str]) -> None:
    for item in items:
        if item not in target:
            target.append(item)


def _first_of_symbol(
    productions: Sequence[Production], symbol: str, visiting: frozenset[str]
) -> tuple[list[str], bool]:
    if not _is_nonterminal(symbol):
        return [symbol], False
    if symbol in visiting:
        return [], False
    found: list[str] = []
    nullable = False
    inner = visiting | {symbol}
    for lhs, rhs in productions:
        if lhs != symbol:
            continue
        if rhs.startswith(EPSILON):
            nullable = True
            continue
        firsts, rest_nullable = _first_of_sequence(productions, rhs, inner)
        _extend(found, firsts)
        nullable = nullable or rest_nullable
    return found, nullable


def _first_of_sequence(
    productions: Sequence[Production], symbols: str, visiting: frozenset[str]
) -> tuple[list[str], bool]:
    found: list[str] = []
    for symbol in symbols:
        firsts, nullable = _first_of_symbol(productions, symbol, visiting)
        _extend(found, firsts)
        if not nullable:
            return found, False
    return found, True


def _follow(
    productions: Sequence[Production], symbol: str, visiting: frozenset[str]
) -> list[str]:
    found: list[str] = []
    if productions and productions[0][0] == symbol:
        found.append(END_MARKER)
    inner = visiting | {symbol}
    for lhs, rhs in productions:
        for index, current in enumerate(rhs):
            if current != symbol:
                continue
            firsts, nullable = _first_of_sequence(productions, rhs[index + 1:], frozenset())
            _extend(found, firsts)
            if nullable and lhs not in inner:
                _extend(found, _follow(productions, lhs, inner))
    return found


def compute_follow(productions: Iterable[Production], symbol: str) -> tuple[str, ...]:
    """Return the FOLLOW set of ``symbol``; the first production's lhs is the start."""
    return tuple(_follow(list(productions), symbol, frozenset()))


def _format_follow(symbol: str, items: Iterable[str]) -> str:
    return f"FOLLOW({symbol}) = {{ " + "".join(f"{item} " for item in items) + "}"


def main(argv: Sequence[str] | None = None) -> int:
    """Read productions from standard input and print FOLLOW sets."""
    print("Enter the no.of productions: ", end="")
    tokens = sys.stdin.read().split()
    try:
        count = int(tokens[0])
    except (IndexError, ValueError):
        print("Invalid number of productions", file=sys.stderr)
        return 1
    print("Enter the productions (epsilon = $):")
    lines = tokens[1:1 + count]
    if len(lines) < count:
        print("Not enough productions given", file=sys.stderr)
        return 1
    try:
        productions = parse_productions(lines)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    for symbol in REPORT_SYMBOLS:
        print(_format_follow(symbol, compute_follow(productions, symbol)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())