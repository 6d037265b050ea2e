"""A small lexical analyser for C-like source text."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

OPERATORS = "+-*/%="
WHITESPACE = " \n\t"
DEFAULT_INPUT = "input.txt"

KEYWORDS = frozenset(
    {
        "auto", "break", "case", "char", "const",
        "continue", "default", "do", "double", "else",
        "enum", "extern", "float", "for", "goto", "if",
        "int", "long", "register", "return", "short", "signed",
        "sizeof", "static", "struct", "switch", "typedef", "union",
        "unsigned", "void", "volatile", "while",
    }
)


class TokenKind(Enum):
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    OPERATOR = "Operator"
    SPECIAL = "Special symbol"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    def __str__(self) -> str:
        if self.kind in (TokenKind.OPERATOR, TokenKind.SPECIAL):
            return f"{self.kind.value}: '{self.text}'"
        return f"{self.kind.value}: {self.text}"


def is_keyword(word: str) -> bool:
    """Return True if ``word`` is a C keyword."""
    return word in KEYWORDS


def _word_token(word: str) -> Token:
    kind = TokenKind.KEYWORD if is_keyword(word) else TokenKind.IDENTIFIER
    return Token(kind, word)


def tokenize(text: str) -> Iterator[Token]:
    """Yield tokens from ``text``.

    An operator character is reported as an operator first and then, like
    every other non-alphanumeric, non-blank character, as a special symbol.
    """
    word: list[str] = []
    for ch in text:
        if ch in OPERATORS:
            yield Token(TokenKind.OPERATOR, ch)
        if ch.isascii() and ch.isalnum():
            word.append(ch)
            continue
        if ch in WHITESPACE:
            if word:
                yield _word_token("".join(word))
                word.clear()
            continue
        if word:
            yield _word_token("".join(word))
            word.clear()
        yield Token(TokenKind.SPECIAL, ch)
    if word:
        yield _word_token("".join(word))


def main(argv: Sequence[str] | None = None) -> int:
    """Tokenize a file and print the tokens found."""
    parser = argparse.ArgumentParser(prog="lexer", description="List the tokens of a file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError:
        print("Error opening the file")
        return 0
    print("Tokens found:")
    for token in tokenize(text):
        print(token)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())