"""A predictive parser for S -> (L) | a, L -> S L', L' -> , S L' | e, ended by ``#``."""

from __future__ import annotations

from collections.abc import Sequence


class ListParseError(Exception):
    """A syntax error, with the position where it was found."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def lookahead(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def match(self, expected: str) -> None:
        if self.lookahead != expected:
            raise ListParseError(
                f"Error: expected '{expected}' at Position {self.pos}", self.pos
            )
        self.pos += 1

    def sentence(self) -> None:
        if self.lookahead == "(":
            self.match("(")
            self.items()
            self.match(")")
        elif self.lookahead == "a":
            self.match("a")
        else:
            raise ListParseError(
                f"Error: Unexpected symbol {self.lookahead} at position {self.pos}", self.pos
            )

    def items(self) -> None:
        self.sentence()
        while self.lookahead == ",":
            self.match(",")
            self.sentence()


def parse_list(text: str) -> bool:
    """Parse ``text``; return True if the sentence is followed by ``#``.

    Raises ListParseError on a syntax error.
    """
    parser = _Parser(text)
    parser.sentence()
    return parser.lookahead == "#"


def _read_token(prompt: str) -> str:
    try:
        line = input(prompt)
    except EOFError:
        return ""
    parts = line.split()
    return parts[0] if parts else ""


def main(argv: Sequence[str] | None = None) -> int:
    """Read an expression and report whether it parses."""
    text = _read_token("Enter an expression: ")
    try:
        complete = parse_list(text)
    except ListParseError as error:
        print(error)
        return 1
    print("Parsing successful: Input is valid." if complete else "Parsing failed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())