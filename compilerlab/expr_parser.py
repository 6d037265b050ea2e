"""A predictive parser for E -> T E', E' -> + T E' | e, T -> F T', T' -> * F T' | e, F -> (E) | id."""

from __future__ import annotations

from collections.abc import Sequence


class ParseError(Exception):
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
            raise ParseError(f"Error: expected '{expected}' at position {self.pos}", self.pos)
        self.pos += 1

    def expression(self) -> None:
        self.term()
        while self.lookahead == "+":
            self.match("+")
            self.term()

    def term(self) -> None:
        self.factor()
        while self.lookahead == "*":
            self.match("*")
            self.factor()

    def factor(self) -> None:
        if self.lookahead == "(":
            self.match("(")
            self.expression()
            self.match(")")
        elif self.lookahead == "i":
            self.match("i")
            if self.lookahead != "d":
                raise ParseError("Error: expected 'd' after 'i'", self.pos)
            self.match("d")
        else:
            raise ParseError(
                f"Error: unexpected symbol '{self.lookahead}' at position {self.pos}", self.pos
            )


def parse_expression(text: str) -> bool:
    """Parse ``text``; return True if all of it was consumed, False if input is left over.

    Raises ParseError on a syntax error.
    """
    parser = _Parser(text)
    parser.expression()
    return parser.lookahead == ""


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
        complete = parse_expression(text)
    except ParseError as error:
        print(error)
        return 1
    print("Parsing successful" if complete else "Parsing failed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())