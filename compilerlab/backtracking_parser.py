"""A backtracking recognizer for S -> cAd#, A -> ab | a."""

from __future__ import annotations

from collections.abc import Sequence


def _match_a(text: str, position: int) -> int | None:
    """Try A -> ab, then A -> a; return the position after the match."""
    if text.startswith("ab", position):
        return position + 2
    if text.startswith("a", position):
        return position + 1
    return None


def accepts(text: str) -> bool:
    """Return True if ``text`` begins with a sentence of the grammar ended by ``#``."""
    if not text.startswith("c"):
        return False
    position = _match_a(text, 1)
    return position is not None and text.startswith("d#", position)


def _read_token(prompt: str) -> str:
    try:
        line = input(prompt)
    except EOFError:
        return ""
    parts = line.split()
    return parts[0] if parts else ""


def main(argv: Sequence[str] | None = None) -> int:
    """Read a string and report whether the grammar accepts it."""
    text = _read_token("Enter the input string: ")
    if accepts(text):
        print(f"String {text} belongs to the given Grammar.")
    else:
        print(f"String {text} does not belong to the given Grammar.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())