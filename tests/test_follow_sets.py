import io

import pytest

from compilerlab.follow_sets import compute_follow, main, parse_productions

SAMPLE_LINES = ["E=TD", "D=+TD", "D=$", "T=FS", "S=*FS", "S=$", "F=(E)", "F=a"]


@pytest.fixture
def grammar():
    return parse_productions(SAMPLE_LINES)


def test_follow_of_start_symbol(grammar):
    assert compute_follow(grammar, "E") == ("$", ")")


def test_follow_of_term(grammar):
    assert compute_follow(grammar, "T") == ("+", "$", ")")


def test_follow_of_factor(grammar):
    assert compute_follow(grammar, "F") == ("*", "+", "$", ")")


def test_tail_symbols_inherit_follow(grammar):
    assert compute_follow(grammar, "D") == compute_follow(grammar, "E")
    assert compute_follow(grammar, "S") == compute_follow(grammar, "T")


def test_no_duplicates(grammar):
    for symbol in "EDTSF":
        result = compute_follow(grammar, symbol)
        assert len(set(result)) == len(result)


def test_unused_symbol_has_empty_follow(grammar):
    assert compute_follow(grammar, "X") == ()


def test_start_symbol_gets_end_marker():
    assert compute_follow([("A", "b")], "A")[0] == "$"


def test_parse_productions_skips_blank_lines():
    assert parse_productions(["E=TD", "", " F=a "]) == [("E", "TD"), ("F", "a")]


def test_parse_productions_rejects_malformed():
    with pytest.raises(ValueError):
        parse_productions(["E->TD"])


def test_main_prints_follow_sets(monkeypatch, capsys, grammar):
    text = f"{len(SAMPLE_LINES)}\n" + "\n".join(SAMPLE_LINES) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main() == 0
    out = capsys.readouterr().out
    report = [line for line in out.splitlines() if "FOLLOW(" in line]
    assert len(report) == 5
    e_line = next(line for line in report if "FOLLOW(E)" in line)
    for item in compute_follow(grammar, "E"):
        assert f" {item} " in e_line


def test_main_rejects_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\nE=TD\n"))
    assert main() == 1