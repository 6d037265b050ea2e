import io

import pytest

from compilerlab.list_parser import ListParseError, main, parse_list


@pytest.mark.parametrize("text", ["a#", "(a)#", "(a,(a,a))#", "a#trailing"])
def test_valid_lists(text):
    assert parse_list(text) is True


@pytest.mark.parametrize("text", ["a", "(a,a)", "aa#"])
def test_missing_end_marker_fails(text):
    assert parse_list(text) is False


def test_unclosed_list():
    with pytest.raises(ListParseError) as info:
        parse_list("(a,a#")
    assert str(info.value) == "Error: expected ')' at Position 4"


def test_unexpected_symbol():
    with pytest.raises(ListParseError) as info:
        parse_list("b#")
    assert info.value.position == 0
    assert "Unexpected symbol b" in str(info.value)


def test_dangling_comma():
    with pytest.raises(ListParseError) as info:
        parse_list("(a,)#")
    assert info.value.position == len("(a,")


def test_main_success(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(a,a)#\n"))
    assert main() == 0
    assert "Parsing successful: Input is valid." in capsys.readouterr().out


def test_main_failure(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(a,a)\n"))
    assert main() == 0
    assert "Parsing failed" in capsys.readouterr().out


def test_main_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))
    assert main() == 1
    assert "Unexpected symbol x" in capsys.readouterr().out