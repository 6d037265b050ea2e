import io

import pytest

from compilerlab.stack_alloc import (
    MAX_FRAMES,
    ActivationStack,
    Frame,
    StackOverflowError,
    StackUnderflowError,
    main,
)


def test_push_pop_round_trip():
    stack = ActivationStack()
    frame = Frame("main", 3, "100")
    stack.push(frame)
    assert stack.pop() == frame
    assert len(stack) == 0


def test_frames_are_top_first():
    stack = ActivationStack()
    first = Frame("main", 1, "a")
    second = Frame("helper", 2, "b")
    stack.push(first)
    stack.push(second)
    assert stack.frames() == [second, first]


def test_overflow_at_capacity():
    stack = ActivationStack()
    for number in range(MAX_FRAMES):
        stack.push(Frame(f"f{number}", number, "r"))
    with pytest.raises(StackOverflowError):
        stack.push(Frame("extra", 0, "r"))
    assert len(stack) == MAX_FRAMES


def test_custom_capacity():
    stack = ActivationStack(capacity=1)
    stack.push(Frame("only", 0, "r"))
    with pytest.raises(StackOverflowError):
        stack.push(Frame("more", 0, "r"))


def test_underflow_on_empty():
    with pytest.raises(StackUnderflowError):
        ActivationStack().pop()


def test_frame_rendering():
    assert str(Frame("main", 2, "0x10")) == "Func: main | Vars: 2 | Ret: 0x10"


def test_main_session(monkeypatch, capsys):
    session = "1\nmain\n2\n100\n3\n2\n2\n4\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(session))
    assert main() == 0
    out = capsys.readouterr().out
    assert ">> main pushed." in out
    assert str(Frame("main", 2, "100")) in out
    assert "<< main popped." in out
    assert "Stack Underflow!" in out


def test_main_invalid_choice_and_eof(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n3\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "Invalid choice!" in out
    assert "Stack Empty." in out