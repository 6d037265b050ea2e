"""A simulation of activation-record stack allocation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

MAX_FRAMES = 10
MENU = "\n1.Push  2.Pop  3.Display  4.Exit\nEnter choice: "


@dataclass(frozen=True)
class Frame:
    """One activation record: function name, local variable count, return address."""

    func: str
    vars: int
    ret: str

    def __str__(self) -> str:
        return f"Func: {self.func} | Vars: {self.vars} | Ret: {self.ret}"


class StackOverflowError(Exception):
    """Raised when pushing onto a full activation stack."""


class StackUnderflowError(Exception):
    """Raised when popping from an empty activation stack."""


class ActivationStack:
    """A bounded stack of activation records."""

    def __init__(self, capacity: int = MAX_FRAMES) -> None:
        self.capacity = capacity
        self._frames: list[Frame] = []

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def is_full(self) -> bool:
        return len(self._frames) >= self.capacity

    def push(self, frame: Frame) -> None:
        if self.is_full:
            raise StackOverflowError("Stack Overflow!")
        self._frames.append(frame)

    def pop(self) -> Frame:
        if not self._frames:
            raise StackUnderflowError("Stack Underflow!")
        return self._frames.pop()

    def frames(self) -> list[Frame]:
        """Return the frames from top to bottom."""
        return list(reversed(self._frames))


def _push_interactive(stack: ActivationStack) -> None:
    if stack.is_full:
        print("Stack Overflow!")
        return
    func = input("Enter Function Name: ").strip()
    try:
        local_vars = int(input("Enter Local Vars: ").strip())
    except ValueError:
        print("Invalid number!")
        return
    ret = input("Enter Return Addr: ").strip()
    stack.push(Frame(func, local_vars, ret))
    print(f">> {func} pushed.")


def _pop_interactive(stack: ActivationStack) -> None:
    try:
        frame = stack.pop()
    except StackUnderflowError as error:
        print(error)
        return
    print(f"<< {frame.func} popped.")


def _display(stack: ActivationStack) -> None:
    if not len(stack):
        print("Stack Empty.")
        return
    print("\n--- Stack (Top → Bottom) ---")
    for frame in stack.frames():
        print(frame)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive stack allocation menu."""
    stack = ActivationStack()
    actions = {"1": _push_interactive, "2": _pop_interactive, "3": _display}
    print("=== Stack Allocation Simulation ===")
    try:
        while True:
            choice = input(MENU).strip()
            if choice == "4":
                return 0
            action = actions.get(choice)
            if action is None:
                print("Invalid choice!")
            else:
                action(stack)
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())