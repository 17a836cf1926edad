"""Fixed-capacity stack and queue with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator
from typing import Any, TextIO


class OverflowError_(OverflowError):
    """Raised when a bounded container has no room left."""


class UnderflowError(LookupError):
    """Raised when taking from an empty container."""


class BoundedStack:
    """A LIFO stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        if len(self._items) >= self.capacity:
            raise OverflowError_("Stack is full. Overflow condition!")
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise UnderflowError("Stack is empty . Underflow condition! ")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise UnderflowError("Stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def display(self) -> str:
        """Return the contents bottom to top, or a note that the stack is empty."""
        if not self._items:
            return "Stack is empty"
        return "Stack elements are : " + "".join(f"{value} " for value in self._items)


class BoundedQueue:
    """A FIFO queue that accepts at most ``capacity`` values over its lifetime.

    Slots freed by dequeuing are not reused.
    """

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._enqueued = 0

    def enqueue(self, value: Any) -> None:
        if self._enqueued >= self.capacity:
            raise OverflowError_("Queue Overflow")
        self._items.append(value)
        self._enqueued += 1

    def dequeue(self) -> Any:
        if not self._items:
            raise UnderflowError("Queue Underflow")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def display(self) -> str:
        """Return the contents front to back, or a note that nothing was ever queued."""
        if self._enqueued == 0:
            return "Queue is empty"
        return "Queue elements are : " + "".join(f"{value} " for value in self._items)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int | None:
    token = next(tokens, None)
    if token is None:
        raise EOFError
    try:
        return int(token)
    except ValueError:
        return None


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _stack_menu(stack: BoundedStack, tokens: Iterator[str]) -> None:
    print("\n1) Insert element to stack")
    print("2) Delete element from stack")
    print("3) Display all the elements of stack")
    print("4) Exit")
    choice = None
    while choice != 4:
        _prompt("Enter your choice : ")
        choice = _read_int(tokens)
        if choice == 1:
            _prompt("Enter data : ")
            value = _read_int(tokens)
            if value is None:
                print("Invalid number")
            else:
                try:
                    stack.push(value)
                except OverflowError_ as error:
                    print(error)
        elif choice == 2:
            try:
                stack.pop()
            except UnderflowError as error:
                print(error.args[0])
        elif choice == 3:
            print(stack.display())
        elif choice == 4:
            print("Exit")
        else:
            print("Invalid choice")
        print()


def _queue_menu(queue: BoundedQueue, tokens: Iterator[str]) -> None:
    print("\n1) Insert element to queue")
    print("2) Delete element from queue")
    print("3) Display all the elements of queue")
    print("4) Exit")
    choice = None
    while choice != 4:
        _prompt("Enter your choice : ")
        choice = _read_int(tokens)
        if choice == 1:
            if queue._enqueued >= queue.capacity:
                print("Queue Overflow")
            else:
                print("Insert the element in queue : ")
                value = _read_int(tokens)
                if value is None:
                    print("Invalid number")
                else:
                    queue.enqueue(value)
        elif choice == 2:
            try:
                print(f"Element deleted from queue is : {queue.dequeue()}")
            except UnderflowError as error:
                _prompt(f"{error.args[0]} ")
        elif choice == 3:
            print(queue.display())
        elif choice == 4:
            print("Exit")
        else:
            print("Invalid choice")
        print()


def main(argv: list[str] | None = None) -> int:
    """Run the stack and queue menu on standard input."""
    parser = argparse.ArgumentParser(
        prog="stack-queue", description="Interactive bounded stack and queue."
    )
    parser.add_argument("--capacity", type=int, default=100, help="size of each container")
    args = parser.parse_args(argv)

    stack = BoundedStack(args.capacity)
    queue = BoundedQueue(args.capacity)
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print("1) Insert in stack")
            print("2) Insert in queue")
            print("3) Exit")
            _prompt("Enter your choice : ")
            choice = _read_int(tokens)
            if choice == 1:
                _stack_menu(stack, tokens)
            elif choice == 2:
                _queue_menu(queue, tokens)
            elif choice == 3:
                print("\nExit")
                break
            else:
                print("\nInvalid choice")
                print()
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())