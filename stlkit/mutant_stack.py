"""A stack whose contents can be iterated from bottom to top."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class MutantStack(Generic[T]):
    """Last-in, first-out stack that also supports iteration."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = list(items) if items is not None else []

    def push(self, value: T) -> None:
        """Place ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        """Return whether the stack holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def copy(self) -> MutantStack[T]:
        """Return an independent stack with the same contents."""
        return MutantStack(self._items)

    def __repr__(self) -> str:
        return f"MutantStack({self._items!r})"


def main(argv: list[str] | None = None) -> int:
    """Exercise the stack and print what happens."""
    mstack: MutantStack[int] = MutantStack()

    print("== Testing push and top ==")
    mstack.push(5)
    mstack.push(17)
    print(f"Top: {mstack.top()}")

    print("== Testing pop ==")
    mstack.pop()
    print(f"Size after pop: {len(mstack)}")

    print("== Adding more elements ==")
    for value in (3, 5, 737, 0):
        mstack.push(value)

    print("== Iterating over the stack ==")
    for value in mstack:
        print(value)

    print("== Testing copy ==")
    duplicate = mstack.copy()
    print(f"Top of the copy: {duplicate.top()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())