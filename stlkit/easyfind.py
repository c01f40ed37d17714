"""Locate a value inside a sized container."""

from __future__ import annotations

from collections import deque
from collections.abc import Collection, Sequence
from typing import Any


class EmptyContainerError(RuntimeError):
    """Raised when searching a container that holds nothing."""


class ValueNotFoundError(RuntimeError):
    """Raised when the searched value is absent from the container."""


def easyfind(container: Collection[Any], value: Any) -> int:
    """Return the position of the first element equal to ``value``.

    Positions follow the container's iteration order.
    """
    if len(container) == 0:
        raise EmptyContainerError("Container is empty")
    for position, item in enumerate(container):
        if item == value:
            return position
    raise ValueNotFoundError("Value not found in container")


def _demo(title: str, container: Sequence[int], values: list[int]) -> None:
    print(f"Testing with {title}")
    try:
        for value in values:
            position = easyfind(container, value)
            print(f"Found value: {container[position]}")
    except RuntimeError as exc:
        print(f"Error: {exc}")


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration searches and print their results."""
    _demo("list", [10, 20, 30], [20, 40])
    print()
    _demo("deque", deque([3, 6, 9]), [6])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())