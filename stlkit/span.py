"""A bounded collection of integers with span queries."""

from __future__ import annotations

import random


class SpanFullError(RuntimeError):
    """Raised when adding to a span that has reached its capacity."""


class NotEnoughNumbersError(RuntimeError):
    """Raised when a span query needs at least two numbers."""


class Span:
    """Holds at most ``max_size`` integers."""

    def __init__(self, max_size: int = 0) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._numbers: list[int] = []

    def __len__(self) -> int:
        return len(self._numbers)

    def add_number(self, number: int) -> None:
        """Store ``number``, failing if the span is already full."""
        if len(self._numbers) >= self.max_size:
            raise SpanFullError("Cannot add number: Span is full")
        self._numbers.append(number)

    def shortest_span(self) -> int:
        """Return the smallest distance between any two stored numbers."""
        if len(self._numbers) < 2:
            raise NotEnoughNumbersError(
                "Cannot find shortest span: not enough numbers"
            )
        ordered = sorted(self._numbers)
        return min(b - a for a, b in zip(ordered, ordered[1:]))

    def longest_span(self) -> int:
        """Return the distance between the smallest and largest numbers."""
        if len(self._numbers) < 2:
            raise NotEnoughNumbersError(
                "Cannot find longest span: not enough numbers"
            )
        return max(self._numbers) - min(self._numbers)


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration scenarios and print their results."""
    print("== Basic test ==")
    try:
        span = Span(5)
        for number in (6, 3, 17, 9, 11):
            span.add_number(number)
        print(f"Shortest span: {span.shortest_span()}")
        print(f"Longest span: {span.longest_span()}")
    except RuntimeError as exc:
        print(f"Error: {exc}")

    print("\n== Capacity test ==")
    try:
        span = Span(2)
        for number in (1, 2, 3):
            span.add_number(number)
    except RuntimeError as exc:
        print(f"Error: {exc}")

    print("\n== Fewer than two numbers test ==")
    try:
        span = Span(1)
        span.add_number(42)
        print(f"Shortest span: {span.shortest_span()}")
    except RuntimeError as exc:
        print(f"Error: {exc}")

    print("\n== 10000 random numbers test ==")
    try:
        span = Span(10000)
        for _ in range(10000):
            span.add_number(random.randint(0, 2**31 - 1))
        print(f"Shortest span: {span.shortest_span()}")
        print(f"Longest span: {span.longest_span()}")
    except RuntimeError as exc:
        print(f"Error: {exc}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())