import random

import pytest

from stlkit.span import NotEnoughNumbersError, Span, SpanFullError, main


def _filled(numbers):
    span = Span(len(numbers))
    for number in numbers:
        span.add_number(number)
    return span


def test_basic_example():
    span = _filled([6, 3, 17, 9, 11])
    assert span.shortest_span() == 2
    assert span.longest_span() == 14


def test_capacity_is_enforced():
    span = Span(2)
    span.add_number(1)
    span.add_number(2)
    with pytest.raises(SpanFullError, match="Cannot add number: Span is full"):
        span.add_number(3)
    assert len(span) == 2


def test_default_span_is_full():
    with pytest.raises(SpanFullError):
        Span().add_number(1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Span(-1)


def test_shortest_needs_two_numbers():
    span = _filled([42])
    with pytest.raises(NotEnoughNumbersError, match="shortest span"):
        span.shortest_span()


def test_longest_needs_two_numbers():
    with pytest.raises(NotEnoughNumbersError, match="longest span"):
        Span(3).longest_span()


def test_two_numbers_give_equal_spans():
    span = _filled([100, 40])
    assert span.shortest_span() == span.longest_span() == 60


def test_duplicates_have_zero_shortest_span():
    span = _filled([5, 9, 5])
    assert span.shortest_span() == 0


def test_many_random_numbers_invariants():
    rng = random.Random(1234)
    numbers = [rng.randint(-10**6, 10**6) for _ in range(10000)]
    span = _filled(numbers)
    assert len(span) == 10000
    assert span.longest_span() == max(numbers) - min(numbers)
    assert 0 <= span.shortest_span() <= span.longest_span()


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Error: Cannot add number: Span is full" in out
    assert "Error: Cannot find shortest span: not enough numbers" in out