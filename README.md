# stlkit

Three small container utilities:

- `stlkit.easyfind` finds a value in a sized container (anything with a
  length that can be iterated) and returns the position of the first match.
- `stlkit.span.Span` holds a bounded collection of integers and reports the
  shortest and longest distance between them.
- `stlkit.mutant_stack.MutantStack` is a last-in, first-out stack that can
  also be iterated from bottom to top.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

### easyfind

```python
from stlkit.easyfind import easyfind, EmptyContainerError, ValueNotFoundError

easyfind([10, 20, 30], 20)   # 1, position in iteration order

try:
    easyfind([10, 20, 30], 40)
except ValueNotFoundError as exc:
    print(exc)               # Value not found in container
```

An empty container raises `EmptyContainerError` ("Container is empty").
Both errors are subclasses of `RuntimeError`.

### Span

```python
from stlkit.span import Span, SpanFullError, NotEnoughNumbersError

sp = Span(5)
for n in (6, 3, 17, 9, 11):
    sp.add_number(n)

sp.shortest_span()   # 2
sp.longest_span()    # 14
len(sp)              # 5
sp.max_size          # 5
```

- `Span(max_size=0)` sets the capacity; a negative capacity raises `ValueError`.
- Adding to a full span raises `SpanFullError`.
- `shortest_span()` and `longest_span()` raise `NotEnoughNumbersError` when
  fewer than two numbers are held.

Both error classes are subclasses of `RuntimeError`.

### MutantStack

```python
from stlkit.mutant_stack import MutantStack

stack = MutantStack()
stack.push(5)
stack.push(17)
stack.top()          # 17
stack.pop()          # 17
len(stack)           # 1
stack.empty()        # False

for value in (3, 5, 737, 0):
    stack.push(value)

list(stack)              # [5, 3, 5, 737, 0], bottom to top
list(reversed(stack))    # [0, 737, 5, 3, 5], top to bottom
copy = stack.copy()      # independent stack with the same contents
MutantStack([1, 2, 3])   # build from any iterable, last item on top
```

`pop()` and `top()` on an empty stack raise `IndexError`.

## Demonstrations

Each module has a short demonstration that prints its results:

```
stlkit-easyfind
stlkit-span
stlkit-stack
```

`stlkit-easyfind` searches a list and a deque, `stlkit-span` runs a basic
case, a capacity overflow, a too-small span and 10000 random numbers, and
`stlkit-stack` pushes, pops, iterates and copies a stack. These commands take
no options.