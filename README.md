# pestkit

Small building blocks for writing PEG-style parsers by hand. The package has
no dependencies outside the standard library.

## What is inside

- `pestkit.position.Position` is a cursor into an input string. Offsets count
  characters (code points). A position is created with `Position(input, pos)`,
  which raises `ValueError` if `pos` is outside the input, or with
  `Position.from_start(input)`. Its `input` and `pos` properties give the
  input and the offset.

  The matching methods move the cursor in place. Each returns `True` on
  success. On failure it returns `False` and leaves the cursor where it was:
  - `match_string(string)` matches a literal string.
  - `match_insensitive(string)` matches a string, ignoring ASCII case.
  - `match_range(start, end)` matches one character in the inclusive range.
  - `match_char_by(predicate)` matches one character that `predicate` accepts.
  - `skip(n)` moves forward `n` characters.
  - `skip_back(n)` moves back `n` characters.

  `skip_until(strings)` moves to the first place where any of the strings
  begins. If none is found, it moves to the end and returns `False`.

  `line_col()` returns the 1-based line and column. `\n` and `\r\n` each end a
  line; a lone `\r` counts as one column. `line_of()` returns the whole line
  that holds the cursor, line break included. `find_line_start()` and
  `find_line_end()` give that line's bounds. `at_start()` and `at_end()` test
  the cursor against the ends of the input. `copy()` returns an independent
  cursor.

  Positions compare and hash by the identity of their input and by their
  offset. Ordering positions over different input objects raises
  `ValueError`.
- `pestkit.span.Span` is a `start`..`end` range over an input. Building one
  with invalid bounds raises `ValueError`. `as_str()` returns its text.
  `start_pos()`, `end_pos()` and `split()` return its bounding positions.
  `lines()` yields every whole line the span touches. `Position.span(other)`
  builds a span between two positions on the same input object, and raises
  `ValueError` if the inputs differ.
- `pestkit.stack.Stack` is a stack that can be rewound:
  - `push`, `pop`, `peek`, `is_empty`, `len()` and indexing or slicing work as
    usual. `pop` and `peek` return `None` when the stack is empty.
  - `snapshot()` remembers the current state.
  - `restore()` rewinds to the most recent snapshot, or empties the stack if
    there is none.
  - `clear_snapshot()` drops the most recent snapshot without rewinding.
- `pestkit.token.Token` is a frozen record of `kind`, `rule` and `pos`. Its
  `kind` is a `TokenKind`, either `START` or `END`, and marks where a matched
  rule opens or closes.
- `pestkit.prec_climber` folds a flat sequence of operands and infix operators
  into a result using precedence climbing. It provides `Assoc` (`LEFT`,
  `RIGHT`), `Operator` and `PrecClimber`.

## Installation

```
pip install pestkit
```

## Examples

Positions and spans:

```python
from pestkit.position import Position

pos = Position("a\nbc", 0)
pos.match_string("a\n")    # True, the cursor moves past the match
pos.line_col()             # (2, 1)
pos.line_of()              # "bc"

start = Position.from_start("hello world")
end = start.copy()
end.skip(5)
start.span(end).as_str()   # "hello"
```

Snapshots on a stack:

```python
from pestkit.stack import Stack

stack = Stack()
stack.push("a")
stack.snapshot()
stack.pop()
stack.restore()
stack.peek()               # "a"
```

Precedence climbing:

```python
from pestkit.prec_climber import Assoc, Operator, PrecClimber

climber = PrecClimber([
    Operator("plus", Assoc.LEFT) | Operator("minus", Assoc.LEFT),
    Operator("times", Assoc.LEFT),
    Operator("power", Assoc.RIGHT),
])
```

`climber.climb(pairs, primary, infix)` takes an iterable of pairs. Each pair
must have a `rule` attribute. The sequence starts with an operand and then
alternates operator and operand. `climb` calls `primary` on each operand and
combines results through `infix(lhs, op, rhs)`, and it respects each
operator's precedence and associativity. In the list passed to `PrecClimber`,
operators go from lowest to highest precedence, and operators joined with `|`
share one level.

`climb` raises `ValueError` in two cases: when `pairs` is empty, and when an
operator is not followed by an operand.

To build a climber from a table of `(rule, precedence, assoc)` tuples, use
`PrecClimber.from_table(...)`. Precedence starts at 1.

## What it does not do

pestkit has no grammar language, no parser generator and no parse driver. It
does not produce tokens or pair trees by itself. You write the parsing
functions, and you use these pieces to track the cursor, backtrack, record
tokens and fold expressions.

## Running the tests

```
pip install -e ".[test]"
pytest
```