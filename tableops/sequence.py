"""
tableops.sequence — Positional operations on array-like tables.

Non-mutating (return a new table or plain values):
    spread, reduce, filter, map, concat, slice

Mutating (change their argument in place):
    reverse   returns the same table
    shift     returns the removed element, or Absent
    unshift   returns the new length
    push      returns None

Positions are 1-based.  The guards run before any mutation, so a call
that raises leaves its arguments untouched.
"""

import logging
from typing import Any, Callable

from .core import (
    Absent, Table,
    is_absent, is_array, native_keys,
    _require_array, _require_callable, _require_table,
)
from .errors import PreconditionError

logger = logging.getLogger(__name__)

_NO_INITIAL = object()


# ═══════════════════════════════════════════════════════════════════
#  READING
# ═══════════════════════════════════════════════════════════════════

def spread(seq: Table, start: int = 1, stop: int = None) -> tuple:
    """
    Unpack positions start..stop (inclusive) into a tuple.

        spread(Table.seq("a", "b", "c"))        → ("a", "b", "c")
        spread(Table.seq("a", "b", "c"), 2)     → ("b", "c")
        spread(Table.seq("a", "b", "c"), 3, 2)  → ()

    Positions past the end yield Absent.
    """
    _require_array(seq, "spread")
    if stop is None:
        stop = len(seq)
    if start > stop:
        return ()
    return tuple(seq[position] for position in range(start, stop + 1))


def reduce(seq: Table, callback: Callable, initial: Any = _NO_INITIAL) -> Any:
    """
    Left fold over positions 1..len(seq).

    callback(accumulator, element, position, seq) returns the next
    accumulator.  Without `initial`, element 1 seeds the accumulator and
    folding starts at position 2; an empty sequence then has nothing to
    seed with and raises PreconditionError.
    """
    _require_array(seq, "reduce")
    _require_callable(callback, "reduce")

    n = len(seq)
    if initial is _NO_INITIAL:
        if n == 0:
            raise PreconditionError("reduce: empty array, no initial value")
        accumulator = seq[1]
        first = 2
    else:
        accumulator = initial
        first = 1

    for position in range(first, n + 1):
        accumulator = callback(accumulator, seq[position], position, seq)
    return accumulator


def filter(container: Table, predicate: Callable) -> Table:
    """
    New sequence of every value for which predicate(value, key, container)
    is true, packed densely from position 1.

    Accepts any table; mapping tables are walked in insertion order.
    """
    _require_table(container, "filter")
    _require_callable(predicate, "filter", "predicate")

    result = Table()
    n = 0
    for key in native_keys(container):
        value = container[key]
        if predicate(value, key, container):
            n += 1
            result[n] = value
    return result


def map(seq: Table, callback: Callable) -> Table:
    """
    New sequence of callback(element, position, seq) results.

    Results that are absent (None or Absent) are skipped rather than
    leaving a hole, so the output can be shorter than the input:

        map(Table.seq(1, 2, 3), lambda x, *_: x * 2 if x > 1 else None)
            → Table.seq(4, 6)
    """
    _require_array(seq, "map")
    _require_callable(callback, "map")

    result = Table()
    n = 0
    for position in native_keys(seq):
        mapped = callback(seq[position], position, seq)
        if is_absent(mapped):
            continue
        n += 1
        result[n] = mapped
    return result


# ═══════════════════════════════════════════════════════════════════
#  BUILDING
# ═══════════════════════════════════════════════════════════════════

def concat(source: Any, *rest: Any) -> Table:
    """
    Concatenate into a new sequence, flattening array-like arguments one
    level.

        concat(1, Table.seq(2, 3), 4)   → Table.seq(1, 2, 3, 4)

    Non-array values (scalars and mapping tables) are appended as single
    elements.  Absent arguments are skipped.  Inputs are never mutated.
    """
    result = Table()
    n = 0
    for part in (source, *rest):
        if is_array(part):
            for _, value in part.positions():
                n += 1
                result[n] = value
        elif not is_absent(part):
            n += 1
            result[n] = part
    return result


def slice(seq: Table, start: int = None, end: int = None) -> Table:
    """
    New sequence of positions start..end-1.

    `start` defaults to 1 and `end` to len(seq) + 1.  A bound v < 1 is
    read as max(len(seq) - |v|, 1): it saturates toward position 1
    instead of counting back from the true end.

        slice(Table.seq(1, 2, 3, 4, 5), 2, 4)   → Table.seq(2, 3)
        slice(Table.seq(1, 2, 3, 4, 5), -2)     → Table.seq(3, 4, 5)
    """
    _require_table(seq, "slice")
    n = len(seq)

    if start is None:
        start = 1
    if end is None:
        end = n + 1
    if start < 1:
        start = max(n - abs(start), 1)
    if end < 1:
        end = max(n - abs(end), 1)
    end = min(end, n + 1)

    result = Table()
    for offset, position in enumerate(range(start, end), 1):
        result[offset] = seq[position]
    return result


# ═══════════════════════════════════════════════════════════════════
#  MUTATING
# ═══════════════════════════════════════════════════════════════════

def reverse(seq: Table) -> Table:
    """Reverse positions 1..len(seq) in place and return `seq`."""
    _require_table(seq, "reverse")
    entries = seq.entries
    i, j = 1, len(seq)
    while i < j:
        entries[i], entries[j] = entries[j], entries[i]
        i += 1
        j -= 1
    return seq


def shift(seq: Table) -> Any:
    """
    Remove and return the element at position 1, moving the rest down.

    An empty sequence is left alone and Absent is returned.
    """
    _require_table(seq, "shift")
    n = len(seq)
    if n == 0:
        return Absent

    entries = seq.entries
    head = entries[1]
    for position in range(1, n):
        entries[position] = entries[position + 1]
    del entries[n]
    return head


def unshift(seq: Table, *values: Any) -> int:
    """
    Insert `values` at the front, keeping their order, and return the
    new length.

        t = Table.seq(3); unshift(t, 1, 2)   → 3, t == Table.seq(1, 2, 3)

    Absent values are skipped, as in push.  Only positions 1..len(seq)
    move; keys just past the border are overwritten:

        t = Table({1: "a", 2: "b", 4: "d"}); unshift(t, "x", "y")
            → t == Table.seq("x", "y", "a", "b")
    """
    _require_table(seq, "unshift")
    values = [value for value in values if not is_absent(value)]
    n = len(seq)
    k = len(values)
    if k == 0:
        return n

    entries = seq.entries
    for position in range(n, 0, -1):
        entries[position + k] = entries[position]
    for offset, value in enumerate(values, 1):
        entries[offset] = value
    return len(seq)


def push(seq: Table, *values: Any) -> None:
    """Append `values`, in order, to the end of `seq`."""
    _require_table(seq, "push")
    entries = seq.entries
    n = len(seq)
    for value in values:
        if is_absent(value):
            continue
        n += 1
        entries[n] = value
        # Filling a gap can join the border to a later run.
        while (n + 1) in entries:
            n += 1
