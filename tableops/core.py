"""
tableops.core — Tables, absence, and the shape classifier
==========================================================

§1  ONE CONTAINER, TWO READINGS
───────────────────────────────

A Table is a single generic key→value container.  Each operation
decides how to read it:

    SEQUENCE   keys are exactly the positions 1..n, no gaps
               Table.seq("a", "b", "c")    →  {1: "a", 2: "b", 3: "c"}

    MAPPING    arbitrary keys, no positional contract
               Table({"name": "Alice", "age": 30})

Every sequence is also a mapping (its positions are keys).  Not every
mapping is a sequence.


§2  ABSENCE
───────────

`Absent` is the explicit "no value" result.  A table never stores it:

    t[k] = Absent     →  removes k
    t[k] = None       →  removes k
    t[missing_key]    →  Absent

so `is_absent(v)` is the single test for "nothing here", whether the
value came from a lookup miss or from a callback that returned None.


§3  LENGTH
──────────

len(t) is the table's border: the largest n such that positions
1..n are all present.  For a sequence this is its element count.  For
a sparse or non-1-based table it stops at the first gap:

    len(Table({1: "a", 2: "b", 4: "d"}))   →  2
    len(Table({2: "b", 3: "c"}))           →  0


§4  THE CLASSIFIER
──────────────────

is_array(t) is the weak, fast guard used before positional operations:
true iff `t` is a table whose every key is numeric.  It does NOT check
contiguity or 1-basing, so {2: "b", 7: "g"} passes.  Positional
operations that then assume contiguity see only positions 1..len(t).

is_sequence(t) is the strict check (keys exactly 1..n).  It is used
for display and format conversion, never as a guard.
"""

from typing import Any, Iterator, Optional

from .errors import PreconditionError, ShapeError, kind_of


# ═══════════════════════════════════════════════════════════════════
#  ABSENCE
# ═══════════════════════════════════════════════════════════════════

class _Absent:
    """Singleton type of `Absent`.  Not instantiated directly."""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Absent"

    def __reduce__(self):
        return (_Absent, ())


Absent = _Absent()


def is_absent(value: Any) -> bool:
    """True for `Absent` and for None."""
    return value is Absent or value is None


# ═══════════════════════════════════════════════════════════════════
#  TABLE
# ═══════════════════════════════════════════════════════════════════

class Table:
    """
    A mutable key→value container read as a sequence or as a mapping.

    Examples:
        Table.seq(1, 2, 3)                  # sequence [1, 2, 3]
        Table({"x": 1, "y": Table.seq()})   # mapping with a nested table
        Table()                             # empty (array-like)
    """
    __slots__ = ("entries",)

    def __init__(self, entries: Optional[dict] = None):
        self.entries: dict = {}
        if isinstance(entries, Table):
            entries = entries.entries
        if entries is not None:
            for key, value in entries.items():
                self[key] = value

    @classmethod
    def seq(cls, *items: Any) -> "Table":
        """Build a sequence holding `items` at positions 1..n."""
        table = cls()
        for position, item in enumerate(items, 1):
            table[position] = item
        return table

    # ── item access ──────────────────────────────────────────────

    def __getitem__(self, key: Any) -> Any:
        return self.entries.get(key, Absent)

    def __setitem__(self, key: Any, value: Any) -> None:
        if is_absent(value):
            self.entries.pop(key, None)
        else:
            self.entries[key] = value

    def __delitem__(self, key: Any) -> None:
        self.entries.pop(key, None)

    def __contains__(self, key: Any) -> bool:
        return key in self.entries

    def get(self, key: Any, default: Any = Absent) -> Any:
        return self.entries.get(key, default)

    # ── iteration ────────────────────────────────────────────────

    def __iter__(self) -> Iterator[Any]:
        return iter(self.entries)

    def keys(self):
        return self.entries.keys()

    def values(self):
        return self.entries.values()

    def items(self):
        return self.entries.items()

    def positions(self) -> Iterator[tuple[int, Any]]:
        """Yield (position, value) for positions 1..len(self)."""
        for position in range(1, len(self) + 1):
            yield position, self.entries[position]

    def __len__(self) -> int:
        n = 0
        while (n + 1) in self.entries:
            n += 1
        return n

    # ── comparison / display ─────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self.entries == other.entries

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        if self.entries and is_sequence(self):
            inner = ", ".join(repr(v) for _, v in self.positions())
            return f"Table.seq({inner})"
        return f"Table({self.entries!r})"


# ═══════════════════════════════════════════════════════════════════
#  SHAPE CLASSIFIER
# ═══════════════════════════════════════════════════════════════════

def _is_numeric_key(key: Any) -> bool:
    # bool is a subclass of int; True/False are not positions.
    return isinstance(key, (int, float)) and not isinstance(key, bool)


def is_array(value: Any) -> bool:
    """
    True iff `value` is a table whose every key is numeric.

    Permissive by contract: contiguity and 1-basing are not checked, so
    sparse numeric tables qualify.  Non-table input returns False and
    never raises.
    """
    if not isinstance(value, Table):
        return False
    return all(_is_numeric_key(key) for key in value.entries)


def is_sequence(value: Any) -> bool:
    """True iff `value` is a table whose keys are exactly 1..n."""
    if not isinstance(value, Table):
        return False
    return len(value) == len(value.entries)


def native_keys(table: Table) -> list:
    """
    Keys of `table` in its native enumeration order.

    Array-like tables are walked in ascending numeric order, every other
    table in insertion order.  The list is a snapshot, so callbacks may
    mutate the table without disturbing the walk.
    """
    if is_array(table):
        return sorted(table.entries)
    return list(table.entries)


# ═══════════════════════════════════════════════════════════════════
#  ARGUMENT GUARDS
# ═══════════════════════════════════════════════════════════════════

def _require_table(value: Any, op: str) -> Table:
    if not isinstance(value, Table):
        raise ShapeError(f"{op}: expected a table, got {kind_of(value)}")
    return value


def _require_array(value: Any, op: str) -> Table:
    if not is_array(value):
        raise ShapeError(f"{op}: expected an array-like table, got {kind_of(value)}")
    return value


def _require_callable(fn: Any, op: str, role: str = "callback") -> None:
    if not callable(fn):
        raise TypeError(f"{op}: {role} must be callable, got {type(fn).__name__}")


def _require_container(value: Any, op: str) -> Table:
    if not isinstance(value, Table):
        raise PreconditionError(f"{op}: expected a table, got {kind_of(value)}")
    return value
