"""
tableops
========

Array-like and mapping operations over a single generic container.

    is_array(Table.seq(1, 2, 3))                      → True
    map(Table.seq(1, 2, 3), lambda x, *_: x * 2)      → Table.seq(2, 4, 6)
    slice(Table.seq(1, 2, 3, 4, 5), -2)               → Table.seq(3, 4, 5)
    reconcile(Table({"a": 1}), Table({"a": 2, "b": 3}))
                                                      → Table({'a': 1, 'b': 3})

A Table is read as a SEQUENCE (keys 1..n, no gaps) or as a MAPPING
(arbitrary keys) depending on the operation.  Positions are 1-based.
Most operations return new tables; reverse, shift, unshift and push
mutate their argument in place.
"""

import logging

from tableops.core import (
    # Types
    Table,
    Absent,
    is_absent,
    # Classifier
    is_array,
    is_sequence,
)
from tableops.errors import TableError, ShapeError, PreconditionError
from tableops.sequence import (
    spread, reduce, filter, map, concat, slice,
    reverse, shift, unshift, push,
)
from tableops.mapping import find, copy, reconcile
from tableops.formats import from_python, to_python

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "Table", "Absent", "is_absent",
    "is_array", "is_sequence",
    "TableError", "ShapeError", "PreconditionError",
    "spread", "reduce", "filter", "map", "concat", "slice",
    "reverse", "shift", "unshift", "push",
    "find", "copy", "reconcile",
    "from_python", "to_python",
]
