"""
tableops.mapping — Key-space operations on tables of any shape.

    find        first value matching a predicate (keyed or positional)
    copy        shallow or deep duplicate
    reconcile   structural "fill in defaults" merge

RECONCILE RULES
───────────────

reconcile(target, defaults) starts from a shallow copy of `target`
and visits every key of `defaults`:

    key missing from target          → install default (deep copy if a table)
    default is a table, target too   → reconcile the two recursively
    default is a table, target not   → default wins (deep copy)
    default is a scalar              → target keeps its value

    reconcile({a: 1},      {a: 2, b: 3})       → {a: 1, b: 3}
    reconcile({a: {x: 1}}, {a: {x: 2, y: 3}})  → {a: {x: 1, y: 3}}

Subtrees of `target` that `defaults` never touches are shared with the
result, not copied.  Neither copy nor reconcile detects cycles; a cyclic
input recurses until Python raises RecursionError.
"""

import logging
from typing import Any, Callable, Optional

from .core import (
    Absent, Table,
    native_keys,
    _require_array, _require_callable, _require_container, _require_table,
)

logger = logging.getLogger(__name__)


def find(container: Table, predicate: Callable, start: Optional[int] = None) -> Any:
    """
    First value for which predicate(value, key, container) is true.

    Without `start`, every key is scanned in native order.  With
    `start`, the container must be array-like and positions
    start..len(container) are scanned in increasing order.

    Returns Absent when nothing matches.
    """
    _require_table(container, "find")
    _require_callable(predicate, "find", "predicate")

    if start is None:
        for key in native_keys(container):
            value = container[key]
            if predicate(value, key, container):
                return value
        return Absent

    _require_array(container, "find")
    for position in range(start, len(container) + 1):
        value = container[position]
        if predicate(value, position, container):
            return value
    return Absent


def copy(container: Table, deep: bool = False) -> Table:
    """
    New table with the same key/value pairs.

    Shallow (default): nested tables are shared with `container`.
    Deep: every nested table is replaced by its own deep copy.
    """
    _require_container(container, "copy")
    if not deep:
        result = Table()
        result.entries = dict(container.entries)
        return result
    logger.debug("copy: deep copy of a %d-key table", len(container.entries))
    return _deep_copy(container)


def _deep_copy(table: Table) -> Table:
    result = Table()
    for key, value in table.entries.items():
        if isinstance(value, Table):
            value = _deep_copy(value)
        result.entries[key] = value
    return result


def reconcile(target: Table, defaults: Table) -> Table:
    """Merge `defaults` into a copy of `target`; see module docstring."""
    _require_container(target, "reconcile")
    _require_container(defaults, "reconcile")
    return _reconcile(target, defaults, ())


def _reconcile(target: Table, defaults: Table, path: tuple) -> Table:
    result = copy(target)
    for key, default in defaults.entries.items():
        if key not in result:
            result[key] = _deep_copy(default) if isinstance(default, Table) else default
        elif isinstance(default, Table):
            current = result[key]
            if isinstance(current, Table):
                result[key] = _reconcile(current, default, path + (key,))
            else:
                logger.debug(
                    "reconcile: scalar %r at %s replaced by table default",
                    current, "/".join(str(p) for p in path + (key,)),
                )
                result[key] = _deep_copy(default)
    return result
