"""
tableops.formats — Convert between plain Python data and tables.

Supported conversions:
    • Python objects (dict, list, tuple, scalars, None) ↔ Table
"""

import logging
from typing import Any

from .core import Absent, Table, is_absent, is_sequence

logger = logging.getLogger(__name__)


def from_python(obj: Any) -> Any:
    """
    Convert a Python object to tables.

    Mapping:
        list/tuple → Table.seq(...)   (positions 1..n)
        dict       → Table(...)
        None       → Absent
        anything else is returned unchanged

    Nested structures are converted recursively.  None inside a list
    leaves a hole, since a table cannot hold "no value".
    """
    if obj is None:
        return Absent
    if isinstance(obj, (list, tuple)):
        return Table.seq(*(from_python(item) for item in obj))
    if isinstance(obj, dict):
        return Table({k: from_python(v) for k, v in obj.items()})
    return obj


def to_python(value: Any) -> Any:
    """
    Convert tables back to plain Python objects.

    Dense sequences become lists, every other table a dict, Absent
    becomes None.  Inverse of from_python for nested lists and dicts
    without None values or empty dicts (an empty table reads back as a
    list).
    """
    if is_absent(value):
        return None
    if isinstance(value, Table):
        if is_sequence(value):
            if not value.entries:
                logger.debug("to_python: empty table rendered as an empty list")
            return [to_python(item) for _, item in value.positions()]
        return {k: to_python(v) for k, v in value.entries.items()}
    return value
