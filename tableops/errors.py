"""
tableops.errors — Exceptions raised by table operations.

Every error is raised synchronously by the operation that detects it,
before any argument is mutated.
"""


class TableError(Exception):
    """Base class for all tableops errors."""


class ShapeError(TableError, TypeError):
    """A table (or an array-like table) was required and something else was given."""


class PreconditionError(TableError, ValueError):
    """An operation-specific precondition does not hold."""


def kind_of(value) -> str:
    """Short human-readable description of a value's runtime kind."""
    # Local import: core imports this module.
    from .core import Table, is_absent, is_array

    if is_absent(value):
        return "absent"
    if isinstance(value, Table):
        return "array table" if is_array(value) else "mapping table"
    return type(value).__name__
