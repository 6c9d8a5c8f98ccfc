"""Errors raised by the persistence layer.

Startup errors (StoreConnectionError, SchemaError) stop the process.
Per-request errors (WriteError, DecodeError, plain StoreError) are turned
into 500 responses by the app's exception handler.
"""


class StoreError(Exception):
    """Base class for failures talking to the backing store."""


class StoreConnectionError(StoreError):
    """The backing store could not be reached at startup."""


class SchemaError(StoreError):
    """The tables could not be created."""


class WriteError(StoreError):
    """An insert statement failed (storage full, constraint violation, ...)."""


class DecodeError(StoreError):
    """A stored timestamp is not valid RFC 3339."""

    def __init__(self, table: str, column: str, row_id, value):
        self.table = table
        self.column = column
        self.row_id = row_id
        self.value = value
        super().__init__(
            f"Cannot decode {table}.{column} for id={row_id}: {value!r} is not RFC 3339"
        )
