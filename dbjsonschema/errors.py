"""Exceptions raised by dbjsonschema.

All conversion failures are immediate and non-recoverable: they are raised at
the point of detection and no partial document is returned.
"""

from __future__ import annotations

from collections.abc import Iterable


class DbJsonSchemaError(ValueError):
    """Base class for all dbjsonschema errors."""


class MissingArgumentError(DbJsonSchemaError):
    """A required construction argument was not supplied."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"missing required argument {argument}")


class InvalidDialectError(DbJsonSchemaError):
    """The requested source dialect has no built-in lookup tables."""

    def __init__(self, dialect: object, allowed: Iterable[str]):
        self.dialect = dialect
        self.allowed = sorted(allowed)
        super().__init__(
            f"given dialect '{dialect}' is not valid, "
            f"allowed dialects - {', '.join(self.allowed)}"
        )


class MissingSourceError(DbJsonSchemaError):
    """convert() was called without a source name."""

    def __init__(self):
        super().__init__("missing schema source")


class UnknownColumnTypeError(DbJsonSchemaError):
    """A column data type has no entry in the effective type map."""

    def __init__(self, source: str, column: str, data_type: str):
        self.source = source
        self.column = column
        self.data_type = data_type
        super().__init__(
            f"unknown data type - {data_type} (source: {source}, column: {column})"
        )


class SourceNotFoundError(DbJsonSchemaError, KeyError):
    """A column metadata provider does not know the requested source."""

    def __init__(self, source: str, available: Iterable[str] = ()):
        self.source = source
        self.available = sorted(available)
        message = f"unknown source '{source}'"
        if self.available:
            message += f", available sources - {', '.join(self.available)}"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])
