"""dbjsonschema: relational table definitions as JSON Schema documents.

dbjsonschema takes the column metadata of a table (database type, length,
nullability, default value, enum members) and produces a JSON Schema
document describing the same record shape.

Key Features:
    - Built-in MySQL type, length and pattern tables with per-instance overrides
    - Required-field computation from nullability and defaults
    - Decimal columns as pattern-checked strings
    - Property exclusion, injection, merging, overwriting and renaming
    - Generated property descriptions

Example:
    >>> from dbjsonschema import SchemaConverter
    >>> converter = SchemaConverter(
    ...     {"users": {"id": {"data_type": "integer", "is_auto_increment": True}}},
    ...     dialect="MySQL",
    ... )
    >>> converter.convert("users")["properties"]["id"]
    {'type': 'integer', 'maximum': 2147483647}
"""

from .architecture import (
    ColumnExtra,
    ColumnMetadata,
    ConfigBaseModel,
    ConvertOptions,
    DatabaseExpression,
)
from .converter import SchemaConverter
from .dialect import DialectDefaults, get_dialect_defaults
from .errors import (
    DbJsonSchemaError,
    InvalidDialectError,
    MissingArgumentError,
    MissingSourceError,
    SourceNotFoundError,
    UnknownColumnTypeError,
)
from .onto import Dialect, JsonType, OverwriteAction
from .provider import (
    ColumnMetadataProvider,
    FileColumnProvider,
    InMemoryColumnProvider,
)

__all__ = [
    # Conversion
    "SchemaConverter",
    "ConvertOptions",
    # Metadata
    "ColumnExtra",
    "ColumnMetadata",
    "DatabaseExpression",
    "ColumnMetadataProvider",
    "FileColumnProvider",
    "InMemoryColumnProvider",
    # Dialects
    "Dialect",
    "DialectDefaults",
    "get_dialect_defaults",
    # Enums & base
    "ConfigBaseModel",
    "JsonType",
    "OverwriteAction",
    # Errors
    "DbJsonSchemaError",
    "InvalidDialectError",
    "MissingArgumentError",
    "MissingSourceError",
    "SourceNotFoundError",
    "UnknownColumnTypeError",
]
