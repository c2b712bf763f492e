"""Core enumerations shared across dbjsonschema.

This module provides the string-based enumerations used throughout the
converter: supported source dialects, JSON Schema base types and the
actions available for property overwrites.

Key Components:
    - BaseEnum: Base class for string-based enumerations with flexible membership testing
    - Dialect: Source database dialects with built-in lookup tables
    - JsonType: JSON Schema base types a column can resolve to
    - OverwriteAction: How a caller supplied property is applied

Example:
    >>> "integer" in JsonType  # True
    >>> "frobnicate" in JsonType  # False
"""

from enum import EnumMeta

from strenum import StrEnum


class MetaEnum(EnumMeta):
    """Metaclass for flexible enumeration membership testing.

    Allows checking if a raw value is a valid member of an enum using the
    `in` operator, without instantiating the member first.
    """

    def __contains__(self, member: object) -> bool:
        if isinstance(member, self):
            return True
        try:
            self(member)
            return True
        except ValueError:
            return False


class BaseEnum(StrEnum, metaclass=MetaEnum):
    """Base class for string-based enumerations."""

    def __str__(self) -> str:
        """Return the enum value as string for proper serialization."""
        return self.value

    def __repr__(self) -> str:
        return self.value


class Dialect(BaseEnum):
    """Source database dialects with built-in type and length tables.

    Attributes:
        MYSQL: MySQL / MariaDB column types
    """

    MYSQL = "MySQL"


class JsonType(BaseEnum):
    """JSON Schema base types a database column resolves to.

    ENUM is a synthetic category: it travels through the conversion pipeline
    like any other type but is rendered as an `enum` list without a `type`
    keyword in the produced document.

    Attributes:
        STRING: Character, binary and temporal columns
        NUMBER: Decimal and floating point columns
        INTEGER: Integral columns
        ENUM: Columns restricted to a list of members
        OBJECT: Structured (JSON) columns
    """

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    ENUM = "enum"
    OBJECT = "object"

    @property
    def is_numeric(self) -> bool:
        return self in (JsonType.NUMBER, JsonType.INTEGER)


class OverwriteAction(BaseEnum):
    """How a caller supplied partial property is applied to a computed one.

    Attributes:
        MERGE: Layer the partial keys over the computed property
        OVERWRITE: Discard the computed property and use the partial as is
    """

    MERGE = "merge"
    OVERWRITE = "overwrite"


NULL_TYPE = "null"
"""JSON Schema type (and enum literal) used to widen nullable columns."""
