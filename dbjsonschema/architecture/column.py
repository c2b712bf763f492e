"""Column metadata consumed by the converter.

A ColumnMetadataProvider returns, for one table, a mapping from column name
to ColumnMetadata. The models here accept the loose shapes produced by
schema introspection (``"YES"``/``"NO"`` nullability, ``[precision, scale]``
lists) and normalize them on validation.
"""

from __future__ import annotations

from pydantic import ConfigDict, Field as PydanticField

from dbjsonschema.architecture.base import ConfigBaseModel

Scalar = str | int | float | bool


class DatabaseExpression(ConfigBaseModel):
    """Default value computed by the database, e.g. ``CURRENT_TIMESTAMP``.

    A column carrying such a default is not required in the produced schema,
    but the expression itself is never copied into the document.
    """

    expression: str


class ColumnExtra(ConfigBaseModel):
    """Additional column attributes."""

    model_config = ConfigDict(extra="ignore")

    unsigned: bool = False
    members: list[str] | None = PydanticField(
        default=None,
        alias="list",
        description="Ordered enum/set members.",
    )


class ColumnMetadata(ConfigBaseModel):
    """Column information from a relational table definition.

    Attributes:
        data_type: Dialect specific type name (e.g. "varchar", "bigint")
        is_nullable: Whether NULL is accepted
        default_value: Scalar default, database expression or None
        size: Maximum length, or (precision, scale) for decimal types
        is_auto_increment: Whether the value is generated by a sequence
        extra: Signedness and enum members
    """

    # introspection output carries keys the converter has no use for
    model_config = ConfigDict(extra="ignore")

    data_type: str
    is_nullable: bool = False
    default_value: Scalar | DatabaseExpression | None = None
    size: int | tuple[int, int] | None = None
    is_auto_increment: bool = False
    extra: ColumnExtra | None = None

    @property
    def has_default(self) -> bool:
        return self.default_value is not None

    @property
    def scalar_default(self) -> Scalar | None:
        """Default value suitable for the `default` keyword, if any."""
        if isinstance(self.default_value, DatabaseExpression):
            return None
        return self.default_value

    @property
    def is_unsigned(self) -> bool:
        return self.extra is not None and self.extra.unsigned

    @property
    def enum_members(self) -> list[str] | None:
        if self.extra is None:
            return None
        return self.extra.members

    @property
    def precision_scale(self) -> tuple[int, int] | None:
        """(precision, scale) pair for decimal columns, None otherwise."""
        if isinstance(self.size, tuple):
            return self.size
        return None

    @property
    def max_size(self) -> int | None:
        """Explicit maximum length, None when absent or pair-shaped."""
        if isinstance(self.size, int) and not isinstance(self.size, bool):
            return self.size
        return None
