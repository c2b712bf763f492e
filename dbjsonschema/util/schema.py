"""Helpers computing individual JSON Schema property keywords.

Key Components:
    - resolve_range: Min/max bounds of a column from the dialect length map
    - decimal_pattern: Regular expression matching a (precision, scale) decimal
    - describe_property: Human readable description of a computed property
"""

from __future__ import annotations

import random
from typing import Any

from dbjsonschema.architecture.column import ColumnMetadata
from dbjsonschema.dialect.onto import LengthBounds, SignedRange
from dbjsonschema.onto import NULL_TYPE, JsonType


def resolve_range(
    column: ColumnMetadata,
    bounds: LengthBounds,
    auto_increment_minimum: int = 1,
) -> tuple[int, int]:
    """Resolve the (min, max) bounds of a column.

    Unsigned columns use the unsigned bounds, signed ones the signed bounds;
    flat bounds apply regardless of signedness. Auto-increment columns never
    start below ``auto_increment_minimum``.

    Args:
        column: Column metadata
        bounds: Length map entry of the column data type
        auto_increment_minimum: Minimum forced on auto-increment columns

    Returns:
        tuple: (minimum, maximum)
    """
    if isinstance(bounds, SignedRange):
        low, high = bounds.unsigned if column.is_unsigned else bounds.signed
    else:
        low, high = bounds

    if column.is_auto_increment:
        low = auto_increment_minimum
    return low, high


def decimal_pattern(precision: int, scale: int) -> str:
    """Pattern accepting decimals with at most ``precision`` digits, ``scale`` of them fractional."""
    return rf"^\d{{1,{precision - scale}}}\.\d{{0,{scale}}}$"


def _split_nullable(type_value: str | list[str]) -> tuple[str, bool]:
    if isinstance(type_value, list):
        members = [t for t in type_value if t != NULL_TYPE]
        return (members[0] if members else NULL_TYPE), len(members) < len(type_value)
    return type_value, False


def describe_property(
    name: str,
    prop: dict[str, Any],
    rng: random.Random | None = None,
) -> str:
    """Generate a somewhat logical description of a property.

    Numeric properties with a maximum get an example value: the default when
    there is one, otherwise a random integer below the maximum. Pass a seeded
    ``rng`` for reproducible output.

    Args:
        name: Property name used in the sentence
        prop: Computed property
        rng: Random generator for example values

    Returns:
        str: Description, empty when the type cannot be described
    """
    if not prop.get("type"):
        if prop.get("enum"):
            members = ", ".join(str(m) for m in prop["enum"])
            return f"Enum list type, one of - {members}"
        return ""

    base_type, optional = _split_nullable(prop["type"])
    if base_type == JsonType.OBJECT:
        return ""

    is_numeric = base_type in (JsonType.INTEGER, JsonType.NUMBER)
    word = "Numeric" if is_numeric else base_type.capitalize()
    if optional:
        word = f"Optional {word.lower()}"

    description = f"{word} type value for field {name}"

    if is_numeric and prop.get("maximum"):
        example = prop.get("default")
        if example is None:
            example = (rng or random).randrange(max(int(prop["maximum"]), 1))
        description += f" e.g. {example}"
    elif base_type == JsonType.STRING and prop.get("pattern"):
        description += f" with pattern {prop['pattern']} "

    return description
