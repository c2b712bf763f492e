"""Lookup table shapes shared by all dialects."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import Field as PydanticField

from dbjsonschema.architecture.base import ConfigBaseModel
from dbjsonschema.onto import JsonType

Bounds = tuple[int, int]


class SignedRange(ConfigBaseModel):
    """Numeric bounds of a type whose range depends on signedness."""

    signed: Bounds
    unsigned: Bounds


LengthBounds = Bounds | SignedRange


class DialectDefaults(ConfigBaseModel):
    """Default conversion tables of one source dialect.

    Attributes:
        type_map: data type -> JSON Schema base type
        length_map: data type -> (min, max) or signed/unsigned bounds
        length_type_map: JSON type -> (min keyword, max keyword)
        pattern_map: data type -> regular expression of its literal format
        format_map: data type -> JSON Schema format keyword
    """

    type_map: dict[str, JsonType]
    length_map: dict[str, LengthBounds] = PydanticField(default_factory=dict)
    length_type_map: dict[JsonType, tuple[str, str]] = PydanticField(
        default_factory=dict
    )
    pattern_map: dict[str, str] = PydanticField(default_factory=dict)
    format_map: dict[str, str] = PydanticField(default_factory=dict)


PATTERN_MAP: Mapping[str, str] = MappingProxyType(
    {
        "date": r"^\d{4}-\d{2}-\d{2}$",
        "time": r"^\d{2}:\d{2}:\d{2}$",
        "year": r"^\d{4}$",
        "datetime": r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$",
        "timestamp": r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$",
    }
)


def invert_type_groups(groups: Mapping[JsonType, list[str]]) -> dict[str, JsonType]:
    """Flatten {json type: [data types]} into {data type: json type}."""
    return {
        data_type: json_type
        for json_type, data_types in groups.items()
        for data_type in data_types
    }
