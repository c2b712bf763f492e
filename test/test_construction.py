"""Tests for SchemaConverter construction and dialect table merging."""

import pytest
from pydantic import ValidationError

from dbjsonschema import (
    Dialect,
    InMemoryColumnProvider,
    InvalidDialectError,
    JsonType,
    MissingArgumentError,
    SchemaConverter,
)
from dbjsonschema.dialect import SignedRange, get_dialect_defaults


def test_missing_provider():
    with pytest.raises(MissingArgumentError, match="provider"):
        SchemaConverter(None, dialect="MySQL")


def test_missing_dialect(provider):
    with pytest.raises(MissingArgumentError, match="dialect"):
        SchemaConverter(provider, dialect="")


def test_invalid_dialect(provider):
    with pytest.raises(InvalidDialectError, match="allowed dialects - MySQL"):
        SchemaConverter(provider, dialect="Oracle")


def test_dialect_enum_accepted(provider):
    converter = SchemaConverter(provider, dialect=Dialect.MYSQL)
    assert converter.dialect == Dialect.MYSQL
    assert converter.provider is provider


def test_mapping_provider_is_wrapped():
    converter = SchemaConverter({"T": {"id": {"data_type": "integer"}}}, "MySQL")
    assert isinstance(converter.provider, InMemoryColumnProvider)
    assert converter.provider.sources() == ["T"]


def test_defaults_are_loaded(provider):
    converter = SchemaConverter(provider, dialect="MySQL")
    assert converter.type_map["varchar"] == JsonType.STRING
    assert converter.type_map["double precision"] == JsonType.NUMBER
    assert converter.length_type_map[JsonType.STRING] == ("minLength", "maxLength")
    assert converter.length_map["char"] == (0, 1)
    assert converter.pattern_map["year"] == r"^\d{4}$"
    assert dict(converter.format_map) == {}


def test_overrides_are_merged_over_defaults(provider):
    converter = SchemaConverter(
        provider,
        dialect="MySQL",
        type_map={"uuid": "string", "json": "string"},
        length_map={"char": [0, 36], "tinyint": {"signed": [-1, 1], "unsigned": [0, 2]}},
        length_type_map={"number": ["exclusiveMinimum", "exclusiveMaximum"]},
        pattern_map={"uuid": "^[0-9a-f-]{36}$"},
    )
    assert converter.type_map["uuid"] == JsonType.STRING
    assert converter.type_map["json"] == JsonType.STRING
    assert converter.type_map["varchar"] == JsonType.STRING
    assert converter.length_map["char"] == (0, 36)
    assert converter.length_map["tinyint"] == SignedRange(
        signed=(-1, 1), unsigned=(0, 2)
    )
    assert converter.length_type_map[JsonType.NUMBER] == (
        "exclusiveMinimum",
        "exclusiveMaximum",
    )
    assert converter.length_type_map[JsonType.INTEGER] == ("minimum", "maximum")
    assert converter.pattern_map["uuid"] == "^[0-9a-f-]{36}$"
    assert converter.pattern_map["date"] == r"^\d{4}-\d{2}-\d{2}$"


def test_overrides_do_not_leak_between_instances(provider):
    SchemaConverter(provider, dialect="MySQL", type_map={"uuid": "string"})
    converter = SchemaConverter(provider, dialect="MySQL")
    assert "uuid" not in converter.type_map
    assert "uuid" not in get_dialect_defaults("MySQL").type_map


def test_tables_are_read_only(provider):
    converter = SchemaConverter(provider, dialect="MySQL")
    with pytest.raises(TypeError):
        converter.type_map["uuid"] = JsonType.STRING


def test_invalid_type_override(provider):
    with pytest.raises(ValidationError):
        SchemaConverter(provider, dialect="MySQL", type_map={"uuid": "uuid"})


def test_overridden_type_is_converted():
    converter = SchemaConverter(
        {"T": {"id": {"data_type": "uuid"}}},
        dialect="MySQL",
        type_map={"uuid": "string"},
        length_map={"uuid": [36, 36]},
        pattern_map={"uuid": "^[0-9a-f-]{36}$"},
    )
    assert converter.convert("T")["properties"]["id"] == {
        "type": "string",
        "maxLength": 36,
        "pattern": "^[0-9a-f-]{36}$",
    }
