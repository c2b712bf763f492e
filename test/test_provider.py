import pytest
from pydantic import ValidationError

from dbjsonschema import (
    ColumnMetadata,
    DatabaseExpression,
    FileColumnProvider,
    InMemoryColumnProvider,
    SourceNotFoundError,
)


def test_file_provider_sources(provider):
    assert provider.sources() == ["Test", "Address", "Broken"]


def test_file_provider_columns(provider):
    columns = provider.columns_for("Address")
    assert list(columns) == ["id", "street", "postcode", "created_at"]
    assert all(isinstance(c, ColumnMetadata) for c in columns.values())


def test_metadata_normalization(provider):
    columns = provider.columns_for("Test")
    assert columns["datetime"].is_nullable is True
    assert columns["decimal"].size == (6, 2)
    assert columns["decimal"].precision_scale == (6, 2)
    assert columns["decimal"].max_size is None
    assert columns["binary"].max_size == 1
    assert columns["enum"].enum_members == ["X", "Y", "Z"]
    assert columns["tinyint"].is_unsigned
    assert not columns["char"].is_unsigned


def test_database_expression_default(provider):
    column = provider.columns_for("Test")["timestamp"]
    assert column.default_value == DatabaseExpression(expression="CURRENT_TIMESTAMP")
    assert column.has_default
    assert column.scalar_default is None


def test_falsy_scalar_default_counts(provider):
    column = provider.columns_for("Test")["smallint"]
    assert column.has_default
    assert column.scalar_default == 0


def test_unknown_source(provider):
    with pytest.raises(SourceNotFoundError) as excinfo:
        provider.columns_for("Nope")
    assert isinstance(excinfo.value, KeyError)
    assert "available sources - Address, Broken, Test" in str(excinfo.value)


def test_columns_for_returns_a_copy(provider):
    provider.columns_for("Address").pop("id")
    assert "id" in provider.columns_for("Address")


def test_in_memory_provider_validates_early():
    with pytest.raises(ValidationError):
        InMemoryColumnProvider({"T": {"id": {"is_nullable": False}}})


def test_in_memory_provider_ignores_unused_keys():
    provider = InMemoryColumnProvider(
        {"T": {"id": {"data_type": "integer", "accessor": "ident", "sequence": "s"}}}
    )
    assert provider.columns_for("T")["id"].data_type == "integer"


def test_in_memory_provider_accepts_models():
    column = ColumnMetadata(data_type="varchar", size=10)
    provider = InMemoryColumnProvider({"T": {"name": column}})
    assert provider.columns_for("T")["name"] == column


def test_file_provider_rejects_non_mapping(tmp_path):
    path = tmp_path / "tables.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="Expected mapping"):
        FileColumnProvider(path)


def test_file_provider_json(tmp_path):
    path = tmp_path / "tables.json"
    path.write_text('{"T": {"id": {"data_type": "integer"}}}')
    provider = FileColumnProvider(path)
    assert provider.columns_for("T")["id"].data_type == "integer"
