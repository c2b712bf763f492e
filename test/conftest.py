import logging
import random
from pathlib import Path

import pytest
from suthing import FileHandle

from dbjsonschema import FileColumnProvider, SchemaConverter

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def tables_path() -> Path:
    return Path(__file__).parent / "data" / "tables.yaml"


@pytest.fixture(scope="session")
def options_path() -> Path:
    return Path(__file__).parent / "data" / "options.yaml"


@pytest.fixture(scope="function")
def tables(tables_path) -> dict:
    return FileHandle.load(tables_path)


@pytest.fixture(scope="function")
def provider(tables_path) -> FileColumnProvider:
    return FileColumnProvider(tables_path)


@pytest.fixture(scope="function")
def converter(provider) -> SchemaConverter:
    return SchemaConverter(provider, dialect="MySQL", rng=random.Random(7))


@pytest.fixture()
def required_test_columns() -> list[str]:
    """Columns of source Test that are neither nullable nor defaulted."""
    return [
        "char",
        "bit",
        "int",
        "decimal",
        "time",
        "tinyint",
        "varbinary",
        "bigint",
        "year",
        "tinytext",
        "float",
        "mediumtext",
        "enum",
        "date",
        "binary",
        "blob",
        "longtext",
        "double",
        "numeric",
        "mediumint",
    ]
