"""Column metadata providers.

The converter never talks to a database. It consumes, per source (table),
a mapping from column name to ColumnMetadata supplied by a provider.

Key Components:
    - ColumnMetadataProvider: Abstract provider interface
    - InMemoryColumnProvider: Provider backed by a dictionary of tables
    - FileColumnProvider: Provider loading tables from a YAML or JSON file

Example:
    >>> provider = InMemoryColumnProvider(
    ...     {"users": {"id": {"data_type": "integer", "is_auto_increment": True}}}
    ... )
    >>> provider.columns_for("users")["id"].data_type  # 'integer'
"""

from __future__ import annotations

import abc
import logging
import pathlib
from typing import Any, Mapping

from suthing import FileHandle

from dbjsonschema.architecture.column import ColumnMetadata
from dbjsonschema.errors import SourceNotFoundError

logger = logging.getLogger(__name__)

ColumnsInput = Mapping[str, ColumnMetadata | Mapping[str, Any]]


class ColumnMetadataProvider(abc.ABC):
    """Supplies column metadata for named sources."""

    @abc.abstractmethod
    def columns_for(self, source: str) -> dict[str, ColumnMetadata]:
        """Return the columns of a source, keyed by column name.

        Args:
            source: Source (table) identifier

        Returns:
            dict: column name -> ColumnMetadata, in column order

        Raises:
            SourceNotFoundError: If the source is unknown
        """
        pass

    @abc.abstractmethod
    def sources(self) -> list[str]:
        """Names of all sources this provider knows about."""
        pass


class InMemoryColumnProvider(ColumnMetadataProvider):
    """Provider serving tables held in memory.

    Raw column dictionaries are validated into ColumnMetadata once, on
    construction, so malformed metadata fails early.
    """

    def __init__(self, tables: Mapping[str, ColumnsInput]):
        self._tables: dict[str, dict[str, ColumnMetadata]] = {
            source: {
                name: ColumnMetadata.model_validate(column)
                for name, column in columns.items()
            }
            for source, columns in tables.items()
        }

    def columns_for(self, source: str) -> dict[str, ColumnMetadata]:
        try:
            columns = self._tables[source]
        except KeyError:
            raise SourceNotFoundError(source, self._tables) from None
        return dict(columns)

    def sources(self) -> list[str]:
        return list(self._tables)


class FileColumnProvider(InMemoryColumnProvider):
    """Provider reading ``{source: {column: metadata}}`` from a YAML/JSON file."""

    def __init__(self, path: str | pathlib.Path):
        self.path = pathlib.Path(path)
        tables = FileHandle.load(self.path)
        if not isinstance(tables, dict):
            raise ValueError(
                f"Expected mapping of sources in {self.path}, got {type(tables)}"
            )
        logger.debug(f"Loaded {len(tables)} source(s) from {self.path}")
        super().__init__(tables)
