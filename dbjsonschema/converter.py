"""Relational table schema to JSON Schema conversion.

This module provides SchemaConverter, which walks the column metadata of a
table and produces an equivalent JSON Schema document. Conversion does not
include relationships between tables: each source is converted on its own.

Key Components:
    - SchemaConverter: Holds the effective dialect tables and converts sources

Example:
    >>> converter = SchemaConverter(provider, dialect="MySQL")
    >>> document = converter.convert(
    ...     "users",
    ...     decimals_to_pattern=True,
    ...     exclude_properties={"password"},
    ...     overwrite_schema_property_keys={"name": "full_name"},
    ... )
    >>> document["required"]  # ['id', 'name']
"""

from __future__ import annotations

import logging
import random
from copy import deepcopy
from types import MappingProxyType
from typing import Any, Mapping

from dbjsonschema.architecture.column import ColumnMetadata
from dbjsonschema.architecture.options import ConvertOptions
from dbjsonschema.dialect import DialectDefaults, get_dialect_defaults
from dbjsonschema.dialect.onto import LengthBounds
from dbjsonschema.errors import (
    MissingArgumentError,
    MissingSourceError,
    UnknownColumnTypeError,
)
from dbjsonschema.onto import NULL_TYPE, Dialect, JsonType, OverwriteAction
from dbjsonschema.provider import ColumnMetadataProvider, InMemoryColumnProvider
from dbjsonschema.util.schema import decimal_pattern, describe_property, resolve_range

logger = logging.getLogger(__name__)


class SchemaConverter:
    """Converts relational table definitions into JSON Schema documents.

    Dialect tables are resolved once, at construction: caller supplied maps
    are shallow-merged over the dialect defaults (caller keys win) and the
    merged tables are exposed read-only.

    Attributes:
        provider: Source of column metadata
        dialect: Source database dialect
    """

    def __init__(
        self,
        provider: ColumnMetadataProvider | Mapping[str, Any] | None,
        dialect: Dialect | str | None,
        type_map: Mapping[str, str] | None = None,
        length_map: Mapping[str, Any] | None = None,
        length_type_map: Mapping[str, Any] | None = None,
        pattern_map: Mapping[str, str] | None = None,
        format_map: Mapping[str, str] | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize the converter.

        Args:
            provider: Column metadata provider, or a mapping
                {source: {column: metadata}} served from memory
            dialect: Dialect whose tables are used as defaults, e.g. "MySQL"
            type_map: data type -> JSON type overrides
            length_map: data type -> bounds overrides
            length_type_map: JSON type -> (min keyword, max keyword) overrides
            pattern_map: data type -> pattern overrides
            format_map: data type -> format overrides
            rng: Random generator for description examples

        Raises:
            MissingArgumentError: If provider or dialect is missing
            InvalidDialectError: If the dialect has no built-in tables
        """
        if provider is None:
            raise MissingArgumentError("provider")
        if not dialect:
            raise MissingArgumentError("dialect")

        defaults = get_dialect_defaults(dialect)
        self.dialect = Dialect(dialect)

        if isinstance(provider, ColumnMetadataProvider):
            self.provider = provider
        else:
            self.provider = InMemoryColumnProvider(provider)

        tables = DialectDefaults(
            type_map={**defaults.type_map, **(type_map or {})},
            length_map={**defaults.length_map, **(length_map or {})},
            length_type_map={**defaults.length_type_map, **(length_type_map or {})},
            pattern_map={**defaults.pattern_map, **(pattern_map or {})},
            format_map={**defaults.format_map, **(format_map or {})},
        )
        self._type_map = MappingProxyType(
            {k: JsonType(v) for k, v in tables.type_map.items()}
        )
        self._length_map = MappingProxyType(dict(tables.length_map))
        self._length_type_map = MappingProxyType(
            {JsonType(k): tuple(v) for k, v in tables.length_type_map.items()}
        )
        self._pattern_map = MappingProxyType(dict(tables.pattern_map))
        self._format_map = MappingProxyType(dict(tables.format_map))
        self._rng = rng

    @property
    def type_map(self) -> Mapping[str, JsonType]:
        return self._type_map

    @property
    def length_map(self) -> Mapping[str, LengthBounds]:
        return self._length_map

    @property
    def length_type_map(self) -> Mapping[JsonType, tuple[str, str]]:
        return self._length_type_map

    @property
    def pattern_map(self) -> Mapping[str, str]:
        return self._pattern_map

    @property
    def format_map(self) -> Mapping[str, str]:
        return self._format_map

    def convert(
        self,
        source: str,
        options: ConvertOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        """Return a JSON Schema document equivalent to a source definition.

        Options may be given as a ConvertOptions instance, a mapping or
        keyword arguments; keyword arguments are layered over the mapping.

        Args:
            source: Source (table) name, e.g. "Address"
            options: Conversion rewrite rules
            **kwargs: ConvertOptions fields

        Returns:
            dict: JSON Schema document

        Raises:
            MissingSourceError: If source is empty
            UnknownColumnTypeError: If a column data type has no JSON type
        """
        if not source:
            raise MissingSourceError()

        options = self._build_options(options, kwargs)
        columns = self.provider.columns_for(source)

        required: list[str] = []
        properties: dict[str, dict[str, Any]] = {}

        for name, column in columns.items():
            if name in options.exclude_properties:
                logger.debug(f"Excluding column '{name}' of source '{source}'")
                continue

            prop, is_required = self._convert_column(source, name, column, options)
            if is_required:
                required.append(name)
            properties[name] = prop

        for name, prop in options.add_schema_properties.items():
            properties[name] = deepcopy(prop)

        properties = self._apply_overwrites(properties, options)

        document: dict[str, Any] = {
            "$schema": options.schema_declaration,
            "type": "object",
            "additionalProperties": options.allow_additional_properties,
            "required": required,
            "properties": properties,
        }
        if options.dependencies is not None:
            document["dependencies"] = deepcopy(options.dependencies)

        document.update(deepcopy(options.schema_overwrite))

        logger.debug(
            f"Converted source '{source}': {len(properties)} properties, "
            f"{len(required)} required"
        )
        return document

    @staticmethod
    def _build_options(
        options: ConvertOptions | Mapping[str, Any] | None, overrides: dict[str, Any]
    ) -> ConvertOptions:
        if isinstance(options, ConvertOptions):
            if not overrides:
                return options
            return ConvertOptions.model_validate(
                {**options.model_dump(), **overrides}
            )
        return ConvertOptions.model_validate({**(options or {}), **overrides})

    def _convert_column(
        self,
        source: str,
        name: str,
        column: ColumnMetadata,
        options: ConvertOptions,
    ) -> tuple[dict[str, Any], bool]:
        """Compute the property of one column and whether it is required."""
        json_type = self._type_map.get(column.data_type)
        if json_type is None:
            raise UnknownColumnTypeError(source, name, column.data_type)

        prop: dict[str, Any] = {}
        # enum columns are rendered by their member list alone
        if json_type != JsonType.ENUM:
            prop["type"] = json_type.value

        if column.data_type in self._format_map:
            prop["format"] = self._format_map[column.data_type]
        elif column.data_type in self._length_map:
            self._set_range(prop, column, json_type, options)

        is_required = options.is_required(
            name, nullable=column.is_nullable, has_default=column.has_default
        )

        if not options.ignore_property_defaults and column.scalar_default is not None:
            prop["default"] = column.scalar_default

        if json_type == JsonType.ENUM and column.enum_members is not None:
            prop["enum"] = list(column.enum_members)

        if column.is_nullable and not is_required:
            if json_type == JsonType.ENUM:
                if "enum" in prop:
                    prop["enum"].append(NULL_TYPE)
            else:
                prop["type"] = [json_type.value, NULL_TYPE]

        if (
            options.decimals_to_pattern
            and json_type == JsonType.NUMBER
            and column.precision_scale is not None
        ):
            prop["type"] = JsonType.STRING.value
            prop["pattern"] = decimal_pattern(*column.precision_scale)

        if column.data_type in self._pattern_map:
            prop["pattern"] = self._pattern_map[column.data_type]

        if options.has_schema_property_description and not prop.get("description"):
            label = options.overwrite_schema_property_keys.get(name, name)
            prop["description"] = describe_property(label, prop, rng=self._rng)

        logger.debug(
            f"Column '{name}' ({column.data_type}) -> {json_type}, "
            f"required={is_required}"
        )
        return prop, is_required

    def _set_range(
        self,
        prop: dict[str, Any],
        column: ColumnMetadata,
        json_type: JsonType,
        options: ConvertOptions,
    ) -> None:
        """Assign min/max keywords of a sized column."""
        keywords = self._length_type_map.get(json_type)
        if keywords is None:
            return
        min_keyword, max_keyword = keywords

        low, high = resolve_range(
            column,
            self._length_map[column.data_type],
            auto_increment_minimum=options.auto_increment_minimum,
        )
        if column.max_size is not None:
            high = column.max_size

        if options.add_property_minimum_value:
            prop[min_keyword] = low
        prop[max_keyword] = high

    @staticmethod
    def _apply_overwrites(
        properties: dict[str, dict[str, Any]], options: ConvertOptions
    ) -> dict[str, dict[str, Any]]:
        """Apply property overwrites then key renames, property by property."""
        pending = options.pending_overwrites()
        result: dict[str, dict[str, Any]] = {}

        for name, prop in properties.items():
            overwrite = pending.pop(name, None)
            if overwrite is not None:
                action, attrs = overwrite
                if action == OverwriteAction.OVERWRITE:
                    prop = attrs
                else:
                    prop = {**prop, **attrs}

            new_name = options.overwrite_schema_property_keys.get(name, name)
            result[new_name] = prop

        for name in pending:
            logger.debug(f"Ignoring overwrite of unknown property '{name}'")
        return result
