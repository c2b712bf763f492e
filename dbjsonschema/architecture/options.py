"""Options controlling a single schema conversion.

ConvertOptions gathers every rewrite rule recognised by
SchemaConverter.convert(). Unknown fields are rejected, so a typo in an
options file fails loudly instead of being silently ignored.

Example:
    >>> options = ConvertOptions(
    ...     decimals_to_pattern=True,
    ...     exclude_properties={"password"},
    ...     overwrite_schema_property_keys={"name": "full_name"},
    ...     overwrite_schema_properties={
    ...         "age": {"minimum": 18, "_action": "merge"},
    ...     },
    ... )
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from pydantic import Field as PydanticField, field_validator

from dbjsonschema.architecture.base import ConfigBaseModel
from dbjsonschema.onto import OverwriteAction

ACTION_KEY = "_action"
DEFAULT_SCHEMA_DECLARATION = "http://json-schema.org/draft-04/schema#"


class ConvertOptions(ConfigBaseModel):
    """Rewrite rules applied while converting one table."""

    allow_additional_properties: bool = PydanticField(
        default=False,
        description="Value of the document's additionalProperties flag.",
    )
    exclude_properties: set[str] = PydanticField(
        default_factory=set,
        description="Columns skipped entirely (no property, never required).",
    )
    exclude_required: set[str] = PydanticField(
        default_factory=set,
        description="Columns never listed in required.",
    )
    include_required: set[str] = PydanticField(
        default_factory=set,
        description="Columns always listed in required; wins over exclude_required.",
    )
    decimals_to_pattern: bool = PydanticField(
        default=False,
        description="Render (precision, scale) numbers as pattern-checked strings.",
    )
    has_schema_property_description: bool = PydanticField(
        default=False,
        description="Synthesize a description for properties lacking one.",
    )
    ignore_property_defaults: bool = PydanticField(
        default=False,
        description="Never copy column defaults into the properties.",
    )
    add_property_minimum_value: bool = PydanticField(
        default=False,
        description="Emit minLength/minimum next to the always emitted maximum.",
    )
    auto_increment_minimum: int = PydanticField(
        default=1,
        description="Minimum forced on auto-increment columns.",
    )
    overwrite_schema_property_keys: dict[str, str] = PydanticField(
        default_factory=dict,
        description="Property renames {old: new}, applied after every other rule.",
    )
    overwrite_schema_properties: dict[str, dict[str, Any]] = PydanticField(
        default_factory=dict,
        description="Partial properties merged over (or replacing) computed ones.",
    )
    add_schema_properties: dict[str, dict[str, Any]] = PydanticField(
        default_factory=dict,
        description="Properties injected independently of the source columns.",
    )
    dependencies: dict[str, Any] | None = PydanticField(
        default=None,
        description="Copied verbatim into the document.",
    )
    schema_declaration: str = PydanticField(
        default=DEFAULT_SCHEMA_DECLARATION,
        description="Value of the $schema keyword.",
    )
    schema_overwrite: dict[str, Any] = PydanticField(
        default_factory=dict,
        description="Shallow-merged over the finished document.",
    )

    @field_validator("overwrite_schema_properties")
    @classmethod
    def _validate_actions(cls, v: dict[str, dict[str, Any]]) -> dict[str, dict]:
        for name, partial in v.items():
            action = partial.get(ACTION_KEY, OverwriteAction.MERGE)
            if action not in OverwriteAction:
                allowed = ", ".join(a.value for a in OverwriteAction)
                raise ValueError(
                    f"overwrite action '{action}' for property '{name}' is not "
                    f"allowed, expected one of - {allowed}"
                )
        return v

    def is_required(self, column: str, *, nullable: bool, has_default: bool) -> bool:
        """Decide whether a column belongs to the required list."""
        if column in self.include_required:
            return True
        if column in self.exclude_required:
            return False
        return not nullable and not has_default

    def pending_overwrites(self) -> dict[str, tuple[OverwriteAction, dict[str, Any]]]:
        """Working copy of the property overwrites for a single conversion.

        Returns:
            dict: property name -> (action, partial property without the action key)
        """
        pending = {}
        for name, partial in self.overwrite_schema_properties.items():
            attrs = deepcopy(partial)
            action = OverwriteAction(attrs.pop(ACTION_KEY, OverwriteAction.MERGE))
            pending[name] = (action, attrs)
        return pending
