"""Base model for dbjsonschema configuration classes with YAML support."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict


class ConfigBaseModel(BaseModel):
    """Base model for all dbjsonschema configuration classes.

    Provides YAML serialization/deserialization and standard configuration
    for all Pydantic models in the package. Unknown fields are rejected.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        use_enum_values=True,
        validate_assignment=True,
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> Self:
        """Load a single instance from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Load from a dictionary."""
        return cls.model_validate(data)

    def to_yaml_str(self, **kwargs: Any) -> str:
        """Convert instance to a YAML string."""
        return yaml.safe_dump(
            self.to_dict(),
            default_flow_style=False,
            sort_keys=False,
            **kwargs,
        )

    def to_dict(self, **kwargs: Any) -> dict[str, Any]:
        """Convert instance to a dictionary.

        Supports skip_defaults=True (mapped to exclude_defaults).
        """
        if kwargs.get("skip_defaults"):
            kwargs = dict(kwargs)
            kwargs.pop("skip_defaults", None)
            kwargs["exclude_defaults"] = True
        return self.model_dump(
            by_alias=True, exclude_none=True, mode="json", **kwargs
        )
