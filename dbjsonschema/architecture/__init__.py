"""Configuration and metadata models.

Key Components:
    - ConfigBaseModel: Pydantic base with YAML loading
    - ColumnMetadata: Per-column relational schema description
    - ConvertOptions: Rewrite rules of a single conversion
"""

from .base import ConfigBaseModel
from .column import ColumnExtra, ColumnMetadata, DatabaseExpression
from .options import ConvertOptions

__all__ = [
    "ColumnExtra",
    "ColumnMetadata",
    "ConfigBaseModel",
    "ConvertOptions",
    "DatabaseExpression",
]
