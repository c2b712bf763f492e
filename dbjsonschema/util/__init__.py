"""Utility helpers for property keyword computation."""

from .schema import decimal_pattern, describe_property, resolve_range

__all__ = ["decimal_pattern", "describe_property", "resolve_range"]
