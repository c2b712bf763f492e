"""Built-in dialect registry.

Each supported dialect ships a DialectDefaults instance holding its type,
length, length-type, pattern and format tables. The registry is static:
dialects are resolved once, when a converter is constructed.

Example:
    >>> from dbjsonschema.dialect import get_dialect_defaults
    >>> defaults = get_dialect_defaults("MySQL")
    >>> defaults.type_map["varchar"]  # 'string'
"""

from typing import Dict

from dbjsonschema.errors import InvalidDialectError
from dbjsonschema.onto import Dialect

from .mysql import MYSQL_DEFAULTS
from .onto import PATTERN_MAP, DialectDefaults, SignedRange

DIALECT_MAPPING: Dict[Dialect, DialectDefaults] = {
    Dialect.MYSQL: MYSQL_DEFAULTS,
}


def get_dialect_defaults(dialect: Dialect | str) -> DialectDefaults:
    """Get the conversion tables of a dialect.

    Args:
        dialect: Dialect enum member or its name, e.g. "MySQL"

    Returns:
        DialectDefaults: A private copy of the dialect tables

    Raises:
        InvalidDialectError: If the dialect has no registered tables
    """
    if dialect not in Dialect or Dialect(dialect) not in DIALECT_MAPPING:
        raise InvalidDialectError(dialect, [str(d) for d in DIALECT_MAPPING])
    return DIALECT_MAPPING[Dialect(dialect)].model_copy(deep=True)


__all__ = [
    "DIALECT_MAPPING",
    "PATTERN_MAP",
    "DialectDefaults",
    "SignedRange",
    "get_dialect_defaults",
]
