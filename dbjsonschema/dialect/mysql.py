"""MySQL conversion tables.

Maps MySQL column types to JSON Schema base types and defines the default
minimum/maximum value (or length) of every sized type.
"""

from dbjsonschema.dialect.onto import (
    PATTERN_MAP,
    DialectDefaults,
    SignedRange,
    invert_type_groups,
)
from dbjsonschema.onto import JsonType

TYPE_GROUPS = {
    JsonType.STRING: [
        "char",
        "varchar",
        "binary",
        "varbinary",
        "blob",
        "text",
        "mediumtext",
        "longtext",
        "tinytext",
        "date",
        "datetime",
        "timestamp",
        "time",
        "year",
    ],
    JsonType.ENUM: ["enum", "set"],
    JsonType.INTEGER: [
        "integer",
        "int",
        "smallint",
        "tinyint",
        "mediumint",
        "bigint",
        "bit",
    ],
    JsonType.NUMBER: ["decimal", "float", "double", "double precision", "numeric"],
    JsonType.OBJECT: ["json"],
}

LENGTH_TYPE_MAP = {
    JsonType.STRING: ("minLength", "maxLength"),
    JsonType.NUMBER: ("minimum", "maximum"),
    JsonType.INTEGER: ("minimum", "maximum"),
}

LENGTH_MAP = {
    "char": (0, 1),
    "varchar": (0, 255),
    "binary": (0, 255),
    "varbinary": (0, 255),
    "blob": (0, 65_535),
    "text": (0, 65_535),
    "mediumtext": (0, 16_777_215),
    "longtext": (0, 4_294_967_295),
    "tinytext": (0, 255),
    "date": (10, 10),
    "datetime": (19, 19),
    "timestamp": (26, 26),
    "time": (8, 8),
    "year": (4, 4),
    "integer": SignedRange(
        signed=(-2_147_483_648, 2_147_483_647), unsigned=(0, 4_294_967_295)
    ),
    "int": SignedRange(
        signed=(-2_147_483_648, 2_147_483_647), unsigned=(0, 4_294_967_295)
    ),
    "smallint": SignedRange(signed=(-32_768, 32_767), unsigned=(0, 65_535)),
    "tinyint": SignedRange(signed=(-128, 127), unsigned=(0, 255)),
    "mediumint": SignedRange(
        signed=(-8_388_608, 8_388_607), unsigned=(0, 16_777_215)
    ),
    "bigint": SignedRange(
        signed=(-(2**63), 2**63 - 1), unsigned=(0, 2**64 - 1)
    ),
    "bit": SignedRange(signed=(0, 1), unsigned=(0, 1)),
}

MYSQL_DEFAULTS = DialectDefaults(
    type_map=invert_type_groups(TYPE_GROUPS),
    length_map=LENGTH_MAP,
    length_type_map=LENGTH_TYPE_MAP,
    pattern_map=dict(PATTERN_MAP),
)
