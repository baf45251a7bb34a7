from typing import ClassVar


class Defaults:
    FILE_FILTER = "\\.out"
    ENCODING = "utf-8"
    FILE_LIMIT = 0
    FILL = False
    ADD_CONSTANTS = True
    SKIP_EMPTY_FILES = False
    ERROR_POLICY = "abort"
    DUPLICATE_CONSTANTS = "last"
    COERCE_ALL_MISSING = True
    CONFIG_FILE = "apsim_outputs.toml"


class Markers:
    FACTORS = "factors = "
    FACTOR_SEPARATOR = ";"
    FACTOR_ASSIGN = "="
    CONSTANT_ASSIGN = " = "
    ASSIGN = "="


class MissingValues:
    TOKENS: ClassVar[frozenset[str]] = frozenset({"?", "*"})


class Columns:
    FILE_NAME = "fileName"
