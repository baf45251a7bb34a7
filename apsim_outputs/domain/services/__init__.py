"""Domain services.

Parsing, merging and typing rules that operate on lines and DataFrames.
"""

from .body_reader import read_body
from .constant_appender import ConstantAppendResult, append_constants, resolve_constants
from .header_parser import HeaderScanState, classify_line, parse_header
from .numeric_coercion import CoercionResult, coerce_numeric_columns, infer_column_kind
from .table_merger import check_schemas, merge_tables, union_columns
from .token_extractor import count_delimiters, get_token

__all__ = [
    # Header parsing
    "HeaderScanState",
    "classify_line",
    "parse_header",
    # Body and constants
    "read_body",
    "ConstantAppendResult",
    "append_constants",
    "resolve_constants",
    # Merging
    "check_schemas",
    "merge_tables",
    "union_columns",
    # Typing
    "CoercionResult",
    "coerce_numeric_columns",
    "infer_column_kind",
    # Tokens
    "count_delimiters",
    "get_token",
]
