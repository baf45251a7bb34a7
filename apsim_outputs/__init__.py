"""APSIM outputs package.

This package reads the text output files written by the APSIM crop
simulator and merges them into a single pandas DataFrame.

Features:
- Header parsing of constants, factor levels, column names and units
- Strict or column-union merging of many files
- All-or-nothing numeric typing of merged columns
- Positional token extraction from delimited text columns
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("apsim-outputs")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from apsim_outputs.api import get_token, load_apsim, load_apsim_response
from apsim_outputs.domain.exceptions import (
    ApsimOutputsError,
    DelimiterCountMismatch,
    EmptyFileError,
    InvalidColumnSelector,
    InvalidTokenPosition,
    RowWidthMismatch,
    SchemaMismatchError,
    UnitsMismatch,
)

__all__ = [
    "__version__",
    # Loading
    "load_apsim",
    "load_apsim_response",
    # Tokens
    "get_token",
    # Errors
    "ApsimOutputsError",
    "DelimiterCountMismatch",
    "EmptyFileError",
    "InvalidColumnSelector",
    "InvalidTokenPosition",
    "RowWidthMismatch",
    "SchemaMismatchError",
    "UnitsMismatch",
]
