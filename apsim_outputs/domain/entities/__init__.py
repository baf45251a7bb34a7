from .output_file import (
    ClassifiedLine,
    ColumnKind,
    Constant,
    LineKind,
    OutputFileTable,
    ParsedHeader,
)
from .policies import DuplicateConstantPolicy, ErrorPolicy, OutReadOptions

__all__ = [
    "ClassifiedLine",
    "ColumnKind",
    "Constant",
    "DuplicateConstantPolicy",
    "ErrorPolicy",
    "LineKind",
    "OutReadOptions",
    "OutputFileTable",
    "ParsedHeader",
]
