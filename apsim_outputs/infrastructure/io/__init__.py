"""Infrastructure I/O layer.

Readers that turn APSIM output files on disk into per-file tables.
"""

from .exceptions import DataParseError, DataSourceError, DataSourceNotFoundError
from .out_file_reader import OutFileReader

__all__ = [
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "OutFileReader",
]
