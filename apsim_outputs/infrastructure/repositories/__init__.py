"""Repository implementations for data access.

This module provides the concrete repository for discovering and reading
APSIM output files.
"""

from .output_file_repository import OutputFileRepository

__all__ = [
    "OutputFileRepository",
]
