"""Port interfaces for external dependencies.

This module defines abstract interfaces (protocols) that external
adapters must implement. This enables dependency injection and testing.
"""

from .repositories import OutputFileRepositoryPort
from .services import LoggerPort

__all__ = ["LoggerPort", "OutputFileRepositoryPort"]
