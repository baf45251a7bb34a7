"""Presenters for CLI output formatting.

Presenters turn application responses into rich tables and status lines.
"""

from .summary import LoadSummaryPresenter, LoadSummaryRequest

__all__ = ["LoadSummaryPresenter", "LoadSummaryRequest"]
