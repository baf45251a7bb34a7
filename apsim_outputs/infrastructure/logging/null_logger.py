from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_load_start(self, source: Path, file_count: int, *, load_all: bool) -> None:
        return None

    @override
    def log_file_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None:
        return None

    @override
    def log_file_skipped(self, filename: str, reason: str) -> None:
        return None

    @override
    def log_duplicate_constants(self, filename: str, keys: Sequence[str]) -> None:
        return None

    @override
    def log_merge_result(
        self, file_count: int, row_count: int, column_count: int, *, fill: bool
    ) -> None:
        return None

    @override
    def log_coercion_result(
        self, numeric_columns: Sequence[str], text_columns: Sequence[str]
    ) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
