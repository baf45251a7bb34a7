from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_load_start(
        self, source: Path, file_count: int, *, load_all: bool
    ) -> None: ...

    def log_file_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None: ...

    def log_file_skipped(self, filename: str, reason: str) -> None: ...

    def log_duplicate_constants(self, filename: str, keys: Sequence[str]) -> None: ...

    def log_merge_result(
        self, file_count: int, row_count: int, column_count: int, *, fill: bool
    ) -> None: ...

    def log_coercion_result(
        self, numeric_columns: Sequence[str], text_columns: Sequence[str]
    ) -> None: ...

    def log_final_stats(self) -> None: ...
