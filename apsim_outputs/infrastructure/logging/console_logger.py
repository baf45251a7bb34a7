from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
import sys
from typing import TYPE_CHECKING

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

MAX_LISTED_COLUMNS = 12


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    source: str = ""
    file_name: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = {
            "files_loaded": 0,
            "files_skipped": 0,
            "rows_loaded": 0,
            "warnings": 0,
            "errors": 0,
        }

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    def _get_prefix(self) -> str:
        if self._context is None or not self._context.file_name:
            return ""
        return f"[{self._context.file_name}] "

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}", markup=False)

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}", style="dim", markup=False)

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}", style="dim cyan", markup=False)

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_load_start(
        self, source: Path, file_count: int, *, load_all: bool
    ) -> None:
        self.set_context(source=str(source), operation="load")
        if load_all:
            self.verbose(f"Scanning directory: {source}")
            self.verbose(f"Found {file_count} output file(s)")
        else:
            self.verbose(f"Loading single file: {source}")

    @override
    def log_file_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None:
        self._stats["files_loaded"] += 1
        self._stats["rows_loaded"] += row_count
        msg = f"  Loaded {row_count:,} rows from {filename}"
        if column_count is not None and self.verbosity >= LogLevel.DEBUG:
            msg += f" ({column_count} columns)"
        self.verbose(msg)

    @override
    def log_file_skipped(self, filename: str, reason: str) -> None:
        self._stats["files_skipped"] += 1
        self.verbose(f"  Skipped {filename}: {reason}")

    @override
    def log_duplicate_constants(self, filename: str, keys: Sequence[str]) -> None:
        if keys:
            self.warning(
                f"{filename}: constant(s) declared more than once, "
                f"keeping the last value: {', '.join(keys)}"
            )

    @override
    def log_merge_result(
        self, file_count: int, row_count: int, column_count: int, *, fill: bool
    ) -> None:
        if file_count > 1:
            mode = "union of columns" if fill else "identical columns"
            self.verbose(
                f"Merged {file_count} files into {row_count:,} rows x "
                f"{column_count} columns ({mode})"
            )

    @override
    def log_coercion_result(
        self, numeric_columns: Sequence[str], text_columns: Sequence[str]
    ) -> None:
        self.verbose(
            f"Column types: {len(numeric_columns)} numeric, {len(text_columns)} text"
        )
        if text_columns and self.verbosity >= LogLevel.DEBUG:
            listed = ", ".join(list(text_columns)[:MAX_LISTED_COLUMNS])
            if len(text_columns) > MAX_LISTED_COLUMNS:
                listed += ", ..."
            self.debug(f"  Text columns: {listed}")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Load Statistics:[/dim]")
            self.console.print(
                f"[dim]  Files loaded: {self._stats['files_loaded']}[/dim]"
            )
            self.console.print(
                f"[dim]  Total rows: {self._stats['rows_loaded']:,}[/dim]"
            )
            if self._stats["files_skipped"] > 0:
                self.console.print(
                    f"[dim]  Files skipped: {self._stats['files_skipped']}[/dim]"
                )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()
