from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pandas as pd

from ..constants import Defaults
from ..domain.entities.policies import DuplicateConstantPolicy, ErrorPolicy

if TYPE_CHECKING:
    from pathlib import Path

    from ..config import LoaderConfig
    from ..domain.entities.output_file import ColumnKind


def _empty_frame() -> pd.DataFrame:
    return pd.DataFrame()


def _empty_file_results() -> list[FileLoadResult]:
    return []


def _empty_error_list() -> list[tuple[str, str]]:
    return []


def _empty_column_kinds() -> dict[str, ColumnKind]:
    return {}


@dataclass(slots=True)
class LoadOutputsRequest:
    source: Path | None = None
    load_all: bool = True
    file_filter: str = Defaults.FILE_FILTER
    file_limit: int = Defaults.FILE_LIMIT
    fill: bool = Defaults.FILL
    add_constants: bool = Defaults.ADD_CONSTANTS
    skip_empty_files: bool = Defaults.SKIP_EMPTY_FILES
    error_policy: ErrorPolicy = ErrorPolicy.ABORT
    duplicate_constants: DuplicateConstantPolicy = DuplicateConstantPolicy.LAST_WINS
    coerce_all_missing: bool = Defaults.COERCE_ALL_MISSING
    encoding: str = Defaults.ENCODING

    def __post_init__(self) -> None:
        if self.file_limit < 0:
            raise ValueError(
                "file_limit must be zero (unlimited) or positive, "
                f"got {self.file_limit}"
            )
        self.error_policy = ErrorPolicy(self.error_policy)
        self.duplicate_constants = DuplicateConstantPolicy(self.duplicate_constants)

    @classmethod
    def from_config(
        cls, config: LoaderConfig, *, source: Path | None = None, load_all: bool = True
    ) -> LoadOutputsRequest:
        return cls(
            source=source,
            load_all=load_all,
            file_filter=config.file_filter,
            file_limit=config.file_limit,
            fill=config.fill,
            add_constants=config.add_constants,
            skip_empty_files=config.skip_empty_files,
            error_policy=config.error_policy,
            duplicate_constants=config.duplicate_constants,
            coerce_all_missing=config.coerce_all_missing,
            encoding=config.encoding,
        )


@dataclass(slots=True)
class FileLoadResult:
    file_name: str
    path: Path
    rows: int
    columns: int
    duplicate_constant_keys: tuple[str, ...] = ()


@dataclass(slots=True)
class LoadOutputsResponse:
    source: Path | None = None
    frame: pd.DataFrame = field(default_factory=_empty_frame)
    file_results: list[FileLoadResult] = field(default_factory=_empty_file_results)
    skipped_files: list[tuple[str, str]] = field(default_factory=_empty_error_list)
    errors: list[tuple[str, str]] = field(default_factory=_empty_error_list)
    column_kinds: dict[str, ColumnKind] = field(default_factory=_empty_column_kinds)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def file_count(self) -> int:
        return len(self.file_results)

    @property
    def row_count(self) -> int:
        return len(self.frame)

    @property
    def failed_files(self) -> list[str]:
        return [name for name, _ in self.errors]

    def to_columns(self) -> dict[str, list[object]]:
        """Return the result as a columnar table of plain lists."""
        return {column: self.frame[column].tolist() for column in self.frame.columns}
