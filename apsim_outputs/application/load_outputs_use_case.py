"""Load outputs use case.

Orchestrates one batch load: discovery -> per-file parsing -> merge ->
numeric coercion. Files are parsed one at a time in discovery order.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..domain.entities.policies import ErrorPolicy, OutReadOptions
from ..domain.exceptions import EmptyFileError, OutputFileError
from ..domain.services.numeric_coercion import coerce_numeric_columns
from ..domain.services.table_merger import merge_tables
from .models import FileLoadResult, LoadOutputsResponse

if TYPE_CHECKING:
    from ..domain.entities.output_file import OutputFileTable
    from .models import LoadOutputsRequest
    from .ports.repositories import OutputFileRepositoryPort
    from .ports.services import LoggerPort


@dataclass(slots=True)
class LoadOutputsDependencies:
    logger: LoggerPort
    output_file_repository: OutputFileRepositoryPort


class LoadOutputsUseCase:
    """Use case for loading and merging a batch of APSIM output files.

    The default error policy is fail-fast: the first file that cannot be
    parsed aborts the whole load and no partial result is returned. With
    ``ErrorPolicy.SKIP`` the failing file is recorded in
    ``response.errors`` and left out of the merge. Schema mismatches between
    files are batch-level and always abort.

    Example:
        >>> use_case = LoadOutputsUseCase(
        ...     LoadOutputsDependencies(
        ...         logger=NullLogger(),
        ...         output_file_repository=OutputFileRepository(),
        ...     )
        ... )
        >>> response = use_case.execute(LoadOutputsRequest(source=Path("outputs")))
        >>> response.frame.shape
    """

    def __init__(self, dependencies: LoadOutputsDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._output_file_repository = dependencies.output_file_repository

    def execute(self, request: LoadOutputsRequest) -> LoadOutputsResponse:
        source = self._resolve_source(request.source)
        paths = self._discover(source, request)
        self.logger.log_load_start(source, len(paths), load_all=request.load_all)

        response = LoadOutputsResponse(source=source)
        if not paths:
            self.logger.warning(
                f"No files matching '{request.file_filter}' found in {source}"
            )
            return response

        options = OutReadOptions(
            add_constants=request.add_constants,
            duplicate_constants=request.duplicate_constants,
            encoding=request.encoding,
        )
        tables: list[OutputFileTable] = []
        for path in paths:
            table = self._load_file(path, options, request, response)
            if table is None:
                continue
            tables.append(table)
            if request.file_limit and len(tables) >= request.file_limit:
                self.logger.verbose(f"File limit of {request.file_limit} reached")
                break

        merged = merge_tables(tables, fill=request.fill)
        self.logger.log_merge_result(
            len(tables), len(merged), merged.shape[1], fill=request.fill
        )
        coerced = coerce_numeric_columns(
            merged, coerce_all_missing=request.coerce_all_missing
        )
        self.logger.log_coercion_result(coerced.numeric_columns, coerced.text_columns)

        response.frame = coerced.frame
        response.column_kinds = coerced.column_kinds
        self.logger.log_final_stats()
        return response

    def _resolve_source(self, source: Path | None) -> Path:
        # Paths are resolved up front; the working directory is never changed.
        if source is None:
            return Path.cwd()
        return Path(source).expanduser().resolve()

    def _discover(self, source: Path, request: LoadOutputsRequest) -> list[Path]:
        if not request.load_all:
            return [source]
        return self._output_file_repository.list_output_files(
            source, request.file_filter
        )

    def _load_file(
        self,
        path: Path,
        options: OutReadOptions,
        request: LoadOutputsRequest,
        response: LoadOutputsResponse,
    ) -> OutputFileTable | None:
        try:
            table = self._output_file_repository.read_output_file(path, options)
        except EmptyFileError as exc:
            if not request.skip_empty_files:
                return self._handle_failure(path, exc, request, response)
            response.skipped_files.append((path.name, exc.reason))
            self.logger.log_file_skipped(path.name, exc.reason)
            return None
        except OutputFileError as exc:
            return self._handle_failure(path, exc, request, response)

        self.logger.log_duplicate_constants(
            table.file_name, table.duplicate_constant_keys
        )
        self.logger.log_file_loaded(
            table.file_name, table.row_count, table.column_count
        )
        response.file_results.append(
            FileLoadResult(
                file_name=table.file_name,
                path=path,
                rows=table.row_count,
                columns=table.column_count,
                duplicate_constant_keys=table.duplicate_constant_keys,
            )
        )
        return table

    def _handle_failure(
        self,
        path: Path,
        exc: OutputFileError,
        request: LoadOutputsRequest,
        response: LoadOutputsResponse,
    ) -> None:
        self.logger.error(str(exc))
        if request.error_policy is ErrorPolicy.ABORT:
            raise exc
        response.errors.append((path.name, str(exc)))
        return None
