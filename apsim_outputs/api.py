"""Callable entry points for loading APSIM outputs.

``load_apsim`` reads every ``.out`` file in a directory (or one file) and
returns a single table:

    >>> frame = load_apsim("outputs")
    >>> frame = load_apsim("outputs/simulation.out", load_all=False)
    >>> frame = load_apsim("outputs", fill=True, skip_empty=True)

``get_token`` splits a delimited text column and appends one token of it as
a new column:

    >>> frame = get_token(frame, "fileName", 2, "_", "sowing")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .application.models import LoadOutputsRequest
from .constants import Defaults
from .domain.entities.policies import DuplicateConstantPolicy, ErrorPolicy
from .domain.services.token_extractor import get_token
from .infrastructure.container import DependencyContainer

if TYPE_CHECKING:
    import pandas as pd

    from .application.models import LoadOutputsResponse
    from .application.ports.services import LoggerPort


def load_apsim_response(
    request: LoadOutputsRequest, *, logger: LoggerPort | None = None
) -> LoadOutputsResponse:
    container = DependencyContainer(use_null_logger=logger is None)
    if logger is not None:
        container.override_logger(logger)
    return container.create_load_outputs_use_case().execute(request)


def load_apsim(
    directory: str | Path | None = None,
    *,
    load_all: bool = True,
    file_filter: str = Defaults.FILE_FILTER,
    return_frame: bool = True,
    file_limit: int = Defaults.FILE_LIMIT,
    fill: bool = Defaults.FILL,
    add_constants: bool = Defaults.ADD_CONSTANTS,
    skip_empty: bool = Defaults.SKIP_EMPTY_FILES,
    error_policy: ErrorPolicy | str = ErrorPolicy.ABORT,
    duplicate_constants: DuplicateConstantPolicy | str = (
        DuplicateConstantPolicy.LAST_WINS
    ),
    coerce_all_missing: bool = Defaults.COERCE_ALL_MISSING,
    encoding: str = Defaults.ENCODING,
    logger: LoggerPort | None = None,
) -> pd.DataFrame | dict[str, list[object]]:
    """Read APSIM ``.out`` files into one table.

    Args:
        directory: Directory to scan (not recursive) or, with
            ``load_all=False``, the single file to read. Defaults to the
            current working directory.
        load_all: Scan ``directory`` for files instead of reading one file.
        file_filter: Regular expression the file names must end with.
        return_frame: Return a DataFrame; False returns a dict of column lists.
        file_limit: Stop after this many files were loaded (0 reads all).
        fill: Merge files with differing columns, padding absent cells with
            missing values. When False differing columns raise
            ``SchemaMismatchError``.
        add_constants: Add constants and factor levels found in the file
            headers as columns.
        skip_empty: Skip empty files instead of raising ``EmptyFileError``.
        error_policy: ``"abort"`` fails on the first bad file, ``"skip"``
            leaves bad files out.
        duplicate_constants: ``"last"`` keeps the last value of a repeated
            constant, ``"error"`` raises ``DuplicateConstantError``.
        coerce_all_missing: Treat columns holding only missing values as
            numeric.
        encoding: Text encoding of the files.
        logger: Receives progress messages; silent when omitted.

    Returns:
        The merged table with numeric columns converted and a ``fileName``
        column naming the source file of each row.
    """
    request = LoadOutputsRequest(
        source=Path(directory) if directory is not None else None,
        load_all=load_all,
        file_filter=file_filter,
        file_limit=file_limit,
        fill=fill,
        add_constants=add_constants,
        skip_empty_files=skip_empty,
        error_policy=ErrorPolicy(error_policy),
        duplicate_constants=DuplicateConstantPolicy(duplicate_constants),
        coerce_all_missing=coerce_all_missing,
        encoding=encoding,
    )
    response = load_apsim_response(request, logger=logger)
    if return_frame:
        return response.frame
    return response.to_columns()


__all__ = ["get_token", "load_apsim", "load_apsim_response"]
