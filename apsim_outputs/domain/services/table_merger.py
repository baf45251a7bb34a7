from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

from ..exceptions import SchemaMismatchError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from ..entities.output_file import OutputFileTable


def union_columns(frames: Iterable[pd.DataFrame]) -> list[str]:
    columns: list[str] = []
    seen: set[str] = set()
    for frame in frames:
        for column in frame.columns:
            if column not in seen:
                seen.add(column)
                columns.append(column)
    return columns


def check_schemas(tables: Sequence[OutputFileTable]) -> list[str]:
    """Return the shared column list or raise on the first table that differs."""
    reference = tables[0]
    expected = list(reference.frame.columns)
    for table in tables[1:]:
        actual = list(table.frame.columns)
        if actual != expected:
            raise SchemaMismatchError(
                table.file_name,
                expected,
                actual,
                reference_file=reference.file_name,
            )
    return expected


def merge_tables(
    tables: Sequence[OutputFileTable], *, fill: bool = False
) -> pd.DataFrame:
    """Concatenate per-file tables in the order given.

    With ``fill`` disabled every table must have the same ordered columns.
    With ``fill`` enabled the result carries the union of all columns in
    first-seen order and absent cells are missing values.
    """
    if not tables:
        return pd.DataFrame()
    if fill:
        columns = union_columns(table.frame for table in tables)
    else:
        columns = check_schemas(tables)
    frames = [
        table.frame.reindex(columns=columns).astype("object") for table in tables
    ]
    return pd.concat(frames, ignore_index=True)
