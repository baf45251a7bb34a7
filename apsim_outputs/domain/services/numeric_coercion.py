"""Post-merge numeric typing.

Every parsed value is text until the whole batch is merged. A column is then
promoted to numeric only when all of its values parse, so a column is never
partly numeric. Missing values do not block promotion; a column made only of
missing values is numeric as well unless ``coerce_all_missing`` is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd
from pandas.api.types import is_bool_dtype, is_numeric_dtype

from ..entities.output_file import ColumnKind


@dataclass(frozen=True, slots=True)
class CoercionResult:
    frame: pd.DataFrame
    column_kinds: dict[str, ColumnKind]

    @property
    def numeric_columns(self) -> list[str]:
        return [c for c, k in self.column_kinds.items() if k is ColumnKind.NUMERIC]

    @property
    def text_columns(self) -> list[str]:
        return [c for c, k in self.column_kinds.items() if k is ColumnKind.TEXT]


def infer_column_kind(
    series: pd.Series, *, coerce_all_missing: bool = True
) -> ColumnKind:
    if is_bool_dtype(series.dtype):
        return ColumnKind.TEXT
    if is_numeric_dtype(series.dtype):
        return ColumnKind.NUMERIC
    missing = series.isna()
    if bool(missing.all()):
        return ColumnKind.NUMERIC if coerce_all_missing else ColumnKind.TEXT
    converted = pd.to_numeric(series[~missing], errors="coerce")
    if bool(converted.isna().any()):
        return ColumnKind.TEXT
    return ColumnKind.NUMERIC


def coerce_numeric_columns(
    frame: pd.DataFrame, *, coerce_all_missing: bool = True
) -> CoercionResult:
    result = frame.copy()
    kinds: dict[str, ColumnKind] = {}
    for column in result.columns:
        kind = infer_column_kind(result[column], coerce_all_missing=coerce_all_missing)
        kinds[column] = kind
        if kind is ColumnKind.NUMERIC:
            result[column] = pd.to_numeric(result[column], errors="coerce")
    return CoercionResult(frame=result, column_kinds=kinds)
