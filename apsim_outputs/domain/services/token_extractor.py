"""Positional token extraction for delimited text columns.

Useful for values that carry several fields in one string, such as a file
name like ``Wheat_Early_N120.out`` or a simulation title, when the fields are
of variable width but consistently delimited.
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from ...pandas_utils import text_or_none
from ..exceptions import (
    DelimiterCountMismatch,
    InvalidColumnSelector,
    InvalidTokenPosition,
    TokenExtractionError,
)


def _select_column(frame: pd.DataFrame, column: str | Sequence[str] | None) -> str:
    names = [column] if isinstance(column, str) else list(column or [])
    if len(names) != 1:
        raise InvalidColumnSelector(
            f"exactly one column name must be given, got {len(names)}"
        )
    name = names[0]
    if name not in frame.columns:
        raise InvalidColumnSelector(f"column '{name}' not found")
    return name


def count_delimiters(values: pd.Series, separator: str) -> pd.Series:
    """Count non-overlapping separator occurrences per non-missing value."""
    texts = values.map(text_or_none).dropna()
    return texts.map(lambda text: text.count(separator)).astype("int64")


def get_token(
    frame: pd.DataFrame,
    column: str | Sequence[str] | None,
    position: int,
    separator: str,
    new_column: str,
) -> pd.DataFrame:
    """Append the token at ``position`` (1-based) of ``column`` as ``new_column``.

    Every non-missing value must hold the same number of separators. Missing
    values produce a missing token.

    Raises:
        InvalidColumnSelector: Not exactly one existing column was selected,
            or ``new_column`` already exists.
        DelimiterCountMismatch: Rows hold different numbers of separators.
        InvalidTokenPosition: ``position`` is outside ``1..count + 1``.
    """
    name = _select_column(frame, column)
    if not separator:
        raise TokenExtractionError("separator must not be empty")
    if new_column in frame.columns:
        raise InvalidColumnSelector(f"column '{new_column}' already exists")

    counts = count_delimiters(frame[name], separator)
    distinct = sorted(set(counts.tolist()))
    if len(distinct) > 1:
        raise DelimiterCountMismatch(
            f"number of '{separator}' delimiters is not the same in all values "
            f"of column '{name}' (found {distinct})"
        )
    token_count = distinct[0] + 1 if distinct else 1
    if not 1 <= position <= token_count:
        raise InvalidTokenPosition(
            f"token position {position} is outside 1..{token_count} "
            f"for column '{name}'"
        )

    def _token(value: object) -> str | None:
        text = text_or_none(value)
        if text is None:
            return None
        return text.split(separator)[position - 1]

    result = frame.copy()
    result[new_column] = frame[name].map(_token).astype("object")
    return result
