from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

from ...constants import MissingValues
from ..exceptions import RowWidthMismatch

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


def read_body(
    lines: Iterable[str],
    column_names: Sequence[str],
    *,
    first_line_number: int = 1,
) -> pd.DataFrame:
    """Split data lines into a text-typed frame named by ``column_names``.

    The ``?`` and ``*`` sentinels become missing values. Blank lines are
    skipped. Numeric typing is left to the post-merge coercion pass.

    Raises:
        RowWidthMismatch: A row does not have one field per column.
    """
    expected = len(column_names)
    rows: list[list[str | None]] = []
    for offset, line in enumerate(lines):
        fields = line.split()
        if not fields:
            continue
        if len(fields) != expected:
            raise RowWidthMismatch(
                f"expected {expected} fields but found {len(fields)}",
                line_number=first_line_number + offset,
            )
        rows.append([None if f in MissingValues.TOKENS else f for f in fields])
    return pd.DataFrame(rows, columns=list(column_names), dtype="object")
