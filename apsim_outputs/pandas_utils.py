from typing import Any, cast

import pandas as pd


def is_missing_scalar(value: object) -> bool:
    try:
        return cast("bool", pd.isna(cast("Any", value)))
    except (TypeError, ValueError):
        return False


def text_or_none(value: object) -> str | None:
    if value is None or is_missing_scalar(value):
        return None
    return str(value)
