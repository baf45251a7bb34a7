from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pandas as pd

from ...constants import Columns
from ..entities.output_file import Constant
from ..entities.policies import DuplicateConstantPolicy
from ..exceptions import DuplicateConstantError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


@dataclass(frozen=True, slots=True)
class ConstantAppendResult:
    frame: pd.DataFrame
    duplicate_keys: tuple[str, ...] = ()


def resolve_constants(
    constants: Iterable[Constant],
    policy: DuplicateConstantPolicy = DuplicateConstantPolicy.LAST_WINS,
) -> tuple[tuple[Constant, ...], tuple[str, ...]]:
    """Collapse repeated keys to one constant each.

    A repeated key keeps the position of its first declaration and the value
    of its last one.
    """
    values: dict[str, str] = {}
    duplicates: list[str] = []
    for constant in constants:
        if constant.key in values:
            if policy is DuplicateConstantPolicy.ERROR:
                raise DuplicateConstantError(
                    f"constant '{constant.key}' is declared more than once"
                )
            if constant.key not in duplicates:
                duplicates.append(constant.key)
        values[constant.key] = constant.value
    resolved = tuple(Constant(key=key, value=value) for key, value in values.items())
    return resolved, tuple(duplicates)


def append_constants(
    frame: pd.DataFrame,
    constants: Sequence[Constant],
    *,
    policy: DuplicateConstantPolicy = DuplicateConstantPolicy.LAST_WINS,
    reserved_columns: Sequence[str] = (Columns.FILE_NAME,),
) -> ConstantAppendResult:
    """Broadcast each constant into a column after the data columns."""
    resolved, duplicates = resolve_constants(constants, policy)
    if not resolved:
        return ConstantAppendResult(frame=frame.copy(), duplicate_keys=duplicates)

    for constant in resolved:
        if constant.key in frame.columns or constant.key in reserved_columns:
            raise DuplicateConstantError(
                f"constant '{constant.key}' clashes with a column of the same name"
            )

    constant_frame = pd.DataFrame(
        {constant.key: constant.value for constant in resolved},
        index=frame.index,
        dtype="object",
    )
    combined = pd.concat([frame, constant_frame], axis=1)
    return ConstantAppendResult(frame=combined, duplicate_keys=duplicates)
