from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pandas as pd


def _empty_str_tuple() -> tuple[str, ...]:
    return ()


def _empty_constants() -> tuple[Constant, ...]:
    return ()


class LineKind(str, Enum):
    FACTORS = "factors"
    CONSTANT = "constant"
    COLUMN_NAMES = "column_names"
    UNITS = "units"
    DATA = "data"
    BLANK = "blank"


class ColumnKind(str, Enum):
    NUMERIC = "numeric"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class Constant:
    key: str
    value: str


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    kind: LineKind
    constants: tuple[Constant, ...] = field(default_factory=_empty_constants)
    tokens: tuple[str, ...] = field(default_factory=_empty_str_tuple)

    @property
    def is_metadata(self) -> bool:
        return self.kind is not LineKind.DATA


@dataclass(frozen=True, slots=True)
class ParsedHeader:
    column_names: tuple[str, ...]
    units: tuple[str, ...]
    constants: tuple[Constant, ...]
    data_start_offset: int

    def __post_init__(self) -> None:
        if len(self.units) != len(self.column_names):
            raise ValueError(
                f"units ({len(self.units)}) and column names "
                f"({len(self.column_names)}) must have the same length"
            )

    @property
    def unit_map(self) -> dict[str, str]:
        return dict(zip(self.column_names, self.units, strict=True))


@dataclass(slots=True)
class OutputFileTable:
    file_name: str
    frame: pd.DataFrame
    header: ParsedHeader
    duplicate_constant_keys: tuple[str, ...] = field(default_factory=_empty_str_tuple)

    @property
    def row_count(self) -> int:
        return len(self.frame)

    @property
    def column_count(self) -> int:
        return self.frame.shape[1]
