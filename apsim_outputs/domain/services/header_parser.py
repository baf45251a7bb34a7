"""Header scanning for APSIM ``.out`` files.

An output file starts with any number of metadata lines, interleaved in any
order:

    ApsimVersion = 7.10
    Title = Wheat_Sow_Early
    factors = Cultivar=Hartog;SowDate=15-may

followed by the column-name line and the units line:

    Date  biomass  yield
    (dd/mm/yyyy)  (kg/ha)  (kg/ha)

Everything after the units line is data. The scanner classifies one line at
a time and stops at the first data line without consuming it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ...constants import Markers
from ..entities.output_file import ClassifiedLine, Constant, LineKind, ParsedHeader
from ..exceptions import (
    DuplicateColumnError,
    EmptyFileError,
    HeaderParseError,
    MissingHeaderError,
    UnitsMismatch,
)

if TYPE_CHECKING:
    from collections.abc import Iterable


def _empty_str_list() -> list[str]:
    return []


def _empty_constant_list() -> list[Constant]:
    return []


@dataclass(slots=True)
class HeaderScanState:
    names_found: bool = False
    units_found: bool = False
    column_names: list[str] = field(default_factory=_empty_str_list)
    units: list[str] = field(default_factory=_empty_str_list)
    constants: list[Constant] = field(default_factory=_empty_constant_list)
    line_count: int = 0

    def apply(self, line: ClassifiedLine, *, collect_constants: bool = True) -> None:
        if not line.is_metadata:
            return
        if line.kind in (LineKind.FACTORS, LineKind.CONSTANT):
            if collect_constants:
                self.constants.extend(line.constants)
        elif line.kind is LineKind.COLUMN_NAMES:
            self.column_names = list(line.tokens)
            self.names_found = True
        elif line.kind is LineKind.UNITS:
            self.units = list(line.tokens)
            self.units_found = True
        self.line_count += 1

    def to_header(self) -> ParsedHeader:
        return ParsedHeader(
            column_names=tuple(self.column_names),
            units=tuple(self.units),
            constants=tuple(self.constants),
            data_start_offset=self.line_count,
        )


def classify_line(
    line: str, state: HeaderScanState, *, line_number: int | None = None
) -> ClassifiedLine:
    """Classify one header line against the current scan state.

    Metadata lines are recognised before the header lines, so a line holding
    ``=`` is always a constant even after the column names were found.

    Raises:
        UnitsMismatch: The units line has a different token count than the
            column-name line.
        DuplicateColumnError: The column-name line repeats a name.
        HeaderParseError: A constant line has no usable key.
    """
    if Markers.FACTORS in line:
        return ClassifiedLine(
            LineKind.FACTORS, constants=_parse_factors(line, line_number)
        )
    if Markers.ASSIGN in line:
        return ClassifiedLine(
            LineKind.CONSTANT, constants=(_parse_constant(line, line_number),)
        )
    tokens = tuple(line.split())
    if not tokens:
        return ClassifiedLine(LineKind.BLANK)
    if not state.names_found:
        _check_unique(tokens, line_number)
        return ClassifiedLine(LineKind.COLUMN_NAMES, tokens=tokens)
    if not state.units_found:
        if len(tokens) != len(state.column_names):
            raise UnitsMismatch(
                f"units count ({len(tokens)}) does not match column count "
                f"({len(state.column_names)})",
                line_number=line_number,
            )
        return ClassifiedLine(LineKind.UNITS, tokens=tokens)
    return ClassifiedLine(LineKind.DATA)


def parse_header(
    lines: Iterable[str], *, collect_constants: bool = True
) -> ParsedHeader:
    """Scan leading lines until the data section starts.

    Args:
        lines: File lines without line terminators.
        collect_constants: When False constant lines are skipped but not kept.

    Returns:
        The parsed header. ``data_start_offset`` is the number of lines to
        skip before the first data row.
    """
    state = HeaderScanState()
    saw_content = False
    for line in lines:
        classified = classify_line(line, state, line_number=state.line_count + 1)
        if not classified.is_metadata:
            break
        if classified.kind is not LineKind.BLANK:
            saw_content = True
        state.apply(classified, collect_constants=collect_constants)

    if not saw_content:
        raise EmptyFileError("file contains no lines")
    if not state.names_found:
        raise MissingHeaderError("no column name line found")
    if not state.units_found:
        raise MissingHeaderError(
            "no units line found after the column names",
            line_number=state.line_count + 1,
        )
    return state.to_header()


def _parse_factors(line: str, line_number: int | None) -> tuple[Constant, ...]:
    body = line.replace(Markers.FACTORS, "", 1)
    constants: list[Constant] = []
    for segment in body.split(Markers.FACTOR_SEPARATOR):
        if not segment.strip():
            continue
        key, sep, value = segment.partition(Markers.FACTOR_ASSIGN)
        if not sep:
            raise HeaderParseError(
                f"factor '{segment.strip()}' has no '{Markers.FACTOR_ASSIGN}'",
                line_number=line_number,
            )
        constants.append(_make_constant(key, value, line_number))
    return tuple(constants)


def _parse_constant(line: str, line_number: int | None) -> Constant:
    if Markers.CONSTANT_ASSIGN in line:
        key, _, value = line.partition(Markers.CONSTANT_ASSIGN)
    else:
        key, _, value = line.partition(Markers.ASSIGN)
    return _make_constant(key, value, line_number)


def _make_constant(key: str, value: str, line_number: int | None) -> Constant:
    key = key.strip()
    if not key:
        raise HeaderParseError("constant has an empty name", line_number=line_number)
    return Constant(key=key, value=value.strip())


def _check_unique(tokens: tuple[str, ...], line_number: int | None) -> None:
    seen: set[str] = set()
    duplicates: list[str] = []
    for token in tokens:
        if token in seen and token not in duplicates:
            duplicates.append(token)
        seen.add(token)
    if duplicates:
        raise DuplicateColumnError(
            f"column names repeated in header: {', '.join(duplicates)}",
            line_number=line_number,
        )
