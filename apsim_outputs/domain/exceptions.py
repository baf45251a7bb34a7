"""Error taxonomy for output file parsing, merging and token extraction.

Parsing functions in the domain layer work on lines, not files, so they raise
without a file name. The file pipeline attaches the name with ``with_file``
before the error leaves the infrastructure layer.
"""

from __future__ import annotations

from collections.abc import Sequence


class ApsimOutputsError(Exception):
    pass


class OutputFileError(ApsimOutputsError):
    """Base class for errors tied to a single output file."""

    def __init__(
        self,
        reason: str,
        *,
        file_name: str | None = None,
        line_number: int | None = None,
    ) -> None:
        self.reason = reason
        self.file_name = file_name
        self.line_number = line_number
        super().__init__(self._format())

    def _format(self) -> str:
        message = self.reason
        if self.file_name:
            message += f" in file {self.file_name}"
        if self.line_number is not None:
            message += f", line {self.line_number}"
        return message

    def with_file(self, file_name: str) -> OutputFileError:
        self.file_name = file_name
        self.args = (self._format(),)
        return self


class HeaderParseError(OutputFileError):
    pass


class UnitsMismatch(HeaderParseError):
    pass


class MissingHeaderError(HeaderParseError):
    pass


class DuplicateColumnError(HeaderParseError):
    pass


class RowWidthMismatch(OutputFileError):
    pass


class EmptyFileError(OutputFileError):
    pass


class UnreadableFileError(OutputFileError):
    pass


class DuplicateConstantError(OutputFileError):
    pass


class SchemaMismatchError(ApsimOutputsError):
    def __init__(
        self,
        file_name: str,
        expected_columns: Sequence[str],
        actual_columns: Sequence[str],
        *,
        reference_file: str | None = None,
    ) -> None:
        self.file_name = file_name
        self.expected_columns = list(expected_columns)
        self.actual_columns = list(actual_columns)
        self.reference_file = reference_file
        missing = [c for c in self.expected_columns if c not in self.actual_columns]
        extra = [c for c in self.actual_columns if c not in self.expected_columns]
        message = f"Columns in file {file_name} do not match"
        if reference_file:
            message += f" the columns of {reference_file}"
        details: list[str] = []
        if missing:
            details.append(f"missing {missing}")
        if extra:
            details.append(f"unexpected {extra}")
        if not details:
            details.append("same columns in a different order")
        message += f" ({'; '.join(details)}). Use fill to merge differing columns."
        super().__init__(message)


class TokenExtractionError(ApsimOutputsError):
    pass


class DelimiterCountMismatch(TokenExtractionError):
    pass


class InvalidColumnSelector(TokenExtractionError):
    pass


class InvalidTokenPosition(TokenExtractionError):
    pass
