from __future__ import annotations

from typing import TYPE_CHECKING

from ...constants import Columns
from ...domain.entities.output_file import OutputFileTable
from ...domain.entities.policies import OutReadOptions
from ...domain.exceptions import (
    DuplicateColumnError,
    EmptyFileError,
    OutputFileError,
    UnreadableFileError,
)
from ...domain.services.body_reader import read_body
from ...domain.services.constant_appender import append_constants
from ...domain.services.header_parser import parse_header
from .exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


class OutFileReader:
    pass

    def read(
        self, path: Path, options: OutReadOptions | None = None
    ) -> OutputFileTable:
        """Parse one ``.out`` file into a table tagged with its file name.

        Raises:
            DataSourceNotFoundError: ``path`` is missing or not a file.
            OutputFileError: The file is empty or breaks the layout rules.
                The error carries the file name.
        """
        if options is None:
            options = OutReadOptions()
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        try:
            if path.stat().st_size == 0:
                raise EmptyFileError("file is empty (0 bytes)")
            lines = self._read_lines(path, options.encoding)
            return self._parse(path.name, lines, options)
        except OutputFileError as e:
            e.with_file(path.name)
            raise

    def _read_lines(self, path: Path, encoding: str) -> list[str]:
        try:
            with path.open("r", encoding=encoding) as handle:
                return handle.read().splitlines()
        except UnicodeDecodeError as e:
            raise UnreadableFileError(
                f"cannot decode text as {encoding} ({e.reason})"
            ) from e
        except OSError as e:
            raise DataParseError(f"Failed to read {path}: {e}") from e

    def _parse(
        self, file_name: str, lines: list[str], options: OutReadOptions
    ) -> OutputFileTable:
        header = parse_header(lines, collect_constants=options.add_constants)
        if Columns.FILE_NAME in header.column_names:
            raise DuplicateColumnError(
                f"column '{Columns.FILE_NAME}' is reserved for the source file name"
            )
        body = read_body(
            lines[header.data_start_offset :],
            header.column_names,
            first_line_number=header.data_start_offset + 1,
        )
        duplicate_keys: tuple[str, ...] = ()
        if options.add_constants:
            appended = append_constants(
                body, header.constants, policy=options.duplicate_constants
            )
            body = appended.frame
            duplicate_keys = appended.duplicate_keys
        body[Columns.FILE_NAME] = file_name
        return OutputFileTable(
            file_name=file_name,
            frame=body,
            header=header,
            duplicate_constant_keys=duplicate_keys,
        )
