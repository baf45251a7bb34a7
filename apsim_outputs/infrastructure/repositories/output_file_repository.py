import re
from pathlib import Path

from ...constants import Defaults
from ...domain.entities.output_file import OutputFileTable
from ...domain.entities.policies import OutReadOptions
from ..io.exceptions import DataParseError, DataSourceNotFoundError
from ..io.out_file_reader import OutFileReader


class OutputFileRepository:
    pass

    def __init__(self, reader: OutFileReader | None = None) -> None:
        super().__init__()
        self._reader = reader or OutFileReader()

    def list_output_files(
        self, folder: Path, pattern: str = Defaults.FILE_FILTER
    ) -> list[Path]:
        """List files directly inside ``folder`` whose names end in ``pattern``.

        ``pattern`` is a regular expression anchored at the end of the name,
        so the default ``\\.out`` matches ``sim.out`` but not ``sim.out.bak``.
        Results are absolute paths sorted by file name.
        """
        folder = Path(folder).expanduser().resolve()
        if not folder.exists():
            raise DataSourceNotFoundError(f"Directory not found: {folder}")
        if not folder.is_dir():
            raise DataSourceNotFoundError(f"Not a directory: {folder}")
        try:
            matcher = re.compile(f"(?:{pattern})$")
        except re.error as e:
            raise DataParseError(f"Invalid file filter '{pattern}': {e}") from e
        files = [
            path
            for path in folder.iterdir()
            if path.is_file() and matcher.search(path.name)
        ]
        return sorted(files, key=lambda path: path.name)

    def read_output_file(
        self, file_path: str | Path, options: OutReadOptions | None = None
    ) -> OutputFileTable:
        path = Path(file_path).expanduser().resolve()
        return self._reader.read(path, options)
