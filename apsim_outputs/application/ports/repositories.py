from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.output_file import OutputFileTable
    from ...domain.entities.policies import OutReadOptions


@runtime_checkable
class OutputFileRepositoryPort(Protocol):
    pass

    def list_output_files(self, folder: Path, pattern: str = ...) -> list[Path]: ...

    def read_output_file(
        self, file_path: str | Path, options: OutReadOptions | None = None
    ) -> OutputFileTable: ...
