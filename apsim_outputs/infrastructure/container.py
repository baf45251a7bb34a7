from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.load_outputs_use_case import (
    LoadOutputsDependencies,
    LoadOutputsUseCase,
)
from .io.out_file_reader import OutFileReader
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.output_file_repository import OutputFileRepository

if TYPE_CHECKING:
    from ..application.ports.repositories import OutputFileRepositoryPort
    from ..application.ports.services import LoggerPort


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self._logger_instance: LoggerPort | None = None
        self._out_file_reader_instance: OutFileReader | None = None
        self._output_file_repository_instance: OutputFileRepositoryPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_out_file_reader(self) -> OutFileReader:
        if self._out_file_reader_instance is None:
            self._out_file_reader_instance = OutFileReader()
        return self._out_file_reader_instance

    def create_output_file_repository(self) -> OutputFileRepositoryPort:
        if self._output_file_repository_instance is None:
            self._output_file_repository_instance = OutputFileRepository(
                reader=self.create_out_file_reader()
            )
        return self._output_file_repository_instance

    def create_load_outputs_use_case(self) -> LoadOutputsUseCase:
        return LoadOutputsUseCase(
            LoadOutputsDependencies(
                logger=self.create_logger(),
                output_file_repository=self.create_output_file_repository(),
            )
        )

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_output_file_repository(
        self, repository: OutputFileRepositoryPort
    ) -> None:
        self._output_file_repository_instance = repository


def create_default_container(
    verbose: int = 0, console: Console | None = None
) -> DependencyContainer:
    return DependencyContainer(verbose=verbose, console=console)
