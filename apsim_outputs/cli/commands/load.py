"""Load command - Read APSIM output files and merge them into one table.

This module is a thin adapter between the Click CLI framework and the
application layer's LoadOutputsUseCase. It is responsible for:
1. Parsing CLI arguments and layering them over the runtime config
2. Creating the LoadOutputsRequest
3. Calling the use case
4. Presenting the result and optionally writing it as CSV
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import cast

import click
from rich.console import Console

from ...application.models import LoadOutputsRequest
from ...config import ConfigLoader, LoaderConfig
from ...domain.entities.policies import DuplicateConstantPolicy, ErrorPolicy
from ...domain.exceptions import ApsimOutputsError
from ...infrastructure import create_default_container
from ..presenters.summary import LoadSummaryPresenter, LoadSummaryRequest

console = Console()


@dataclass(frozen=True)
class LoadCommandOptions:
    single_file: bool
    config_file: Path | None
    file_filter: str | None
    file_limit: int | None
    fill: bool | None
    add_constants: bool | None
    skip_empty: bool | None
    error_policy: str | None
    duplicate_constants: str | None
    output: Path | None
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> "LoadCommandOptions":
        return cls(
            single_file=cast("bool", options["single_file"]),
            config_file=cast("Path | None", options.get("config_file")),
            file_filter=cast("str | None", options.get("file_filter")),
            file_limit=cast("int | None", options.get("file_limit")),
            fill=cast("bool | None", options.get("fill")),
            add_constants=cast("bool | None", options.get("add_constants")),
            skip_empty=cast("bool | None", options.get("skip_empty")),
            error_policy=cast("str | None", options.get("error_policy")),
            duplicate_constants=cast("str | None", options.get("duplicate_constants")),
            output=cast("Path | None", options.get("output")),
            verbose=cast("int", options["verbose"]),
        )

    def apply_to(self, config: LoaderConfig) -> LoaderConfig:
        overrides: dict[str, object] = {
            "file_filter": self.file_filter,
            "file_limit": self.file_limit,
            "fill": self.fill,
            "add_constants": self.add_constants,
            "skip_empty_files": self.skip_empty,
            "error_policy": (
                ErrorPolicy(self.error_policy) if self.error_policy else None
            ),
            "duplicate_constants": (
                DuplicateConstantPolicy(self.duplicate_constants)
                if self.duplicate_constants
                else None
            ),
        }
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(config, **changes)


@click.command()
@click.argument("source", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--single-file",
    "single_file",
    is_flag=True,
    help="Treat SOURCE as one output file instead of a directory to scan",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to an apsim_outputs.toml config file (default: ./apsim_outputs.toml)",
)
@click.option(
    "--filter",
    "file_filter",
    help="Regular expression file names must end with (default: \\.out)",
)
@click.option(
    "--limit",
    "file_limit",
    type=click.IntRange(min=0),
    help="Stop after loading this many files (0 loads all)",
)
@click.option(
    "--fill/--no-fill",
    default=None,
    help="Merge files with differing columns, filling gaps with missing values",
)
@click.option(
    "--constants/--no-constants",
    "add_constants",
    default=None,
    help="Add header constants and factor levels as columns",
)
@click.option(
    "--skip-empty/--no-skip-empty",
    "skip_empty",
    default=None,
    help="Skip empty output files instead of failing",
)
@click.option(
    "--on-error",
    "error_policy",
    type=click.Choice([policy.value for policy in ErrorPolicy]),
    help="abort on the first unreadable file, or skip it and report",
)
@click.option(
    "--duplicate-constants",
    "duplicate_constants",
    type=click.Choice([policy.value for policy in DuplicateConstantPolicy]),
    help="Keep the last value of a repeated constant, or fail",
)
@click.option(
    "--output",
    "output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the merged table to this CSV file",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def load_command(source: Path, **options: object) -> None:
    """Load APSIM output files and merge them into one table.

    SOURCE is a directory whose output files are all loaded (not recursive),
    or a single file when --single-file is given. Constants from the file
    headers become columns and every row is tagged with its fileName.

    Examples:

    \b
        # Load every .out file in a directory
        apsim-outputs load outputs/

    \b
        # Load one file and write it as CSV
        apsim-outputs load outputs/Wheat.out --single-file --output wheat.csv

    \b
        # Merge files with differing columns, skipping empty ones
        apsim-outputs load outputs/ --fill --skip-empty
    """
    command_options = LoadCommandOptions.from_kwargs(dict(options))

    try:
        runtime_config = command_options.apply_to(
            ConfigLoader.load(config_file=command_options.config_file)
        )
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    request = LoadOutputsRequest.from_config(
        runtime_config, source=source, load_all=not command_options.single_file
    )

    container = create_default_container(
        verbose=command_options.verbose, console=console
    )
    use_case = container.create_load_outputs_use_case()

    try:
        response = use_case.execute(request)
    except ApsimOutputsError as exc:
        raise click.ClickException(str(exc)) from exc

    if command_options.output is not None:
        response.frame.to_csv(command_options.output, index=False)

    presenter = LoadSummaryPresenter(console)
    presenter.present(
        LoadSummaryRequest(response=response, output_path=command_options.output)
    )

    if response.has_errors:
        raise click.ClickException("Load completed with errors")
