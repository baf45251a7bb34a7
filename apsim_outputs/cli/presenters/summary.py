from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from ...domain.entities.output_file import ColumnKind

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from ...application.models import LoadOutputsResponse


@dataclass(frozen=True, slots=True)
class LoadSummaryRequest:
    response: LoadOutputsResponse
    output_path: Path | None = None


class LoadSummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, request: LoadSummaryRequest) -> None:
        response = request.response
        self.console.print()
        if response.file_results:
            self.console.print(self._build_files_table(response))
            self.console.print()
        if response.column_kinds:
            self.console.print(self._build_columns_table(response))
            self.console.print()
        self._print_status_summary(response)
        self._print_output_information(response, request.output_path)
        self._print_problem_details(response)

    def _build_files_table(self, response: LoadOutputsResponse) -> Table:
        table = Table(
            title="📊 Loaded Output Files",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
            title_style="bold magenta",
        )
        table.add_column("File", style="cyan", no_wrap=True)
        table.add_column("Rows", justify="right", style="yellow", no_wrap=True)
        table.add_column("Columns", justify="right", style="yellow", no_wrap=True)
        table.add_column("Notes", style="dim", overflow="fold")
        for result in response.file_results:
            notes = ""
            if result.duplicate_constant_keys:
                keys = ", ".join(result.duplicate_constant_keys)
                notes = f"repeated constants: {escape(keys)}"
            table.add_row(
                escape(result.file_name),
                f"{result.rows:,}",
                str(result.columns),
                notes,
            )
        table.add_section()
        table.add_row(
            "[bold]Total[/bold]",
            f"[bold yellow]{response.row_count:,}[/bold yellow]",
            f"[bold yellow]{response.frame.shape[1]}[/bold yellow]",
            "",
        )
        return table

    def _build_columns_table(self, response: LoadOutputsResponse) -> Table:
        table = Table(
            title="🧮 Column Types",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
            title_style="bold magenta",
        )
        table.add_column("Column", style="cyan", no_wrap=True)
        table.add_column("Kind", style="white", no_wrap=True)
        table.add_column("Missing", justify="right", style="yellow", no_wrap=True)
        missing_counts = response.frame.isna().sum()
        for column, kind in response.column_kinds.items():
            style = "green" if kind is ColumnKind.NUMERIC else "white"
            table.add_row(
                escape(str(column)),
                f"[{style}]{kind.value}[/{style}]",
                f"{int(missing_counts[column]):,}",
            )
        return table

    def _print_status_summary(self, response: LoadOutputsResponse) -> None:
        loaded = response.file_count
        failed = len(response.errors)
        skipped = len(response.skipped_files)
        if failed == 0 and skipped == 0:
            status_line = f"[bold green]✓ {loaded} files loaded successfully[/bold green]"
        else:
            status_line = f"[green]✓ {loaded} loaded[/green]"
            if skipped:
                status_line += f"  [yellow]⊘ {skipped} skipped[/yellow]"
            if failed:
                status_line += f"  [red]✗ {failed} failed[/red]"
        self.console.print(status_line)

    def _print_output_information(
        self, response: LoadOutputsResponse, output_path: Path | None
    ) -> None:
        if response.source is not None:
            self.console.print(
                f"[bold]📁 Source:[/bold] [cyan]{escape(str(response.source))}[/cyan]",
                highlight=False,
            )
        self.console.print(
            f"[bold]📈 Total rows:[/bold] [yellow]{response.row_count:,}[/yellow]"
        )
        if output_path is not None:
            self.console.print(
                f"[bold]💾 Written to:[/bold] [cyan]{escape(str(output_path))}[/cyan]",
                highlight=False,
            )

    def _print_problem_details(self, response: LoadOutputsResponse) -> None:
        if not response.errors and not response.skipped_files:
            return
        table = Table(
            title="⚠ Files Not Loaded",
            show_header=True,
            header_style="bold red",
            border_style="red",
        )
        table.add_column("File", style="cyan", no_wrap=True)
        table.add_column("Status", style="white", no_wrap=True)
        table.add_column("Reason", style="white", overflow="fold")
        for file_name, reason in response.skipped_files:
            table.add_row(
                escape(file_name), "[yellow]skipped[/yellow]", escape(reason)
            )
        for file_name, message in response.errors:
            table.add_row(escape(file_name), "[red]failed[/red]", escape(message))
        self.console.print()
        self.console.print(table)
