from pathlib import Path

import click
import pandas as pd
from rich.console import Console

from ...domain.exceptions import TokenExtractionError
from ...domain.services.token_extractor import get_token

console = Console(stderr=True)


@click.command()
@click.argument(
    "input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--column", required=True, help="Column holding the delimited values")
@click.option(
    "--position",
    type=click.IntRange(min=1),
    required=True,
    help="1-based position of the token to extract",
)
@click.option(
    "--sep", "separator", required=True, help="Separator, may be several characters"
)
@click.option("--name", "new_column", required=True, help="Name of the new column")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the result to this CSV file instead of standard output",
)
def token_command(
    input_file: Path,
    column: str,
    position: int,
    separator: str,
    new_column: str,
    output: Path | None,
) -> None:
    """Append one token of a delimited column of a CSV table as a new column."""
    try:
        frame = pd.read_csv(
            input_file, dtype=str, keep_default_na=False, na_values=[""]
        )
    except pd.errors.EmptyDataError as exc:
        raise click.ClickException(f"CSV file is empty: {input_file}") from exc
    except pd.errors.ParserError as exc:
        raise click.ClickException(f"Failed to parse CSV {input_file}: {exc}") from exc

    try:
        result = get_token(frame, column, position, separator, new_column)
    except TokenExtractionError as exc:
        raise click.ClickException(str(exc)) from exc

    if output is None:
        click.echo(result.to_csv(index=False), nl=False)
        return
    result.to_csv(output, index=False)
    console.print(f"[green]✓[/green] Wrote {len(result):,} rows to {output}")
