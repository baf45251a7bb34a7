import click

from .commands.load import load_command
from .commands.token import token_command


@click.group()
def app() -> None:
    pass


app.add_command(load_command, name="load")
app.add_command(token_command, name="token")
__all__ = ["app"]
