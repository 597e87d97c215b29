"""Main CLI application."""

from __future__ import annotations

from typing import Annotated

import typer

from subseg import __version__
from subseg.cli.batch import batch_cmd
from subseg.cli.retime import retime_cmd
from subseg.cli.split import split_cmd
from subseg.cli.split_text import split_text_cmd
from subseg.config import load_config
from subseg.log_config import configure_logging

app = typer.Typer(
    name="subseg",
    help="Split transcripts into caption-length subtitle segments.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"subseg {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR."),
    ] = None,
) -> None:
    """Split transcripts into caption-length subtitle segments."""
    configure_logging(log_level or load_config().log_level)


app.command("split")(split_cmd)
app.command("split-text")(split_text_cmd)
app.command("retime")(retime_cmd)
app.command("batch")(batch_cmd)
