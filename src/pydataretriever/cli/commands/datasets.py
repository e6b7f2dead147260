"""Datasets command for CLI."""

from __future__ import annotations

import typer

from pydataretriever.cli.main import app, exit_with_error
from pydataretriever.core.exceptions import RetrieverError


@app.command()
def datasets() -> None:
    """List the names of all available datasets."""
    from pydataretriever import Retriever

    try:
        names = Retriever.from_environment().datasets()
    except RetrieverError as e:
        exit_with_error(e)

    if not names:
        typer.echo("No datasets available. Run 'dataretriever update' first.")
        return

    for name in names:
        typer.echo(name)
