"""Update command for CLI."""

from __future__ import annotations

import typer

from pydataretriever.cli.main import app, exit_with_error
from pydataretriever.core.exceptions import RetrieverError


@app.command()
def update() -> None:
    """Update the retriever's dataset scripts to the latest release."""
    from pydataretriever import Retriever, RichProgressReporter

    try:
        with RichProgressReporter() as progress:
            update_log = Retriever.from_environment(progress=progress).get_updates()
    except RetrieverError as e:
        exit_with_error(e)

    typer.echo(str(update_log))
