"""Reset command for CLI."""

from __future__ import annotations

import typer

from pydataretriever.cli.main import app, exit_with_error
from pydataretriever.core.exceptions import RetrieverError


def _typer_confirm(message: str) -> bool:
    return typer.confirm(message, default=False, show_default=False)


@app.command()
def reset(
    scope: str = typer.Argument(
        "all",
        help="What to delete: all, scripts, data or connections.",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Don't ask for confirmation.",
    ),
) -> None:
    """Delete the retriever's cached scripts, data or connections."""
    from pydataretriever import Retriever

    confirm = (lambda _message: True) if yes else _typer_confirm

    try:
        deleted = Retriever.from_environment(confirm=confirm).reset(scope)
    except RetrieverError as e:
        exit_with_error(e)

    if deleted is None:
        typer.echo("Nothing deleted.")
    else:
        typer.echo(f"Deleted {deleted}")
