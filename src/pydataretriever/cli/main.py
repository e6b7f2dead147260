"""CLI commands for pydataretriever."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import typer
from rich.console import Console
from rich.table import Table

from pydataretriever.cli.logger import configure_logging
from pydataretriever.core.exceptions import RetrieverError


if TYPE_CHECKING:
    from typing import Any


app = typer.Typer(
    name="dataretriever",
    help="Install, download and load datasets with the Data Retriever.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging, including each retriever command line.",
    ),
) -> None:
    """Install, download and load datasets with the Data Retriever."""
    configure_logging(verbose)


def exit_with_error(error: RetrieverError) -> NoReturn:
    """Report a library error on stderr and exit with status 1."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)
    raise typer.Exit(1)


@app.command()
def install(
    dataset: str = typer.Argument(help="Name of the dataset to install."),
    connection: str = typer.Argument(
        help="One of: mysql, postgres, sqlite, msaccess, csv, json, xml."
    ),
    db_file: str | None = typer.Option(
        None,
        "--db-file",
        help="Database file to load into (sqlite and msaccess).",
    ),
    conn_file: str | None = typer.Option(
        None,
        "--conn-file",
        help="Connection file for mysql/postgres. Defaults to ./<connection>.conn.",
    ),
    data_dir: str = typer.Option(
        ".",
        "--data-dir",
        help="Directory for csv, json and xml output.",
    ),
    log_dir: str | None = typer.Option(
        None,
        "--log-dir",
        help="Write retriever output to <log-dir>/<dataset>_download.log.",
    ),
) -> None:
    """Install a dataset into a database or flat files."""
    from pydataretriever import Retriever, RichProgressReporter

    try:
        with RichProgressReporter() as progress:
            retriever = Retriever.from_environment(progress=progress)
            retriever.install(
                dataset,
                connection,
                db_file=db_file,
                conn_file=conn_file,
                data_dir=data_dir,
                log_dir=log_dir,
            )
    except RetrieverError as e:
        exit_with_error(e)
    typer.echo(f"Installed '{dataset}' ({connection.lower()}).")


@app.command()
def download(
    dataset: str = typer.Argument(help="Name of the dataset to download."),
    path: str = typer.Option(
        ".",
        "--path",
        "-p",
        help="Directory to download the raw files into.",
    ),
    sub_dir: bool = typer.Option(
        False,
        "--sub-dir",
        help="Keep the dataset's subdirectories under --path.",
    ),
    log_dir: str | None = typer.Option(
        None,
        "--log-dir",
        help="Write retriever output to <log-dir>/<dataset>_download.log.",
    ),
) -> None:
    """Download a dataset's raw files with no processing."""
    from pydataretriever import Retriever, RichProgressReporter

    try:
        with RichProgressReporter() as progress:
            retriever = Retriever.from_environment(progress=progress)
            retriever.download(dataset, path=path, sub_dir=sub_dir, log_dir=log_dir)
    except RetrieverError as e:
        exit_with_error(e)
    typer.echo(f"Downloaded '{dataset}' to {path}.")


@app.command()
def fetch(
    dataset: str = typer.Argument(help="Name of the dataset to fetch."),
    show_output: bool = typer.Option(
        False,
        "--show-output",
        help="Let the retriever print its progress instead of running quietly.",
    ),
    reader: str = typer.Option(
        "pandas",
        "--reader",
        "-r",
        help="Table library to load with: pandas or polars.",
    ),
    output_dir: str | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Also write each table to <output-dir>/<table>.csv.",
    ),
) -> None:
    """Fetch a dataset and summarize its tables."""
    from pydataretriever import Retriever
    from pydataretriever.adapters.readers import get_reader

    try:
        table_reader = get_reader(reader)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    try:
        retriever = Retriever.from_environment()
        tables = retriever.fetch(dataset, quiet=not show_output, reader=table_reader)
    except RetrieverError as e:
        exit_with_error(e)

    out = Path(output_dir) if output_dir else None
    if out is not None:
        out.mkdir(parents=True, exist_ok=True)

    table = Table(title=dataset)
    table.add_column("Table")
    table.add_column("Rows", justify="right")
    table.add_column("Columns", justify="right")
    for name, frame in tables.items():
        rows, cols = frame.shape
        table.add_row(name, str(rows), str(cols))
        if out is not None:
            _write_csv(frame, out / f"{name}.csv")

    console = Console()
    console.print(table)


def _write_csv(frame: Any, path: Path) -> None:
    """Write a pandas or polars DataFrame to CSV."""
    if hasattr(frame, "write_csv"):
        frame.write_csv(path)
    else:
        frame.to_csv(path, index=False)


@app.command()
def check() -> None:
    """Check that the retriever executable can be found."""
    from pydataretriever.config import (
        find_retriever,
        missing_retriever_message,
        set_home,
    )

    found = find_retriever(home=set_home())
    if found is None:
        typer.echo(missing_retriever_message(), err=True)
        raise typer.Exit(1)
    typer.echo(f"retriever found at {found}")
    typer.echo(
        "Use 'dataretriever update' to download the most recent release of "
        "download scripts."
    )


def main() -> None:
    """Entry point for the CLI."""
    app()
