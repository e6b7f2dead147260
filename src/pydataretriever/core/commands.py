"""Argument list builders for the retriever command line.

Each builder returns the full argv, executable first. Nothing here touches
the file system or starts a process.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydataretriever.core.models import ConnectionType


if TYPE_CHECKING:
    from pydataretriever.core.models import ConnectionConfig


# Placeholders expanded by the retriever itself, not by us
TABLE_NAME_TEMPLATE = "{db}_{table}"


def install_args(
    executable: str,
    dataset: str,
    connection: ConnectionType,
    *,
    conn: ConnectionConfig | None = None,
    db_file: Path | str | None = None,
    data_dir: Path | str = ".",
    quiet: bool = False,
) -> list[str]:
    """Build the argv for ``retriever install``.

    Args:
        executable: Retriever executable name or path.
        dataset: Dataset name.
        connection: Target backend.
        conn: Credentials, required for mysql and postgres.
        db_file: Database file for sqlite and msaccess.
        data_dir: Output directory for csv, json and xml.
        quiet: Run the retriever with -q.

    Returns:
        The argv list.

    Raises:
        ValueError: If a server connection is given without credentials.
    """
    args = [executable]
    if quiet:
        args.append("-q")
    args += ["install", connection.value]

    if connection.is_server:
        if conn is None:
            raise ValueError(f"{connection.value} install requires connection credentials")
        args += [
            dataset,
            "--user",
            conn.user,
            "--password",
            conn.password,
            "--host",
            conn.host,
            "--port",
            conn.port,
        ]
    elif connection.is_file_database:
        args.append(dataset)
        if db_file is not None:
            args += ["--file", str(db_file)]
    else:
        table_name = Path(data_dir) / f"{TABLE_NAME_TEMPLATE}.{connection.value}"
        args += ["--table_name", str(table_name), dataset]

    return args


def download_args(
    executable: str,
    dataset: str,
    path: Path | str = ".",
    sub_dir: bool = False,
) -> list[str]:
    """Build the argv for ``retriever download``."""
    args = [executable, "download", dataset, "-p", str(path)]
    if sub_dir:
        args.append("--subdir")
    return args


def ls_args(executable: str) -> list[str]:
    """Build the argv for ``retriever ls``."""
    return [executable, "ls"]


def update_args(executable: str) -> list[str]:
    """Build the argv for ``retriever update``."""
    return [executable, "update"]


def log_file_for(log_dir: Path | str, dataset: str) -> Path:
    """Return the log file used when output is redirected for a dataset."""
    return Path(log_dir) / f"{dataset}_download.log"
