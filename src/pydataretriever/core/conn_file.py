"""Connection file parsing.

A conn_file holds the credentials for a mysql or postgres server, one
whitespace separated ``key value`` pair per line, in any order::

    host     my_server@my_host.com
    port     my_port_number
    user     my_user_name
    password my_password
"""

from __future__ import annotations

from pathlib import Path

from pydataretriever.core.exceptions import ConnFileNotFoundError, ConnFileParseError
from pydataretriever.core.models import ConnectionConfig, ConnectionType


def default_conn_file(connection: ConnectionType, directory: Path | str = ".") -> Path:
    """Return the conventional conn_file path, e.g. ``./mysql.conn``."""
    return Path(directory) / f"{connection.value}.conn"


def read_conn_file(
    path: Path | str, connection: ConnectionType = ConnectionType.MYSQL
) -> ConnectionConfig:
    """Parse a conn_file into a ConnectionConfig.

    Args:
        path: Location of the conn_file.
        connection: Server type the file is for, used in error messages.

    Returns:
        The parsed credentials.

    Raises:
        ConnFileNotFoundError: If the file does not exist.
        ConnFileParseError: If a line is malformed, a key is repeated,
            or a required key is missing.
    """
    path = Path(path)
    if not path.is_file():
        raise ConnFileNotFoundError(path, connection.value)

    values: dict[str, str] = {}
    for lineno, raw in enumerate(path.read_text().splitlines(), 1):
        line = raw.strip()
        if not line:
            continue
        fields = line.split()
        if len(fields) != 2:
            raise ConnFileParseError(
                f"Expected 'key value' in {path}, got: {line!r}", path, line=lineno
            )
        key, value = fields
        key = key.lower()
        if key in values:
            raise ConnFileParseError(
                f"Duplicate key '{key}' in {path}", path, line=lineno
            )
        values[key] = value

    missing = [k for k in ConnectionConfig.REQUIRED_KEYS if k not in values]
    if missing:
        raise ConnFileParseError(
            f"conn_file {path} is missing: {', '.join(missing)}", path
        )

    return ConnectionConfig(
        host=values["host"],
        port=values["port"],
        user=values["user"],
        password=values["password"],
    )
