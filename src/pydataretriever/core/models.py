"""Core domain models for pydataretriever.

These models are pure Python dataclasses and enums with no I/O dependencies.
They describe what is passed to the retriever and what comes back from it.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Self

from pydataretriever.core.exceptions import InvalidConnectionError, InvalidScopeError


UPDATE_MARKER = "Downloading script: "


class ConnectionType(StrEnum):
    """Storage backends the retriever can install a dataset into."""

    MYSQL = "mysql"
    POSTGRES = "postgres"
    SQLITE = "sqlite"
    MSACCESS = "msaccess"
    CSV = "csv"
    JSON = "json"
    XML = "xml"

    @classmethod
    def parse(cls, value: str | ConnectionType | None) -> Self:
        """Convert a user supplied value to a ConnectionType.

        Args:
            value: Connection name, case-insensitive.

        Returns:
            The matching ConnectionType.

        Raises:
            InvalidConnectionError: If value is missing or not supported.
        """
        if isinstance(value, cls):
            return value
        if not value:
            raise InvalidConnectionError(None)
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidConnectionError(str(value)) from None

    @property
    def is_server(self) -> bool:
        """True for database servers that need a conn_file."""
        return self in (ConnectionType.MYSQL, ConnectionType.POSTGRES)

    @property
    def is_file_database(self) -> bool:
        """True for single-file databases that accept --file."""
        return self in (ConnectionType.SQLITE, ConnectionType.MSACCESS)

    @property
    def is_flat_file(self) -> bool:
        """True for flat-file outputs written one file per table."""
        return self in (ConnectionType.CSV, ConnectionType.JSON, ConnectionType.XML)


@dataclass(frozen=True, slots=True)
class ConnectionConfig:
    """Credentials for a mysql or postgres server.

    Attributes:
        host: Server host name.
        port: Server port, kept as text since it is only passed through.
        user: User name.
        password: Password.
    """

    host: str
    port: str
    user: str
    password: str

    REQUIRED_KEYS = ("host", "port", "user", "password")

    def __repr__(self) -> str:
        return (
            f"ConnectionConfig(host={self.host!r}, port={self.port!r}, "
            f"user={self.user!r}, password='***')"
        )


class ResetScope(StrEnum):
    """Parts of the retriever's local state that reset() can delete."""

    ALL = "all"
    SCRIPTS = "scripts"
    DATA = "data"
    CONNECTIONS = "connections"

    @classmethod
    def parse(cls, value: str | ResetScope) -> Self:
        """Convert a user supplied scope, case-insensitive.

        "connection" is accepted as an alias for "connections".

        Raises:
            InvalidScopeError: If the scope is unknown.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        if normalized == "connection":
            normalized = "connections"
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidScopeError(str(value)) from None

    @property
    def relative_path(self) -> str:
        """Folder under ~/.retriever removed by this scope ("" is the root)."""
        return {
            ResetScope.ALL: "",
            ResetScope.SCRIPTS: "scripts",
            ResetScope.DATA: "raw_data",
            ResetScope.CONNECTIONS: "connections",
        }[self]


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one retriever invocation.

    Attributes:
        args: The argv that was executed.
        returncode: Exit status of the process.
        stdout: Captured standard output ("" when not captured).
        stderr: Captured standard error ("" when not captured).
        log_file: File the output was redirected to, if any.
    """

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    log_file: Path | None = None

    @property
    def ok(self) -> bool:
        """True if the retriever exited successfully."""
        return self.returncode == 0

    @property
    def command(self) -> str:
        """The argv rendered as a single shell-quoted line."""
        return shlex.join(self.args)

    @property
    def lines(self) -> list[str]:
        """Captured stdout split into lines."""
        return self.stdout.splitlines()


@dataclass(frozen=True, slots=True)
class UpdateLog:
    """Output of ``retriever update``.

    Attributes:
        lines: Standard output lines of the update run.

    Example:
        >>> log = UpdateLog(["Downloading script: portal", "Downloading script: iris"])
        >>> str(log)
        'Downloaded scripts: iris, portal'
    """

    lines: list[str] = field(default_factory=list)

    def downloaded_scripts(self) -> list[str]:
        """Return the sorted names of scripts the update downloaded."""
        text = " ; ".join(self.lines)
        chunks = text.split(UPDATE_MARKER)[1:]
        names = (chunk.split(" ; ")[0].strip() for chunk in chunks)
        return sorted(name for name in names if name)

    def summary_line(self) -> str:
        """Return the retriever's status line (third line of output)."""
        if len(self.lines) > 2:
            return self.lines[2]
        return ""

    def __str__(self) -> str:
        scripts = self.downloaded_scripts()
        if not scripts:
            return "No scripts downloaded"
        return f"Downloaded scripts: {', '.join(scripts)}"
