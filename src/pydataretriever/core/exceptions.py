"""Domain exceptions for pydataretriever.

All library errors inherit from RetrieverError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


CONNECTION_OPTIONS = ("mysql", "postgres", "sqlite", "msaccess", "csv", "json", "xml")

CONN_FILE_FORMAT = (
    "\n    host my_server@myhost.com"
    "\n    port my_port_number"
    "\n    user my_user_name"
    "\n    password my_pass_word"
)

INSTALL_URL = "http://data-retriever.org/download.html"


class RetrieverError(Exception):
    """Base class for all pydataretriever exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class InvalidConnectionError(RetrieverError, ValueError):
    """Raised when the connection argument is missing or not supported.

    Attributes:
        connection: The value that was given, or None if it was missing.
    """

    def __init__(self, connection: str | None = None) -> None:
        self.connection = connection
        options = ", ".join(f"'{c}'" for c in CONNECTION_OPTIONS)
        super().__init__(
            "The argument 'connection' must be set to one of the following "
            f"options: {options}"
        )

    @property
    def recovery_hint(self) -> str:
        """Repeat the accepted values."""
        return f"Use one of: {', '.join(CONNECTION_OPTIONS)}"


class InvalidScopeError(RetrieverError, ValueError):
    """Raised when reset() is given an unknown scope.

    Attributes:
        scope: The rejected scope value.
    """

    def __init__(self, scope: str) -> None:
        self.scope = scope
        super().__init__(f"Unknown reset scope '{scope}'")

    @property
    def recovery_hint(self) -> str:
        """List the accepted scopes."""
        return "Use one of: all, scripts, data, connections"


class ConnFileError(RetrieverError):
    """Base class for connection file errors.

    Attributes:
        path: Path to the connection file.
    """

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(message)


class ConnFileNotFoundError(ConnFileError):
    """Raised when a server connection needs a conn_file that doesn't exist.

    Attributes:
        connection: The server connection type (mysql or postgres).
    """

    def __init__(self, path: Path, connection: str) -> None:
        self.connection = connection
        super().__init__(
            f"conn_file: {path} does not exist. To use a {connection} server "
            "create a 'conn_file' with the format:"
            f"{CONN_FILE_FORMAT}\nwhere order of arguments does not matter",
            path,
        )

    @property
    def recovery_hint(self) -> str:
        """Suggest where the file is expected."""
        return f"Create {self.path} or pass conn_file explicitly"


class ConnFileParseError(ConnFileError):
    """Raised when a conn_file exists but can't be parsed.

    Attributes:
        line: Line number where the error occurred (if available).
    """

    def __init__(self, message: str, path: Path, line: int | None = None) -> None:
        self.line = line
        super().__init__(message, path)

    @property
    def recovery_hint(self) -> str:
        """Point at the offending line and the expected format."""
        where = f"{self.path.name} at line {self.line}" if self.line else self.path.name
        return f"Check {where}; expected one 'key value' pair per line:{CONN_FILE_FORMAT}"


class RetrieverNotFoundError(RetrieverError):
    """Raised when the retriever executable can't be started.

    Attributes:
        executable: The executable name or path that was tried.
        cause: The underlying exception, if any.
    """

    def __init__(self, executable: str, cause: Exception | None = None) -> None:
        self.executable = executable
        self.cause = cause
        super().__init__(
            f"The retriever executable '{executable}' is not on your path "
            "and may not be installed."
        )

    @property
    def recovery_hint(self) -> str:
        """Point at the install instructions."""
        return (
            "Install the Data Retriever and make sure it is on PATH, "
            f"or set PYDATARETRIEVER_EXECUTABLE. See {INSTALL_URL}"
        )


class RetrieverCommandError(RetrieverError):
    """Raised when the retriever exits with a non-zero status.

    Attributes:
        command: The command line that was run.
        returncode: Exit status of the retriever process.
        stderr: Captured standard error, if it was captured.
        log_file: Log file the output was redirected to, if any.
    """

    def __init__(
        self,
        command: str,
        returncode: int,
        stderr: str = "",
        log_file: Path | None = None,
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        self.log_file = log_file
        message = f"Command '{command}' failed with exit status {returncode}"
        detail = stderr.strip().splitlines()
        if detail:
            message = f"{message}: {detail[-1]}"
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest where to look for the retriever's own output."""
        if self.log_file is not None:
            return f"See the retriever log at {self.log_file}"
        return "Re-run with --verbose to see the retriever command line"


class EmptyFetchError(RetrieverError):
    """Raised when fetch() finds no files written for the dataset.

    Attributes:
        dataset: The dataset that was fetched.
        directory: The directory that was searched.
    """

    def __init__(self, dataset: str, directory: Path) -> None:
        self.dataset = dataset
        self.directory = directory
        super().__init__(f"No data files found for dataset '{dataset}'")

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the dataset name."""
        return "Run 'dataretriever datasets' to check the dataset name"
