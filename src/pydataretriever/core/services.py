"""Core domain services for pydataretriever."""

from __future__ import annotations

import logging
import re
import shutil
import tempfile
from pathlib import Path
from typing import Any

from pydataretriever.core.commands import (
    download_args,
    install_args,
    log_file_for,
    ls_args,
    update_args,
)
from pydataretriever.core.conn_file import default_conn_file, read_conn_file
from pydataretriever.core.exceptions import EmptyFetchError, RetrieverCommandError
from pydataretriever.core.fetch_files import match_dataset_files, table_name
from pydataretriever.core.models import (
    CommandResult,
    ConnectionType,
    ResetScope,
    UpdateLog,
)
from pydataretriever.core.ports import (
    ConfirmCallback,
    NullProgressReporter,
    ProgressReporter,
    Reader,
    RunnerPort,
)


log = logging.getLogger(__name__)

# Header lines printed by `retriever ls`, e.g. "Available datasets : 213"
_LS_HEADER = re.compile(r"^\s*[A-Za-z][A-Za-z ]*datasets\s*:", re.IGNORECASE)

RESET_PROMPT = "Do you want to proceed? (y/N)"


class Retriever:
    """Runs retriever commands and post-processes their output."""

    def __init__(
        self,
        runner: RunnerPort,
        executable: str = "retriever",
        home: Path | None = None,
        progress: ProgressReporter | None = None,
        confirm: ConfirmCallback | None = None,
    ) -> None:
        self._runner = runner
        self.executable = executable
        self.home = home if home is not None else Path.home()
        self._progress = progress if progress is not None else NullProgressReporter()
        self._confirm = confirm

    @classmethod
    def from_environment(
        cls,
        progress: ProgressReporter | None = None,
        confirm: ConfirmCallback | None = None,
    ) -> Retriever:
        """Create a Retriever with the subprocess runner and detected settings.

        Args:
            progress: Optional progress reporter for long running calls.
            confirm: Callback for reset() confirmation. Defaults to an
                interactive prompt.

        Returns:
            Retriever using SubprocessRunner and RetrieverSettings.from_env().
        """
        from pydataretriever.adapters.prompt import rich_confirm
        from pydataretriever.adapters.runner import SubprocessRunner
        from pydataretriever.config import RetrieverSettings

        settings = RetrieverSettings.from_env()
        return cls(
            runner=SubprocessRunner(),
            executable=settings.executable,
            home=settings.home,
            progress=progress,
            confirm=confirm if confirm is not None else rich_confirm,
        )

    def _run(
        self,
        args: list[str],
        task: str,
        description: str,
        *,
        log_file: Path | None = None,
        capture: bool = False,
        discard_stderr: bool = False,
    ) -> CommandResult:
        """Run args with progress display and raise on a non-zero exit."""
        self._progress.start_task(task, description)
        try:
            result = self._runner.run(
                args,
                log_file=log_file,
                capture=capture,
                discard_stderr=discard_stderr,
            )
        finally:
            self._progress.finish_task(task)

        if not result.ok:
            raise RetrieverCommandError(
                result.command,
                result.returncode,
                stderr=result.stderr,
                log_file=result.log_file,
            )
        return result

    def install(
        self,
        dataset: str,
        connection: str | ConnectionType | None,
        db_file: Path | str | None = None,
        conn_file: Path | str | None = None,
        data_dir: Path | str = ".",
        log_dir: Path | str | None = None,
    ) -> CommandResult:
        """Install a dataset into a database or flat files.

        Args:
            dataset: Name of the dataset to install.
            connection: One of mysql, postgres, sqlite, msaccess, csv, json, xml.
            db_file: Database file for sqlite and msaccess.
            conn_file: Credentials file for mysql and postgres. Defaults to
                ./mysql.conn or ./postgres.conn.
            data_dir: Output directory for csv, json and xml.
            log_dir: If given, retriever output goes to
                <log_dir>/<dataset>_download.log instead of the console.

        Returns:
            CommandResult of the install run.

        Raises:
            InvalidConnectionError: If connection is missing or unsupported.
            ConnFileNotFoundError: If a server conn_file doesn't exist.
            ConnFileParseError: If the conn_file is malformed.
            RetrieverCommandError: If the retriever exits with an error.
        """
        conn_type = ConnectionType.parse(connection)

        conn = None
        if conn_type.is_server:
            path = Path(conn_file) if conn_file is not None else default_conn_file(conn_type)
            conn = read_conn_file(path, conn_type)
            log.info(
                "Using conn_file: %s to connect to a %s server on host: %s",
                path,
                conn_type.value,
                conn.host,
            )

        args = install_args(
            self.executable,
            dataset,
            conn_type,
            conn=conn,
            db_file=db_file,
            data_dir=data_dir,
        )
        log_file = log_file_for(log_dir, dataset) if log_dir is not None else None
        return self._run(
            args,
            dataset,
            f"Installing {dataset} ({conn_type.value})",
            log_file=log_file,
        )

    def fetch(
        self,
        dataset: str,
        quiet: bool = True,
        reader: Reader[Any] | None = None,
    ) -> dict[str, Any]:
        """Install a dataset as CSV into a temporary directory and load it.

        Args:
            dataset: Name of the dataset to fetch.
            quiet: Run the retriever in quiet mode.
            reader: Reader used to load each CSV file. Defaults to
                PandasCsvReader.

        Returns:
            Dict mapping table names to loaded tables, e.g.
            {"species": DataFrame, "plots": DataFrame}.

        Raises:
            RetrieverCommandError: If the retriever exits with an error.
            EmptyFetchError: If the retriever wrote no files for dataset.
        """
        if reader is None:
            from pydataretriever.adapters.readers import PandasCsvReader

            reader = PandasCsvReader()

        with tempfile.TemporaryDirectory(prefix="pydataretriever-") as tmp:
            temp_path = Path(tmp)
            if quiet:
                args = install_args(
                    self.executable,
                    dataset,
                    ConnectionType.CSV,
                    data_dir=temp_path,
                    quiet=True,
                )
                self._run(args, dataset, f"Fetching {dataset}")
            else:
                self.install(dataset, ConnectionType.CSV, data_dir=temp_path)

            files = match_dataset_files(temp_path, dataset)
            if not files:
                raise EmptyFetchError(dataset, temp_path)

            tables = {table_name(f, dataset): reader.read(f) for f in files}

        log.debug("fetched %d table(s) for %s", len(tables), dataset)
        return tables

    def download(
        self,
        dataset: str,
        path: Path | str = ".",
        sub_dir: bool = False,
        log_dir: Path | str | None = None,
    ) -> CommandResult:
        """Download a dataset's raw files with no processing.

        Args:
            dataset: Name of the dataset to download.
            path: Directory to download into.
            sub_dir: Keep the dataset's subdirectory layout under path.
            log_dir: If given, retriever output goes to
                <log_dir>/<dataset>_download.log instead of the console.

        Raises:
            RetrieverCommandError: If the retriever exits with an error.
        """
        args = download_args(self.executable, dataset, path=path, sub_dir=sub_dir)
        log_file = log_file_for(log_dir, dataset) if log_dir is not None else None
        return self._run(args, dataset, f"Downloading {dataset}", log_file=log_file)

    def datasets(self) -> list[str]:
        """Return the names of all datasets the retriever can install.

        More information on each dataset is at
        http://data-retriever.org/available-data.html
        """
        result = self._run(
            ls_args(self.executable), "ls", "Listing datasets", capture=True
        )
        names: list[str] = []
        for line in result.lines:
            if _LS_HEADER.match(line):
                continue
            names.extend(line.split())
        return names

    def reset(
        self,
        scope: str | ResetScope = "all",
        confirm: ConfirmCallback | None = None,
    ) -> Path | None:
        """Delete cached retriever state after asking for confirmation.

        Args:
            scope: What to delete: "all", "scripts", "data" or "connections".
            confirm: Callback receiving the prompt text and returning True to
                proceed. Defaults to the callback given at construction.

        Returns:
            The deleted directory, or None if the user declined or there
            was nothing to delete.

        Raises:
            InvalidScopeError: If scope is unknown.
            ValueError: If no confirm callback is available.
        """
        reset_scope = ResetScope.parse(scope)
        confirm = confirm if confirm is not None else self._confirm
        if confirm is None:
            raise ValueError("reset() needs a confirm callback")

        log.warning(
            "This will delete %s cached information.", reset_scope.value.upper()
        )
        if not confirm(RESET_PROMPT):
            log.info("reset cancelled, nothing deleted")
            return None

        target = self.home / ".retriever"
        if reset_scope.relative_path:
            target = target / reset_scope.relative_path
        if not target.exists():
            log.info("%s does not exist, nothing to delete", target)
            return None

        shutil.rmtree(target)
        log.info("deleted %s", target)
        return target

    def get_updates(self) -> UpdateLog:
        """Update the retriever's dataset scripts to the latest release.

        Checks whether the scripts in ~/.retriever/scripts/ match the most
        recent official retriever release. Newer scripts may exist in the
        retriever repository that are not yet part of a release.

        Returns:
            UpdateLog with the update output. str() of it lists the
            scripts that were downloaded.

        Raises:
            RetrieverCommandError: If the retriever exits with an error.
        """
        log.info("Please wait while the retriever updates its scripts, ...")
        result = self._run(
            update_args(self.executable),
            "update",
            "Updating scripts",
            capture=True,
            discard_stderr=True,
        )
        update_log = UpdateLog(result.lines)
        summary = update_log.summary_line()
        if summary:
            log.info("%s", summary)
        return update_log
