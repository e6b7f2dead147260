"""Subprocess adapter implementing RunnerPort."""

from __future__ import annotations

import contextlib
import logging
import platform
import shlex
import subprocess
from typing import IO, TYPE_CHECKING

from pydataretriever.core.exceptions import RetrieverNotFoundError
from pydataretriever.core.models import CommandResult


if TYPE_CHECKING:
    from pathlib import Path


log = logging.getLogger(__name__)

# cmd.exe exit status for "is not recognized as an internal or external command"
SHELL_NOT_FOUND = 9009


class SubprocessRunner:
    """Runs the retriever with subprocess.run.

    On Windows the command is joined into a single line and handed to the
    shell, since the retriever's console script doesn't start reliably
    there when exec'd directly. Other systems exec the argv as is.

    Attributes:
        system: Operating system name as reported by platform.system().
    """

    def __init__(self, system: str | None = None) -> None:
        """Initialize the runner.

        Args:
            system: Override the detected operating system (for testing).
        """
        self.system = system if system is not None else platform.system()

    @property
    def use_shell(self) -> bool:
        """True if commands are dispatched through the shell."""
        return self.system == "Windows"

    def _command(self, args: list[str]) -> list[str] | str:
        if self.use_shell:
            return subprocess.list2cmdline(args)
        return args

    def run(
        self,
        args: list[str],
        *,
        log_file: Path | None = None,
        capture: bool = False,
        discard_stderr: bool = False,
    ) -> CommandResult:
        """Run args, wait for it to exit and report the outcome.

        Args:
            args: Full argv, executable first.
            log_file: If given, stdout and stderr are appended to this file.
            capture: Capture stdout (and stderr) as text.
            discard_stderr: Send stderr to the null device.

        Returns:
            CommandResult with the exit status and captured output.

        Raises:
            RetrieverNotFoundError: If the executable cannot be started, or
                the shell reports it as an unknown command.
        """
        log.debug("running: %s", shlex.join(args))

        with contextlib.ExitStack() as stack:
            stdout: IO[str] | int | None = None
            stderr: IO[str] | int | None = None
            if log_file is not None:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                handle = stack.enter_context(log_file.open("a"))
                stdout = handle
                stderr = subprocess.STDOUT
            elif capture:
                stdout = subprocess.PIPE
                stderr = subprocess.PIPE
            if discard_stderr:
                stderr = subprocess.DEVNULL

            try:
                completed = subprocess.run(
                    self._command(args),
                    stdout=stdout,
                    stderr=stderr,
                    text=True,
                    shell=self.use_shell,
                    check=False,
                )
            except FileNotFoundError as e:
                raise RetrieverNotFoundError(args[0], cause=e) from e
            except PermissionError as e:
                raise RetrieverNotFoundError(args[0], cause=e) from e

        log.debug("exit status %d: %s", completed.returncode, args[0])
        if self.use_shell and completed.returncode == SHELL_NOT_FOUND:
            raise RetrieverNotFoundError(args[0])
        return CommandResult(
            args=list(args),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            log_file=log_file,
        )
