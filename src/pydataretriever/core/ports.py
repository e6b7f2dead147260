"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable


if TYPE_CHECKING:
    from pathlib import Path

    from pydataretriever.core.models import CommandResult

T_co = TypeVar("T_co", covariant=True)

ConfirmCallback = Callable[[str], bool]


@runtime_checkable
class RunnerPort(Protocol):
    """Runs the retriever executable as a blocking subprocess."""

    def run(
        self,
        args: list[str],
        *,
        log_file: Path | None = None,
        capture: bool = False,
        discard_stderr: bool = False,
    ) -> CommandResult:
        """Run args and wait for the process to exit.

        Args:
            args: Full argv, executable first.
            log_file: If given, stdout and stderr are appended to this file.
            capture: Capture stdout (and stderr) as text in the result.
            discard_stderr: Send stderr to the null device.

        Returns:
            CommandResult with the exit status and any captured output.
            A non-zero exit status is reported, not raised.

        Raises:
            RetrieverNotFoundError: If the executable cannot be started.
        """
        ...


@runtime_checkable
class Reader(Protocol[T_co]):
    """Loads a fetched file into a typed in-memory table."""

    def read(self, path: Path) -> T_co:
        """Read the file at path."""
        ...


@runtime_checkable
class ProgressReporter(Protocol):
    """Reports long-running retriever calls to the user.

    The retriever gives no byte-level progress, so a task only has a
    start and a finish.
    """

    def start_task(self, name: str, description: str) -> None:
        """Start tracking a task.

        Args:
            name: Key for the task (usually the dataset name).
            description: Human-readable text shown while it runs.
        """
        ...

    def finish_task(self, name: str) -> None:
        """Mark a task as complete.

        Args:
            name: The task name passed to start_task().
        """
        ...


class NullProgressReporter:
    """A ProgressReporter that produces no output.

    Used as the default when no progress reporting is desired.
    """

    def start_task(self, name: str, description: str) -> None:  # noqa: ARG002
        """Do nothing."""

    def finish_task(self, name: str) -> None:
        """Do nothing."""
        _ = name  # Unused but required by protocol
