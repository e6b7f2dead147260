"""Rich-based progress reporter for terminal output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.progress import (
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


if TYPE_CHECKING:
    from types import TracebackType


class RichProgressReporter:
    """Progress reporter using Rich for terminal display.

    Shows a spinner with elapsed time while the retriever runs. The
    retriever reports no byte counts, so tasks are indeterminate.

    Example:
        with RichProgressReporter() as reporter:
            retriever = Retriever.from_environment(progress=reporter)
            retriever.install("iris", "csv")
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the progress display.

        Args:
            console: Console to render to. Defaults to stderr.
        """
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            TimeElapsedColumn(),
            console=console if console is not None else Console(stderr=True),
            transient=True,
        )
        self._tasks: dict[str, TaskID] = {}
        self._started = False

    def __enter__(self) -> RichProgressReporter:
        """Start the progress display."""
        self._progress.start()
        self._started = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Stop the progress display."""
        self._progress.stop()
        self._started = False

    def start_task(self, name: str, description: str) -> None:
        """Show a spinner for a running retriever call."""
        # Auto-start if not in context manager
        if not self._started:
            self._progress.start()
            self._started = True

        self._tasks[name] = self._progress.add_task(description, total=None)

    def finish_task(self, name: str) -> None:
        """Remove the spinner for a finished call."""
        task_id = self._tasks.pop(name, None)
        if task_id is not None:
            self._progress.remove_task(task_id)
