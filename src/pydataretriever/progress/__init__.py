"""Progress reporting adapters."""

from pydataretriever.progress.rich_progress import RichProgressReporter


__all__ = ["RichProgressReporter"]
