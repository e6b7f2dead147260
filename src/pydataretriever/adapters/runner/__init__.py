"""Runner adapters for invoking the retriever."""

from pydataretriever.adapters.runner.subprocess_runner import SubprocessRunner


__all__ = ["SubprocessRunner"]
