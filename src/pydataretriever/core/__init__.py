"""Core domain module for pydataretriever.

This module contains pure Python domain models, argv builders and port
definitions. Apart from reading conn_files it has no I/O dependencies and
can be tested in isolation.
"""

from pydataretriever.core.models import (
    CommandResult,
    ConnectionConfig,
    ConnectionType,
    ResetScope,
    UpdateLog,
)
from pydataretriever.core.ports import ProgressReporter, Reader, RunnerPort


__all__ = [
    "CommandResult",
    "ConnectionConfig",
    "ConnectionType",
    "ProgressReporter",
    "Reader",
    "ResetScope",
    "RunnerPort",
    "UpdateLog",
]
