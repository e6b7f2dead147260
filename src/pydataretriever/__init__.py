"""pydataretriever - Python bindings for the Data Retriever command line tool.

The Data Retriever installs published datasets into databases or flat
files. This library builds the retriever command lines, runs them and
loads what comes back.

Example:
    >>> from pydataretriever import Retriever
    >>> retriever = Retriever.from_environment()
    >>> retriever.install("iris", "csv", data_dir="./data")
    >>> portal = retriever.fetch("portal")  # {"species": DataFrame, ...}
    >>> portal["species"].head()
"""

from pydataretriever.adapters.readers import PandasCsvReader
from pydataretriever.adapters.runner import SubprocessRunner
from pydataretriever.config import (
    RetrieverSettings,
    check_for_retriever,
    find_retriever,
    set_home,
)
from pydataretriever.core.conn_file import read_conn_file
from pydataretriever.core.exceptions import (
    ConnFileError,
    ConnFileNotFoundError,
    ConnFileParseError,
    EmptyFetchError,
    InvalidConnectionError,
    InvalidScopeError,
    RetrieverCommandError,
    RetrieverError,
    RetrieverNotFoundError,
)
from pydataretriever.core.models import (
    CommandResult,
    ConnectionConfig,
    ConnectionType,
    ResetScope,
    UpdateLog,
)
from pydataretriever.core.ports import (
    NullProgressReporter,
    ProgressReporter,
    Reader,
    RunnerPort,
)
from pydataretriever.core.services import Retriever
from pydataretriever.progress import RichProgressReporter


__version__ = "0.1.0"

__all__ = [
    "CommandResult",
    "ConnFileError",
    "ConnFileNotFoundError",
    "ConnFileParseError",
    "ConnectionConfig",
    "ConnectionType",
    "EmptyFetchError",
    "InvalidConnectionError",
    "InvalidScopeError",
    "NullProgressReporter",
    "PandasCsvReader",
    "ProgressReporter",
    "Reader",
    "ResetScope",
    "Retriever",
    "RetrieverCommandError",
    "RetrieverError",
    "RetrieverNotFoundError",
    "RetrieverSettings",
    "RichProgressReporter",
    "RunnerPort",
    "SubprocessRunner",
    "UpdateLog",
    "__version__",
    "check_for_retriever",
    "find_retriever",
    "read_conn_file",
    "set_home",
]
