"""Reader adapters for loading fetched tables into typed objects.

- Pandas: PandasCsvReader (default)
- Polars: PolarsCsvReader (needs the ``polars`` extra)

PolarsCsvReader is imported lazily so that pandas-only installs work.
"""

from typing import Any

from pydataretriever.adapters.readers.pandas import PandasCsvReader


__all__ = ["PandasCsvReader", "PolarsCsvReader", "get_reader"]


def __getattr__(name: str) -> Any:
    if name == "PolarsCsvReader":
        from pydataretriever.adapters.readers.polars import PolarsCsvReader

        return PolarsCsvReader
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def get_reader(name: str) -> Any:
    """Return a reader instance by name ("pandas" or "polars").

    Raises:
        ValueError: If the name is unknown.
    """
    if name == "pandas":
        return PandasCsvReader()
    if name == "polars":
        from pydataretriever.adapters.readers.polars import PolarsCsvReader

        return PolarsCsvReader()
    raise ValueError(f"Unknown reader '{name}', expected 'pandas' or 'polars'")
