"""Pandas reader adapter for fetched CSV tables.

Provides the default Reader used by Retriever.fetch().
"""

from pathlib import Path

import pandas as pd


class PandasCsvReader:
    """Reader adapter for CSV files using pandas.

    Wraps pd.read_csv() to satisfy the Reader[pd.DataFrame] protocol.
    Extra keyword arguments are forwarded to pd.read_csv().
    """

    def __init__(self, **read_csv_kwargs: object) -> None:
        self._kwargs = read_csv_kwargs

    def read(self, path: Path) -> pd.DataFrame:
        """Load a CSV file into a pandas DataFrame.

        Args:
            path: Path to the CSV file the retriever wrote.

        Returns:
            pandas DataFrame with the loaded data.

        Raises:
            FileNotFoundError: If the file does not exist.
            pandas.errors.ParserError: If the file is not valid CSV.
        """
        return pd.read_csv(path, **self._kwargs)  # type: ignore[call-overload]
