"""Polars reader for fetched CSV tables."""

from pathlib import Path

import polars as pl


class PolarsCsvReader:
    """Reader that loads CSV files into polars DataFrames."""

    def read(self, path: Path) -> pl.DataFrame:
        """Load a CSV file using polars.read_csv().

        Raises:
            FileNotFoundError: If the file does not exist.
            polars.exceptions.ComputeError: If the file is not valid CSV.
        """
        return pl.read_csv(path)
