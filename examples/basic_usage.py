"""Basic install and fetch example.

This example shows the simplest usage pattern: build a Retriever from the
environment, install a dataset as CSV files, then load another dataset
straight into pandas DataFrames.
"""

from pathlib import Path

from pydataretriever import Retriever


retriever = Retriever.from_environment()

# Install iris as CSV files under ./data
data_dir = Path("./data")
data_dir.mkdir(exist_ok=True)
retriever.install("iris", "csv", data_dir=data_dir)

# Fetch portal into memory: one DataFrame per table
portal = retriever.fetch("portal")
for table, frame in portal.items():
    print(f"{table}: {frame.shape[0]} rows")
