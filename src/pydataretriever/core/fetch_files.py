"""Helpers for locating the CSV files the retriever writes for a dataset."""

from __future__ import annotations

from pathlib import Path


def file_stem(dataset: str) -> str:
    """Return the prefix the retriever uses for a dataset's file names.

    The retriever converts '-' in dataset names to '_' in file names.
    """
    return dataset.replace("-", "_")


def match_dataset_files(directory: Path, dataset: str) -> list[Path]:
    """Find CSV files in directory that belong to dataset.

    Args:
        directory: Directory the dataset was installed into.
        dataset: Dataset name as passed to the retriever.

    Returns:
        Matching file paths, sorted by name.
    """
    stem = file_stem(dataset)
    return sorted(p for p in directory.glob("*.csv") if stem in p.name)


def table_name(path: Path, dataset: str) -> str:
    """Derive the table name from a file written for dataset.

    For dataset "portal-dev" and file "portal_dev_species.csv" this
    returns "species".
    """
    name = path.name.removesuffix(".csv")
    return name.removeprefix(f"{file_stem(dataset)}_")
