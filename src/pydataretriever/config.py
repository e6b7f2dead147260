"""Configuration utilities for pydataretriever.

This module locates the retriever executable and the home directory that
holds the retriever's local state (``~/.retriever``).
"""

from __future__ import annotations

import logging
import os
import platform
import shutil
from collections.abc import MutableMapping
from dataclasses import dataclass
from pathlib import Path


log = logging.getLogger(__name__)

EXECUTABLE_ENV = "PYDATARETRIEVER_EXECUTABLE"
HOME_ENV = "PYDATARETRIEVER_HOME"

DEFAULT_EXECUTABLE = "retriever"

# Default Anaconda/Miniconda install folders, relative to the home directory.
# Some IDE launchers don't inherit the PATH entries conda adds.
CONDA_SUFFIXES = (
    "/Anaconda3/Scripts",
    "/Anaconda2/Scripts",
    "/Anaconda/Scripts",
    "/Miniconda3/Scripts",
    "/Miniconda2/Scripts",
    "/anaconda3/bin",
    "/anaconda2/bin",
    "/anaconda/bin",
    "/miniconda3/bin",
    "/miniconda2/bin",
)

PATH_WARNING = "The retriever is not on your path and may not be installed."
MAC_INSTRUCTIONS = (
    "Follow the instructions for installing and manually adding the Data "
    "Retriever to your path at http://data-retriever.org/download.html"
)
DOWNLOAD_INSTRUCTIONS = (
    "Please upgrade to the most recent version of the Data Retriever, which "
    "will automatically add itself to the path http://data-retriever.org/download.html"
)


def normalize_home(home: str) -> str:
    """Remove the "/Documents" some Windows shells append to HOME.

    Example:
        >>> normalize_home("C:/Users/ana/Documents")
        'C:/Users/ana'
    """
    return home.replace("/Documents", "")


def set_home(environ: MutableMapping[str, str] | None = None) -> str:
    """Normalize HOME in environ in place and return the new value."""
    if environ is None:
        environ = os.environ
    home = normalize_home(environ.get("HOME", str(Path.home())))
    environ["HOME"] = home
    return home


def retriever_home(home: Path | str) -> Path:
    """Return the retriever's state directory under home."""
    return Path(home) / ".retriever"


def find_retriever(
    name: str = DEFAULT_EXECUTABLE,
    home: str | None = None,
    environ: MutableMapping[str, str] | None = None,
) -> Path | None:
    """Locate the retriever executable.

    Looks on PATH first. If that fails, the default conda folders under
    home that aren't already on environ["PATH"] are appended to it and the
    lookup is retried.

    Args:
        name: Executable name or path.
        home: Home directory for the conda fallback. Defaults to environ["HOME"].
        environ: Environment to read and update. Defaults to os.environ.

    Returns:
        Path to the executable, or None if it can't be found.
    """
    if environ is None:
        environ = os.environ

    found = shutil.which(name, path=environ.get("PATH"))
    if found:
        return Path(found)

    if home is None:
        home = environ.get("HOME", str(Path.home()))
    current = environ.get("PATH", "").split(os.pathsep)
    extra = [
        folder
        for folder in (f"{home}{suffix}" for suffix in CONDA_SUFFIXES)
        if folder not in current
    ]
    if extra:
        environ["PATH"] = os.pathsep.join([*current, *extra])
        log.debug("retriever not on PATH, retrying with conda folders under %s", home)

    found = shutil.which(name, path=environ["PATH"])
    return Path(found) if found else None


def check_for_retriever(
    name: str = DEFAULT_EXECUTABLE,
    environ: MutableMapping[str, str] | None = None,
) -> Path | None:
    """Normalize HOME, look for the retriever and warn if it is missing.

    Returns:
        Path to the executable, or None if it can't be found.
    """
    if environ is None:
        environ = os.environ
    home = set_home(environ)
    found = find_retriever(name, home=home, environ=environ)
    if found is None:
        log.warning("%s", missing_retriever_message())
    return found


def missing_retriever_message(system: str | None = None) -> str:
    """Return the platform specific "retriever not found" message."""
    if system is None:
        system = platform.system()
    if system == "Darwin":
        return f"{PATH_WARNING} {MAC_INSTRUCTIONS}"
    return f"{PATH_WARNING} {DOWNLOAD_INSTRUCTIONS}"


@dataclass(frozen=True, slots=True)
class RetrieverSettings:
    """Settings for building a Retriever from the environment.

    Attributes:
        executable: Retriever executable name or path.
        home: Home directory holding ~/.retriever.
    """

    executable: str
    home: Path

    @classmethod
    def from_env(
        cls, environ: MutableMapping[str, str] | None = None
    ) -> RetrieverSettings:
        """Read settings, falling back to PATH detection and HOME.

        PYDATARETRIEVER_EXECUTABLE overrides detection and
        PYDATARETRIEVER_HOME overrides the home directory.
        """
        if environ is None:
            environ = os.environ

        executable = environ.get(EXECUTABLE_ENV)
        if not executable:
            found = check_for_retriever(environ=environ)
            executable = str(found) if found else DEFAULT_EXECUTABLE

        home = environ.get(HOME_ENV) or set_home(environ)
        return cls(executable=executable, home=Path(home))
