"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from pydataretriever.core.models import CommandResult
from pydataretriever.core.services import Retriever


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, commands and services")
    config.addinivalue_line("markers", "runner: Subprocess runner adapter")
    config.addinivalue_line("markers", "readers: Table reader adapters")
    config.addinivalue_line("markers", "progress: Rich progress integration")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


@dataclass
class RunCall:
    """One recorded call to FakeRunner.run()."""

    args: list[str]
    log_file: Path | None
    capture: bool
    discard_stderr: bool


@dataclass
class FakeRunner:
    """RunnerPort that records calls instead of starting processes.

    Attributes:
        returncode: Exit status reported for every call.
        stdout: Output reported when capture is requested.
        stderr: Error output reported when capture is requested.
        on_run: Optional side effect, called with the argv (e.g. to write
            the files a real install would produce).
    """

    returncode: int = 0
    stdout: str = ""
    stderr: str = ""
    on_run: Callable[[list[str]], None] | None = None
    calls: list[RunCall] = field(default_factory=list)

    def run(
        self,
        args: list[str],
        *,
        log_file: Path | None = None,
        capture: bool = False,
        discard_stderr: bool = False,
    ) -> CommandResult:
        self.calls.append(RunCall(list(args), log_file, capture, discard_stderr))
        if self.on_run is not None:
            self.on_run(list(args))
        return CommandResult(
            args=list(args),
            returncode=self.returncode,
            stdout=self.stdout if capture else "",
            stderr=self.stderr if capture and not discard_stderr else "",
            log_file=log_file,
        )

    @property
    def last_args(self) -> list[str]:
        """argv of the most recent call."""
        return self.calls[-1].args


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Reusable fake runner that succeeds without output."""
    return FakeRunner()


@pytest.fixture
def retriever(fake_runner: FakeRunner, tmp_path: Path) -> Retriever:
    """Retriever wired to fake_runner with tmp_path/home as home."""
    home = tmp_path / "home"
    home.mkdir(exist_ok=True)
    return Retriever(runner=fake_runner, executable="retriever", home=home)


def write_tables(directory: Path, prefix: str, tables: dict[str, str]) -> None:
    """Write CSV files named <prefix>_<table>.csv the way the retriever does."""
    for table, content in tables.items():
        (directory / f"{prefix}_{table}.csv").write_text(content)


def table_name_dir(args: list[str]) -> Path:
    """Return the directory from the --table_name argument of an install argv."""
    template = args[args.index("--table_name") + 1]
    return Path(template).parent
