"""Unit tests for Retriever.datasets(), reset() and get_updates()."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from conftest import FakeRunner

from pydataretriever.core.exceptions import InvalidScopeError, RetrieverCommandError
from pydataretriever.core.models import UpdateLog
from pydataretriever.core.services import Retriever


LS_OUTPUT = """\
Available datasets : 5

abalone-age      airports         amniote-life-hist
bird-size        portal
"""


@pytest.mark.core
@pytest.mark.tra("UseCase.Datasets")
@pytest.mark.tier(1)
class TestDatasets:
    """Tests for Retriever.datasets."""

    def test_parses_ls_output(self, tmp_path: Path) -> None:
        """Names are read from all columns, the header is skipped."""
        runner = FakeRunner(stdout=LS_OUTPUT)
        retriever = Retriever(runner=runner, home=tmp_path)

        names = retriever.datasets()

        assert names == [
            "abalone-age",
            "airports",
            "amniote-life-hist",
            "bird-size",
            "portal",
        ]
        assert runner.last_args == ["retriever", "ls"]
        assert runner.calls[0].capture is True

    def test_one_name_per_line(self, tmp_path: Path) -> None:
        """Plain one-per-line output works too."""
        retriever = Retriever(runner=FakeRunner(stdout="iris\nportal\n"), home=tmp_path)

        assert retriever.datasets() == ["iris", "portal"]

    def test_skips_offline_online_headers(self, tmp_path: Path) -> None:
        """Other '<kind> datasets :' headers are skipped as well."""
        output = "Offline datasets : 1\niris\nOnline datasets : 1\nportal\n"
        retriever = Retriever(runner=FakeRunner(stdout=output), home=tmp_path)

        assert retriever.datasets() == ["iris", "portal"]

    def test_failure_raises(self, tmp_path: Path) -> None:
        """A failing ls raises RetrieverCommandError with stderr."""
        runner = FakeRunner(returncode=1, stderr="Traceback\nOSError: offline\n")
        retriever = Retriever(runner=runner, home=tmp_path)

        with pytest.raises(RetrieverCommandError, match="OSError: offline"):
            retriever.datasets()


@pytest.fixture
def retriever_home(tmp_path: Path) -> Path:
    """A populated ~/.retriever under tmp_path/home."""
    root = tmp_path / "home" / ".retriever"
    for sub in ["scripts", "raw_data", "connections"]:
        (root / sub).mkdir(parents=True)
        (root / sub / "file.txt").write_text("x")
    return root


@pytest.mark.core
@pytest.mark.tra("UseCase.Reset")
@pytest.mark.tier(1)
class TestReset:
    """Tests for Retriever.reset."""

    @pytest.mark.parametrize(
        ("scope", "folder"),
        [
            ("scripts", "scripts"),
            ("data", "raw_data"),
            ("connections", "connections"),
            ("connection", "connections"),
        ],
    )
    def test_scope_deletes_only_its_folder(
        self,
        retriever: Retriever,
        retriever_home: Path,
        scope: str,
        folder: str,
    ) -> None:
        """Each scope deletes its own folder and nothing else."""
        deleted = retriever.reset(scope, confirm=lambda _msg: True)

        assert deleted == retriever_home / folder
        assert not (retriever_home / folder).exists()
        remaining = {p.name for p in retriever_home.iterdir()}
        assert remaining == {"scripts", "raw_data", "connections"} - {folder}

    def test_all_deletes_everything(
        self, retriever: Retriever, retriever_home: Path
    ) -> None:
        """The default scope removes ~/.retriever entirely."""
        deleted = retriever.reset(confirm=lambda _msg: True)

        assert deleted == retriever_home
        assert not retriever_home.exists()

    def test_declined_deletes_nothing(
        self, retriever: Retriever, retriever_home: Path
    ) -> None:
        """Answering no leaves everything in place."""
        prompts: list[str] = []

        def decline(message: str) -> bool:
            prompts.append(message)
            return False

        assert retriever.reset("ALL", confirm=decline) is None
        assert retriever_home.exists()
        assert prompts == ["Do you want to proceed? (y/N)"]

    def test_warning_logged_before_confirm(
        self,
        retriever: Retriever,
        retriever_home: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """The scope warning is logged even when confirmation is automatic."""
        seen: list[str] = []

        def auto_yes(_message: str) -> bool:
            seen.extend(r.getMessage() for r in caplog.records)
            return True

        with caplog.at_level(logging.WARNING, logger="pydataretriever.core.services"):
            retriever.reset("scripts", confirm=auto_yes)

        assert seen == ["This will delete SCRIPTS cached information."]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1

    def test_missing_folder_returns_none(self, retriever: Retriever) -> None:
        """Nothing to delete is not an error."""
        assert retriever.reset("scripts", confirm=lambda _msg: True) is None

    def test_invalid_scope_raises_before_prompt(self, retriever: Retriever) -> None:
        """Unknown scopes are rejected without prompting."""
        asked: list[str] = []

        with pytest.raises(InvalidScopeError):
            retriever.reset("everything", confirm=lambda m: asked.append(m) or True)

        assert asked == []

    def test_constructor_confirm_used(
        self, fake_runner: FakeRunner, tmp_path: Path, retriever_home: Path
    ) -> None:
        """The confirm callback given at construction is the default."""
        retriever = Retriever(
            runner=fake_runner, home=tmp_path / "home", confirm=lambda _msg: True
        )

        assert retriever.reset("data") == retriever_home / "raw_data"

    def test_no_confirm_raises(self, retriever: Retriever) -> None:
        """reset() refuses to delete without a way to ask."""
        with pytest.raises(ValueError, match="confirm"):
            retriever.reset("all")

    def test_never_runs_retriever(
        self, retriever: Retriever, fake_runner: FakeRunner, retriever_home: Path
    ) -> None:
        """reset() works on the file system only."""
        retriever.reset(confirm=lambda _msg: True)

        assert fake_runner.calls == []


@pytest.mark.core
@pytest.mark.tra("UseCase.Update")
@pytest.mark.tier(1)
class TestGetUpdates:
    """Tests for Retriever.get_updates."""

    def test_returns_update_log(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """stdout becomes an UpdateLog and the status line is logged."""
        output = (
            "Downloading scripts...\n"
            "Downloading script: portal.json\n"
            "Updated 1 script\n"
        )
        runner = FakeRunner(stdout=output, stderr="noise")
        retriever = Retriever(runner=runner, home=tmp_path)

        with caplog.at_level(logging.INFO, logger="pydataretriever.core.services"):
            update_log = retriever.get_updates()

        assert isinstance(update_log, UpdateLog)
        assert update_log.downloaded_scripts() == ["portal.json"]
        assert "Please wait while the retriever updates its scripts" in caplog.text
        assert "Updated 1 script" in caplog.text

    def test_runs_update_discarding_stderr(self, tmp_path: Path) -> None:
        """update output is captured and stderr is discarded."""
        runner = FakeRunner()
        retriever = Retriever(runner=runner, home=tmp_path)

        update_log = retriever.get_updates()

        call = runner.calls[0]
        assert call.args == ["retriever", "update"]
        assert call.capture is True
        assert call.discard_stderr is True
        assert str(update_log) == "No scripts downloaded"

    def test_failure_raises(self, tmp_path: Path) -> None:
        """A failing update raises RetrieverCommandError."""
        retriever = Retriever(runner=FakeRunner(returncode=1), home=tmp_path)

        with pytest.raises(RetrieverCommandError):
            retriever.get_updates()
