"""Printing retriever commands instead of running them.

Any object with a run() method matching RunnerPort can replace the
subprocess runner. This one prints each command and reports success,
which is handy for checking what a script would do.
"""

from pathlib import Path

from pydataretriever import CommandResult, Retriever


class EchoRunner:
    """RunnerPort that prints commands instead of running them."""

    def run(
        self,
        args: list[str],
        *,
        log_file: Path | None = None,
        capture: bool = False,
        discard_stderr: bool = False,
    ) -> CommandResult:
        result = CommandResult(args=args, returncode=0, log_file=log_file)
        print(result.command)
        return result


retriever = Retriever(runner=EchoRunner())

retriever.install("iris", "csv", data_dir="./data")
retriever.install("portal", "sqlite", db_file="portal.sqlite")
retriever.download("portal", path="./raw", sub_dir=True, log_dir="./logs")
