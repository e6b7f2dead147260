"""CLI for pydataretriever."""

# Import commands to register them with the app
# These imports have side effects (registering commands with @app.command())
from pydataretriever.cli.commands import datasets as _datasets_module  # noqa: F401
from pydataretriever.cli.commands import reset as _reset_module  # noqa: F401
from pydataretriever.cli.commands import update as _update_module  # noqa: F401
from pydataretriever.cli.main import app, main


__all__ = ["app", "main"]
