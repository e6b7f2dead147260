"""Interactive confirmation prompt for reset()."""

from __future__ import annotations

from rich.prompt import Confirm


def rich_confirm(message: str) -> bool:
    """Ask a yes/no question on the terminal, defaulting to no."""
    return Confirm.ask(message, default=False, show_default=False, show_choices=False)
