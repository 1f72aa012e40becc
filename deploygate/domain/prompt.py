"""Interactive confirmation prompt."""

from typing import Callable

import click


# (message, default) -> user's answer
Confirm = Callable[[str, bool], bool]


def click_confirm(message: str, default: bool = False) -> bool:
    """Ask a yes/no question on stderr. Ctrl-C or EOF counts as "no"."""
    try:
        return click.confirm(message, default=default, err=True)
    except click.Abort:
        return False
