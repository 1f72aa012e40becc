"""Terminal output sink for user-facing validation messages."""

import logging
import os

import click

logger = logging.getLogger(__name__)


def to_human_path(path: str, home_dir: str | None = None) -> str:
    """
    Render a path for display, shortening the home directory to ``~``.

    Examples:
        >>> to_human_path("/home/ada/site", "/home/ada")
        '~/site'
        >>> to_human_path("/srv/site", "/home/ada")
        '/srv/site'
    """
    resolved = os.path.abspath(path)
    if home_dir and resolved.startswith(home_dir):
        return f"~{resolved[len(home_dir):]}"
    return resolved


class Output:
    """Writes formatted lines for the user (stderr by default).

    ``color=None`` lets click decide based on whether the stream is a TTY.
    """

    def __init__(self, *, err: bool = True, color: bool | None = None) -> None:
        self._err = err
        self._color = color

    def print(self, text: str) -> None:
        click.echo(text, err=self._err, color=self._color)

    def error(self, text: str) -> None:
        self.print(f"{click.style('Error!', fg='red')} {text}")

    def pretty_error(self, message: str, link: str | None = None) -> None:
        """Print an error with an optional documentation link on the next line."""
        logger.debug("pretty_error: %s (link=%s)", message, link)
        self.error(message)
        if link:
            self.print(f"{click.style('Learn More:', bold=True)} {link}")

    @staticmethod
    def highlight(text: str) -> str:
        return click.style(text, fg="cyan")


class BufferedOutput(Output):
    """Collects plain-text lines instead of writing them.

    Used for ``--json`` mode, where stdout must carry a single JSON record.
    """

    def __init__(self) -> None:
        super().__init__(color=False)
        self.lines: list[str] = []

    def print(self, text: str) -> None:
        self.lines.extend(click.unstyle(text).splitlines())
