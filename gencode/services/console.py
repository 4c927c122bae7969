from functools import lru_cache
from typing import Optional

import click
from rich.console import Console
from rich.text import Text


@lru_cache()
def get_console() -> Console:
    """Shared stderr console for progress output."""
    return Console(stderr=True)


def error(message: str) -> None:
    click.secho(message, fg="red", bold=True, err=True)


def hint(message: str) -> None:
    click.secho(message, fg="yellow", err=True)


def command_hint(message: str) -> None:
    click.secho(message, fg="blue", err=True)


class Status:
    """Spinner shown while an operation runs, replaced by a ✔/✖ marker."""

    def __init__(self, message: str, console: Optional[Console] = None):
        self.console = console or get_console()
        self._status = self.console.status(Text(message), spinner="dots")

    def start(self) -> "Status":
        self._status.start()
        return self

    def _finish(self, marker: str, style: str) -> None:
        self._status.stop()
        self.console.print(marker, style=style, markup=False, highlight=False, soft_wrap=True)

    def succeed(self, message: str) -> None:
        self._finish(f"✔ {message}", "green")

    def fail(self, message: str) -> None:
        self._finish(f"✖ {message}", "bold red")
