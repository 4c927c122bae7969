import asyncio
import logging
from pathlib import Path
from typing import Optional

import click

from gencode.errors import OutputWriteError
from gencode.models.code import GeneratedCode
from gencode.services.console import Status, error

logger = logging.getLogger("output_sink")

HEADER = "\n--- Generated Code ---"
FOOTER = "------------------------\n"


def _write(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


async def write_output(text: str, path: str) -> Path:
    """Write the full text to path, replacing whatever was there."""
    target = Path(path)
    try:
        await asyncio.to_thread(_write, target, text)
    except OSError as e:
        logger.error(f"Write to {path} failed: {e}")
        raise OutputWriteError(e.strerror or str(e), path) from e
    return target


def print_code(text: str) -> None:
    click.secho(HEADER, fg="cyan", bold=True)
    click.echo(text)
    click.secho(FOOTER, fg="cyan", bold=True)


async def deliver(result: GeneratedCode, output: Optional[str] = None) -> int:
    """Send the result to exactly one destination. Returns the exit status."""
    if not output:
        print_code(result.text)
        return 0

    status = Status(f"Saving code to {output}...").start()
    try:
        await write_output(result.text, output)
    except OutputWriteError as e:
        status.fail("Error saving file:")
        error(f"{e.path}: {e.message}")
        print_code(result.text)
        return e.exit_code
    status.succeed(f"Successfully saved to {output}")
    return 0
