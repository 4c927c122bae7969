from __future__ import annotations

import io

from rich.console import Console

from gencode.services.console import Status


def _terminal_console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, force_terminal=True, width=80), buffer


def test_status_spinner_is_replaced_by_success_marker() -> None:
    console, buffer = _terminal_console()

    Status("Sending prompt to Gemini...", console=console).start().succeed("Code generated successfully!")

    out = buffer.getvalue()
    assert "Sending prompt to Gemini..." in out
    assert "\x1b[2K" in out
    assert out.index("✔ Code generated successfully!") > out.rindex("Sending prompt to Gemini...")


def test_status_spinner_is_replaced_by_failure_marker() -> None:
    console, buffer = _terminal_console()

    Status("Saving code to out.py...", console=console).start().fail("Error saving file:")

    out = buffer.getvalue()
    assert "\x1b[2K" in out
    assert out.index("✖ Error saving file:") > out.rindex("Saving code to out.py...")


def test_status_on_plain_stream_prints_only_the_marker() -> None:
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False)

    Status("Sending prompt to Gemini...", console=console).start().succeed("done [ok]")

    assert buffer.getvalue() == "✔ done [ok]\n"
