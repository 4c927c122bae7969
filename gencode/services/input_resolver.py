import logging
from typing import BinaryIO, Callable, Optional, Sequence

import click

from gencode.errors import EmptyPromptError, NoPromptError
from gencode.models.prompt import (
    AbsentPrompt,
    DirectPrompt,
    InteractivePrompt,
    PipedPrompt,
    PromptSource,
)

logger = logging.getLogger("input_resolver")

EDITOR_MESSAGE = "Enter your code prompt (save and close the editor to finish):"


def resolve_source(
    words: Sequence[str],
    *,
    stdin_is_tty: bool,
    interactive: bool = False,
) -> PromptSource:
    """Pick the single prompt source for this invocation. First match wins."""
    text = " ".join(words)
    if text:
        return DirectPrompt(text=text)
    if not stdin_is_tty:
        return PipedPrompt()
    if interactive:
        return InteractivePrompt()
    return AbsentPrompt()


def read_stdin(stream: Optional[BinaryIO] = None) -> str:
    """Read piped input to EOF and trim surrounding whitespace."""
    if stream is None:
        stream = click.get_binary_stream("stdin")
    data = stream.read()
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")
    logger.debug(f"Read {len(data)} characters from stdin")
    return data.strip()


def read_editor(editor: Optional[Callable[..., Optional[str]]] = None) -> str:
    """Open the user's editor on an empty buffer and return what they saved.

    The editor comes from $VISUAL / $EDITOR (see click.edit). Closing it
    without saving, or saving nothing but whitespace, is an empty prompt.
    """
    edit = editor or click.edit
    click.secho(EDITOR_MESSAGE, fg="cyan", err=True)
    content = edit("", require_save=True)
    if content is None or not content.strip():
        raise EmptyPromptError()
    return content.strip()


def read_prompt(
    source: PromptSource,
    *,
    stdin: Optional[BinaryIO] = None,
    editor: Optional[Callable[..., Optional[str]]] = None,
) -> str:
    if isinstance(source, DirectPrompt):
        return source.text
    if isinstance(source, PipedPrompt):
        prompt = read_stdin(stdin)
        if not prompt:
            raise EmptyPromptError()
        return prompt
    if isinstance(source, InteractivePrompt):
        return read_editor(editor)
    raise NoPromptError()
