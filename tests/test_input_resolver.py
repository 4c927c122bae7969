from __future__ import annotations

import io

import pytest

from gencode.errors import EmptyPromptError, NoPromptError
from gencode.models.prompt import AbsentPrompt, DirectPrompt, InteractivePrompt, PipedPrompt
from gencode.services.input_resolver import read_prompt, read_stdin, resolve_source


def test_direct_words_are_space_joined() -> None:
    source = resolve_source(["a", "function", "to", "add"], stdin_is_tty=False, interactive=True)
    assert source == DirectPrompt(text="a function to add")
    assert read_prompt(source) == "a function to add"


def test_direct_words_are_used_verbatim() -> None:
    source = resolve_source(["  padded ", "x=1;"], stdin_is_tty=True)
    assert read_prompt(source) == "  padded  x=1;"


def test_pipe_wins_over_interactive_flag() -> None:
    assert resolve_source([], stdin_is_tty=False, interactive=True) == PipedPrompt()


def test_interactive_needs_a_terminal_and_the_flag() -> None:
    assert resolve_source([], stdin_is_tty=True, interactive=True) == InteractivePrompt()
    assert resolve_source([], stdin_is_tty=True, interactive=False) == AbsentPrompt()


def test_empty_words_fall_through() -> None:
    assert resolve_source([""], stdin_is_tty=True) == AbsentPrompt()


def test_read_stdin_strips_only_the_ends() -> None:
    stream = io.BytesIO(b"\n\t  reverse   a\n\n string  \n")
    assert read_stdin(stream) == "reverse   a\n\n string"


def test_read_stdin_decodes_utf8() -> None:
    stream = io.BytesIO("écris une fonction".encode("utf-8"))
    assert read_stdin(stream) == "écris une fonction"


def test_piped_source_reads_stdin() -> None:
    prompt = read_prompt(PipedPrompt(), stdin=io.BytesIO(b"  sort a list\n"))
    assert prompt == "sort a list"


def test_empty_pipe_is_rejected() -> None:
    with pytest.raises(EmptyPromptError):
        read_prompt(PipedPrompt(), stdin=io.BytesIO(b"  \n"))


def test_interactive_source_uses_editor_contents() -> None:
    calls: list[str] = []

    def _fake_edit(text, require_save=True):  # type: ignore[no-untyped-def]
        calls.append(text)
        return "write a\nmulti-line prompt\n"

    assert read_prompt(InteractivePrompt(), editor=_fake_edit) == "write a\nmulti-line prompt"
    assert calls == [""]


@pytest.mark.parametrize("saved", [None, "", "   \n"])
def test_empty_editor_contents_are_rejected(saved) -> None:  # type: ignore[no-untyped-def]
    with pytest.raises(EmptyPromptError):
        read_prompt(InteractivePrompt(), editor=lambda text, require_save=True: saved)


def test_absent_source_raises() -> None:
    with pytest.raises(NoPromptError) as excinfo:
        read_prompt(AbsentPrompt())
    assert excinfo.value.exit_code == 1
    assert "-i" in excinfo.value.hint
