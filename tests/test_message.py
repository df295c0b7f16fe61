import pytest

from git_autopush.errors import CommitMessageError, InputError
from git_autopush.message import PROMPT, acquire_commit_message


def scripted(*lines):
    """Return a read_line callable that replays lines and records prompts."""

    remaining = list(lines)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    read_line.prompts = prompts
    return read_line


def _never_prompt(prompt):
    raise AssertionError("should not prompt when a message is supplied")


@pytest.mark.parametrize("message", ["fix bug", "  padded  ", "line one\nline two"])
def test_supplied_message_is_returned_untrimmed(message):
    assert acquire_commit_message(message, read_line=_never_prompt) == message


@pytest.mark.parametrize("message", ["", "   ", "\t\n"])
def test_supplied_blank_message_is_rejected(message):
    try:
        acquire_commit_message(message, read_line=_never_prompt)
    except CommitMessageError as exc:
        assert str(exc) == "Commit message cannot be empty"
    else:
        raise AssertionError("expected CommitMessageError to be raised")


def test_prompts_when_no_message_supplied(capsys):
    read_line = scripted("from the prompt")

    assert acquire_commit_message(None, read_line=read_line) == "from the prompt"
    assert read_line.prompts == [PROMPT]
    assert "Commit message required" in capsys.readouterr().out


def test_prompt_asks_again_after_empty_line():
    read_line = scripted("", "", "third time")

    assert acquire_commit_message(None, read_line=read_line) == "third time"
    assert len(read_line.prompts) == 3


def test_prompt_rejects_whitespace_only_line():
    read_line = scripted("   ")

    try:
        acquire_commit_message(None, read_line=read_line)
    except CommitMessageError as exc:
        assert str(exc) == "Commit message cannot be empty"
    else:
        raise AssertionError("expected CommitMessageError to be raised")


def test_closed_input_is_an_input_error():
    read_line = scripted()

    try:
        acquire_commit_message(None, read_line=read_line)
    except InputError as exc:
        assert str(exc).startswith("Failed to read input")
    else:
        raise AssertionError("expected InputError to be raised")
