import pytest

from aorta.errors import (
    CommandError,
    CommandNotFoundError,
    ConfigError,
    EmptyCommandError,
    EnvError,
    ExecutionError,
    HistoryError,
    InvalidArgumentsError,
    InvalidIndexError,
    PipelineError,
    PipelineExecutionError,
    PipelineParseError,
    ProcessError,
    ShellError,
)


def test_command_not_found_message_and_attribute():
    err = CommandNotFoundError("frobnicate")
    assert str(err) == "command not found: frobnicate"
    assert err.command == "frobnicate"


def test_invalid_arguments_message():
    err = InvalidArgumentsError("bad args")
    assert str(err) == "invalid arguments: bad args"
    assert err.detail == "bad args"


def test_execution_error_message():
    err = ExecutionError("failed")
    assert str(err) == "execution error: failed"
    assert err.detail == "failed"


def test_invalid_index_message():
    err = InvalidIndexError(7)
    assert str(err) == "Invalid history index: 7"
    assert err.index == 7


def test_empty_command_message():
    assert str(EmptyCommandError()) == "Empty command"


def test_pipeline_messages():
    assert str(PipelineParseError("Empty pipeline")) == "Parse error: Empty pipeline"
    assert str(PipelineExecutionError("grep: no pattern specified")) == (
        "Execution error: grep: no pattern specified"
    )


@pytest.mark.parametrize(
    "error, parents",
    [
        (CommandNotFoundError("x"), (CommandError, ShellError)),
        (InvalidArgumentsError("x"), (CommandError, ShellError)),
        (ExecutionError("x"), (CommandError, ShellError)),
        (InvalidIndexError(1), (HistoryError, ShellError)),
        (EmptyCommandError(), (HistoryError, ShellError)),
        (PipelineParseError("x"), (PipelineError, ShellError)),
        (PipelineExecutionError("x"), (PipelineError, ShellError)),
        (ProcessError("x"), (ShellError,)),
        (EnvError("x"), (ShellError,)),
        (ConfigError("x"), (ShellError,)),
    ],
)
def test_errors_are_caught_by_their_parents(error, parents):
    for parent in parents:
        with pytest.raises(parent) as info:
            raise error
        assert info.value is error


def test_plain_errors_keep_their_message():
    assert str(ProcessError("Command not found: ls")) == "Command not found: ls"
    assert str(EnvError("Home directory not found")) == "Home directory not found"


@pytest.mark.parametrize(
    "error, message",
    [
        (CommandNotFoundError("test"), "command not found: test"),
        (InvalidArgumentsError("bad args"), "invalid arguments: bad args"),
        (ExecutionError("failed"), "execution error: failed"),
        (InvalidIndexError(0), "Invalid history index: 0"),
        (EmptyCommandError(), "Empty command"),
    ],
)
def test_every_error_has_a_message(error, message):
    assert str(error) == message