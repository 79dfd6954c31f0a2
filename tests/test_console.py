"""
Tests for the interactive command loop.

Tests cover:
- Confirmations for recognized commands
- Error reporting for both failure kinds, under both strategies
- Loop state transitions and termination
- Full sessions driven through text streams
"""

import io

import pytest

from cmdvalidator.config import ErrorStrategy
from cmdvalidator.console import WELCOME, CommandLoop, LoopState
from cmdvalidator.core.commands import PROMPT, Action


@pytest.fixture(params=list(ErrorStrategy), ids=lambda s: s.value)
def strategy(request: pytest.FixtureRequest) -> ErrorStrategy:
    return request.param


@pytest.fixture
def stdout() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def loop(strategy: ErrorStrategy, stdout: io.StringIO) -> CommandLoop:
    return CommandLoop(strategy=strategy, stdin=io.StringIO(""), stdout=stdout)


class TestProcessLine:
    """Tests for CommandLoop.process_line."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("p", "play\n\n"),
            ("PLAY", "play\n\n"),
            ("Pause", "pause\n\n"),
            ("A", "pause\n\n"),
            ("rewind", "rewind\n\n"),
            ("Fast-Forward", "fast-Forward\n\n"),
            ("f", "fast-Forward\n\n"),
            ("STOP", "stop\n\n"),
        ],
    )
    def test_recognized_commands(self, loop: CommandLoop, stdout: io.StringIO, line: str, expected: str) -> None:
        action = loop.process_line(line)

        assert isinstance(action, Action)
        assert stdout.getvalue() == expected
        assert loop.state is LoopState.AWAITING_INPUT

    def test_unrecognized_command(self, loop: CommandLoop, stdout: io.StringIO) -> None:
        assert loop.process_line("xyz") is None
        assert stdout.getvalue() == "Unrecognized command: xyz\n\n"
        assert loop.state is LoopState.AWAITING_INPUT

    def test_unrecognized_echoes_original_case(self, loop: CommandLoop, stdout: io.StringIO) -> None:
        loop.process_line("XyZ")
        assert stdout.getvalue() == "Unrecognized command: XyZ\n\n"

    def test_invalid_characters(self, loop: CommandLoop, stdout: io.StringIO) -> None:
        assert loop.process_line("12-3") is None
        assert stdout.getvalue() == "Bad string: 12-3\n\n"
        assert loop.state is LoopState.AWAITING_INPUT

    def test_empty_line_is_unrecognized(self, loop: CommandLoop, stdout: io.StringIO) -> None:
        assert loop.process_line("") is None
        assert stdout.getvalue() == "Unrecognized command: \n\n"

    @pytest.mark.parametrize("line", ["q", "quit", "Q", "QUIT"])
    def test_quit_terminates(self, loop: CommandLoop, stdout: io.StringIO, line: str) -> None:
        assert loop.process_line(line) is Action.QUIT
        assert stdout.getvalue() == "quit\n\nGoodbye!\n\n"
        assert loop.state is LoopState.TERMINATED
        assert loop.terminated

    def test_terminated_is_absorbing(self, loop: CommandLoop) -> None:
        loop.process_line("q")

        with pytest.raises(RuntimeError):
            loop.process_line("play")
        assert loop.state is LoopState.TERMINATED

    def test_unexpected_error_is_reported(
        self, loop: CommandLoop, stdout: io.StringIO, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Errors outside the known kinds should be reported, not raised."""

        def boom(*args: object, **kwargs: object) -> None:
            raise ValueError("boom")

        monkeypatch.setattr("cmdvalidator.console.validate", boom)
        monkeypatch.setattr("cmdvalidator.console.require_valid", boom)

        assert loop.process_line("play") is None
        assert stdout.getvalue() == "Unexpected error: play\n\n"
        assert loop.state is LoopState.AWAITING_INPUT


class TestRun:
    """Tests for full sessions through CommandLoop.run."""

    def test_session_until_quit(self, strategy: ErrorStrategy) -> None:
        stdin = io.StringIO("p\nxyz\n12-3\nq\nplay\n")
        stdout = io.StringIO()
        loop = CommandLoop(strategy=strategy, stdin=stdin, stdout=stdout)

        assert loop.run() == 0

        assert stdout.getvalue() == (
            WELCOME
            + PROMPT
            + "play\n\n"
            + PROMPT
            + "Unrecognized command: xyz\n\n"
            + PROMPT
            + "Bad string: 12-3\n\n"
            + PROMPT
            + "quit\n\nGoodbye!\n\n"
        )
        # Lines after quit are never read
        assert stdin.readline() == "play\n"

    def test_end_of_input_terminates(self, strategy: ErrorStrategy) -> None:
        stdout = io.StringIO()
        loop = CommandLoop(strategy=strategy, stdin=io.StringIO("stop\n"), stdout=stdout)

        assert loop.run() == 0
        assert loop.state is LoopState.TERMINATED
        assert stdout.getvalue() == WELCOME + PROMPT + "stop\n\n" + PROMPT + "\n"

    def test_windows_line_endings(self) -> None:
        stdout = io.StringIO()
        loop = CommandLoop(stdin=io.StringIO("rewind\r\nquit\r\n"), stdout=stdout, show_banner=False)

        loop.run()

        assert stdout.getvalue() == PROMPT + "rewind\n\n" + PROMPT + "quit\n\nGoodbye!\n\n"

    def test_defaults_to_process_streams(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("Pause\nq\n"))

        assert CommandLoop().run() == 0

        captured = capsys.readouterr()
        assert captured.out == WELCOME + PROMPT + "pause\n\n" + PROMPT + "quit\n\nGoodbye!\n\n"
