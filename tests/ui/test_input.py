"""Tests for the scoped input reader."""

import io

import pytest

from terminal_ui.input import InputClosedError, input_scope


class TestInputReader:
    """Tests for prompting and reading answers."""

    def test_ask_prints_prompt_and_normalises(self, output):
        with input_scope(io.StringIO("  H \n"), output) as reader:
            assert reader.ask("Hit or stand? (h/s)") == "h"
        assert output.getvalue() == "Hit or stand? (h/s)\n"

    def test_end_of_stream_raises(self, output):
        with input_scope(io.StringIO(""), output) as reader:
            with pytest.raises(InputClosedError):
                reader.ask("Play again? (y/n)")

    def test_blank_line_is_not_end_of_stream(self, output):
        with input_scope(io.StringIO("\n"), output) as reader:
            assert reader.ask("?") == ""

    def test_choose_reprompts_on_invalid(self, output):
        with input_scope(io.StringIO("x\nhit\nS\n"), output) as reader:
            assert reader.choose("Hit or stand? (h/s)", {"h": "hit", "s": "stand"}) == "stand"

        lines = output.getvalue().splitlines()
        assert lines.count("Invalid input.") == 2
        assert lines.count("Hit or stand? (h/s)") == 3

    def test_read_error_is_invalid_input(self, output, failing_stream):
        stream = failing_stream("h\n", failures=1)
        with input_scope(stream, output) as reader:
            assert reader.choose("Hit or stand? (h/s)", {"h": "hit", "s": "stand"}) == "hit"
        assert "Invalid input." in output.getvalue()

    def test_repeated_read_errors_close_input(self, output, failing_stream):
        stream = failing_stream("h\n", failures=5)
        with input_scope(stream, output, max_read_errors=3) as reader:
            with pytest.raises(InputClosedError):
                reader.choose("Hit or stand? (h/s)", {"h": "hit"})
        assert stream.failures == 2

    def test_successful_read_resets_error_count(self, output, failing_stream):
        stream = failing_stream("a\nb\n", failures=2)
        with input_scope(stream, output, max_read_errors=3) as reader:
            assert reader.ask("?") == ""
            assert reader.ask("?") == ""
            assert reader.ask("?") == "a"
            stream.failures = 2
            assert reader.ask("?") == ""
            assert reader.ask("?") == ""
            assert reader.ask("?") == "b"

    def test_reader_unusable_after_scope(self, output):
        with input_scope(io.StringIO("h\n"), output) as reader:
            pass
        with pytest.raises(InputClosedError):
            reader.ask("?")
