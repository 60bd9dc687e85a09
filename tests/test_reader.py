"""Tests for answer readers."""

import io
from unittest.mock import Mock

import pytest

from termask.errors import InputError
from termask.reader import ConsoleReader, StreamReader, as_reader, strip_line_ending


@pytest.mark.unit
class TestStripLineEnding:
    def test_strips_newline_and_carriage_return(self):
        assert strip_line_ending("abc\r\n") == "abc"
        assert strip_line_ending("abc\n") == "abc"
        assert strip_line_ending("abc") == "abc"

    def test_keeps_inner_whitespace(self):
        assert strip_line_ending("  a b  \n") == "  a b  "

    def test_only_one_newline(self):
        assert strip_line_ending("abc\n\n") == "abc\n"


@pytest.mark.unit
class TestStreamReader:
    """Test reading from redirected input."""

    def test_reads_one_line_at_a_time(self):
        reader = StreamReader(io.StringIO("first\nsecond\n"))
        assert reader.read_line() == "first"
        assert reader.read_line() == "second"
        assert reader.read_line() == ""

    def test_decodes_bytes(self):
        reader = StreamReader(io.BytesIO("héllo\n".encode("utf-8")))
        assert reader.read_line() == "héllo"

    def test_read_failure(self):
        stream = Mock()
        stream.readline.side_effect = OSError("broken")
        with pytest.raises(InputError, match="Unable to read from input") as exc_info:
            StreamReader(stream).read_line()
        assert isinstance(exc_info.value.cause, OSError)
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_masked_read_failure(self):
        with pytest.raises(InputError, match="Unable to read input"):
            StreamReader(io.BytesIO(b"\xff\xfe\n")).read_masked()


@pytest.mark.unit
class TestConsoleReader:
    """Test reading from the terminal."""

    def test_read_line(self):
        console = Mock()
        console.input.return_value = "typed"
        assert ConsoleReader(console).read_line() == "typed"
        console.input.assert_called_once_with()

    def test_read_masked_disables_echo(self):
        console = Mock()
        console.input.return_value = "secret\r"
        assert ConsoleReader(console).read_masked() == "secret"
        console.input.assert_called_once_with(password=True)

    def test_eof_on_stdin(self):
        console = Mock()
        console.input.side_effect = EOFError()
        with pytest.raises(InputError, match="Unable to read from STDIN"):
            ConsoleReader(console).read_line()

    def test_masked_eof(self):
        console = Mock()
        console.input.side_effect = EOFError()
        with pytest.raises(InputError, match="Unable to read input"):
            ConsoleReader(console).read_masked()


@pytest.mark.unit
class TestAsReader:
    def test_wraps_text_and_bytes(self):
        assert as_reader("a\n").read_line() == "a"
        assert as_reader(b"b\n").read_line() == "b"

    def test_readers_pass_through(self):
        reader = ConsoleReader(Mock())
        assert as_reader(reader) is reader

    def test_rejects_unreadable(self):
        with pytest.raises(TypeError):
            as_reader(3.5)
