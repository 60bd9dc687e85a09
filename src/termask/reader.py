"""Where answers are read from."""

import io
from typing import IO, Optional, Union

from rich.console import Console as RichConsole

from .errors import InputError

STDIN_ERROR = "Unable to read from STDIN"
STREAM_ERROR = "Unable to read from input"
MASKED_ERROR = "Unable to read input"


def strip_line_ending(line: str) -> str:
    """Drop one trailing newline and any carriage return before it."""
    if line.endswith("\n"):
        line = line[:-1]
    return line.rstrip("\r")


class ConsoleReader:
    """Read answers typed on the terminal."""

    def __init__(self, console: Optional[RichConsole] = None):
        self._console = console or RichConsole()

    def read_line(self) -> str:
        try:
            return strip_line_ending(self._console.input())
        except (EOFError, OSError) as e:
            raise InputError(STDIN_ERROR, e) from e

    def read_masked(self) -> str:
        """Read a line with terminal echo switched off."""
        try:
            return strip_line_ending(self._console.input(password=True))
        except (EOFError, OSError) as e:
            raise InputError(MASKED_ERROR, e) from e


class StreamReader:
    """Read answers from a redirected buffer or stream.

    End of input yields an empty answer. Binary streams are decoded as UTF-8.
    """

    def __init__(self, stream: IO):
        self._stream = stream

    def _readline(self) -> str:
        line = self._stream.readline()
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        return strip_line_ending(line)

    def read_line(self) -> str:
        try:
            return self._readline()
        except (OSError, ValueError) as e:
            raise InputError(STREAM_ERROR, e) from e

    def read_masked(self) -> str:
        """Read a line; nothing is echoed from a redirected stream anyway."""
        try:
            return self._readline()
        except (OSError, ValueError) as e:
            raise InputError(MASKED_ERROR, e) from e


Reader = Union[ConsoleReader, StreamReader]


def as_reader(source: Union[str, bytes, IO, Reader]) -> Reader:
    """Wrap text, bytes or a readable stream in a StreamReader."""
    if isinstance(source, (ConsoleReader, StreamReader)):
        return source
    if isinstance(source, str):
        return StreamReader(io.StringIO(source))
    if isinstance(source, (bytes, bytearray)):
        return StreamReader(io.BytesIO(bytes(source)))
    if hasattr(source, "readline"):
        return StreamReader(source)
    raise TypeError(f"Cannot read answers from {type(source).__name__}")
