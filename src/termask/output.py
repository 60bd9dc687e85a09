"""Where rendered prompt text is written."""

import io
from typing import IO, Optional, Protocol

from rich.console import Console as RichConsole
from rich.text import Text


class OutputSink(Protocol):
    """A destination for prompt text."""

    def write(self, text: str) -> None: ...


class ConsoleOutput:
    """Print prompt text on the terminal, one line per write.

    Styles already embedded in the text as ANSI codes are decoded and
    re-rendered by rich, so they are dropped when the console is not a
    terminal.
    """

    def __init__(self, console: Optional[RichConsole] = None):
        self._console = console or RichConsole(highlight=False)

    def write(self, text: str) -> None:
        """Print the text followed by a newline, without wrapping it."""
        self._console.print(Text.from_ansi(text), soft_wrap=True)


def _is_binary(stream) -> bool:
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    # File wrappers such as NamedTemporaryFile only expose their mode
    mode = getattr(stream, "mode", "")
    return isinstance(mode, str) and "b" in mode


class StreamOutput:
    """Write prompt text verbatim to a file-like object, no newline added."""

    def __init__(self, stream: IO):
        self._stream = stream
        self._binary = _is_binary(stream)

    def write(self, text: str) -> None:
        if self._binary:
            self._stream.write(text.encode("utf-8"))
        else:
            self._stream.write(text)
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()


def as_sink(target) -> OutputSink:
    """Wrap anything writable in a StreamOutput unless it is already a sink."""
    if isinstance(target, (ConsoleOutput, StreamOutput)):
        return target
    if callable(getattr(target, "write", None)):
        return StreamOutput(target)
    raise TypeError(f"Cannot write prompt output to {type(target).__name__}")
