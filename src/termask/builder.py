"""Fluent prompt builder and the pipeline that asks the question.

A builder collects options through chained calls and runs a fixed pipeline
on ``ask()``: print the message (looping on a Y/N confirmation when asked
to), read the answer with or without echo, substitute the default, validate
and finally discard the answer if requested.

    >>> answer = input("Name").prompt(":").fg_colour(Colour.GREEN).ask()
"""

import logging
from dataclasses import dataclass
from typing import IO, Any, Callable, Optional, Union

from .colours import Colour, Painter, RichPainter, resolve_bg, resolve_fg
from .config import Config
from .errors import InputError, ValidationError
from .output import ConsoleOutput, OutputSink, as_sink
from .reader import ConsoleReader, Reader, as_reader

logger = logging.getLogger(__name__)

Answer = str
Predicate = Callable[[Answer], bool]


@dataclass
class PromptConfig:
    """Options for a single question. ``None`` means default behaviour."""

    no_answer: Optional[bool] = None
    no_echo: Optional[bool] = None
    confirm: Optional[bool] = None
    default: Optional[str] = None
    prompt: Optional[str] = None
    bg_colour: Optional[Colour] = None
    fg_colour: Optional[Colour] = None
    validate: Optional[Predicate] = None
    redirect_in: Optional[Reader] = None
    redirect_out: Optional[OutputSink] = None


@dataclass
class Colours:
    fg: str
    bg: str


class PromptBuilder:
    """Builds and asks one question."""

    def __init__(self, message: Any = "", config: Optional[Config] = None,
                 painter: Optional[Painter] = None):
        self.message = message
        self.state = PromptConfig()
        self._config = config
        self._painter = painter

    # Options

    def no_echo(self) -> "PromptBuilder":
        """Read the answer without echoing it (password style)."""
        self.state.no_echo = True
        return self

    def no_answer(self) -> "PromptBuilder":
        """Run the whole pipeline but return an empty answer."""
        self.state.no_answer = True
        return self

    def confirm(self) -> "PromptBuilder":
        """Require a Y/N confirmation before reading the answer."""
        self.state.confirm = True
        return self

    def default(self, text: str) -> "PromptBuilder":
        """Answer to use when the reply is empty."""
        self.state.default = str(text)
        return self

    def prompt(self, char: str) -> "PromptBuilder":
        """Append a prompt character to the message, e.g. ``':'``."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Prompt must be a single character, got {char!r}")
        self.state.prompt = char
        return self

    def bg_colour(self, colour: Colour) -> "PromptBuilder":
        self.state.bg_colour = _check_colour(colour)
        return self

    def fg_colour(self, colour: Colour) -> "PromptBuilder":
        self.state.fg_colour = _check_colour(colour)
        return self

    def validate(self, predicate: Predicate) -> "PromptBuilder":
        """Fail ``ask()`` with ValidationError when ``predicate(answer)`` is false."""
        if not callable(predicate):
            raise TypeError("Validation predicate must be callable")
        self.state.validate = predicate
        return self

    def redirect_in(self, source: Union[str, bytes, IO]) -> "PromptBuilder":
        """Read from text, bytes or a stream instead of the terminal."""
        self.state.redirect_in = as_reader(source)
        return self

    def redirect_out(self, sink: Union[IO, OutputSink]) -> "PromptBuilder":
        """Write prompt text to a stream (verbatim) or to an OutputSink."""
        self.state.redirect_out = as_sink(sink)
        return self

    # Pipeline

    def ask(self) -> Answer:
        """Ask the question and return the answer.

        Raises:
            InputError: reading the answer failed.
            ValidationError: the predicate rejected the answer.
        """
        config = self._config or Config()
        painter = self._painter or _painter_for(config)
        reader = self.state.redirect_in or ConsoleReader()
        sink = self.state.redirect_out or ConsoleOutput()

        answer = self._check_no_echo(config, painter, reader, sink)
        answer = self._apply_default(answer)
        answer = self._check_validation(answer)
        return self._discard_answer(answer)

    def _check_no_echo(self, config, painter, reader, sink) -> Answer:
        self._check_colour(config, painter, reader, sink)
        if self.state.no_echo:
            logger.debug("Reading answer with echo disabled")
            return reader.read_masked()
        return reader.read_line()

    def _check_colour(self, config, painter, reader, sink):
        colours = Colours(
            fg=resolve_fg(self.state.fg_colour),
            bg=resolve_bg(self.state.bg_colour),
        )
        self._check_confirm(config, painter, colours, reader, sink)

    def _check_confirm(self, config, painter, colours, reader, sink):
        if not self.state.confirm:
            self._print_message(painter, colours, sink)
            return

        while True:
            self._print_message(painter, colours, sink)
            self._print(painter, colours, sink, config.confirm_message)
            try:
                reply = reader.read_line()
            except InputError as e:
                logger.debug("Confirmation read failed, asking again: %s", e)
                continue
            if reply.strip() in ("y", "Y"):
                return
            logger.debug("Confirmation not given, asking again")

    def _print_message(self, painter, colours, sink):
        message = str(self.message)
        if self.state.prompt is not None:
            message += self.state.prompt
        self._print(painter, colours, sink, message)

    @staticmethod
    def _print(painter, colours, sink, text):
        sink.write(painter.paint(text, colours.fg, colours.bg))

    def _apply_default(self, answer: Answer) -> Answer:
        if answer == "" and self.state.default is not None:
            logger.debug("Empty answer, using default")
            return self.state.default
        return answer

    def _check_validation(self, answer: Answer) -> Answer:
        if self.state.validate is not None and not self.state.validate(answer):
            raise ValidationError()
        return answer

    def _discard_answer(self, answer: Answer) -> Answer:
        if self.state.no_answer:
            return ""
        return answer


def _check_colour(colour) -> Colour:
    if not isinstance(colour, Colour):
        raise TypeError(f"Expected a Colour, got {type(colour).__name__}")
    return colour


def _painter_for(config: Config) -> Painter:
    try:
        return config.painter()
    except ValueError:
        logger.warning("Unknown color system %r, using standard colours", config.color_system)
        return RichPainter()


def input(message: Any = "") -> PromptBuilder:
    """Start building a question with the given message."""
    return PromptBuilder(message)
