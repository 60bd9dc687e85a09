"""Ask questions on the terminal with a small fluent builder."""

import logging

from .builder import Answer, PromptBuilder, PromptConfig, input
from .colours import Colour, Painter, RichPainter
from .config import Config
from .errors import AskError, InputError, ValidationError
from .output import ConsoleOutput, OutputSink, StreamOutput

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Answer",
    "AskError",
    "Colour",
    "Config",
    "ConsoleOutput",
    "InputError",
    "OutputSink",
    "Painter",
    "PromptBuilder",
    "PromptConfig",
    "RichPainter",
    "StreamOutput",
    "ValidationError",
    "input",
]
