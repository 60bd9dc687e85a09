"""Errors raised by the prompt pipeline."""

from typing import Optional


class AskError(Exception):
    """Base class for every failure reported by ``ask()``."""


class InputError(AskError):
    """Reading an answer from the input source failed.

    The message names the source that failed ("Unable to read from STDIN",
    "Unable to read from input", "Unable to read input"); the underlying
    exception is chained and also kept on ``cause``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class ValidationError(AskError):
    """The configured predicate rejected the answer."""

    def __init__(self, message: str = "Response failed validation"):
        super().__init__(message)
