"""Configuration for termask, read from the environment."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .colours import COLOR_SYSTEMS, RichPainter

DEFAULT_CONFIRM_MESSAGE = "Are you sure? Y/N"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Settings loaded from TERMASK_* environment variables."""

    def __init__(self, env_file: Optional[Path] = None):
        """Initialize config, loading ``env_file`` first when given.

        Values already present in the environment win over the file.
        """
        if env_file is not None:
            load_dotenv(env_file)

        self.confirm_message = os.getenv("TERMASK_CONFIRM_MESSAGE", DEFAULT_CONFIRM_MESSAGE)
        self.color_system = os.getenv("TERMASK_COLOR_SYSTEM", "standard").lower()
        self.log_level = os.getenv("TERMASK_LOG_LEVEL", "WARNING").upper()

    def validate(self) -> list[str]:
        """Validate configuration values."""
        errors = []

        if self.color_system not in COLOR_SYSTEMS:
            choices = ", ".join(COLOR_SYSTEMS)
            errors.append(f"TERMASK_COLOR_SYSTEM must be one of: {choices}")
        if self.log_level not in LOG_LEVELS:
            errors.append(f"TERMASK_LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")
        if not self.confirm_message.strip():
            errors.append("TERMASK_CONFIRM_MESSAGE must not be empty")

        return errors

    def painter(self) -> RichPainter:
        """Painter for the configured color system."""
        return RichPainter.from_name(self.color_system)

    def logging_level(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)
