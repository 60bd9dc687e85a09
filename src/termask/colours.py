"""Colour selection and rendering of prompt text."""

from enum import Enum
from typing import Optional, Protocol

from rich.color import ColorSystem
from rich.style import Style

DEFAULT_FG = "white"
DEFAULT_BG = "black"

# Names accepted by TERMASK_COLOR_SYSTEM
COLOR_SYSTEMS: dict[str, Optional[ColorSystem]] = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "none": None,
}


class Colour(Enum):
    """Colours a prompt can be painted with."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"


def resolve_fg(colour: Optional[Colour]) -> str:
    """Map a foreground selection to a terminal colour name."""
    return colour.value if colour is not None else DEFAULT_FG


def resolve_bg(colour: Optional[Colour]) -> str:
    """Map a background selection to a terminal colour name."""
    return colour.value if colour is not None else DEFAULT_BG


class Painter(Protocol):
    """Anything that can style text for the terminal."""

    def paint(self, text: str, fg: str, bg: str) -> str: ...


class RichPainter:
    """Render text with ANSI styles using rich.

    With ``color_system=None`` text passes through untouched.
    """

    def __init__(self, color_system: Optional[ColorSystem] = ColorSystem.STANDARD):
        self.color_system = color_system

    @classmethod
    def from_name(cls, name: str) -> "RichPainter":
        """Build a painter from a TERMASK_COLOR_SYSTEM value."""
        try:
            return cls(COLOR_SYSTEMS[name.lower()])
        except KeyError:
            raise ValueError(f"Unknown color system: {name}") from None

    def paint(self, text: str, fg: str, bg: str) -> str:
        if self.color_system is None:
            return text
        return Style(color=fg, bgcolor=bg).render(text, color_system=self.color_system)
