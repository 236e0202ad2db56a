"""
Terminal color application.

Maps the semantic color names used by status styles onto rich styles and
renders them to ANSI escape sequences. When the output is not a terminal
(or NO_COLOR is set) the colorizer is a no-op and text passes through as-is.
"""

import logging
import sys
from typing import Optional, TextIO

from rich.color import ColorSystem
from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.style import Style

logger = logging.getLogger(__name__)

# Semantic names that rich spells differently
COLOR_ALIASES = {
    "gray": "bright_black",
    "grey": "bright_black",
}

_COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}


class Colorizer:
    """
    Applies semantic colors to text for terminal display.

    Args:
        enabled: True forces standard 16-color output, False disables color,
            None detects support from the target stream.
        stream: Stream used for detection when enabled is None.
    """

    def __init__(self, enabled: Optional[bool] = None, stream: Optional[TextIO] = None):
        if enabled is None:
            detected = Console(file=stream or sys.stdout).color_system
            self.color_system: Optional[ColorSystem] = _COLOR_SYSTEMS.get(detected)
        elif enabled:
            self.color_system = ColorSystem.STANDARD
        else:
            self.color_system = None

    @property
    def enabled(self) -> bool:
        return self.color_system is not None

    def apply(self, color: Optional[str], text: str) -> str:
        """Return text decorated with the given semantic color."""
        if not color or not text or self.color_system is None:
            return text
        name = COLOR_ALIASES.get(color, color)
        try:
            style = Style.parse(name)
        except StyleSyntaxError:
            logger.debug("Unknown color %r, leaving text uncolored", color)
            return text
        return style.render(text, color_system=self.color_system)
