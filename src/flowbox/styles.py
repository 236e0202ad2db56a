"""
Status styles for flow nodes.

Each node carries a status tag that selects its border, color and symbol.
The set of tags is closed; unknown tags render with the pending style but
keep their original string on the rendered node.

Classes:
    Status: The known status tags, in registry order.
    BorderStyle: Box border styles used by status styles.
    StatusStyle: Rendering attributes for one status.
    StatusStyleRegistry: Lookup table from tag to StatusStyle.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)


class Status(str, Enum):
    """Known node status tags."""

    PENDING = "pending"
    READY = "ready"
    ACTIVE = "active"
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


class BorderStyle(str, Enum):
    """Border styles a status can request from the box renderer."""

    SINGLE = "single"
    DOUBLE = "double"


@dataclass(frozen=True)
class StatusStyle:
    """
    Rendering attributes for a status tag.

    Attributes:
        color: Semantic color name for the node text and symbol.
        border_color: Semantic color name for the box border.
        border_style: Single or double box border.
        symbol: Glyph shown before the node text.
    """

    color: str
    border_color: str
    border_style: BorderStyle
    symbol: str


STATUS_STYLES: Dict[Status, StatusStyle] = {
    Status.PENDING: StatusStyle("gray", "gray", BorderStyle.SINGLE, "○"),
    Status.READY: StatusStyle("cyan", "cyan", BorderStyle.SINGLE, "◐"),
    Status.ACTIVE: StatusStyle("yellow", "yellow", BorderStyle.DOUBLE, "●"),
    Status.SUCCESS: StatusStyle("green", "green", BorderStyle.SINGLE, "✓"),
    Status.ERROR: StatusStyle("red", "red", BorderStyle.SINGLE, "✗"),
    Status.WARNING: StatusStyle("yellow", "yellow", BorderStyle.SINGLE, "⚠"),
}


def _as_status(tag: Union[str, Status, None]) -> Optional[Status]:
    if isinstance(tag, Status):
        return tag
    try:
        return Status(tag)
    except ValueError:
        return None


class StatusStyleRegistry:
    """Static lookup from status tag to StatusStyle."""

    def __init__(self, styles: Optional[Dict[Status, StatusStyle]] = None):
        self.styles = dict(STATUS_STYLES if styles is None else styles)

    def lookup(self, tag: Union[str, Status, None]) -> StatusStyle:
        """
        Return the style for a tag, falling back to the pending style.

        Never raises; typos in a tag simply render as pending.
        """
        style = self.get(tag)
        if style is None:
            logger.debug("Unknown status %r, rendering as pending", tag)
            return self.styles[Status.PENDING]
        return style

    def get(self, tag: Union[str, Status, None]) -> Optional[StatusStyle]:
        """Return the style for a known tag, or None without fallback."""
        status = _as_status(tag)
        if status is None:
            return None
        return self.styles.get(status)

    def tags(self) -> List[str]:
        """Known tags in registry order."""
        return [status.value for status in self.styles]


DEFAULT_REGISTRY = StatusStyleRegistry()


def lookup_style(tag: Union[str, Status, None]) -> StatusStyle:
    """Look up a style in the default registry with pending fallback."""
    return DEFAULT_REGISTRY.lookup(tag)
