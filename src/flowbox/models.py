"""
Data models for flow diagram composition.

Classes:
    Direction: Layout direction of a flow.
    NodeOptions: Per-node overrides (width, status symbol).
    FlowNode: One input node of a flow diagram.
    RenderedBox: A node rendered to bordered text rows.
    FlowConfig: Composition settings shared by all nodes of a flow.
"""

import logging
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Union

from .styles import Status

logger = logging.getLogger(__name__)

# camelCase spellings of FlowConfig fields
CONFIG_ALIASES = {
    "showArrows": "show_arrows",
    "verticalConnector": "vertical_connector",
    "verticalArrow": "vertical_arrow",
}


class Direction(str, Enum):
    """Flow layout direction."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def coerce(cls, value: Union[str, "Direction"]) -> "Direction":
        """
        Convert a direction name to a Direction.

        Accepts "horizontal"/"vertical" and the short forms "LR"/"TB".
        Anything else lays out vertically.
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        aliases = {"lr": cls.HORIZONTAL, "tb": cls.VERTICAL}
        if name in aliases:
            return aliases[name]
        try:
            return cls(name)
        except ValueError:
            logger.debug("Unknown direction %r, laying out vertically", value)
            return cls.VERTICAL


@dataclass(frozen=True)
class NodeOptions:
    """
    Per-node rendering overrides.

    Attributes:
        width: Fixed total box width including borders, or None to fit content.
        show_status: Whether to prefix the content with the status symbol.
    """

    width: Optional[int] = None
    show_status: bool = True

    @classmethod
    def coerce(cls, value: Union["NodeOptions", Mapping[str, Any], None]) -> "NodeOptions":
        """Build options from a mapping, ignoring unknown or None entries."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls()
        width = value.get("width")
        show_status = value.get("show_status")
        if show_status is None:
            show_status = value.get("showStatus")
        return cls(
            width=width if width else None,
            show_status=True if show_status is None else bool(show_status),
        )


@dataclass(frozen=True)
class FlowNode:
    """
    A node in a flow diagram.

    Attributes:
        content: Text displayed in the node box.
        status: Status tag; unknown tags are kept as given.
        options: Per-node rendering overrides.
    """

    content: str = ""
    status: str = Status.PENDING.value
    options: NodeOptions = field(default_factory=NodeOptions)

    @classmethod
    def coerce(cls, value: Union["FlowNode", Mapping[str, Any], str, None]) -> "FlowNode":
        """
        Build a node from a FlowNode, a mapping or a bare string.

        Missing fields fall back to their defaults.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls()
        if isinstance(value, str):
            return cls(content=value)
        content = value.get("content")
        status = value.get("status")
        if isinstance(status, Status):
            status = status.value
        return cls(
            content="" if content is None else str(content),
            status=Status.PENDING.value if status is None else status,
            options=NodeOptions.coerce(value.get("options")),
        )


@dataclass(frozen=True)
class RenderedBox:
    """
    A node rendered as bordered text.

    Attributes:
        lines: Display rows, possibly containing ANSI color codes.
        width: Visible column count of the first row.
        height: Number of rows.
        status: The node's original status tag.
    """

    lines: Tuple[str, ...]
    width: int
    height: int
    status: str

    @property
    def content(self) -> str:
        """The rendered box as a single string."""
        return "\n".join(self.lines)


@dataclass
class FlowConfig:
    """
    Composition settings for a flow diagram.

    Attributes:
        direction: Horizontal or vertical layout.
        spacing: Gap between nodes, in columns (horizontal) or rows (vertical).
            Negative values are clamped to 0.
        show_arrows: Whether to draw connectors between nodes. When False the
            gap is dropped as well and boxes touch.
        connector: Fill glyph for horizontal connectors.
        vertical_connector: Fill glyph for vertical connectors.
        arrow: Arrow head for horizontal connectors.
        vertical_arrow: Arrow head for vertical connectors.
    """

    direction: Direction = Direction.HORIZONTAL
    spacing: int = 2
    show_arrows: bool = True
    connector: str = "─"
    vertical_connector: str = "│"
    arrow: str = "→"
    vertical_arrow: str = "↓"

    def __post_init__(self):
        self.direction = Direction.coerce(self.direction)
        self.spacing = max(0, int(self.spacing))

    def merge(
        self, overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> "FlowConfig":
        """
        Return a copy with the given fields replaced.

        None values are ignored so callers can pass optional settings through.
        camelCase field names are accepted; unknown names are ignored.
        """
        changes = {}
        for name, value in {**(overrides or {}), **kwargs}.items():
            changes[CONFIG_ALIASES.get(name, name)] = value
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            logger.debug("Ignoring unknown flow option(s): %s", ", ".join(unknown))
        return replace(
            self,
            **{k: v for k, v in changes.items() if k in known and v is not None},
        )
