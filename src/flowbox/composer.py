"""
Flow composition module.

Lays out rendered node boxes into horizontal, vertical and branched flow
diagrams joined by connectors, and prints status legends.

Every composition writes its finished block to the output stream in a single
write and returns the same text. Nothing is cached between calls.
"""

import logging
import sys
from typing import Any, Iterable, List, Mapping, Optional, Sequence, TextIO, Union

from .colors import Colorizer
from .models import Direction, FlowConfig, FlowNode, NodeOptions, RenderedBox
from .renderer import NodeRenderer
from .styles import DEFAULT_REGISTRY, StatusStyleRegistry

logger = logging.getLogger(__name__)

NodeLike = Union[FlowNode, Mapping[str, Any], str, None]

CONNECTOR_COLOR = "gray"
LEGEND_TITLE = "Status Legend:"
LEGEND_RULE = "─" * 20


class FlowComposer:
    """
    Compose flow diagrams from status-tagged nodes.

    Example:
        >>> composer = FlowComposer(color=False)
        >>> diagram = composer.compose([
        ...     {"content": "Build", "status": "success"},
        ...     {"content": "Deploy", "status": "active"},
        ... ])
    """

    def __init__(
        self,
        config: Optional[FlowConfig] = None,
        color: Optional[bool] = None,
        output: Optional[TextIO] = None,
        registry: Optional[StatusStyleRegistry] = None,
    ):
        """
        Initialize the composer.

        Args:
            config: Default composition settings.
            color: True/False to force color on/off, None to detect from output.
            output: Stream diagrams are written to (default: sys.stdout at
                write time).
            registry: Status style table.
        """
        self.config = config or FlowConfig()
        self.output = output
        self.registry = registry or DEFAULT_REGISTRY
        self.colorizer = Colorizer(enabled=color, stream=output)
        self.node_renderer = NodeRenderer(
            registry=self.registry, colorizer=self.colorizer
        )

    def render_node(
        self,
        content: str = "",
        status: str = "pending",
        options: Union[NodeOptions, Mapping[str, Any], None] = None,
    ) -> RenderedBox:
        """Render a single node box without printing it."""
        return self.node_renderer.render(content, status, options)

    def compose(
        self,
        nodes: Sequence[NodeLike],
        config: Optional[Union[FlowConfig, Mapping[str, Any]]] = None,
        **overrides: Any,
    ) -> str:
        """
        Compose nodes in the configured direction.

        Args:
            nodes: Nodes as FlowNode instances or mappings.
            config: A FlowConfig, or a mapping of fields to override.
            **overrides: Individual FlowConfig fields to override.

        Returns:
            The diagram text.
        """
        config = self._resolve_config(config, overrides)
        if config.direction == Direction.VERTICAL:
            return self.compose_vertical(nodes, config)
        return self.compose_horizontal(nodes, config)

    def compose_horizontal(
        self,
        nodes: Sequence[NodeLike],
        config: Optional[Union[FlowConfig, Mapping[str, Any]]] = None,
        **overrides: Any,
    ) -> str:
        """
        Lay nodes out left to right.

        Boxes shorter than the tallest box are padded with blank rows of their
        own width. The arrow sits on the middle row of the connector gap.
        """
        config = self._resolve_config(config, overrides)
        boxes = self._render_boxes(nodes)
        if not boxes:
            return ""

        max_height = max(box.height for box in boxes)
        middle = max_height // 2
        spacing = config.spacing
        draw_gap = config.show_arrows and spacing > 0
        arrow_gap = self.colorizer.apply(
            CONNECTOR_COLOR, config.connector * (spacing - 1) + config.arrow
        )
        blank_gap = " " * spacing

        rows = []
        for row_idx in range(max_height):
            parts = []
            for box_idx, box in enumerate(boxes):
                if row_idx < box.height:
                    parts.append(box.lines[row_idx])
                else:
                    parts.append(" " * box.width)

                if draw_gap and box_idx < len(boxes) - 1:
                    parts.append(arrow_gap if row_idx == middle else blank_gap)
            rows.append("".join(parts))

        return self._emit("\n".join(rows))

    def compose_vertical(
        self,
        nodes: Sequence[NodeLike],
        config: Optional[Union[FlowConfig, Mapping[str, Any]]] = None,
        **overrides: Any,
    ) -> str:
        """
        Stack nodes top to bottom.

        Connector rows take the width of the box above them, with the glyph in
        the center column and the arrow on the last row.
        """
        config = self._resolve_config(config, overrides)
        boxes = self._render_boxes(nodes)
        if not boxes:
            return ""

        rows: List[str] = []
        for box_idx, box in enumerate(boxes):
            rows.extend(box.lines)

            if not config.show_arrows or box_idx == len(boxes) - 1:
                continue

            center = box.width // 2
            for gap_row in range(config.spacing):
                glyph = (
                    config.vertical_arrow
                    if gap_row == config.spacing - 1
                    else config.vertical_connector
                )
                rows.append(
                    " " * center
                    + self.colorizer.apply(CONNECTOR_COLOR, glyph)
                    + " " * (box.width - center - 1)
                )

        return self._emit("\n".join(rows))

    def compose_branched(
        self,
        main_flow: Sequence[NodeLike],
        branches: Iterable[Sequence[NodeLike]] = (),
        config: Optional[Union[FlowConfig, Mapping[str, Any]]] = None,
        **overrides: Any,
    ) -> str:
        """
        Compose a main flow followed by independent branches.

        The main flow follows the configured direction; branches are always
        horizontal.

        Returns:
            The main flow text only; branches are printed.
        """
        config = self._resolve_config(config, overrides)
        self._write("Main Flow:")
        main_result = self.compose(main_flow, config)

        branch_config = config.merge(direction=Direction.HORIZONTAL)
        for index, branch in enumerate(branches, 1):
            self._write(f"\nBranch {index}:")
            self.compose_horizontal(branch, branch_config)

        return main_result

    def render_legend(self, tags: Optional[Iterable[str]] = None) -> None:
        """
        Print the symbol and name of each known status.

        Unknown tags are skipped.
        """
        if tags is None:
            tags = self.registry.tags()

        lines = ["", LEGEND_TITLE, LEGEND_RULE]
        for tag in tags:
            style = self.registry.get(tag)
            if style is None:
                logger.debug("Skipping unknown status %r in legend", tag)
                continue
            name = str(getattr(tag, "value", tag))
            symbol = self.colorizer.apply(style.color, style.symbol)
            lines.append(f"{symbol} {name[:1].upper()}{name[1:]}")
        lines.append("")

        self._write("\n".join(lines))

    def _resolve_config(
        self,
        config: Optional[Union[FlowConfig, Mapping[str, Any]]],
        overrides: Mapping[str, Any],
    ) -> FlowConfig:
        if isinstance(config, FlowConfig):
            return config.merge(overrides) if overrides else config
        return self.config.merge(config, **overrides)

    def _render_boxes(self, nodes: Optional[Sequence[NodeLike]]) -> List[RenderedBox]:
        boxes = [self.node_renderer.render_node(node) for node in nodes or ()]
        logger.debug("Rendered %d flow node(s)", len(boxes))
        return boxes

    def _emit(self, block: str) -> str:
        self._write(block)
        return block

    def _write(self, text: str) -> None:
        stream = self.output or sys.stdout
        stream.write(text + "\n")


def _composer() -> FlowComposer:
    # Color detection follows sys.stdout as it is at call time
    return FlowComposer()


def compose(nodes: Sequence[NodeLike], config=None, **overrides: Any) -> str:
    """Compose a flow with the default composer."""
    return _composer().compose(nodes, config, **overrides)


def compose_horizontal(nodes: Sequence[NodeLike], config=None, **overrides: Any) -> str:
    """Compose a horizontal flow with the default composer."""
    return _composer().compose_horizontal(nodes, config, **overrides)


def compose_vertical(nodes: Sequence[NodeLike], config=None, **overrides: Any) -> str:
    """Compose a vertical flow with the default composer."""
    return _composer().compose_vertical(nodes, config, **overrides)


def flow_horizontal(nodes: Sequence[NodeLike], **overrides: Any) -> str:
    overrides["direction"] = Direction.HORIZONTAL
    return compose(nodes, **overrides)


def flow_vertical(nodes: Sequence[NodeLike], **overrides: Any) -> str:
    overrides["direction"] = Direction.VERTICAL
    return compose(nodes, **overrides)


def compose_branched(
    main_flow: Sequence[NodeLike],
    branches: Iterable[Sequence[NodeLike]] = (),
    config=None,
    **overrides: Any,
) -> str:
    """Compose a branched flow with the default composer."""
    return _composer().compose_branched(main_flow, branches, config, **overrides)


def render_node(content: str = "", status: str = "pending", options=None) -> RenderedBox:
    """Render a single node box with the default composer."""
    return _composer().render_node(content, status, options)


def render_legend(tags: Optional[Iterable[str]] = None) -> None:
    """Print a status legend with the default composer."""
    _composer().render_legend(tags)
