"""
Box renderer module for flow diagrams.

Draws bordered, padded text boxes with Unicode box-drawing characters and
turns flow nodes into RenderedBox values using their status styles.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from .ansi import strip_ansi, visible_width
from .colors import Colorizer
from .models import FlowNode, NodeOptions, RenderedBox
from .styles import DEFAULT_REGISTRY, BorderStyle, Status, StatusStyleRegistry

# Unicode box-drawing characters
BOX_CHARS = {
    "top_left": "┌",
    "top_right": "┐",
    "bottom_left": "└",
    "bottom_right": "┘",
    "horizontal": "─",
    "vertical": "│",
}

BOX_CHARS_DOUBLE = {
    "top_left": "╔",
    "top_right": "╗",
    "bottom_left": "╚",
    "bottom_right": "╝",
    "horizontal": "═",
    "vertical": "║",
}

BOX_CHARS_ROUNDED = {
    "top_left": "╭",
    "top_right": "╮",
    "bottom_left": "╰",
    "bottom_right": "╯",
    "horizontal": "─",
    "vertical": "│",
}

BORDER_STYLES: Dict[str, Dict[str, str]] = {
    "single": BOX_CHARS,
    "double": BOX_CHARS_DOUBLE,
    "round": BOX_CHARS_ROUNDED,
}

# Columns of horizontal padding per unit of padding
HORIZONTAL_PADDING_FACTOR = 3


def wrap_text(text: str, width: int) -> List[str]:
    """
    Word-wrap text to the given visible width.

    Existing newlines are kept; words longer than the width are split.
    """
    width = max(width, 1)
    lines: List[str] = []

    for paragraph in text.split("\n"):
        current_line: List[str] = []
        current_length = 0

        for word in paragraph.split():
            while visible_width(word) > width:
                if current_line:
                    lines.append(" ".join(current_line))
                    current_line, current_length = [], 0
                plain = strip_ansi(word)
                lines.append(plain[:width])
                word = plain[width:]
            if not word:
                continue

            word_len = visible_width(word)
            space_needed = 1 if current_line else 0
            if current_length + word_len + space_needed <= width:
                current_line.append(word)
                current_length += word_len + space_needed
            else:
                lines.append(" ".join(current_line))
                current_line = [word]
                current_length = word_len

        lines.append(" ".join(current_line))

    return lines


@dataclass
class BoxDimensions:
    """Dimensions of a rendered box."""

    width: int  # Total width including border
    height: int  # Total height including border
    text_lines: List[str]  # Wrapped text lines
    padding: int = 1  # Internal padding
    inner_width: int = 0  # Width between the borders
    h_padding: int = 0  # Columns of padding on each side of the text


class BoxRenderer:
    """
    Renders text inside a bordered box.

    Padding follows the usual terminal box convention: one unit is one blank
    row above and below the text and three columns left and right of it.
    """

    def __init__(self, colorizer: Optional[Colorizer] = None):
        self.colorizer = colorizer or Colorizer()

    def calculate_box_dimensions(
        self, text: str, padding: int = 1, width: Optional[int] = None
    ) -> BoxDimensions:
        """
        Calculate box dimensions for the text.

        With an explicit width the text is wrapped to fit inside it; otherwise
        the box grows to the widest line.
        """
        padding = max(padding, 0)
        h_pad = padding * HORIZONTAL_PADDING_FACTOR

        if width:
            inner_width = max(width - 2, 1)
            # Narrow boxes give up padding before text
            h_pad = min(h_pad, (inner_width - 1) // 2)
            text_lines = wrap_text(text, inner_width - 2 * h_pad)
        else:
            text_lines = text.split("\n")
            text_width = max(visible_width(line) for line in text_lines)
            inner_width = text_width + 2 * h_pad

        return BoxDimensions(
            width=inner_width + 2,
            height=len(text_lines) + 2 * padding + 2,
            text_lines=text_lines,
            padding=padding,
            inner_width=inner_width,
            h_padding=h_pad,
        )

    def render(
        self,
        text: str,
        padding: int = 1,
        margin: int = 0,
        border_style: Union[str, BorderStyle] = "single",
        border_color: Optional[str] = None,
        width: Optional[int] = None,
        align: str = "center",
        text_color: Optional[str] = None,
    ) -> str:
        """
        Render text as a bordered box.

        Box structure (padding=1):
        ┌───────────┐
        │           │
        │   TEXT    │
        │           │
        └───────────┘

        Args:
            text: Box content; newlines start new rows.
            padding: Internal padding units.
            margin: Blank rows above/below and blank column units left/right.
            border_style: "single", "double" or "round".
            border_color: Semantic color for the border.
            width: Total box width including borders, or None to fit.
            align: "left", "center" or "right" text alignment.
            text_color: Semantic color applied to each text row.

        Returns:
            The box rows joined with newlines.
        """
        chars = BORDER_STYLES.get(str(getattr(border_style, "value", border_style)))
        if chars is None:
            chars = BOX_CHARS
        dims = self.calculate_box_dimensions(text, padding, width)
        h_pad = dims.h_padding
        content_width = dims.inner_width - 2 * h_pad
        v_pad = dims.padding

        def border(segment: str) -> str:
            return self.colorizer.apply(border_color, segment)

        side = border(chars["vertical"])
        blank_row = side + " " * dims.inner_width + side

        rows = [
            border(
                chars["top_left"]
                + chars["horizontal"] * dims.inner_width
                + chars["top_right"]
            )
        ]
        rows.extend([blank_row] * v_pad)
        for line in dims.text_lines:
            rows.append(
                side
                + " " * h_pad
                + self._align(line, content_width, align, text_color)
                + " " * h_pad
                + side
            )
        rows.extend([blank_row] * v_pad)
        rows.append(
            border(
                chars["bottom_left"]
                + chars["horizontal"] * dims.inner_width
                + chars["bottom_right"]
            )
        )

        if margin > 0:
            outer = " " * (margin * HORIZONTAL_PADDING_FACTOR)
            rows = [outer + row + outer for row in rows]
            empty = " " * visible_width(rows[0])
            rows = [empty] * margin + rows + [empty] * margin

        return "\n".join(rows)

    def _align(
        self, line: str, width: int, align: str, text_color: Optional[str]
    ) -> str:
        """Align a text row within width and color its text."""
        spare = max(width - visible_width(line), 0)
        if align == "left":
            left = 0
        elif align == "right":
            left = spare
        else:
            left = spare // 2
        colored = self.colorizer.apply(text_color, line)
        return " " * left + colored + " " * (spare - left)


class NodeRenderer:
    """Renders flow nodes as status-styled boxes."""

    def __init__(
        self,
        registry: Optional[StatusStyleRegistry] = None,
        box_renderer: Optional[BoxRenderer] = None,
        colorizer: Optional[Colorizer] = None,
    ):
        self.registry = registry or DEFAULT_REGISTRY
        self.colorizer = colorizer or Colorizer()
        self.box_renderer = box_renderer or BoxRenderer(self.colorizer)

    def render(
        self,
        content: str = "",
        status: str = Status.PENDING.value,
        options: Union[NodeOptions, Mapping[str, Any], None] = None,
    ) -> RenderedBox:
        """
        Render one node.

        Args:
            content: Node text.
            status: Status tag; unknown tags render as pending.
            options: Width and status-symbol overrides.

        Returns:
            RenderedBox keeping the original status tag.
        """
        options = NodeOptions.coerce(options)
        if status is None:
            status = Status.PENDING.value
        style = self.registry.lookup(status)
        text = f"{style.symbol} {content}" if options.show_status else content

        box = self.box_renderer.render(
            text,
            padding=1,
            margin=0,
            border_style=style.border_style,
            border_color=style.border_color,
            width=options.width,
            align="center",
            text_color=style.color,
        )
        lines = tuple(box.split("\n"))
        return RenderedBox(
            lines=lines,
            width=visible_width(lines[0]) if lines else 0,
            height=len(lines),
            status=status,
        )

    def render_node(self, node: Union[FlowNode, Mapping[str, Any], str, None]) -> RenderedBox:
        """Render a FlowNode or node mapping."""
        node = FlowNode.coerce(node)
        return self.render(node.content, node.status, node.options)
