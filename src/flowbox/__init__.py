"""
flowbox - Status-styled ASCII flow diagrams for the terminal

Compose boxed, color-coded nodes into horizontal, vertical and branched flow
diagrams joined by arrows.

Example:
    >>> from flowbox import compose
    >>> diagram = compose([
    ...     {"content": "Code", "status": "success"},
    ...     {"content": "Build", "status": "active"},
    ...     {"content": "Deploy", "status": "pending"},
    ... ])

Text Example:
    >>> from flowbox import FlowGenerator
    >>> generator = FlowGenerator(direction="vertical")
    >>> diagram = generator.generate("Raw Data [success] -> Transform [warning]")
"""

import logging

from .ansi import strip_ansi, visible_width
from .colors import Colorizer
from .composer import (
    FlowComposer,
    compose,
    compose_branched,
    compose_horizontal,
    compose_vertical,
    flow_horizontal,
    flow_vertical,
    render_legend,
    render_node,
)
from .export import FlowExporter
from .generator import FlowGenerator, generate_flow
from .models import Direction, FlowConfig, FlowNode, NodeOptions, RenderedBox
from .parser import ParsedFlow, ParseError, Parser, parse_flow
from .renderer import (
    BOX_CHARS,
    BOX_CHARS_DOUBLE,
    BOX_CHARS_ROUNDED,
    BoxRenderer,
    NodeRenderer,
)
from .styles import (
    STATUS_STYLES,
    BorderStyle,
    Status,
    StatusStyle,
    StatusStyleRegistry,
    lookup_style,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.3.0"

__all__ = [
    # Main API
    "FlowComposer",
    "compose",
    "compose_horizontal",
    "compose_vertical",
    "compose_branched",
    "flow_horizontal",
    "flow_vertical",
    "render_node",
    "render_legend",
    # Text input
    "FlowGenerator",
    "generate_flow",
    "Parser",
    "ParseError",
    "ParsedFlow",
    "parse_flow",
    # Models
    "Direction",
    "FlowConfig",
    "FlowNode",
    "NodeOptions",
    "RenderedBox",
    # Styles
    "Status",
    "BorderStyle",
    "StatusStyle",
    "StatusStyleRegistry",
    "STATUS_STYLES",
    "lookup_style",
    # Rendering
    "BoxRenderer",
    "NodeRenderer",
    "Colorizer",
    "BOX_CHARS",
    "BOX_CHARS_DOUBLE",
    "BOX_CHARS_ROUNDED",
    "strip_ansi",
    "visible_width",
    # Export
    "FlowExporter",
]
