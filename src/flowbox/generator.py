"""
Main flow generator module.

Combines parsing, composition and export to turn flow text into
status-styled diagrams.
"""

import io
from pathlib import Path
from typing import Optional, TextIO

from .composer import FlowComposer
from .export import FlowExporter
from .models import Direction, FlowConfig
from .parser import ParsedFlow, Parser


class FlowGenerator:
    """
    Generate flow diagrams from flow text.

    Example:
        >>> generator = FlowGenerator()
        >>> diagram = generator.generate('''
        ...     Code [success] -> Test [active] -> Deploy
        ... ''')
    """

    def __init__(
        self,
        direction: str = "horizontal",
        spacing: int = 2,
        show_arrows: bool = True,
        color: Optional[bool] = None,
        output: Optional[TextIO] = None,
        font: Optional[str] = None,
    ):
        """
        Initialize the flow generator.

        Args:
            direction: "horizontal" (LR) or "vertical" (TB) for the main flow
            spacing: Gap between boxes
            show_arrows: Whether to draw connectors between boxes
            color: Force color on/off, or None to detect from the output
            output: Stream diagrams are printed to (default: stdout)
            font: Font name for PNG output
        """
        self.config = FlowConfig(
            direction=Direction.coerce(direction),
            spacing=spacing,
            show_arrows=show_arrows,
        )
        self.color = color
        self.output = output
        self.parser = Parser()
        self.composer = FlowComposer(config=self.config, color=color, output=output)
        self.exporter = FlowExporter(default_font=font)

    def parse(self, input_text: str) -> ParsedFlow:
        """Parse flow text without rendering it."""
        return self.parser.parse(input_text)

    def generate(self, input_text: str) -> str:
        """
        Parse flow text and print the diagram.

        Flows with branches print the main flow and each branch under labels.

        Returns:
            The main flow diagram text.

        Raises:
            ParseError: If input format is invalid.
        """
        flow = self.parse(input_text)
        return self._compose(self.composer, flow)

    def render_plain(self, input_text: str) -> str:
        """
        Return the complete uncolored diagram, labels and branches included,
        without printing it.
        """
        buffer = io.StringIO()
        composer = FlowComposer(config=self.config, color=False, output=buffer)
        self._compose(composer, self.parse(input_text))
        return buffer.getvalue().rstrip("\n")

    def save_txt(self, input_text: str, filename: str) -> Path:
        """Generate a diagram and save it to a text file."""
        return self.exporter.save_txt(self.render_plain(input_text), filename)

    def save_png(self, input_text: str, filename: str, **png_kwargs) -> Path:
        """
        Generate a diagram and save it as a PNG image.

        Args:
            input_text: Flow text.
            filename: Output filename (should end in .png).
            **png_kwargs: Options for FlowExporter.save_png.
        """
        return self.exporter.save_png(
            self.render_plain(input_text), filename, **png_kwargs
        )

    def _compose(self, composer: FlowComposer, flow: ParsedFlow) -> str:
        if flow.has_branches:
            return composer.compose_branched(flow.main, flow.branches)
        return composer.compose(flow.main)


def generate_flow(input_text: str, **kwargs) -> str:
    """
    Convenience function to generate a flow diagram.

    Args:
        input_text: Flow text.
        **kwargs: Additional parameters for FlowGenerator.

    Returns:
        The main flow diagram text.
    """
    return FlowGenerator(**kwargs).generate(input_text)
