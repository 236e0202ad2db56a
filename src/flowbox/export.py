"""
File export functionality for flow diagrams.

This module handles exporting composed flow diagrams to files:
- Text files (.txt) - Plain box-drawing text
- PNG images - Rasterized output with a monospace font

Color codes are stripped before export; files always hold plain text.
"""

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from .ansi import strip_ansi

logger = logging.getLogger(__name__)

# Monospace fonts tried in order after a user-specified font
MONOSPACE_FONTS = [
    # Linux
    "DejaVuSansMono",
    "DejaVu Sans Mono",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    # macOS
    "Menlo",
    "Monaco",
    "/System/Library/Fonts/Menlo.ttc",
    # Windows
    "Consolas",
    "Cascadia Code",
    "C:/Windows/Fonts/consola.ttf",
]


class FlowExporter:
    """
    Exports flow diagrams to text and PNG files.

    Attributes:
        default_font: Default font name for PNG export.
    """

    def __init__(self, default_font: Optional[str] = None):
        self.default_font = default_font

    def save_txt(self, diagram: str, filename: str) -> Path:
        """
        Save a diagram to a UTF-8 text file.

        Args:
            diagram: Composed diagram text, possibly colored.
            filename: Output filename.

        Returns:
            Path of the written file.
        """
        output_path = Path(filename)
        output_path.write_text(strip_ansi(diagram), encoding="utf-8")
        logger.debug("Wrote text diagram to %s", output_path)
        return output_path

    def save_png(
        self,
        diagram: str,
        filename: str,
        font_size: int = 16,
        bg_color: str = "#FFFFFF",
        fg_color: str = "#000000",
        padding: int = 20,
        font: Optional[str] = None,
        scale: int = 2,
    ) -> Path:
        """
        Save a diagram as a PNG image.

        The character grid is preserved by drawing each row with a monospace
        font at a fixed line height.

        Args:
            diagram: Composed diagram text, possibly colored.
            filename: Output filename (should end in .png).
            font_size: Font size in points before scaling.
            bg_color: Background color as a hex string.
            fg_color: Text color as a hex string.
            padding: Padding around the diagram in pixels before scaling.
            font: Font name or path (overrides default_font).
            scale: Resolution multiplier.

        Returns:
            Path of the written file.
        """
        lines = strip_ansi(diagram).split("\n")

        loaded_font = self._load_monospace_font(
            font_size * scale, font or self.default_font
        )

        # Character cell from a reference glyph
        bbox = loaded_font.getbbox("M")
        char_width = max(bbox[2] - bbox[0], 1)
        char_height = max(bbox[3] - bbox[1], 1)
        line_height = int(char_height * 1.4)

        scaled_padding = padding * scale
        max_line_len = max(len(line) for line in lines)
        img_width = max(char_width * max_line_len + scaled_padding * 2, 100 * scale)
        img_height = max(line_height * len(lines) + scaled_padding * 2, 100 * scale)

        img = Image.new("RGB", (img_width, img_height), bg_color)
        draw = ImageDraw.Draw(img)

        y = scaled_padding
        for line in lines:
            draw.text((scaled_padding, y), line, font=loaded_font, fill=fg_color)
            y += line_height

        output_path = Path(filename)
        img.save(output_path, "PNG")
        logger.debug("Wrote %dx%d PNG diagram to %s", img_width, img_height, output_path)
        return output_path

    def _load_monospace_font(self, font_size: int, font_name: Optional[str] = None):
        """
        Load a monospace font, falling back to Pillow's default font.
        """
        fonts_to_try = ([font_name] if font_name else []) + MONOSPACE_FONTS

        for candidate in fonts_to_try:
            try:
                return ImageFont.truetype(candidate, font_size)
            except OSError:
                continue

        logger.debug("No monospace font found, using Pillow default font")
        try:
            return ImageFont.load_default(size=font_size)
        except TypeError:
            # Pillow < 10.1 has no size parameter
            return ImageFont.load_default()
