"""Unit tests for the export module."""

from PIL import Image

from flowbox.export import FlowExporter

DIAGRAM = "┌───┐  ┌───┐\n│ A │─→│ B │\n└───┘  └───┘"


class TestSaveTxt:
    """Tests for FlowExporter.save_txt."""

    def test_writes_diagram(self, tmp_path):
        """The diagram is written as UTF-8 text."""
        path = FlowExporter().save_txt(DIAGRAM, str(tmp_path / "flow.txt"))
        assert path.read_text(encoding="utf-8") == DIAGRAM

    def test_strips_color_codes(self, tmp_path):
        """ANSI codes are not written to the file."""
        colored = "\x1b[32m┌─┐\x1b[0m"
        path = FlowExporter().save_txt(colored, str(tmp_path / "flow.txt"))
        assert path.read_text(encoding="utf-8") == "┌─┐"


class TestSavePng:
    """Tests for FlowExporter.save_png."""

    def test_creates_png(self, tmp_path):
        """A PNG image is written."""
        path = FlowExporter().save_png(DIAGRAM, str(tmp_path / "flow.png"))
        assert path.exists()
        with Image.open(path) as img:
            assert img.format == "PNG"

    def test_minimum_size(self, tmp_path):
        """Tiny diagrams still produce a minimum-size image."""
        path = FlowExporter().save_png("x", str(tmp_path / "tiny.png"), scale=1)
        with Image.open(path) as img:
            assert img.size[0] >= 100
            assert img.size[1] >= 100

    def test_scale_increases_size(self, tmp_path):
        """Higher scale gives a larger image."""
        exporter = FlowExporter()
        small = exporter.save_png(DIAGRAM * 3, str(tmp_path / "s.png"), scale=1)
        large = exporter.save_png(DIAGRAM * 3, str(tmp_path / "l.png"), scale=3)
        with Image.open(small) as img_small, Image.open(large) as img_large:
            assert img_large.size[0] > img_small.size[0]

    def test_background_color(self, tmp_path):
        """The background color fills the image corners."""
        path = FlowExporter().save_png(
            DIAGRAM, str(tmp_path / "bg.png"), bg_color="#FF0000"
        )
        with Image.open(path) as img:
            assert img.convert("RGB").getpixel((0, 0)) == (255, 0, 0)

    def test_missing_font_falls_back(self, tmp_path):
        """An unknown font name falls back to an available font."""
        exporter = FlowExporter(default_font="No Such Font 123")
        path = exporter.save_png(DIAGRAM, str(tmp_path / "font.png"))
        assert path.exists()
