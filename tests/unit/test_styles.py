"""Unit tests for the styles module."""

import pytest

from flowbox.styles import (
    DEFAULT_REGISTRY,
    STATUS_STYLES,
    BorderStyle,
    Status,
    StatusStyle,
    StatusStyleRegistry,
    lookup_style,
)

KNOWN_TAGS = ["pending", "ready", "active", "success", "error", "warning"]


class TestStatusStyles:
    """Tests for the status style table."""

    def test_all_known_tags_present(self):
        """Every known tag has a style."""
        assert [status.value for status in STATUS_STYLES] == KNOWN_TAGS

    @pytest.mark.parametrize("tag", KNOWN_TAGS)
    def test_symbol_and_color_non_empty(self, tag):
        """Known styles have a symbol and a color."""
        style = DEFAULT_REGISTRY.lookup(tag)
        assert style.symbol
        assert style.color

    def test_active_uses_double_border(self):
        """Active is the only double-bordered status."""
        doubles = [s for s, style in STATUS_STYLES.items()
                   if style.border_style == BorderStyle.DOUBLE]
        assert doubles == [Status.ACTIVE]

    def test_success_style(self):
        """Success is green with a check mark."""
        style = lookup_style("success")
        assert style == StatusStyle("green", "green", BorderStyle.SINGLE, "✓")

    def test_style_is_frozen(self):
        """Styles cannot be mutated."""
        style = lookup_style("error")
        with pytest.raises(AttributeError):
            style.symbol = "!"


class TestStatusStyleRegistry:
    """Tests for StatusStyleRegistry lookups."""

    def test_lookup_exact(self):
        """Known tags resolve to their own style."""
        registry = StatusStyleRegistry()
        assert registry.lookup("error").symbol == "✗"

    def test_lookup_accepts_enum(self):
        """Status members resolve like their string values."""
        registry = StatusStyleRegistry()
        assert registry.lookup(Status.READY) is registry.lookup("ready")

    @pytest.mark.parametrize("tag", ["unknown", "Success", "", None, "pendingx"])
    def test_unknown_falls_back_to_pending(self, tag):
        """Unknown tags return the very same pending style object."""
        registry = StatusStyleRegistry()
        assert registry.lookup(tag) is registry.lookup("pending")

    def test_get_has_no_fallback(self):
        """get() returns None for unknown tags."""
        registry = StatusStyleRegistry()
        assert registry.get("bogus") is None
        assert registry.get("warning") is STATUS_STYLES[Status.WARNING]

    def test_tags_in_registry_order(self):
        """tags() lists known tags in order."""
        assert StatusStyleRegistry().tags() == KNOWN_TAGS

    def test_custom_styles(self):
        """A registry can be built from a custom table."""
        custom = dict(STATUS_STYLES)
        custom[Status.SUCCESS] = StatusStyle("blue", "blue", BorderStyle.SINGLE, "*")
        registry = StatusStyleRegistry(custom)
        assert registry.lookup("success").symbol == "*"
        assert DEFAULT_REGISTRY.lookup("success").symbol == "✓"
