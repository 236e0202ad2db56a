"""Unit tests for the models module."""

import pytest

from flowbox.models import Direction, FlowConfig, FlowNode, NodeOptions, RenderedBox
from flowbox.styles import Status


class TestDirection:
    """Tests for Direction coercion."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("horizontal", Direction.HORIZONTAL),
            ("vertical", Direction.VERTICAL),
            ("LR", Direction.HORIZONTAL),
            ("TB", Direction.VERTICAL),
            (" Vertical ", Direction.VERTICAL),
            (Direction.VERTICAL, Direction.VERTICAL),
        ],
    )
    def test_coerce(self, value, expected):
        """Names and aliases coerce to directions."""
        assert Direction.coerce(value) is expected

    def test_unknown_direction_is_vertical(self):
        """Unknown directions lay out vertically."""
        assert Direction.coerce("diagonal") is Direction.VERTICAL
        assert Direction.coerce(None) is Direction.VERTICAL


class TestNodeOptions:
    """Tests for NodeOptions."""

    def test_defaults(self):
        """Options default to auto width with the status symbol shown."""
        options = NodeOptions()
        assert options.width is None
        assert options.show_status is True

    def test_coerce_mapping(self):
        """Mappings are converted field by field."""
        options = NodeOptions.coerce({"width": 20, "show_status": False})
        assert options == NodeOptions(width=20, show_status=False)

    def test_coerce_ignores_unknown_and_none(self):
        """Unknown keys and None values fall back to defaults."""
        options = NodeOptions.coerce({"color": "red", "show_status": None})
        assert options == NodeOptions()

    def test_coerce_zero_width_is_auto(self):
        """A zero width means auto-size."""
        assert NodeOptions.coerce({"width": 0}).width is None

    def test_coerce_none(self):
        """None gives default options."""
        assert NodeOptions.coerce(None) == NodeOptions()

    def test_coerce_camel_case_show_status(self):
        """showStatus is read like show_status."""
        assert NodeOptions.coerce({"showStatus": False}).show_status is False
        assert NodeOptions.coerce({"show_status": None, "showStatus": False}) == \
            NodeOptions(show_status=False)


class TestFlowNode:
    """Tests for FlowNode coercion."""

    def test_defaults(self):
        """Empty nodes are pending with no content."""
        node = FlowNode()
        assert node.content == ""
        assert node.status == "pending"
        assert node.options == NodeOptions()

    def test_coerce_mapping(self):
        """Mappings become nodes."""
        node = FlowNode.coerce(
            {"content": "Build", "status": "active", "options": {"width": 30}}
        )
        assert node == FlowNode("Build", "active", NodeOptions(width=30))

    def test_coerce_missing_fields(self):
        """Missing content and status take defaults."""
        assert FlowNode.coerce({"status": "error"}).content == ""
        assert FlowNode.coerce({"content": "X"}).status == "pending"

    def test_coerce_keeps_unknown_status(self):
        """Unknown status strings are kept as given."""
        assert FlowNode.coerce({"status": "bogus"}).status == "bogus"

    def test_coerce_enum_status(self):
        """Status members are stored as their string values."""
        assert FlowNode.coerce({"status": Status.SUCCESS}).status == "success"

    def test_coerce_string_and_none(self):
        """Bare strings and None are accepted."""
        assert FlowNode.coerce("Deploy").content == "Deploy"
        assert FlowNode.coerce(None) == FlowNode()

    def test_coerce_instance_passthrough(self):
        """FlowNode instances are returned unchanged."""
        node = FlowNode("A", "ready")
        assert FlowNode.coerce(node) is node


class TestRenderedBox:
    """Tests for RenderedBox."""

    def test_content_joins_lines(self):
        """content joins rows with newlines."""
        box = RenderedBox(lines=("┌┐", "└┘"), width=2, height=2, status="x")
        assert box.content == "┌┐\n└┘"


class TestFlowConfig:
    """Tests for FlowConfig."""

    def test_defaults(self):
        """Defaults match the documented values."""
        config = FlowConfig()
        assert config.direction is Direction.HORIZONTAL
        assert config.spacing == 2
        assert config.show_arrows is True
        assert config.connector == "─"
        assert config.vertical_connector == "│"
        assert config.arrow == "→"
        assert config.vertical_arrow == "↓"

    def test_negative_spacing_clamped(self):
        """Negative spacing becomes zero."""
        assert FlowConfig(spacing=-3).spacing == 0

    def test_string_direction(self):
        """String directions are coerced."""
        assert FlowConfig(direction="vertical").direction is Direction.VERTICAL

    def test_merge_returns_copy(self):
        """merge() leaves the original untouched."""
        config = FlowConfig()
        merged = config.merge({"spacing": 5}, arrow=">")
        assert merged.spacing == 5
        assert merged.arrow == ">"
        assert config.spacing == 2
        assert config.arrow == "→"

    def test_merge_ignores_none(self):
        """None overrides keep the current value."""
        assert FlowConfig().merge(spacing=None).spacing == 2

    def test_merge_clamps(self):
        """Merged values are normalized."""
        merged = FlowConfig().merge(spacing=-1, direction="TB")
        assert merged.spacing == 0
        assert merged.direction is Direction.VERTICAL

    def test_merge_camel_case_fields(self):
        """camelCase field names map onto their fields."""
        merged = FlowConfig().merge(
            {"showArrows": False, "verticalArrow": "v", "verticalConnector": ":"}
        )
        assert merged.show_arrows is False
        assert merged.vertical_arrow == "v"
        assert merged.vertical_connector == ":"

    def test_merge_ignores_unknown_field(self):
        """Unknown fields are ignored."""
        merged = FlowConfig().merge({"colour": "red"}, spacing=4)
        assert merged == FlowConfig(spacing=4)

    def test_unknown_direction_in_config(self):
        """An unknown direction falls back to vertical."""
        assert FlowConfig(direction="diagonal").direction is Direction.VERTICAL
