"""Pytest configuration and shared fixtures for flowbox tests."""

import io

import pytest

from flowbox import FlowComposer, FlowGenerator
from flowbox.colors import Colorizer
from flowbox.parser import Parser
from flowbox.renderer import BoxRenderer, NodeRenderer


@pytest.fixture
def pipeline_nodes():
    """Simple build pipeline."""
    return [
        {"content": "Code", "status": "success"},
        {"content": "Test", "status": "success"},
        {"content": "Build", "status": "active"},
        {"content": "Deploy", "status": "pending"},
    ]


@pytest.fixture
def uneven_nodes():
    """Two nodes where the second renders one row taller."""
    return [
        {"content": "A", "status": "success"},
        {"content": "Line one\nLine two", "status": "ready"},
    ]


@pytest.fixture
def branched_input():
    """Flow text with one branch point."""
    return """
    HTTP Request [success] -> Auth [success] -> Route [active]
    Route -> API Endpoint [ready] -> JSON Response
    Route -> Web Page [ready] -> HTML Render
    """


@pytest.fixture
def plain_colorizer():
    """Colorizer with color disabled."""
    return Colorizer(enabled=False)


@pytest.fixture
def box_renderer(plain_colorizer):
    """BoxRenderer without color."""
    return BoxRenderer(plain_colorizer)


@pytest.fixture
def node_renderer(plain_colorizer):
    """NodeRenderer without color."""
    return NodeRenderer(colorizer=plain_colorizer)


@pytest.fixture
def output():
    """In-memory output stream."""
    return io.StringIO()


@pytest.fixture
def composer(output):
    """FlowComposer writing uncolored output to an in-memory stream."""
    return FlowComposer(color=False, output=output)


@pytest.fixture
def parser():
    """Default Parser instance."""
    return Parser()


@pytest.fixture
def generator(output):
    """FlowGenerator writing uncolored output to an in-memory stream."""
    return FlowGenerator(color=False, output=output)
