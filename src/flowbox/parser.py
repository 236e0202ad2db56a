"""
Parser module for flow diagram text.

Turns a small text notation into a main flow plus branches:

    HTTP Request [success] -> Auth [success] -> Route [active]
    Route -> API Endpoint [ready] -> JSON Response
    Route -> Web Page [ready] -> HTML Render

Each line is a chain of nodes joined by "->". A status tag in square brackets
after a node name applies to that node wherever it appears. A line with no
arrow declares a standalone node. Lines starting with "#" are comments.
"""

import logging
import re
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

import networkx as nx

from .models import FlowNode
from .styles import Status

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Raised when flow text cannot be parsed."""

    pass


@dataclass
class ParsedFlow:
    """A main flow and the branches that leave it."""

    main: List[FlowNode] = field(default_factory=list)
    branches: List[List[FlowNode]] = field(default_factory=list)

    @property
    def has_branches(self) -> bool:
        return bool(self.branches)


class Parser:
    """Parses flow text into a directed graph and splits it into flows."""

    # Node token: "Name" or "Name [status]"
    NODE_PATTERN = re.compile(r"^(?P<name>[^\[\]]*?)\s*(?:\[(?P<status>[^\[\]]*)\])?$")

    def parse(self, input_text: str) -> ParsedFlow:
        """
        Parse input text into a ParsedFlow.

        Raises:
            ParseError: If a line is malformed, a node gets two statuses,
                the flow contains a cycle, or the input has no nodes.
        """
        graph = self.build_graph(input_text)
        return self.split_flows(graph)

    def build_graph(self, input_text: str) -> nx.DiGraph:
        """
        Build a directed graph of the declared nodes and connections.

        Nodes keep declaration order and carry their status in the "status"
        attribute.
        """
        graph = nx.DiGraph()
        statuses: Dict[str, Tuple[int, str]] = {}

        for line_num, line in enumerate(input_text.strip().split("\n"), 1):
            stripped = line.strip()

            # Skip empty lines and comments
            if not stripped or stripped.startswith("#"):
                continue

            chain = [
                self._parse_node(token, line_num) for token in stripped.split("->")
            ]

            for name, status in chain:
                if status is not None:
                    previous = statuses.get(name)
                    if previous is not None and previous[1] != status:
                        raise ParseError(
                            f"Line {line_num}: Node '{name}' already has status "
                            f"'{previous[1]}' (line {previous[0]}), got '{status}'"
                        )
                    statuses[name] = (line_num, status)
                if name not in graph:
                    graph.add_node(name)

            for (source, _), (target, _) in zip(chain, chain[1:]):
                graph.add_edge(source, target)

        if graph.number_of_nodes() == 0:
            raise ParseError("No flow nodes found in input")

        if not nx.is_directed_acyclic_graph(graph):
            cycle = nx.find_cycle(graph)
            path = " -> ".join([edge[0] for edge in cycle] + [cycle[-1][1]])
            raise ParseError(f"Flow contains a cycle: {path}")

        for name in graph.nodes:
            status = statuses.get(name)
            graph.nodes[name]["status"] = status[1] if status else Status.PENDING.value

        logger.debug(
            "Parsed flow graph with %d node(s) and %d connection(s)",
            graph.number_of_nodes(),
            graph.number_of_edges(),
        )
        return graph

    def split_flows(self, graph: nx.DiGraph) -> ParsedFlow:
        """
        Split a flow graph into a main flow and branches.

        The main flow starts at the first declared root and follows each
        node's first successor. Every other successor starts a branch, and
        roots not reached from the main flow start branches of their own.
        """
        placed: Set[str] = set()
        paths: List[List[str]] = []
        pending: deque = deque()

        def follow(start: str) -> List[str]:
            path = []
            node: Optional[str] = start
            while node is not None and node not in placed:
                placed.add(node)
                path.append(node)
                pending.extend(graph.successors(node))
                node = next(iter(graph.successors(node)), None)
            return path

        roots = [name for name in graph.nodes if graph.in_degree(name) == 0]
        for root in roots:
            if root in placed:
                continue
            paths.append(follow(root))
            while pending:
                start = pending.popleft()
                if start not in placed:
                    paths.append(follow(start))

        def to_nodes(path: List[str]) -> List[FlowNode]:
            return [
                FlowNode(content=name, status=graph.nodes[name]["status"])
                for name in path
            ]

        return ParsedFlow(
            main=to_nodes(paths[0]) if paths else [],
            branches=[to_nodes(path) for path in paths[1:]],
        )

    def _parse_node(self, token: str, line_num: int) -> Tuple[str, Optional[str]]:
        match = self.NODE_PATTERN.match(token.strip())
        if match is None:
            raise ParseError(f"Line {line_num}: Invalid node: {token.strip()}")
        name = match.group("name").strip()
        if not name:
            raise ParseError(f"Line {line_num}: Empty node name")
        status = match.group("status")
        if status is not None:
            status = status.strip().lower() or None
        return name, status


def parse_flow(input_text: str) -> ParsedFlow:
    """
    Convenience function to parse flow text.

    Args:
        input_text: Multi-line flow notation.

    Returns:
        ParsedFlow with main flow and branches.
    """
    return Parser().parse(input_text)
