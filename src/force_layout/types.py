"""
Common types for the force-directed layout.

This module provides the fundamental types used across the package:
- Node: Graph vertex with a 2D position
- Edge: Weighted, undirected connection between two node indices
- Graph: Ordered node list plus edge list
- EventType: Layout lifecycle events
- Event: Event payload for callbacks
"""

from __future__ import annotations

import copy
import math
from enum import IntEnum
from typing import Any, Optional, Sequence, TypedDict, Union

from .vector import Vector2


class EventType(IntEnum):
    """
    Layout lifecycle events.

    - start: Layout iterations have begun
    - tick: Fired once per pass (for animation)
    - end: Layout has converged or stopped
    """

    start = 0
    tick = 1
    end = 2


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    step: float
    energy: float
    movement: float
    iteration: int


class Node:
    """
    Graph node with a 2D position.

    Attributes:
        index: Index in the node list (optional, set by layouts)
        x: X coordinate
        y: Y coordinate
    """

    def __init__(self, **kwargs: Any) -> None:
        """Initialize node with optional properties."""
        self.index: Optional[int] = kwargs.get("index")
        self.x: float = float(kwargs.get("x", 0.0))
        self.y: float = float(kwargs.get("y", 0.0))
        if kwargs.get("position") is not None:
            x, y = kwargs["position"]
            self.position = Vector2(float(x), float(y))

        # Copy any additional custom properties
        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)

    @property
    def position(self) -> Vector2:
        """Current position as a vector."""
        return Vector2(self.x, self.y)

    @position.setter
    def position(self, value: Vector2) -> None:
        self.x = value.x
        self.y = value.y

    def __repr__(self) -> str:
        return f"Node(index={self.index}, x={self.x:.2f}, y={self.y:.2f})"


class Edge:
    """
    Undirected edge between two nodes, referenced by index.

    Attributes:
        first: Index of one endpoint
        second: Index of the other endpoint
        weight: Positive scale of the attractive force (default 1.0)
    """

    def __init__(
        self,
        first: int,
        second: int,
        weight: Optional[float] = 1.0,
        **kwargs: Any,
    ) -> None:
        """
        Initialize edge between two nodes.

        A weight of None means the default weight 1.0.

        Raises:
            ValueError: If an endpoint is None or the weight is not a
                positive finite number
        """
        if first is None:
            raise ValueError("Edge first endpoint cannot be None")
        if second is None:
            raise ValueError("Edge second endpoint cannot be None")
        if weight is None:
            weight = 1.0
        try:
            weight = float(weight)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Edge weight must be a number, got {weight!r}") from exc
        if not math.isfinite(weight) or weight <= 0:
            raise ValueError(f"Edge weight must be a positive finite number, got {weight}")

        self.first = first
        self.second = second
        self.weight = weight

        # Copy any additional custom properties
        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)

    @property
    def is_self_loop(self) -> bool:
        """True if both endpoints are the same node."""
        return self.first == self.second

    def other(self, index: int) -> Optional[int]:
        """Opposite endpoint of an edge incident to index, or None."""
        if self.first == index:
            return self.second
        if self.second == index:
            return self.first
        return None

    def __repr__(self) -> str:
        return f"Edge({self.first} -- {self.second}, weight={self.weight:g})"


# Type aliases for Pythonic API
NodeLike = Union[Node, dict[str, Any], Any]
"""Input type for nodes: Node objects, dicts, or objects with x/y attributes."""

EdgeLike = Union[Edge, dict[str, Any], tuple, Any]
"""Input type for edges: Edge objects, dicts, (first, second[, weight]) tuples, or objects."""

SizeType = Union[tuple[float, float], list[float], Sequence[float]]
"""Canvas size: (width, height) tuple, list, or sequence."""


def to_node(node_data: NodeLike) -> Node:
    """Normalize a node-like value into a Node."""
    if isinstance(node_data, Node):
        return node_data
    if isinstance(node_data, dict):
        return Node(**node_data)
    # Generic object - copy attributes
    node = Node()
    for attr in ["index", "x", "y"]:
        if hasattr(node_data, attr):
            setattr(node, attr, getattr(node_data, attr))
    node.x = float(node.x)
    node.y = float(node.y)
    return node


def to_edge(edge_data: EdgeLike) -> Edge:
    """Normalize an edge-like value into an Edge."""
    if isinstance(edge_data, Edge):
        return edge_data
    if isinstance(edge_data, dict):
        return Edge(**edge_data)
    if isinstance(edge_data, (tuple, list)):
        return Edge(*edge_data)
    # Generic object - extract endpoints
    first = getattr(edge_data, "first", None)
    second = getattr(edge_data, "second", None)
    return Edge(first, second, getattr(edge_data, "weight", None))


class Graph:
    """
    Ordered nodes plus edges.

    Node order is significant: the sequential engine updates nodes in list
    order, so it determines the exact trajectory of a layout.

    Example:
        graph = Graph.from_data(
            nodes=[{"x": 0, "y": 0}, {"x": 10, "y": 0}],
            edges=[(0, 1)],
        )
    """

    def __init__(
        self,
        nodes: Optional[list[Node]] = None,
        edges: Optional[list[Edge]] = None,
    ) -> None:
        self.nodes: list[Node] = nodes if nodes is not None else []
        self.edges: list[Edge] = edges if edges is not None else []

    @classmethod
    def from_data(
        cls,
        nodes: Sequence[NodeLike] = (),
        edges: Sequence[EdgeLike] = (),
    ) -> Graph:
        """Build a graph from node-like and edge-like values."""
        return cls([to_node(n) for n in nodes], [to_edge(e) for e in edges])

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def positions(self) -> list[tuple[float, float]]:
        """Snapshot of node positions as (x, y) tuples."""
        return [(node.x, node.y) for node in self.nodes]

    def copy(self) -> Graph:
        """Independent deep copy of nodes and edges."""
        return Graph(copy.deepcopy(self.nodes), copy.deepcopy(self.edges))

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self.nodes)}, edges={len(self.edges)})"


__all__ = [
    "EventType",
    "Event",
    "Node",
    "Edge",
    "Graph",
    "NodeLike",
    "EdgeLike",
    "SizeType",
    "to_node",
    "to_edge",
]
