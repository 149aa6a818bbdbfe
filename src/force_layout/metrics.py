"""
Layout measurements.

Read-only measures of a graph's current positions:
- Equilibrium distance: the separation an isolated edge settles at
- Layout energy: sum of squared net forces, without moving any node
- Edge lengths and their variance

All metrics work with the current node positions of any graph.
"""

from __future__ import annotations

from .config import LayoutConfig
from .engine import net_force
from .types import Graph
from .validation import validate_edge_indices
from .vector import length, length_sq, subtract


def equilibrium_distance(optimal_distance: float, weight: float = 1.0) -> float:
    """
    Separation at which attraction and repulsion balance for one isolated edge.

    Equal to D^(5/4) / w^(1/4); the repulsive force scale cancels out.

    Args:
        optimal_distance: Target inter-node spacing D
        weight: Edge weight w
    """
    return optimal_distance**1.25 / weight**0.25


def layout_energy(graph: Graph, config: LayoutConfig) -> float:
    """
    Energy of the current positions.

    Unlike a pass of the engine, every force is evaluated against the same
    positions and nothing is moved.

    Raises:
        InvalidEdgeError: If an edge references a node index out of range
    """
    validate_edge_indices(graph.edges, len(graph.nodes), strict=True)
    return sum(length_sq(net_force(graph, i, config)) for i in range(len(graph.nodes)))


def edge_lengths(graph: Graph) -> list[float]:
    """
    Lengths of all edges except self-loops, in edge order.

    Raises:
        InvalidEdgeError: If an edge references a node index out of range
    """
    validate_edge_indices(graph.edges, len(graph.nodes), strict=True)
    nodes = graph.nodes
    return [
        length(subtract(nodes[edge.second].position, nodes[edge.first].position))
        for edge in graph.edges
        if not edge.is_self_loop
    ]


def edge_length_variance(graph: Graph) -> float:
    """
    Population variance of edge lengths.

    Lower values indicate more uniform edge lengths. Returns 0.0 for
    fewer than two edges.
    """
    lengths = edge_lengths(graph)
    if len(lengths) < 2:
        return 0.0
    mean = sum(lengths) / len(lengths)
    return sum((value - mean) ** 2 for value in lengths) / len(lengths)


__all__ = [
    "equilibrium_distance",
    "layout_energy",
    "edge_lengths",
    "edge_length_variance",
]
