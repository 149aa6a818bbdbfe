"""Tests for layout metrics."""

import pytest

from force_layout import Edge, Graph, InvalidEdgeError, LayoutConfig, Node, net_force
from force_layout.metrics import (
    edge_length_variance,
    edge_lengths,
    equilibrium_distance,
    layout_energy,
)


def create_square():
    """Four nodes on a 10x10 square with a diagonal and a self-loop."""
    nodes = [Node(x=0, y=0), Node(x=10, y=0), Node(x=10, y=10), Node(x=0, y=10)]
    edges = [Edge(0, 1), Edge(1, 2), Edge(2, 3), Edge(0, 2), Edge(3, 3)]
    return Graph(nodes, edges)


class TestEquilibriumDistance:
    """Tests for the closed-form isolated-edge separation."""

    def test_default_optimal_distance(self):
        assert equilibrium_distance(16.0) == pytest.approx(32.0)

    def test_heavier_edges_are_shorter(self):
        assert equilibrium_distance(16.0, 16.0) == pytest.approx(16.0)
        assert equilibrium_distance(16.0, 2.0) < equilibrium_distance(16.0, 1.0)


class TestLayoutEnergy:
    """Tests for snapshot energy."""

    def test_does_not_move_nodes(self):
        graph = create_square()
        before = graph.positions()
        layout_energy(graph, LayoutConfig())
        assert graph.positions() == before

    def test_sum_of_squared_net_forces(self):
        graph = create_square()
        config = LayoutConfig(central_force_scale=0.1)
        expected = 0.0
        for i in range(4):
            f = net_force(graph, i, config)
            expected += f.x**2 + f.y**2
        assert layout_energy(graph, config) == pytest.approx(expected)

    def test_isolated_node_zero(self):
        assert layout_energy(Graph([Node(x=3, y=4)]), LayoutConfig()) == 0.0

    def test_zero_at_equilibrium(self):
        graph = Graph([Node(x=0, y=0), Node(x=32, y=0)], [Edge(0, 1)])
        assert layout_energy(graph, LayoutConfig()) == pytest.approx(0.0, abs=1e-20)


class TestEdgeLengths:
    """Tests for edge length measures."""

    def test_lengths_skip_self_loops(self):
        lengths = edge_lengths(create_square())
        assert lengths == pytest.approx([10.0, 10.0, 10.0, 200**0.5])

    def test_uniform_lengths_zero_variance(self):
        graph = create_square()
        graph.edges = [Edge(0, 1), Edge(1, 2), Edge(2, 3)]
        assert edge_length_variance(graph) == pytest.approx(0.0)

    def test_variance(self):
        graph = Graph([Node(x=0, y=0), Node(x=2, y=0), Node(x=2, y=4)], [Edge(0, 1), Edge(1, 2)])
        # lengths 2 and 4, mean 3
        assert edge_length_variance(graph) == pytest.approx(1.0)

    def test_fewer_than_two_edges(self):
        graph = Graph([Node(x=0, y=0), Node(x=2, y=0)], [Edge(0, 1)])
        assert edge_length_variance(graph) == 0.0


class TestMetricsEdgeValidation:
    """Out-of-range edge indices are rejected instead of wrapping around."""

    def test_negative_index_rejected(self):
        graph = Graph([Node(x=0, y=0), Node(x=10, y=0)], [Edge(0, -1)])
        with pytest.raises(InvalidEdgeError, match="out of bounds"):
            edge_lengths(graph)
        with pytest.raises(InvalidEdgeError):
            edge_length_variance(graph)
        with pytest.raises(InvalidEdgeError):
            layout_energy(graph, LayoutConfig())

    def test_index_past_end_rejected(self):
        graph = Graph([Node(x=0, y=0), Node(x=10, y=0)], [Edge(0, 1), Edge(1, 2)])
        with pytest.raises(InvalidEdgeError, match="second index 2"):
            edge_lengths(graph)
        with pytest.raises(InvalidEdgeError):
            layout_energy(graph, LayoutConfig())
