"""Tests for input validation module."""

import pytest

from force_layout import Edge
from force_layout.validation import (
    InvalidCanvasSizeError,
    InvalidConfigurationError,
    InvalidEdgeError,
    ValidationError,
    validate_canvas_size,
    validate_edge_indices,
    validate_iteration_cap,
    validate_non_negative,
    validate_open_unit_interval,
    validate_positive,
)


class TestCanvasSizeValidation:
    """Tests for canvas size validation."""

    def test_valid_size(self):
        """Valid canvas size returns tuple."""
        w, h = validate_canvas_size([800, 600])
        assert w == 800.0
        assert h == 600.0

    def test_negative_width_raises(self):
        with pytest.raises(InvalidCanvasSizeError, match="width must be positive"):
            validate_canvas_size([-100, 600])

    def test_zero_height_raises(self):
        with pytest.raises(InvalidCanvasSizeError, match="height must be positive"):
            validate_canvas_size([800, 0])

    def test_single_element_raises(self):
        with pytest.raises(InvalidCanvasSizeError, match="must have 2 elements"):
            validate_canvas_size([800])


class TestEdgeValidation:
    """Tests for edge index validation."""

    def test_valid_edges(self):
        """Valid edges return empty issues list."""
        edges = [Edge(0, 1), Edge(1, 2)]
        assert validate_edge_indices(edges, node_count=3) == []

    def test_self_loop_valid(self):
        assert validate_edge_indices([Edge(1, 1)], node_count=2) == []

    def test_out_of_bounds_first_strict(self):
        with pytest.raises(InvalidEdgeError, match="first index 10 out of bounds"):
            validate_edge_indices([Edge(10, 1)], node_count=3, strict=True)

    def test_out_of_bounds_second_strict(self):
        with pytest.raises(InvalidEdgeError, match="second index 99 out of bounds"):
            validate_edge_indices([Edge(0, 99)], node_count=3, strict=True)

    def test_negative_index_raises(self):
        """Negative indices are rejected rather than wrapping around."""
        with pytest.raises(InvalidEdgeError, match="first index -1 out of bounds"):
            validate_edge_indices([Edge(-1, 1)], node_count=3, strict=True)

    def test_non_strict_returns_issues(self):
        edges = [Edge(0, 1), Edge(10, 20)]
        issues = validate_edge_indices(edges, node_count=3, strict=False)
        assert len(issues) == 2
        assert all(edge_index == 1 for edge_index, _ in issues)

    def test_dict_edges(self):
        edges = [{"first": 0, "second": 5}]
        issues = validate_edge_indices(edges, node_count=2, strict=False)
        assert len(issues) == 1

    def test_non_integer_index(self):
        edges = [{"first": "a", "second": 0}]
        with pytest.raises(InvalidEdgeError, match="first is not a node index"):
            validate_edge_indices(edges, node_count=2)

    def test_empty_edges_valid(self):
        assert validate_edge_indices([], node_count=0) == []

    def test_boundary_indices_valid(self):
        assert validate_edge_indices([Edge(0, 2)], node_count=3) == []


class TestValueValidation:
    """Tests for scalar validators."""

    def test_positive(self):
        assert validate_positive("x", 2) == 2.0
        with pytest.raises(InvalidConfigurationError, match="x must be positive"):
            validate_positive("x", 0)

    def test_non_negative(self):
        assert validate_non_negative("x", 0) == 0.0
        with pytest.raises(InvalidConfigurationError):
            validate_non_negative("x", -1e-9)

    def test_open_unit_interval(self):
        assert validate_open_unit_interval("t", 0.5) == 0.5
        with pytest.raises(InvalidConfigurationError):
            validate_open_unit_interval("t", 1.0)

    def test_iteration_cap(self):
        assert validate_iteration_cap(1) == 1
        with pytest.raises(InvalidConfigurationError):
            validate_iteration_cap(0)


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    def test_all_inherit_from_validation_error(self):
        assert issubclass(InvalidCanvasSizeError, ValidationError)
        assert issubclass(InvalidEdgeError, ValidationError)
        assert issubclass(InvalidConfigurationError, ValidationError)

    def test_validation_error_is_value_error(self):
        assert issubclass(ValidationError, ValueError)
