"""
Input validation utilities for the force-directed layout.

Provides centralized validation functions for edges, canvas size and
layout configuration values. Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Optional, Sequence


class ValidationError(ValueError):
    """Base exception for layout validation errors."""

    pass


class InvalidCanvasSizeError(ValidationError):
    """Raised when canvas dimensions are invalid."""

    pass


class InvalidEdgeError(ValidationError):
    """Raised when an edge references a node index that does not exist."""

    pass


class InvalidConfigurationError(ValidationError):
    """Raised when a layout configuration value is out of range."""

    pass


class ConvergenceWarning(UserWarning):
    """Warning issued when a layout stops on its iteration bound without converging."""

    pass


def validate_canvas_size(size: Sequence[float]) -> tuple[float, float]:
    """
    Validate canvas size dimensions.

    Args:
        size: [width, height] sequence

    Returns:
        Validated (width, height) tuple

    Raises:
        InvalidCanvasSizeError: If dimensions are invalid
    """
    if len(size) < 2:
        raise InvalidCanvasSizeError(
            f"Canvas size must have 2 elements [width, height], got {len(size)}"
        )

    width, height = float(size[0]), float(size[1])

    if width <= 0:
        raise InvalidCanvasSizeError(f"Canvas width must be positive, got {width}")
    if height <= 0:
        raise InvalidCanvasSizeError(f"Canvas height must be positive, got {height}")

    return width, height


def validate_edge_indices(
    edges: Sequence[Any],
    node_count: int,
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that all edge endpoint indices are within bounds.

    Args:
        edges: Sequence of Edge objects or dicts with first/second
        node_count: Number of nodes in the graph
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (edge_index, issue_description) tuples

    Raises:
        InvalidEdgeError: If strict=True and invalid edges found
    """
    issues: list[tuple[int, str]] = []

    for i, edge in enumerate(edges):
        for attr in ("first", "second"):
            idx = _get_index(edge, attr)
            if idx is None:
                issues.append((i, f"Edge {i}: {attr} is not a node index"))
            elif idx < 0 or idx >= node_count:
                issues.append(
                    (i, f"Edge {i}: {attr} index {idx} out of bounds [0, {node_count})")
                )

    if strict and issues:
        msg = "Invalid edge indices:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidEdgeError(msg)

    return issues


def validate_positive(name: str, value: float) -> float:
    """
    Validate that a value is a finite number greater than zero.

    Raises:
        InvalidConfigurationError: If the value is not positive and finite
    """
    value = _as_float(name, value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfigurationError(f"{name} must be positive and finite, got {value}")
    return value


def validate_non_negative(name: str, value: float) -> float:
    """
    Validate that a value is a finite number >= 0.

    Raises:
        InvalidConfigurationError: If the value is negative or not finite
    """
    value = _as_float(name, value)
    if not math.isfinite(value) or value < 0:
        raise InvalidConfigurationError(f"{name} must be >= 0 and finite, got {value}")
    return value


def validate_open_unit_interval(name: str, value: float) -> float:
    """
    Validate that a value lies strictly between 0 and 1.

    Raises:
        InvalidConfigurationError: If the value is not in (0, 1)
    """
    value = _as_float(name, value)
    if not 0 < value < 1:
        raise InvalidConfigurationError(f"{name} must be in (0, 1), got {value}")
    return value


def validate_iteration_cap(value: int) -> int:
    """
    Validate iteration cap is a positive integer.

    Raises:
        InvalidConfigurationError: If the cap is not an integer >= 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidConfigurationError(
            f"iteration_cap must be an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise InvalidConfigurationError(f"iteration_cap must be >= 1, got {value}")
    return int(value)


def _as_float(name: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationError(f"{name} must be a number, got {value!r}") from exc


def _get_index(obj: Any, attr: str) -> Optional[int]:
    """Extract an integer endpoint index from an edge object or dict."""
    if hasattr(obj, attr):
        val = getattr(obj, attr, None)
    elif isinstance(obj, dict):
        val = obj.get(attr)
    else:
        val = None

    if isinstance(val, bool) or not isinstance(val, numbers.Integral):
        return None
    return int(val)


__all__ = [
    "ValidationError",
    "InvalidCanvasSizeError",
    "InvalidEdgeError",
    "InvalidConfigurationError",
    "ConvergenceWarning",
    "validate_canvas_size",
    "validate_edge_indices",
    "validate_positive",
    "validate_non_negative",
    "validate_open_unit_interval",
    "validate_iteration_cap",
]
