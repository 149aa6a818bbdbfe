"""
Force model for the spring-electrical layout.

- Attraction along edges grows linearly with distance: scale * d / D
- Repulsion between every node pair falls off with the cube of distance:
  scale * Dk / d^3 with Dk = D^4 / scale
- Optional central force, an attraction toward the origin

With these formulas an isolated edge of weight w settles at
D^(5/4) / w^(1/4), whatever the repulsive scale is.
"""

from __future__ import annotations

from .vector import EPSILON, ZERO, Vector2, length, multiply, normalize, subtract

ORIGIN = ZERO


def attractive_force(a: Vector2, b: Vector2, scale: float, optimal_distance: float) -> Vector2:
    """
    Force pulling a toward b.

    Args:
        a: Position the force acts on
        b: Position of the attracting point
        scale: Edge weight (or central force scale)
        optimal_distance: Target inter-node spacing D

    Returns:
        Force vector of magnitude scale * |b - a| / D pointing from a to b
    """
    diff = subtract(b, a)
    return multiply(normalize(diff), scale * length(diff) / optimal_distance)


def repulsion_constant(scale: float, optimal_distance: float) -> float:
    """Derived repulsion constant Dk = D^4 / scale."""
    return optimal_distance**4 / scale


def repulsive_force(a: Vector2, b: Vector2, scale: float, optimal_distance: float) -> Vector2:
    """
    Force pushing a away from b.

    Coincident points (distance below EPSILON) have no defined direction
    and produce the zero vector.

    Args:
        a: Position the force acts on
        b: Position of the repelling point
        scale: Repulsive force scale
        optimal_distance: Target inter-node spacing D

    Returns:
        Force vector of magnitude scale * Dk / |b - a|^3 pointing from b to a
    """
    diff = subtract(a, b)
    dist = length(diff)
    if dist < EPSILON:
        return ZERO
    magnitude = scale * repulsion_constant(scale, optimal_distance) / (dist * dist * dist)
    return multiply(normalize(diff), magnitude)


def central_force(position: Vector2, scale: float, optimal_distance: float) -> Vector2:
    """Attraction of a node toward the origin. A zero scale yields the zero vector."""
    if scale == 0.0:
        return ZERO
    return attractive_force(position, ORIGIN, scale, optimal_distance)


__all__ = [
    "attractive_force",
    "repulsion_constant",
    "repulsive_force",
    "central_force",
]
