"""
2D vector primitives for force computations.

Vectors are small immutable values. All arithmetic is exposed as free
functions (add, subtract, multiply, length_sq, length, normalize) so the
force model reads like the formulas it implements; the operator overloads
on Vector2 simply delegate to them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

# Machine epsilon of Python floats (IEEE double).
EPSILON: float = float(np.finfo(np.float64).eps)


@dataclass(frozen=True)
class Vector2:
    """A 2D vector or point."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return add(self, other)

    def __sub__(self, other: Vector2) -> Vector2:
        return subtract(self, other)

    def __mul__(self, factor: float) -> Vector2:
        return multiply(self, factor)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector2({self.x:.4f}, {self.y:.4f})"


ZERO = Vector2(0.0, 0.0)


def add(a: Vector2, b: Vector2) -> Vector2:
    """Component-wise sum a + b."""
    return Vector2(a.x + b.x, a.y + b.y)


def subtract(a: Vector2, b: Vector2) -> Vector2:
    """Component-wise difference a - b."""
    return Vector2(a.x - b.x, a.y - b.y)


def multiply(a: Vector2, factor: float) -> Vector2:
    """Scale a vector by a scalar."""
    return Vector2(a.x * factor, a.y * factor)


def length_sq(a: Vector2) -> float:
    """Squared Euclidean length."""
    return a.x * a.x + a.y * a.y


def length(a: Vector2) -> float:
    """Euclidean length."""
    return math.sqrt(length_sq(a))


def normalize(a: Vector2) -> Vector2:
    """
    Unit vector in the direction of a.

    Returns the zero vector when the length is below EPSILON, so callers
    never divide by a near-zero magnitude.
    """
    magnitude = length(a)
    if magnitude < EPSILON:
        return ZERO
    return multiply(a, 1.0 / magnitude)


__all__ = [
    "EPSILON",
    "ZERO",
    "Vector2",
    "add",
    "subtract",
    "multiply",
    "length_sq",
    "length",
    "normalize",
]
