"""Tests for the attractive, repulsive and central force model."""

import pytest

from force_layout.forces import (
    attractive_force,
    central_force,
    repulsion_constant,
    repulsive_force,
)
from force_layout.vector import ZERO, Vector2, length


class TestAttractiveForce:
    """Tests for edge attraction."""

    def test_points_toward_target(self):
        f = attractive_force(Vector2(0, 0), Vector2(32, 0), 1.0, 16.0)
        assert f.x > 0
        assert f.y == 0

    def test_magnitude_linear_in_distance(self):
        """Magnitude is scale * d / D."""
        f = attractive_force(Vector2(0, 0), Vector2(0, 48), 1.0, 16.0)
        assert length(f) == pytest.approx(3.0)

        f2 = attractive_force(Vector2(0, 0), Vector2(0, 96), 1.0, 16.0)
        assert length(f2) == pytest.approx(2 * length(f))

    def test_scales_with_weight(self):
        f1 = attractive_force(Vector2(1, 1), Vector2(11, 1), 1.0, 16.0)
        f3 = attractive_force(Vector2(1, 1), Vector2(11, 1), 3.0, 16.0)
        assert length(f3) == pytest.approx(3 * length(f1))

    def test_coincident_points(self):
        assert attractive_force(Vector2(5, 5), Vector2(5, 5), 1.0, 16.0) == ZERO


class TestRepulsiveForce:
    """Tests for node-node repulsion."""

    def test_points_away_from_other(self):
        f = repulsive_force(Vector2(0, 0), Vector2(10, 0), 0.6, 16.0)
        assert f.x < 0
        assert f.y == 0

    def test_inverse_cube_magnitude(self):
        """Magnitude is scale * Dk / d^3 = D^4 / d^3."""
        f = repulsive_force(Vector2(0, 0), Vector2(0, 32), 0.6, 16.0)
        assert length(f) == pytest.approx(16.0**4 / 32.0**3)

    def test_scale_cancels(self):
        """The repulsive scale has no effect on the resulting magnitude."""
        a, b = Vector2(0, 0), Vector2(3, 4)
        magnitudes = [length(repulsive_force(a, b, s, 16.0)) for s in (0.1, 0.6, 5.0)]
        assert magnitudes[0] == pytest.approx(magnitudes[1])
        assert magnitudes[1] == pytest.approx(magnitudes[2])

    def test_coincident_points_zero(self):
        """Coincident nodes have no defined direction and do not repel."""
        assert repulsive_force(Vector2(2, 3), Vector2(2, 3), 0.6, 16.0) == ZERO

    def test_repulsion_constant(self):
        assert repulsion_constant(0.5, 2.0) == pytest.approx(32.0)

    def test_balances_attraction_at_equilibrium(self):
        """At d = D^(5/4) the two forces on an isolated edge cancel."""
        a, b = Vector2(0, 0), Vector2(32, 0)
        pull = attractive_force(a, b, 1.0, 16.0)
        push = repulsive_force(a, b, 0.6, 16.0)
        assert pull.x + push.x == pytest.approx(0.0, abs=1e-12)


class TestCentralForce:
    """Tests for the pull toward the origin."""

    def test_points_to_origin(self):
        f = central_force(Vector2(10, -10), 1.0, 16.0)
        assert f.x < 0
        assert f.y > 0

    def test_zero_scale_disabled(self):
        assert central_force(Vector2(10, -10), 0.0, 16.0) == ZERO

    def test_at_origin(self):
        assert central_force(Vector2(0, 0), 2.0, 16.0) == ZERO
