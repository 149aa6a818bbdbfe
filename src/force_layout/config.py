"""
Layout configuration.

LayoutConfig is an immutable value object with named fields and defaults.
Values are validated on construction so an invalid configuration fails
fast instead of producing NaN or divergent trajectories.
"""

from __future__ import annotations

import dataclasses
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .validation import (
    InvalidConfigurationError,
    validate_iteration_cap,
    validate_non_negative,
    validate_open_unit_interval,
    validate_positive,
)


class UpdateMode(str, Enum):
    """
    How a pass applies displacements.

    - sequential: each node moves as soon as its force is known, so later
      nodes in the same pass see the moved positions (Gauss-Seidel). This is
      the reference behavior and depends on node order.
    - synchronous: forces for all nodes are computed from a snapshot of the
      previous pass and applied together at the end (Jacobi). Independent of
      node order, but follows a different numeric trajectory.
    """

    sequential = "sequential"
    synchronous = "synchronous"


@dataclass(frozen=True)
class LayoutConfig:
    """
    Parameters of a layout run.

    Attributes:
        repulsive_force_scale: Strength of node-node repulsion (> 0)
        optimal_distance: Target inter-node spacing D (> 0)
        initial_step_length: Step length the controller starts from (> 0)
        iteration_cap: Hard bound on passes in batch mode (>= 1)
        min_movement: Convergence threshold on the largest displacement (>= 0)
        central_force_scale: Pull toward the origin, 0 disables it (>= 0)
        step_multiplier: Cooling factor of the step controller, in (0, 1)
        update_mode: Sequential (reference) or synchronous update

    Raises:
        InvalidConfigurationError: If any value is out of range
    """

    repulsive_force_scale: float = 0.6
    optimal_distance: float = 16.0
    initial_step_length: float = 100.0
    iteration_cap: int = sys.maxsize
    min_movement: float = 1.0
    central_force_scale: float = 0.0
    step_multiplier: float = 0.9
    update_mode: UpdateMode = UpdateMode.sequential

    def __post_init__(self) -> None:
        # Frozen dataclass: normalized values go through object.__setattr__
        checked = {
            "repulsive_force_scale": validate_positive(
                "repulsive_force_scale", self.repulsive_force_scale
            ),
            "optimal_distance": validate_positive("optimal_distance", self.optimal_distance),
            "initial_step_length": validate_positive(
                "initial_step_length", self.initial_step_length
            ),
            "iteration_cap": validate_iteration_cap(self.iteration_cap),
            "min_movement": validate_non_negative("min_movement", self.min_movement),
            "central_force_scale": validate_non_negative(
                "central_force_scale", self.central_force_scale
            ),
            "step_multiplier": validate_open_unit_interval(
                "step_multiplier", self.step_multiplier
            ),
            "update_mode": _coerce_update_mode(self.update_mode),
        }
        for name, value in checked.items():
            object.__setattr__(self, name, value)

    def replace(self, **changes: Any) -> LayoutConfig:
        """Return a validated copy with some fields changed."""
        return dataclasses.replace(self, **changes)


def _coerce_update_mode(value: Union[UpdateMode, str]) -> UpdateMode:
    try:
        return UpdateMode(value)
    except ValueError as exc:
        choices = ", ".join(mode.value for mode in UpdateMode)
        raise InvalidConfigurationError(
            f"update_mode must be one of {choices}, got {value!r}"
        ) from exc


__all__ = ["LayoutConfig", "UpdateMode"]
