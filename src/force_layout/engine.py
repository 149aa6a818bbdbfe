"""
Iteration engine and adaptive step control.

Based on the spring-electrical model and adaptive cooling scheme from
"Efficient and High Quality Force-Directed Graph Drawing" by Yifan Hu (2005).

Driving APIs:
- begin(state, config): reset controller state before a run
- compute_step(state, graph, config): one pass, for caller-paced iteration
  (e.g. one call per animation frame)
- run(graph, config): batch loop until convergence or iteration cap

Every pass moves each node by exactly the current step length in the
direction of its net force; the step controller grows the step after a
streak of energy improvements and shrinks it otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .config import LayoutConfig, UpdateMode
from .forces import attractive_force, central_force, repulsion_constant, repulsive_force
from .types import Graph
from .validation import validate_edge_indices
from .vector import EPSILON, ZERO, Vector2, add, length, length_sq, multiply, normalize

# Consecutive improving passes needed before the step grows.
STREAK_LENGTH = 5


@dataclass
class LayoutState:
    """
    Mutable state of one layout run.

    Attributes:
        step: Current step length
        energy: Sum of squared net forces of the last completed pass
        progress: Count of consecutive energy-improving passes
        biggest_movement_in_iteration: Largest node displacement of the last pass
        iterations: Passes completed since begin()
    """

    step: float = 0.0
    energy: float = float("inf")
    progress: int = 0
    biggest_movement_in_iteration: float = 0.0
    iterations: int = 0


def adapt_step(
    step: float,
    progress: int,
    step_multiplier: float,
    last_energy: float,
    energy: float,
) -> tuple[float, int]:
    """
    Adaptive step length update.

    Args:
        step: Current step length
        progress: Current improvement streak
        step_multiplier: Cooling factor t in (0, 1)
        last_energy: Energy of the previous pass
        energy: Energy of the pass just completed

    Returns:
        Tuple of (new step, new progress)
    """
    if energy < last_energy:
        progress += 1
        if progress >= STREAK_LENGTH:
            return step / step_multiplier, 0
        return step, progress
    return step * step_multiplier, 0


def begin(state: LayoutState, config: LayoutConfig) -> None:
    """Initialize controller state for a new run."""
    state.step = config.initial_step_length
    state.energy = float("inf")
    state.progress = 0
    state.biggest_movement_in_iteration = 0.0
    state.iterations = 0


def net_force(graph: Graph, index: int, config: LayoutConfig) -> Vector2:
    """
    Total force on one node from the current node positions.

    Sums edge attraction (self-loops contribute nothing), repulsion from
    every other node, and the central force when it is enabled.
    """
    nodes = graph.nodes
    position = nodes[index].position
    optimal_distance = config.optimal_distance
    force = ZERO

    for edge in graph.edges:
        if edge.is_self_loop:
            continue
        other = edge.other(index)
        if other is not None:
            force = add(
                force,
                attractive_force(position, nodes[other].position, edge.weight, optimal_distance),
            )

    for j, other_node in enumerate(nodes):
        if j == index:
            continue
        force = add(
            force,
            repulsive_force(
                position, other_node.position, config.repulsive_force_scale, optimal_distance
            ),
        )

    if config.central_force_scale > 0:
        force = add(force, central_force(position, config.central_force_scale, optimal_distance))

    return force


def _sequential_pass(graph: Graph, config: LayoutConfig, step: float) -> tuple[float, float]:
    """
    One in-place pass in node order.

    Returns:
        Tuple of (energy, biggest movement)
    """
    energy = 0.0
    biggest_movement = 0.0

    for i, node in enumerate(graph.nodes):
        force = net_force(graph, i, config)
        displacement = multiply(normalize(force), step)
        node.position = add(node.position, displacement)

        energy += length_sq(force)
        biggest_movement = max(biggest_movement, length(displacement))

    return energy, biggest_movement


def _synchronous_pass(graph: Graph, config: LayoutConfig, step: float) -> tuple[float, float]:
    """
    One pass reading a snapshot of all positions and writing them back at the end.

    Returns:
        Tuple of (energy, biggest movement)
    """
    n = len(graph.nodes)
    if n == 0:
        return 0.0, 0.0

    pos = np.array([(node.x, node.y) for node in graph.nodes], dtype=np.float64).reshape(n, 2)
    forces = np.zeros((n, 2), dtype=np.float64)
    optimal_distance = config.optimal_distance

    # Attraction along edges
    edges = [edge for edge in graph.edges if not edge.is_self_loop]
    if edges:
        firsts = np.array([edge.first for edge in edges], dtype=np.int64)
        seconds = np.array([edge.second for edge in edges], dtype=np.int64)
        weights = np.array([edge.weight for edge in edges], dtype=np.float64)

        diff = pos[seconds] - pos[firsts]
        dist = np.sqrt(np.sum(diff * diff, axis=1))
        unit = _unit_vectors(diff, dist)
        pull = unit * (weights * dist / optimal_distance)[:, None]
        np.add.at(forces, firsts, pull)
        np.add.at(forces, seconds, -pull)

    # Repulsion between all pairs; coincident pairs (and i == j) contribute zero
    if n > 1:
        diff = pos[:, None, :] - pos[None, :, :]
        dist = np.sqrt(np.sum(diff * diff, axis=2))
        mask = dist >= EPSILON
        safe_dist = np.where(mask, dist, 1.0)
        scale = config.repulsive_force_scale
        magnitude = np.where(
            mask, scale * repulsion_constant(scale, optimal_distance) / safe_dist**3, 0.0
        )
        unit = np.where(mask[:, :, None], diff / safe_dist[:, :, None], 0.0)
        forces += np.sum(unit * magnitude[:, :, None], axis=1)

    # Central force
    if config.central_force_scale > 0:
        dist = np.sqrt(np.sum(pos * pos, axis=1))
        unit = _unit_vectors(-pos, dist)
        forces += unit * (config.central_force_scale * dist / optimal_distance)[:, None]

    force_len = np.sqrt(np.sum(forces * forces, axis=1))
    displacement = _unit_vectors(forces, force_len) * step
    new_pos = pos + displacement

    for node, (x, y) in zip(graph.nodes, new_pos):
        node.x = float(x)
        node.y = float(y)

    energy = float(np.sum(force_len * force_len))
    movement = np.sqrt(np.sum(displacement * displacement, axis=1))
    return energy, float(np.max(movement))


def _unit_vectors(vectors: np.ndarray, lengths: np.ndarray) -> np.ndarray:
    """Row-wise normalize, mapping rows shorter than EPSILON to zero."""
    mask = lengths >= EPSILON
    safe = np.where(mask, lengths, 1.0)
    return np.where(mask[:, None], vectors / safe[:, None], 0.0)


def compute_step(state: LayoutState, graph: Graph, config: LayoutConfig) -> None:
    """
    Run exactly one pass and update the step controller.

    The caller decides whether to continue by comparing
    state.biggest_movement_in_iteration with config.min_movement. The graph
    may be edited between calls; energy and progress history carry over.

    Raises:
        InvalidEdgeError: If an edge references a node index out of range
    """
    validate_edge_indices(graph.edges, len(graph.nodes), strict=True)

    if config.update_mode is UpdateMode.synchronous:
        energy, biggest_movement = _synchronous_pass(graph, config, state.step)
    else:
        energy, biggest_movement = _sequential_pass(graph, config, state.step)

    state.step, state.progress = adapt_step(
        state.step, state.progress, config.step_multiplier, state.energy, energy
    )
    state.energy = energy
    state.biggest_movement_in_iteration = biggest_movement
    state.iterations += 1


def run(graph: Graph, config: Optional[LayoutConfig] = None) -> LayoutState:
    """
    Lay out a graph in place until it converges or hits the iteration cap.

    Args:
        graph: Graph whose node positions are updated in place
        config: Layout parameters (defaults to LayoutConfig())

    Returns:
        The final LayoutState
    """
    if config is None:
        config = LayoutConfig()

    state = LayoutState()
    begin(state, config)
    for _ in range(config.iteration_cap):
        compute_step(state, graph, config)
        if state.biggest_movement_in_iteration < config.min_movement:
            break
    return state


__all__ = [
    "STREAK_LENGTH",
    "LayoutState",
    "adapt_step",
    "begin",
    "net_force",
    "compute_step",
    "run",
]
