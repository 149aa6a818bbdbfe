"""
force-layout: Yifan Hu style force-directed graph layout in Python.

Attractive forces pull connected nodes together in proportion to distance
and edge weight, repulsive forces push every node pair apart with the cube
of their distance, and an adaptive step controller speeds up convergence
while damping oscillation.

Two ways to drive a layout:
- Functional: begin() / compute_step() for caller-paced iteration,
  run() for batch layout to convergence
- Object-oriented: YifanHuLayout with start/tick/end events
"""

__version__ = "0.1.0"

# Base classes for object-oriented layouts
from .base import BaseLayout, IterativeLayout

# Configuration
from .config import LayoutConfig, UpdateMode

# Iteration engine
from .engine import (
    STREAK_LENGTH,
    LayoutState,
    adapt_step,
    begin,
    compute_step,
    net_force,
    run,
)

# Force model
from .forces import attractive_force, central_force, repulsion_constant, repulsive_force
from .layout import YifanHuLayout

# Metrics for layout evaluation
from .metrics import (
    edge_length_variance,
    edge_lengths,
    equilibrium_distance,
    layout_energy,
)
from .types import (
    Edge,
    EdgeLike,
    Event,
    EventType,
    Graph,
    Node,
    NodeLike,
    SizeType,
)

# Validation utilities
from .validation import (
    ConvergenceWarning,
    InvalidCanvasSizeError,
    InvalidConfigurationError,
    InvalidEdgeError,
    ValidationError,
    validate_canvas_size,
    validate_edge_indices,
)
from .vector import EPSILON, Vector2

__all__ = [
    # Version
    "__version__",
    # Types
    "Edge",
    "EdgeLike",
    "Event",
    "EventType",
    "Graph",
    "Node",
    "NodeLike",
    "SizeType",
    "Vector2",
    "EPSILON",
    # Configuration
    "LayoutConfig",
    "UpdateMode",
    # Engine
    "STREAK_LENGTH",
    "LayoutState",
    "adapt_step",
    "begin",
    "compute_step",
    "net_force",
    "run",
    # Forces
    "attractive_force",
    "central_force",
    "repulsion_constant",
    "repulsive_force",
    # Layouts
    "BaseLayout",
    "IterativeLayout",
    "YifanHuLayout",
    # Metrics
    "edge_length_variance",
    "edge_lengths",
    "equilibrium_distance",
    "layout_energy",
    # Validation
    "ConvergenceWarning",
    "InvalidCanvasSizeError",
    "InvalidConfigurationError",
    "InvalidEdgeError",
    "ValidationError",
    "validate_canvas_size",
    "validate_edge_indices",
]
