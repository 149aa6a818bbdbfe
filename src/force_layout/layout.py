"""
Object-oriented Yifan Hu force-directed layout.

YifanHuLayout wraps the functional engine (begin / compute_step) in the
event-driven IterativeLayout interface: run() for offline layout, tick()
for caller-paced animation with one pass per call.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Optional, Sequence

from .base import IterativeLayout
from .config import LayoutConfig
from .engine import LayoutState, begin, compute_step
from .types import EdgeLike, Event, EventType, NodeLike, SizeType
from .validation import ConvergenceWarning


class YifanHuLayout(IterativeLayout):
    """
    Yifan Hu spring-electrical graph layout.

    Example:
        layout = YifanHuLayout(
            nodes=[{'x': 0, 'y': 0}, {'x': 40, 'y': 10}, {'x': 5, 'y': 30}],
            edges=[(0, 1), (1, 2)],
            config=LayoutConfig(optimal_distance=20.0),
        )
        layout.run()

        for node in layout.nodes:
            print(f"Node {node.index}: ({node.x}, {node.y})")
    """

    def __init__(
        self,
        *,
        nodes: Optional[Sequence[NodeLike]] = None,
        edges: Optional[Sequence[EdgeLike]] = None,
        size: SizeType = (1.0, 1.0),
        random_seed: Optional[int] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        config: Optional[LayoutConfig] = None,
        iterations: Optional[int] = None,
    ) -> None:
        """
        Initialize Yifan Hu layout.

        Args:
            nodes: List of nodes
            edges: List of edges
            size: Canvas size as (width, height)
            random_seed: Random seed for reproducible initial positions
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
            config: Layout parameters. Defaults to LayoutConfig().
            iterations: Maximum passes per run. Overrides config.iteration_cap.
        """
        config = config if config is not None else LayoutConfig()
        if iterations is not None:
            config = config.replace(iteration_cap=max(1, int(iterations)))

        super().__init__(
            nodes=nodes,
            edges=edges,
            size=size,
            random_seed=random_seed,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
            iterations=config.iteration_cap,
        )
        self._config: LayoutConfig = config
        self._state: Optional[LayoutState] = None

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def config(self) -> LayoutConfig:
        """Get layout parameters."""
        return self._config

    @config.setter
    def config(self, value: LayoutConfig) -> None:
        """Set layout parameters. Step history is kept."""
        self._config = value
        self._iterations = value.iteration_cap

    @property
    def iterations(self) -> int:
        """Get maximum passes per run."""
        return self._iterations

    @iterations.setter
    def iterations(self, value: int) -> None:
        """Set maximum passes per run (minimum 1)."""
        self.config = self._config.replace(iteration_cap=max(1, int(value)))

    @property
    def state(self) -> Optional[LayoutState]:
        """Get controller state, or None before the first tick."""
        return self._state

    # -------------------------------------------------------------------------
    # Layout Implementation
    # -------------------------------------------------------------------------

    def tick(self) -> bool:
        """
        Perform one pass of the layout.

        Returns:
            True once the largest displacement drops below min_movement.
        """
        if self._state is None:
            self._state = LayoutState()
            begin(self._state, self._config)

        compute_step(self._state, self._graph, self._config)

        self.trigger(
            {
                "type": EventType.tick,
                "step": self._state.step,
                "energy": self._state.energy,
                "movement": self._state.biggest_movement_in_iteration,
                "iteration": self._state.iterations,
            }
        )
        return self._state.biggest_movement_in_iteration < self._config.min_movement

    def run(self, **kwargs: Any) -> YifanHuLayout:
        """
        Run the layout until convergence or the iteration bound.

        Keyword Args:
            random_init: Randomize positions within the canvas first (default: False)
            center_graph: Center graph in the canvas after completion (default: False)

        Returns:
            self for chaining
        """
        self.validate()
        self._initialize_indices()

        if kwargs.get("random_init", False):
            self._initialize_positions()

        self._state = LayoutState()
        begin(self._state, self._config)
        self.trigger({"type": EventType.start, "step": self._state.step})

        return self._finish(**kwargs)

    def resume(self) -> YifanHuLayout:
        """Continue from the current step length and energy history."""
        self.trigger(
            {"type": EventType.start, "step": self._state.step if self._state else 0.0}
        )
        return self._finish()

    def _finish(self, **kwargs: Any) -> YifanHuLayout:
        self.kick()

        if kwargs.get("center_graph", False):
            self._center_graph()

        state = self._state
        if self._exhausted and state is not None:
            warnings.warn(
                f"Layout stopped after {state.iterations} passes without converging "
                f"(largest movement {state.biggest_movement_in_iteration:.4g} >= "
                f"min_movement {self._config.min_movement:.4g}). "
                "Increase iterations or loosen min_movement.",
                ConvergenceWarning,
                stacklevel=3,
            )

        self.trigger({"type": EventType.end, "energy": state.energy if state else 0.0})
        return self


__all__ = ["YifanHuLayout"]
