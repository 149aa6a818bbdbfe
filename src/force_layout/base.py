"""
Base classes for object-oriented layouts.

This module provides abstract base classes wrapping the functional engine
in a stateful, event-driven interface:

- BaseLayout: Abstract base with event system, node/edge management
- IterativeLayout: For animated layouts with a tick loop
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import (
    Edge,
    EdgeLike,
    Event,
    EventType,
    Graph,
    Node,
    NodeLike,
    SizeType,
    to_edge,
    to_node,
)
from .validation import validate_canvas_size, validate_edge_indices


class BaseLayout(ABC):
    """
    Abstract base class for layouts.

    Provides shared infrastructure:
    - Event system (start/tick/end events)
    - Node/edge management via properties
    - Position initialization
    - Canvas size management

    Example:
        layout = SomeLayout(
            nodes=nodes,
            edges=edges,
            size=(800, 600),
        )
        layout.run()

        # Access results via properties
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
    ) -> None:
        """
        Initialize layout with configuration.

        Args:
            nodes: List of nodes (Node objects, dicts, or objects with x/y)
            edges: List of edges (Edge objects, dicts, or (first, second[, weight]) tuples)
            size: Canvas size as (width, height), used for random initialization
                and centering
            random_seed: Random seed for reproducible initial positions
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
        """
        self._graph = Graph()
        self._canvas_size: tuple[float, float] = (1.0, 1.0)
        self._events: dict[EventType, Callable[[Optional[Event]], None]] = {}
        self._random_seed: Optional[int] = None

        # Set initial values via properties (triggers normalization)
        if nodes is not None:
            self.nodes = nodes
        if edges is not None:
            self.edges = edges
        self.size = size
        if random_seed is not None:
            self.random_seed = random_seed

        # Register event callbacks
        if on_start:
            self._events[EventType.start] = on_start
        if on_tick:
            self._events[EventType.tick] = on_tick
        if on_end:
            self._events[EventType.end] = on_end

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def graph(self) -> Graph:
        """Get the graph being laid out."""
        return self._graph

    @property
    def nodes(self) -> list[Node]:
        """Get the list of nodes."""
        return self._graph.nodes

    @nodes.setter
    def nodes(self, value: Sequence[NodeLike]) -> None:
        """Set nodes from a sequence of Node objects, dicts, or objects."""
        self._graph.nodes = [to_node(node_data) for node_data in value]

    @property
    def edges(self) -> list[Edge]:
        """Get the list of edges."""
        return self._graph.edges

    @edges.setter
    def edges(self, value: Sequence[EdgeLike]) -> None:
        """Set edges from a sequence of Edge objects, dicts, tuples, or objects."""
        self._graph.edges = [to_edge(edge_data) for edge_data in value]

    @property
    def size(self) -> tuple[float, float]:
        """Get canvas size as (width, height)."""
        return self._canvas_size

    @size.setter
    def size(self, value: SizeType) -> None:
        """
        Set canvas size.

        Raises:
            InvalidCanvasSizeError: If width or height is not positive.
        """
        self._canvas_size = validate_canvas_size(value)

    @property
    def random_seed(self) -> Optional[int]:
        """Get random seed for reproducible layouts."""
        return self._random_seed

    @random_seed.setter
    def random_seed(self, value: Optional[int]) -> None:
        self._random_seed = value

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: Callable[[Optional[Event]], None]) -> Self:
        """
        Subscribe to a layout event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """Trigger an event, calling the registered callback."""
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self) -> Self:
        """
        Check that all edges reference existing nodes.

        Called automatically by run() but can be called early for fail-fast
        behavior.

        Raises:
            InvalidEdgeError: If any edge references an invalid node index.
        """
        if self._graph.edges:
            validate_edge_indices(self._graph.edges, len(self._graph.nodes), strict=True)
        return self

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    @abstractmethod
    def run(self, **kwargs: Any) -> Self:
        """Run the layout algorithm."""
        pass

    def stop(self) -> Self:
        return self

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def _initialize_indices(self) -> None:
        """Assign indices to nodes that don't have them."""
        for i, node in enumerate(self._graph.nodes):
            if node.index is None:
                node.index = i

    def _initialize_positions(self) -> None:
        """Place every node at a random position within the canvas."""
        rng = random.Random(self._random_seed)
        w, h = self._canvas_size
        for node in self._graph.nodes:
            node.x = rng.uniform(0, w)
            node.y = rng.uniform(0, h)

    def _center_graph(self) -> None:
        """Center the graph within the canvas."""
        nodes = self._graph.nodes
        if not nodes:
            return

        min_x = min(n.x for n in nodes)
        max_x = max(n.x for n in nodes)
        min_y = min(n.y for n in nodes)
        max_y = max(n.y for n in nodes)

        dx = self._canvas_size[0] / 2 - (min_x + max_x) / 2
        dy = self._canvas_size[1] / 2 - (min_y + max_y) / 2

        for node in nodes:
            node.x += dx
            node.y += dy


class IterativeLayout(BaseLayout):
    """
    Base class for iterative/animated layouts.

    Provides:
    - Tick-based iteration loop
    - Iteration bound for kick()
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
        iterations: int = 300,
    ) -> None:
        """
        Initialize iterative layout.

        Args:
            iterations: Maximum number of ticks per kick()
            (other arguments as in BaseLayout)
        """
        super().__init__(
            nodes=nodes,
            edges=edges,
            size=size,
            random_seed=random_seed,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
        )
        self._running: bool = False
        self._converged: bool = False
        self._exhausted: bool = False
        self._iterations: int = max(1, int(iterations))

    @property
    def iterations(self) -> int:
        """Get maximum iterations."""
        return self._iterations

    @iterations.setter
    def iterations(self, value: int) -> None:
        """Set maximum iterations (minimum 1)."""
        self._iterations = max(1, int(value))

    @property
    def running(self) -> bool:
        return self._running

    @property
    def converged(self) -> bool:
        """True if the last kick() stopped because the layout converged."""
        return self._converged

    @abstractmethod
    def tick(self) -> bool:
        """
        Perform one iteration of the layout.

        Returns:
            True if converged/done, False if more iterations needed.
        """
        pass

    def kick(self) -> None:
        """Run tick() repeatedly until convergence, stop(), or max iterations."""
        self._running = True
        self._converged = False
        self._exhausted = False
        for _ in range(self._iterations):
            if self.tick():
                self._converged = True
                break
            if not self._running:
                break
        else:
            self._exhausted = True
        self._running = False

    def stop(self) -> Self:
        """Stop the layout after the current tick."""
        self._running = False
        return self


__all__ = [
    "BaseLayout",
    "IterativeLayout",
]
