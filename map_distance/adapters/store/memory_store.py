"""Thread-safe in-memory graph store.

Holds at most one graph for the lifetime of the process. The stored
graph is an immutable ``Graph`` instance, so returning the reference
under the lock gives readers a consistent snapshot: a concurrent
``set`` swaps the reference and never modifies the old graph.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from ...domain.models import Graph


@dataclass
class InMemoryGraphStore:
    """Process-local holder for the current graph.

    This store implements the GraphStorePort protocol. It performs no
    validation: callers must validate before calling ``set``.

    Example:
        store = InMemoryGraphStore()
        store.set(graph)
        snapshot = store.get()
    """

    name: str = "map"

    _current: Optional[Graph] = field(default=None, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"store.{self.name}")

    def set(self, graph: Graph) -> None:
        """Replace the stored graph.

        Args:
            graph: An already validated graph.
        """
        with self._lock:
            self._current = graph
        self._logger.info(
            "Graph stored",
            extra={"nodes": len(graph.nodes), "edges": len(graph.edges)},
        )

    def get(self) -> Optional[Graph]:
        """Return the stored graph.

        Returns:
            The current graph, or None if none has been set.
        """
        with self._lock:
            return self._current

    def has_map(self) -> bool:
        """Check if a graph is currently stored."""
        with self._lock:
            return self._current is not None

    def clear(self) -> bool:
        """Drop the stored graph.

        Returns:
            True if a graph was stored before the call.
        """
        with self._lock:
            had_map = self._current is not None
            self._current = None
        self._logger.debug("Graph store cleared", extra={"had_map": had_map})
        return had_map
