"""Graph ports - Abstractions for validating, storing and routing.

These protocols define the contracts between the map service and the
components it composes. Implementations live in ``adapters/``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import Graph, RouteResult, ValidationResult


class GraphValidatorPort(Protocol):
    """Port for structural validation of candidate graphs.

    Implementation: adapters/graph/validator.py

    Validation is pure: it never touches stored state and always
    returns a result instead of raising.
    """

    def validate(self, graph: Optional[Graph]) -> ValidationResult:
        """Check a candidate graph.

        Args:
            graph: The candidate graph, possibly ``None``.

        Returns:
            ValidationResult carrying the first failure found, if any.
        """
        ...


class GraphStorePort(Protocol):
    """Port for the single process-wide graph.

    Implementation: adapters/store/memory_store.py

    All operations are atomic with respect to each other.
    """

    def set(self, graph: Graph) -> None:
        """Replace the stored graph.

        Args:
            graph: An already validated graph.
        """
        ...

    def get(self) -> Optional[Graph]:
        """Return the stored graph, or None if none has been set."""
        ...

    def has_map(self) -> bool:
        """Check if a graph is currently stored."""
        ...


class PathFinderPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def shortest_path(
        self,
        graph: Optional[Graph],
        source: Optional[str],
        target: Optional[str],
    ) -> RouteResult:
        """Find the shortest path between two nodes.

        Args:
            graph: The graph snapshot to search.
            source: Source node id.
            target: Destination node id.

        Returns:
            RouteResult with path and distance, or the reason for failure.
        """
        ...
