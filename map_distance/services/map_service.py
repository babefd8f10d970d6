"""Map service - Main orchestrator.

Composes the validator, store and path finder into the three operations
exposed to callers: set the graph, read it back, and query a route.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import MapNotSetError, error_from_kind
from ..domain.models import Graph, RouteResult, ValidationResult
from ..ports.graph import GraphStorePort, GraphValidatorPort, PathFinderPort


@dataclass
class MapService:
    """Main service for storing the map and answering route queries.

    Attributes:
        store: Holds the current graph
        validator: Checks candidate graphs before they are stored
        path_finder: Computes shortest paths on a graph snapshot
    """

    store: GraphStorePort
    validator: GraphValidatorPort
    path_finder: PathFinderPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def set_graph(self, candidate: Optional[Graph]) -> ValidationResult:
        """Validate a graph and, if accepted, replace the stored one.

        A rejected graph leaves the stored state untouched.

        Args:
            candidate: The graph submitted by the caller.

        Returns:
            ValidationResult describing acceptance or the first failure.
        """
        result = self.validator.validate(candidate)
        if not result.is_valid:
            self._logger.info("Map update rejected", extra={"reason": result.error})
            return result

        assert candidate is not None
        self.store.set(candidate)
        return result

    def get_graph(self) -> Optional[Graph]:
        """Return the stored graph, or None if no graph has been set."""
        return self.store.get()

    def shortest_path(
        self, source: Optional[str], target: Optional[str]
    ) -> RouteResult:
        """Compute the shortest route on the current graph snapshot.

        Args:
            source: Source node id.
            target: Destination node id.

        Returns:
            RouteResult with path and distance, or the reason for failure.
        """
        # One read of the store; the search runs on that snapshot only.
        snapshot = self.store.get()
        return self.path_finder.shortest_path(snapshot, source, target)

    def set_graph_or_raise(self, candidate: Optional[Graph]) -> None:
        """Like set_graph(), but raises on rejection.

        Raises:
            GraphValidationError: If the graph fails validation.
        """
        result = self.set_graph(candidate)
        if not result.is_valid:
            raise error_from_kind(result.error_kind, result.error or "Invalid map.")

    def get_graph_or_raise(self) -> Graph:
        """Like get_graph(), but raises when no graph is stored.

        Raises:
            MapNotSetError: If no graph has been set.
        """
        graph = self.get_graph()
        if graph is None:
            raise MapNotSetError("Map has not been set.")
        return graph

    def shortest_path_or_raise(
        self, source: Optional[str], target: Optional[str]
    ) -> RouteResult:
        """Like shortest_path(), but raises instead of returning a failure.

        Raises:
            MapNotSetError: If no graph has been set.
            InvalidQueryError: If a parameter is blank or names an unknown node.
            NoRouteFoundError: If the nodes are not connected.
        """
        result = self.shortest_path(source, target)
        if not result.is_success:
            raise error_from_kind(result.error_kind, result.error or "Query failed.")
        return result
