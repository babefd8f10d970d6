"""Dijkstra path finder adapter.

Edges are treated as undirected: each one is added to the adjacency
list of both endpoints with the same weight. Identifiers are compared
through ``canonical_id`` everywhere; paths are reported with the ids
as declared in the graph's node list.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ...domain.models import ErrorKind, Graph, RouteResult, canonical_id, is_blank

# Distance of a node that has not been reached yet.
UNREACHABLE_DISTANCE = sys.maxsize

Adjacency = Dict[str, List[Tuple[str, int]]]


@dataclass
class DijkstraPathFinder:
    """Path finder using Dijkstra's shortest path algorithm.

    This adapter implements PathFinderPort. All working structures are
    local to a call, so one instance can serve concurrent queries.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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
        if graph is None:
            return RouteResult.failure(ErrorKind.NOT_SET, "Map has not been set.")

        if is_blank(source) or is_blank(target):
            return RouteResult.failure(
                ErrorKind.INPUT, "Missing parameters: from and/or to."
            )

        assert source is not None and target is not None
        source = source.strip()
        target = target.strip()

        names = self._node_names(graph)
        for requested in (source, target):
            if canonical_id(requested) not in names:
                return RouteResult.failure(
                    ErrorKind.INPUT, f"Unknown node name: '{requested}'."
                )

        self._logger.debug(
            "Solving route",
            extra={"source": source, "target": target},
        )

        start = canonical_id(source)
        end = canonical_id(target)
        adjacency = self._build_adjacency(graph, names)
        distances, previous = self._dijkstra(adjacency, start, end)

        no_route = RouteResult.failure(
            ErrorKind.UNREACHABLE, f"No route found from '{source}' to '{target}'."
        )
        if distances[end] == UNREACHABLE_DISTANCE:
            self._logger.warning(
                "No route found",
                extra={"source": source, "target": target},
            )
            return no_route

        keys: List[str] = []
        current: Optional[str] = end
        while current is not None:
            keys.append(current)
            current = previous[current]
        keys.reverse()

        # Predecessor chain must lead back to the source.
        if keys[0] != start:
            self._logger.error(
                "Inconsistent predecessor chain",
                extra={"source": source, "target": target},
            )
            return no_route

        path = tuple(names[key] for key in keys)
        self._logger.info(
            "Route found",
            extra={
                "source": source,
                "target": target,
                "stops": len(path),
                "distance": distances[end],
            },
        )
        return RouteResult(path=path, distance=distances[end])

    @staticmethod
    def _node_names(graph: Graph) -> Dict[str, str]:
        """Map canonical ids to the trimmed ids declared in the graph."""
        names: Dict[str, str] = {}
        for node in graph.nodes:
            if node is None or is_blank(node.id):
                continue
            names.setdefault(canonical_id(node.id), node.id.strip())
        return names

    @staticmethod
    def _build_adjacency(graph: Graph, names: Dict[str, str]) -> Adjacency:
        adjacency: Adjacency = {key: [] for key in names}
        for edge in graph.edges:
            if edge is None or is_blank(edge.from_id) or is_blank(edge.to_id):
                continue
            a = canonical_id(edge.from_id)
            b = canonical_id(edge.to_id)
            if a not in adjacency or b not in adjacency:
                continue
            adjacency[a].append((b, edge.weight))
            adjacency[b].append((a, edge.weight))
        return adjacency

    @staticmethod
    def _dijkstra(
        adjacency: Adjacency, start: str, end: str
    ) -> Tuple[Dict[str, int], Dict[str, Optional[str]]]:
        """Core Dijkstra loop with decrease-key by reinsertion.

        Returns the tentative distances and predecessor links. Stops as
        soon as ``end`` is extracted from the heap.
        """
        distances: Dict[str, int] = {key: UNREACHABLE_DISTANCE for key in adjacency}
        previous: Dict[str, Optional[str]] = {key: None for key in adjacency}
        distances[start] = 0

        # Insertion counter keeps equal-distance ordering stable.
        counter = itertools.count()
        heap: List[Tuple[int, int, str]] = [(0, next(counter), start)]
        visited: set[str] = set()

        while heap:
            current_distance, _, u = heapq.heappop(heap)

            if u in visited or current_distance > distances[u]:
                continue

            visited.add(u)

            if u == end:
                break

            for v, weight in adjacency[u]:
                if current_distance > UNREACHABLE_DISTANCE - weight:
                    continue

                new_distance = current_distance + weight
                if new_distance < distances[v]:
                    distances[v] = new_distance
                    previous[v] = u
                    heapq.heappush(heap, (new_distance, next(counter), v))

        return distances, previous
