"""Immutable domain models for the Map Distance service.

All models are frozen dataclasses with slots. A stored ``Graph`` holds
tuples only, so the instance handed out by the store is a read-only view
that concurrent queries can share without copying.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional


def canonical_id(value: str) -> str:
    """Return the comparison key for a node identifier (trimmed, case-folded)."""
    return value.strip().casefold()


def is_blank(value: Optional[str]) -> bool:
    """Check if an identifier is missing, empty or whitespace only."""
    return value is None or not value.strip()


class ErrorKind(Enum):
    """Category of a failed validation or query."""

    STRUCTURAL = auto()
    NOT_SET = auto()
    INPUT = auto()
    UNREACHABLE = auto()


@dataclass(frozen=True, slots=True)
class Node:
    """A named location in the map.

    Attributes:
        id: Identifier, unique within a graph (case-insensitive)
    """

    id: Optional[str]


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected, weighted connection between two nodes.

    Attributes:
        from_id: Identifier of one endpoint
        to_id: Identifier of the other endpoint
        weight: Strictly positive integer distance
    """

    from_id: Optional[str]
    to_id: Optional[str]
    weight: int = 0


@dataclass(frozen=True, slots=True)
class Graph:
    """The complete node/edge collection describing the map.

    Entries may be ``None`` while the graph is still a candidate; the
    validator rejects such graphs before they reach the store.
    """

    nodes: tuple[Optional[Node], ...] = field(default_factory=tuple)
    edges: tuple[Optional[Edge], ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Render the graph in its JSON wire shape."""
        return {
            "nodes": [None if n is None else {"id": n.id} for n in self.nodes],
            "edges": [
                None
                if e is None
                else {"fromId": e.from_id, "toId": e.to_id, "weight": e.weight}
                for e in self.edges
            ],
        }


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating a candidate graph.

    Attributes:
        error: Human-readable reason when the graph was rejected
    """

    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        """Check if the graph was accepted."""
        return self.error is None

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return None if self.error is None else ErrorKind.STRUCTURAL


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path query.

    Attributes:
        path: Ordered node ids from source to destination inclusive
        distance: Total weight of the path
        error: Human-readable reason when no route could be returned
        error_kind: Category of the failure
    """

    path: tuple[str, ...] = field(default_factory=tuple)
    distance: int = 0
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> RouteResult:
        return cls(error=message, error_kind=kind)

    @property
    def is_success(self) -> bool:
        """Check if a route was found."""
        return self.error is None

    @property
    def num_stops(self) -> int:
        """Return the number of nodes in the route."""
        return len(self.path)
