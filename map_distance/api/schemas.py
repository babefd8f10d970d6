"""Request and response schemas for the HTTP API.

Field names follow the JSON wire format (``fromId``/``toId``); the
PascalCase spellings are accepted on input as well.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from ..domain.models import Edge, Graph, Node, RouteResult


class NodePayload(BaseModel):
    id: Optional[str] = Field(default=None, validation_alias=AliasChoices("id", "Id"))


class EdgePayload(BaseModel):
    from_id: Optional[str] = Field(
        default=None,
        serialization_alias="fromId",
        validation_alias=AliasChoices("fromId", "FromId", "from_id"),
    )
    to_id: Optional[str] = Field(
        default=None,
        serialization_alias="toId",
        validation_alias=AliasChoices("toId", "ToId", "to_id"),
    )
    weight: int = Field(default=0, validation_alias=AliasChoices("weight", "Weight"))


class GraphPayload(BaseModel):
    """A candidate map as submitted by a client.

    ``null`` entries are kept so that validation can report them with a
    precise message instead of a generic schema error.
    """

    nodes: List[Optional[NodePayload]] = Field(
        default_factory=list, validation_alias=AliasChoices("nodes", "Nodes")
    )
    edges: List[Optional[EdgePayload]] = Field(
        default_factory=list, validation_alias=AliasChoices("edges", "Edges")
    )

    def to_domain(self) -> Graph:
        return Graph(
            nodes=tuple(None if n is None else Node(id=n.id) for n in self.nodes),
            edges=tuple(
                None
                if e is None
                else Edge(from_id=e.from_id, to_id=e.to_id, weight=e.weight)
                for e in self.edges
            ),
        )


class RouteResponse(BaseModel):
    """Shortest path and its total distance."""

    path: List[str]
    distance: int

    @classmethod
    def from_result(cls, result: RouteResult) -> RouteResponse:
        return cls(path=list(result.path), distance=result.distance)
