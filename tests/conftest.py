"""Shared fixtures for the map distance tests."""

from __future__ import annotations

from typing import Callable, Iterable, Tuple

import pytest

from map_distance.domain.models import Edge, Graph, Node

GraphFactory = Callable[[Iterable[str], Iterable[Tuple[str, str, int]]], Graph]


def build_graph(
    node_ids: Iterable[str], edges: Iterable[Tuple[str, str, int]]
) -> Graph:
    return Graph(
        nodes=tuple(Node(id=node_id) for node_id in node_ids),
        edges=tuple(Edge(from_id=a, to_id=b, weight=w) for a, b, w in edges),
    )


@pytest.fixture
def make_graph() -> GraphFactory:
    """Build a graph from node ids and ``(from, to, weight)`` triples."""
    return build_graph


@pytest.fixture
def example_graph() -> Graph:
    """G-A-C-E chain (total 9) plus a direct G-E edge of weight 10."""
    return build_graph(
        ["G", "A", "C", "E"],
        [("G", "A", 3), ("A", "C", 2), ("C", "E", 4), ("G", "E", 10)],
    )
