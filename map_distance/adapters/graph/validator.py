"""Structural validation of candidate graphs.

Checks run in a fixed order and stop at the first failure, so the
reported message always describes the earliest problem in the input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Set

from ...domain.models import Graph, ValidationResult, canonical_id, is_blank


@dataclass
class GraphValidator:
    """Validator for graphs submitted to replace the stored map.

    This adapter implements GraphValidatorPort. It is stateless and
    safe to share between threads.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def validate(self, graph: Optional[Graph]) -> ValidationResult:
        """Validate a candidate graph.

        Args:
            graph: The candidate graph, possibly ``None``.

        Returns:
            ValidationResult with ``error`` set to the first failure found.
        """
        error = self._first_error(graph)
        if error is not None:
            self._logger.debug("Graph rejected", extra={"reason": error})
            return ValidationResult(error=error)

        assert graph is not None
        self._logger.debug(
            "Graph accepted",
            extra={"nodes": len(graph.nodes), "edges": len(graph.edges)},
        )
        return ValidationResult()

    def _first_error(self, graph: Optional[Graph]) -> Optional[str]:
        if graph is None:
            return "Map data is missing."

        if not graph.nodes:
            return "Map must contain at least one node."

        if not graph.edges:
            return "Map must contain at least one edge."

        node_ids: Set[str] = set()
        for node in graph.nodes:
            if node is None or is_blank(node.id):
                return "All nodes must have a non-empty Id."

            key = canonical_id(node.id)
            if key in node_ids:
                return f"Duplicate node Id detected: '{node.id}'."
            node_ids.add(key)

        for edge in graph.edges:
            if edge is None:
                return "Edge entry is null."

            if is_blank(edge.from_id) or is_blank(edge.to_id):
                return "All edges must have FromId and ToId."

            if edge.weight is None or edge.weight <= 0:
                return "Edge Weight must be greater than 0."

            if (
                canonical_id(edge.from_id) not in node_ids
                or canonical_id(edge.to_id) not in node_ids
            ):
                return (
                    "Edge references unknown node(s): "
                    f"'{edge.from_id}' -> '{edge.to_id}'."
                )

        return None
