"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- GraphValidator: Structural checks on candidate graphs
- DijkstraPathFinder: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import UNREACHABLE_DISTANCE, DijkstraPathFinder
from .validator import GraphValidator

__all__ = ["GraphValidator", "DijkstraPathFinder", "UNREACHABLE_DISTANCE"]
