"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the map service and the adapters
that implement validation, storage and routing. They make every
component swappable in tests.
"""

from .graph import GraphStorePort, GraphValidatorPort, PathFinderPort

__all__ = [
    "GraphValidatorPort",
    "GraphStorePort",
    "PathFinderPort",
]
