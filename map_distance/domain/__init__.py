"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    AuthorizationError,
    ConfigurationError,
    GraphValidationError,
    InvalidQueryError,
    MapDistanceError,
    MapNotSetError,
    NoRouteFoundError,
    error_from_kind,
)
from .models import (
    Edge,
    ErrorKind,
    Graph,
    Node,
    RouteResult,
    ValidationResult,
    canonical_id,
    is_blank,
)

__all__ = [
    # Models
    "Node",
    "Edge",
    "Graph",
    "ErrorKind",
    "ValidationResult",
    "RouteResult",
    "canonical_id",
    "is_blank",
    # Errors
    "MapDistanceError",
    "GraphValidationError",
    "MapNotSetError",
    "InvalidQueryError",
    "NoRouteFoundError",
    "AuthorizationError",
    "ConfigurationError",
    "error_from_kind",
]
