"""Typed domain errors for the Map Distance service.

The core components report failures through result objects. These error
types are raised by the ``*_or_raise`` service methods so that outer
layers (the HTTP API) can handle each category explicitly.

All errors inherit from MapDistanceError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .models import ErrorKind


@dataclass
class MapDistanceError(Exception):
    """Base error for the map distance domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphValidationError(MapDistanceError):
    """A candidate graph failed structural validation."""


@dataclass
class MapNotSetError(MapDistanceError):
    """A query was issued before any graph was stored."""


@dataclass
class InvalidQueryError(MapDistanceError):
    """Query parameters are blank or name an unknown node."""


@dataclass
class NoRouteFoundError(MapDistanceError):
    """No path connects the requested nodes."""


@dataclass
class AuthorizationError(MapDistanceError):
    """The caller's API key does not grant the requested permission.

    Attributes:
        missing_key: True when no key was supplied at all
    """

    missing_key: bool = False


@dataclass
class ConfigurationError(MapDistanceError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""


def error_from_kind(kind: Optional[ErrorKind], message: str) -> MapDistanceError:
    """Map a result's error category onto the matching exception type."""
    if kind is ErrorKind.STRUCTURAL:
        return GraphValidationError(message)
    if kind is ErrorKind.NOT_SET:
        return MapNotSetError(message)
    if kind is ErrorKind.INPUT:
        return InvalidQueryError(message)
    if kind is ErrorKind.UNREACHABLE:
        return NoRouteFoundError(message)
    return MapDistanceError(message)
