"""Dependency injection container.

This module provides a simple DI container without external frameworks.
Each container owns its own graph store, so tests can build independent
instances without sharing state.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
4. Thread-safe - for web server contexts
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(MapService)

        # Testing
        container = Container.create_default()
        container.register(PathFinderPort, lambda: FakePathFinder())

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Args:
            port_type: The type to resolve.

        Returns:
            An instance of the requested type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        """Check if a type is registered."""
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Drops the stored graph along with every other instance.
        """
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.graph import DijkstraPathFinder, GraphValidator
        from .adapters.store import InMemoryGraphStore
        from .ports.graph import GraphStorePort, GraphValidatorPort, PathFinderPort
        from .services import MapService

        config = config or get_config()
        container = cls(config=config)

        container.register(GraphStorePort, lambda: InMemoryGraphStore())
        container.register(GraphValidatorPort, lambda: GraphValidator())
        container.register(PathFinderPort, lambda: DijkstraPathFinder())

        def create_map_service() -> MapService:
            return MapService(
                store=container.resolve(GraphStorePort),
                validator=container.resolve(GraphValidatorPort),
                path_finder=container.resolve(PathFinderPort),
            )

        container.register(MapService, create_map_service)

        return container
