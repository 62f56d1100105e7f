"""Dependency injection container.

A small explicit container: ports are registered with a factory and
resolved on demand. Singleton instances are created on first use.
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
        container = Container.create_default()
        service = container.resolve(PathService)

        # Testing
        container = Container()
        container.register(ShortestPathSolverPort, lambda: FakeSolver())

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
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

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
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Drop cached singletons so the next resolve builds fresh ones."""
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the default bindings.

        GraphStore is registered as a non-singleton: every resolve yields
        an empty store owned by the caller.
        """
        from .adapters.graph import DijkstraSolver
        from .adapters.rendering import TextGraphRenderer
        from .graph.store import GraphStore
        from .ports.graph import GraphStorePort, ShortestPathSolverPort
        from .ports.rendering import GraphRendererPort
        from .services import PathService

        config = config or get_config()
        container = cls(config=config)

        container.register(GraphStorePort, GraphStore, singleton=False)
        container.register(ShortestPathSolverPort, lambda: DijkstraSolver())
        container.register(
            GraphRendererPort,
            lambda: TextGraphRenderer(config.render),
        )

        def create_path_service() -> PathService:
            return PathService(
                solver=container.resolve(ShortestPathSolverPort),
                renderer=container.resolve(GraphRendererPort),
            )

        container.register(PathService, create_path_service)

        return container
