"""Dependency injection container.

Wires the content engine without a DI framework: ports are registered
with factories and resolved lazily, singletons by default. Tests build
an empty Container and register in-memory sources instead of the JSON
fixture adapters.
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
        pages = container.resolve(PageService)
        result = pages.render("/fr/flights/jfk-agp")

        # Testing
        container = Container.create_default()
        container.register(ContentSourcePort, lambda: StaticContentSource(payloads))

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
        """Check if a type is registered.

        Args:
            port_type: The type to check.

        Returns:
            True if the type is registered.
        """
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    def clear_all(self) -> None:
        """Clear all registrations and singletons.

        Call this to completely reset the container.
        """
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default bindings.

        Upstream sources read the JSON fixtures under the configured data
        directory; the fallback cache follows CacheConfig.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.cache import InMemoryCache, NullCache
        from .adapters.upstream import JsonFileContentSource, JsonFileFlightSource
        from .ports.cache import CachePort
        from .ports.upstream import ContentSourcePort, FlightDataPort
        from .services import FallbackContentResolver, PageService

        config = config or get_config()
        container = cls(config=config)

        # Fallback fragment cache, shared by every resolver
        def create_cache() -> CachePort:
            if not config.cache.enabled:
                return NullCache(name="fallback")
            return InMemoryCache(
                default_ttl_seconds=config.cache.ttl_seconds,
                max_size=config.cache.max_size,
                name="fallback",
            )

        container.register(CachePort, create_cache)

        # Upstream
        container.register(
            ContentSourcePort,
            lambda: JsonFileContentSource(config.upstream),
        )
        container.register(
            FlightDataPort,
            lambda: JsonFileFlightSource(config.upstream),
        )

        # Services
        container.register(
            FallbackContentResolver,
            lambda: FallbackContentResolver(
                cache=container.resolve(CachePort),
                site=config.site,
            ),
        )

        def create_page_service() -> PageService:
            return PageService(
                resolver=container.resolve(FallbackContentResolver),
                content_source=container.resolve(ContentSourcePort),
                flight_source=container.resolve(FlightDataPort),
                base_url=config.site.domain,
            )

        container.register(PageService, create_page_service)

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container.

    Returns:
        The default Container instance (creates one if needed).
    """
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
