"""
Service registry for couchette, backed by dependency-injector.

Services are keyed by interface class and held as providers on a
``DynamicContainer``. bootstrap() fills the process-wide registry; library
code reads it through resolve_or_default() and works without it.
"""

from collections.abc import Callable
from typing import Any, Optional, TypeVar

from dependency_injector import containers, providers

T = TypeVar("T")


def _slot(interface: type) -> str:
    """Provider attribute name for an interface."""
    return f"{interface.__module__}.{interface.__qualname__}".replace(".", "__")


class ServiceContainer:
    """Interface-to-provider registry."""

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._container = containers.DynamicContainer()

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    def add_instance(self, interface: type[T], instance: T) -> None:
        """Always resolve ``interface`` to ``instance``."""
        self._set(interface, providers.Object(instance))

    def add_singleton(self, interface: type[T], factory: Callable[[], T]) -> None:
        """Build on first resolve, then share."""
        self._set(interface, providers.Singleton(factory))

    def add_factory(self, interface: type[T], factory: Callable[..., T]) -> None:
        """Build a new instance on every resolve."""
        self._set(interface, providers.Factory(factory))

    def _set(self, interface: type, provider: providers.Provider) -> None:
        setattr(self._container, _slot(interface), provider)

    def _provider(self, interface: type) -> Any:
        return self._container.providers.get(_slot(interface))

    def is_registered(self, interface: type) -> bool:
        return self._provider(interface) is not None

    def resolve(self, interface: type[T]) -> T:
        """
        Raises:
            KeyError: If nothing is registered for ``interface``
        """
        provider = self._provider(interface)
        if provider is None:
            raise KeyError(f"No provider registered for {interface.__qualname__}")
        return provider()

    def try_resolve(self, interface: type[T]) -> T | None:
        provider = self._provider(interface)
        return None if provider is None else provider()


def get_container() -> ServiceContainer:
    """The process-wide container."""
    return ServiceContainer.get_instance()
