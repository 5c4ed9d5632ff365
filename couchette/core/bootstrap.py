"""
Application bootstrap for couchette.

Applies logging settings and registers the default resource provider.
Call once at application startup; library code works without it.
"""

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.resources import IResourceProvider
from .settings import CouchetteSettings, load_settings

_initialized = False


def bootstrap(
    settings: CouchetteSettings | None = None,
    config_path: Path | None = None,
) -> ServiceContainer:
    """
    Bootstrap couchette.

    Args:
        settings: Pre-loaded settings; loaded from config/env when omitted
        config_path: Explicit config file, used only when settings is None

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    if settings is None:
        settings = load_settings(config_path=config_path)

    _register_core_services(container, settings)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: CouchetteSettings) -> None:
    from ..resources.classpath import ClasspathResourceProvider
    from ..services.logging import configure_logging

    configure_logging(settings.logging)
    container.add_factory(IResourceProvider, ClasspathResourceProvider)  # type: ignore[type-abstract]


def reset() -> None:
    """Forget the bootstrapped container, for tests."""
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    return _initialized
