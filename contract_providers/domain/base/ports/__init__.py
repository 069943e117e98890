"""Domain ports consumed by the dependency injection layer."""

from .factory_port import FactoryPort
from .service_locator_port import ServiceHandlePort, ServiceLocatorPort

__all__ = ["FactoryPort", "ServiceHandlePort", "ServiceLocatorPort"]
