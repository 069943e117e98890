"""Factory port for handing service sources to a locator."""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class FactoryPort(ABC, Generic[T]):
    """Port for objects that produce (and possibly dispose of) service instances."""

    @abstractmethod
    def provide(self) -> T:
        """Return a service instance."""

    @abstractmethod
    def dispose(self, instance: T) -> None:
        """Release an instance previously returned by provide()."""
