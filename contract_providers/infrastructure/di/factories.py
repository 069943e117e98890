"""Factories wrapping pre-built instances."""
from typing import TypeVar

from contract_providers.domain.base.ports.factory_port import FactoryPort

T = TypeVar("T")


class InstanceFactory(FactoryPort[T]):
    """
    Factory that always provides the same pre-built instance.

    The wrapped instance is owned by whoever created it, so dispose() leaves
    it alone.
    """

    __slots__ = ("_instance",)

    def __init__(self, instance: T):
        self._instance = instance

    def provide(self) -> T:
        return self._instance

    def dispose(self, instance: T) -> None:
        # not used
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._instance!r})"


def factory_of(instance: T) -> FactoryPort[T]:
    """
    Wrap an instance into a service factory.

    Args:
        instance: Instance to be wrapped into (and provided by) the factory

    Returns:
        Factory providing the instance
    """
    return InstanceFactory(instance)
