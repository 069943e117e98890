"""Registration records and handles for the in-memory service locator."""
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, Generic, Optional, Tuple, TypeVar

from contract_providers.domain.base.ports.service_locator_port import ServiceHandlePort
from contract_providers.infrastructure.di.exceptions import FactoryError

T = TypeVar("T")

_UNSET = object()


class DIScope(str, Enum):
    """Lifetime of a materialized service."""
    SINGLETON = "singleton"
    PER_LOOKUP = "per_lookup"


@dataclass(frozen=True)
class ActiveDescriptor:
    """Identity of one registration within one locator."""

    locator_id: int
    service_id: int
    implementation_name: str = field(compare=False)

    def __str__(self) -> str:
        return f"{self.implementation_name}#{self.locator_id}.{self.service_id}"


@dataclass(eq=False)
class DependencyRegistration:
    """
    One registration: the contracts it advertises and where its instance comes from.

    Exactly one of ``instance``, ``implementation_type`` or ``factory`` is set.
    """

    descriptor: ActiveDescriptor
    contracts: Tuple[type, ...]
    qualifiers: FrozenSet[Any] = frozenset()
    rank: int = 0
    scope: DIScope = DIScope.SINGLETON
    instance: Any = None
    implementation_type: Optional[type] = None
    factory: Optional[Any] = None
    _cached: Any = field(default=_UNSET, init=False, repr=False)
    _lock: Any = field(default_factory=threading.Lock, init=False, repr=False)

    def advertises(self, contract: type) -> bool:
        return contract in self.contracts

    def matches(self, qualifiers: FrozenSet[Any]) -> bool:
        """Unqualified lookups see unqualified registrations only."""
        if not qualifiers:
            return not self.qualifiers
        return qualifiers <= self.qualifiers

    def create(self) -> Any:
        """Materialize the instance according to the registration scope."""
        if self.instance is not None:
            return self.instance
        if self.scope is DIScope.PER_LOOKUP:
            return self._produce()
        if self._cached is _UNSET:
            with self._lock:
                if self._cached is _UNSET:
                    self._cached = self._produce()
        return self._cached

    def _produce(self) -> Any:
        try:
            if self.factory is not None:
                if is_factory_object(self.factory):
                    return self.factory.provide()
                return self.factory()
            return self.implementation_type()
        except Exception as e:
            raise FactoryError(self.contracts[0], str(e), e) from e


def is_factory_object(factory: Any) -> bool:
    """Factory objects expose provide(); anything else is called directly."""
    return not isinstance(factory, type) and callable(getattr(factory, "provide", None))


class ServiceHandle(ServiceHandlePort[T], Generic[T]):
    """Handle returned by ServiceRegistry lookups."""

    __slots__ = ("_registration",)

    def __init__(self, registration: DependencyRegistration):
        self._registration = registration

    @property
    def active_descriptor(self) -> ActiveDescriptor:
        return self._registration.descriptor

    def get_service(self) -> T:
        return self._registration.create()

    def __repr__(self) -> str:
        return f"ServiceHandle({self._registration.descriptor})"
