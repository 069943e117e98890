"""In-memory service registry answering lookups by contract."""
import itertools
import threading
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, TypeVar, Union

from contract_providers.domain.base.ports.service_locator_port import ServiceLocatorPort
from contract_providers.infrastructure.di.components.descriptors import (
    ActiveDescriptor,
    DependencyRegistration,
    DIScope,
    ServiceHandle,
    is_factory_object,
)
from contract_providers.infrastructure.di.exceptions import DependencyRegistrationError
from contract_providers.infrastructure.di.factories import factory_of
from contract_providers.infrastructure.logging.logger import get_logger

T = TypeVar("T")
logger = get_logger(__name__)

_locator_ids = itertools.count(1)


class ServiceRegistry(ServiceLocatorPort):
    """
    Manages service registrations for lookup by contract.

    A registration advertises one or more contracts, may carry qualifiers and
    a rank, and produces its instance from a pre-built instance, a class or a
    factory. Lookups return handles ordered by rank (highest first), then by
    registration order.
    """

    def __init__(self):
        self._locator_id = next(_locator_ids)
        self._service_ids = itertools.count()
        self._registrations: Dict[ActiveDescriptor, DependencyRegistration] = {}
        self._lock = threading.RLock()

    @property
    def locator_id(self) -> int:
        return self._locator_id

    def bind(
        self,
        contracts: Union[type, Iterable[type]],
        *,
        instance: Any = None,
        implementation: Optional[type] = None,
        factory: Optional[Any] = None,
        qualifiers: Iterable[Any] = (),
        rank: int = 0,
        scope: DIScope = DIScope.SINGLETON,
    ) -> ActiveDescriptor:
        """
        Register a service.

        Args:
            contracts: Contract or contracts the service is looked up by
            instance: Pre-built instance
            implementation: Class instantiated with no arguments
            factory: Object with provide() (such as a FactoryPort) or zero-argument callable
            qualifiers: Qualifiers narrowing the lookups that see this registration
            rank: Higher ranks are returned first
            scope: Lifetime of instances produced from a class or factory

        Returns:
            Descriptor identifying the new registration

        Raises:
            DependencyRegistrationError: If the registration is malformed
        """
        contract_tuple = self._normalize_contracts(contracts)
        sources = [s for s in (instance, implementation, factory) if s is not None]
        if len(sources) != 1:
            raise DependencyRegistrationError(
                "Exactly one of instance, implementation or factory must be given",
                details={"contracts": contract_tuple},
            )
        if implementation is not None and not isinstance(implementation, type):
            raise DependencyRegistrationError(f"Implementation must be a class, got {implementation!r}")
        if factory is not None and not (callable(factory) or is_factory_object(factory)):
            raise DependencyRegistrationError(f"Factory must be callable or provide(), got {factory!r}")

        source = sources[0]
        implementation_name = (
            source.__name__ if isinstance(source, type) else type(source).__name__
        )

        with self._lock:
            descriptor = ActiveDescriptor(
                locator_id=self._locator_id,
                service_id=next(self._service_ids),
                implementation_name=implementation_name,
            )
            self._registrations[descriptor] = DependencyRegistration(
                descriptor=descriptor,
                contracts=contract_tuple,
                qualifiers=frozenset(qualifiers),
                rank=rank,
                scope=scope,
                instance=instance,
                implementation_type=implementation,
                factory=factory,
            )

        logger.debug(
            f"Registered {descriptor} for "
            f"{', '.join(c.__name__ for c in contract_tuple)}"
        )
        return descriptor

    def bind_instance(self, contract: Type[T], instance: T, *qualifiers: Any) -> ActiveDescriptor:
        """Register a pre-built instance through an instance factory."""
        if instance is None:
            raise DependencyRegistrationError("Instance must not be None")
        return self.bind(contract, factory=factory_of(instance), qualifiers=qualifiers)

    def get_all_service_handles(self, contract: type, *qualifiers: Any) -> List[ServiceHandle]:
        """Get handles for registrations advertising the contract and carrying every qualifier."""
        wanted = frozenset(qualifiers)
        with self._lock:
            matching = [
                registration
                for registration in self._registrations.values()
                if registration.advertises(contract) and registration.matches(wanted)
            ]
        # sorted() is stable, so equal ranks keep registration order
        matching = sorted(matching, key=lambda r: -r.rank)
        return [ServiceHandle(registration) for registration in matching]

    def is_registered(self, contract: type) -> bool:
        """Check if any registration advertises the contract."""
        with self._lock:
            return any(r.advertises(contract) for r in self._registrations.values())

    def unbind(self, descriptor: ActiveDescriptor) -> bool:
        """Remove a registration."""
        with self._lock:
            if descriptor in self._registrations:
                del self._registrations[descriptor]
                logger.debug(f"Unregistered {descriptor}")
                return True
            return False

    def clear(self) -> None:
        """Clear all registrations."""
        with self._lock:
            self._registrations.clear()
            logger.info("Service registry cleared")

    def get_stats(self) -> Dict[str, Any]:
        """Get registry statistics."""
        with self._lock:
            registrations = list(self._registrations.values())
        return {
            "total_registrations": len(registrations),
            "qualified_registrations": sum(1 for r in registrations if r.qualifiers),
            "contracts": len({c for r in registrations for c in r.contracts}),
            "scope_types": {
                scope.value: sum(1 for r in registrations if r.scope == scope)
                for scope in DIScope
            },
        }

    @staticmethod
    def _normalize_contracts(contracts: Union[type, Iterable[type]]) -> Tuple[type, ...]:
        if contracts is None:
            raise DependencyRegistrationError("Contracts must not be None")
        contract_tuple = (contracts,) if isinstance(contracts, type) else tuple(contracts)
        if not contract_tuple:
            raise DependencyRegistrationError("At least one contract must be given")
        for candidate in contract_tuple:
            if not isinstance(candidate, type):
                raise DependencyRegistrationError(f"Contract must be a class, got {candidate!r}")
        return contract_tuple
