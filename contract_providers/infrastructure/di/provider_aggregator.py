"""
Provider aggregation over a service locator.

Collects every registered implementation of a contract. Registrations are
either defaults (no qualifier) or custom (qualified with CUSTOM, supplied by
the application). Handles are deduplicated by their active descriptor, so a
registration visible through several lookups is materialized once.
"""
from collections.abc import Set as SetABC
from functools import cmp_to_key
from typing import (
    AbstractSet,
    Any,
    Callable,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Type,
    TypeVar,
    Union,
)

from contract_providers.domain.base.ports.service_locator_port import (
    ServiceHandlePort,
    ServiceLocatorPort,
)
from contract_providers.domain.base.qualifiers import CUSTOM
from contract_providers.infrastructure.logging.logger import get_logger

T = TypeVar("T")
Comparator = Callable[[T, T], int]

logger = get_logger(__name__)


class ProviderSet(SetABC):
    """
    Insertion-ordered, read-only set of provider instances.

    Members are told apart by identity, so providers need not be hashable.
    Compares equal to any other set with the same members.
    """

    __slots__ = ("_providers",)

    def __init__(self, providers: Iterable[Any] = ()):
        seen = set()
        self._providers: List[Any] = []
        for provider in providers:
            if id(provider) not in seen:
                seen.add(id(provider))
                self._providers.append(provider)

    def __contains__(self, candidate: object) -> bool:
        return any(p is candidate or p == candidate for p in self._providers)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._providers!r})"


def get_providers(
    locator: ServiceLocatorPort,
    contract: Type[T],
    comparator: Optional[Comparator] = None,
) -> Union[AbstractSet[T], List[T]]:
    """
    Get the default providers registered for the given contract.

    Without a comparator the result is an insertion-ordered set view in
    locator order. With a comparator the result is a list sorted by it, and
    providers the comparator reports as equal collapse into the first one
    looked up: comparator equality, not registration identity, decides
    membership in that case.

    Args:
        locator: Service locator to query
        contract: Provider contract
        comparator: Optional cmp-style function ordering the providers

    Returns:
        All available default provider instances for the contract
    """
    handles = _get_all_service_handles(locator, contract)
    if comparator is None:
        return _get_services(handles.values())
    return _sorted_distinct(_materialize(handles.values()), comparator)


def get_custom_providers(locator: ServiceLocatorPort, contract: Type[T]) -> AbstractSet[T]:
    """
    Get the custom providers registered for the given contract.

    Args:
        locator: Service locator to query
        contract: Provider contract

    Returns:
        Insertion-ordered set view of the custom provider instances
    """
    handles = _get_all_service_handles(locator, contract, CUSTOM)
    return _get_services(handles.values())


def get_all_providers(
    locator: ServiceLocatorPort,
    contract: Type[T],
    comparator: Optional[Comparator] = None,
) -> List[T]:
    """
    Get all providers (custom and default) registered for the given contract.

    Custom providers come first, followed by the default providers not
    already seen through the custom lookup. With a comparator the merged
    list is then stably sorted by it.

    Args:
        locator: Service locator to query
        contract: Provider contract
        comparator: Optional cmp-style function ordering the providers

    Returns:
        List of all available provider instances for the contract
    """
    provider_map = _get_all_service_handles(locator, contract, CUSTOM)
    for key, handle in _get_all_service_handles(locator, contract).items():
        if key not in provider_map:
            provider_map[key] = handle

    providers = _materialize(provider_map.values())
    if comparator is not None:
        providers.sort(key=cmp_to_key(comparator))
    return providers


def _get_all_service_handles(
    locator: ServiceLocatorPort, contract: type, *qualifiers
) -> Dict[Hashable, ServiceHandlePort]:
    if locator is None:
        raise ValueError("Service locator must not be None")
    if contract is None:
        raise ValueError("Contract must not be None")

    handles: Dict[Hashable, ServiceHandlePort] = {}
    for handle in locator.get_all_service_handles(contract, *qualifiers):
        handles.setdefault(handle.active_descriptor, handle)

    logger.debug(
        f"Found {len(handles)} provider(s) for {contract.__name__}"
        + (f" qualified with {', '.join(str(q) for q in qualifiers)}" if qualifiers else "")
    )
    return handles


def _materialize(handles: Iterable[ServiceHandlePort]) -> List:
    return [handle.get_service() for handle in handles]


def _get_services(handles: Iterable[ServiceHandlePort]) -> AbstractSet:
    return ProviderSet(_materialize(handles))


def _sorted_distinct(providers: List[T], comparator: Comparator) -> List[T]:
    result: List[T] = []
    # Stable sort puts comparator-equal providers next to each other, first looked up first
    for provider in sorted(providers, key=cmp_to_key(comparator)):
        if result and comparator(result[-1], provider) == 0:
            continue
        result.append(provider)
    return result
