"""
Provider contract discovery.

A class is a provider for every recognised contract found among its bases,
transitively. A base is a recognised contract when it is in the provider
contract whitelist or is itself decorated with ``@contract``.
"""
from typing import List, Optional, Set

from contract_providers.domain.base.contract import is_contract
from contract_providers.infrastructure.di.whitelist import (
    DEFAULT_WHITELIST,
    ProviderContractWhitelist,
)


def get_provider_contracts(
    cls: type, whitelist: Optional[ProviderContractWhitelist] = None
) -> Set[type]:
    """
    Return the provider contracts implemented by ``cls``.

    Args:
        cls: Class to extract the provider contracts from
        whitelist: Built-in contracts, DEFAULT_WHITELIST if None

    Returns:
        Set of provider contracts implemented by the class, possibly empty
    """
    _check_class(cls)
    whitelist = DEFAULT_WHITELIST if whitelist is None else whitelist
    contracts: Set[type] = set()
    _compute_provider_contracts(cls, whitelist, contracts, set())
    return contracts


def _compute_provider_contracts(
    cls: type,
    whitelist: ProviderContractWhitelist,
    contracts: Set[type],
    visited: Set[type],
) -> None:
    for candidate in _get_implemented_contracts(cls):
        # Diamond hierarchies reach the same base through several paths
        if candidate in visited:
            continue
        visited.add(candidate)
        if _matches(candidate, whitelist):
            contracts.add(candidate)
        _compute_provider_contracts(candidate, whitelist, contracts, visited)


def is_provider(cls: type, whitelist: Optional[ProviderContractWhitelist] = None) -> bool:
    """
    Return True if ``cls`` implements at least one provider contract.

    Stops at the first recognised contract instead of collecting all of
    them. See get_provider_contracts().
    """
    _check_class(cls)
    whitelist = DEFAULT_WHITELIST if whitelist is None else whitelist
    return _find_first_provider_contract(cls, whitelist, set())


def _find_first_provider_contract(
    cls: type, whitelist: ProviderContractWhitelist, visited: Set[type]
) -> bool:
    for candidate in _get_implemented_contracts(cls):
        if candidate in visited:
            continue
        visited.add(candidate)
        if _matches(candidate, whitelist):
            return True
        if _find_first_provider_contract(candidate, whitelist, visited):
            return True
    return False


def is_provider_contract(
    candidate: type, whitelist: Optional[ProviderContractWhitelist] = None
) -> bool:
    """Return True if ``candidate`` is whitelisted or declares the contract marker."""
    _check_class(candidate)
    whitelist = DEFAULT_WHITELIST if whitelist is None else whitelist
    return _matches(candidate, whitelist)


def _matches(candidate: type, whitelist: ProviderContractWhitelist) -> bool:
    return candidate in whitelist or is_contract(candidate)


def _get_implemented_contracts(cls: type) -> List[type]:
    # __bases__ holds both the implemented ABCs and the superclass; object has none
    return list(cls.__bases__)


def _check_class(cls: type) -> None:
    if cls is None:
        raise ValueError("Class must not be None")
    if not isinstance(cls, type):
        raise TypeError(f"Expected a class, got {type(cls).__name__}")
