"""Dependency injection package: provider contract discovery and aggregation."""
from .contract_resolver import get_provider_contracts, is_provider, is_provider_contract
from .factories import InstanceFactory, factory_of
from .provider_aggregator import (
    ProviderSet,
    get_all_providers,
    get_custom_providers,
    get_providers,
)
from .whitelist import DEFAULT_WHITELIST, ProviderContractWhitelist

__all__ = [
    "get_provider_contracts",
    "is_provider",
    "is_provider_contract",
    "InstanceFactory",
    "factory_of",
    "ProviderSet",
    "get_all_providers",
    "get_custom_providers",
    "get_providers",
    "DEFAULT_WHITELIST",
    "ProviderContractWhitelist",
]
