"""Provider contract discovery and aggregation over a service locator."""
from contract_providers._package import __version__
from contract_providers.domain.base.contract import contract, is_contract
from contract_providers.domain.base.qualifiers import CUSTOM, Qualifier
from contract_providers.infrastructure.di.contract_resolver import (
    get_provider_contracts,
    is_provider,
    is_provider_contract,
)
from contract_providers.infrastructure.di.factories import InstanceFactory, factory_of
from contract_providers.infrastructure.di.provider_aggregator import (
    get_all_providers,
    get_custom_providers,
    get_providers,
)
from contract_providers.infrastructure.di.whitelist import (
    DEFAULT_WHITELIST,
    ProviderContractWhitelist,
)

__all__ = [
    "__version__",
    "contract",
    "is_contract",
    "CUSTOM",
    "Qualifier",
    "get_provider_contracts",
    "is_provider",
    "is_provider_contract",
    "InstanceFactory",
    "factory_of",
    "get_all_providers",
    "get_custom_providers",
    "get_providers",
    "DEFAULT_WHITELIST",
    "ProviderContractWhitelist",
]
