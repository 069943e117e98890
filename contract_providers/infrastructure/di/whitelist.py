"""Whitelist of built-in provider contracts."""
import importlib
from typing import FrozenSet, Iterable, Iterator, Optional

from contract_providers.config.schemas.providers_schema import ProvidersConfig
from contract_providers.domain.base.exceptions import ConfigurationError
from contract_providers.domain.extensions import BUILTIN_PROVIDER_CONTRACTS
from contract_providers.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ProviderContractWhitelist:
    """
    Immutable set of contracts recognised as providers without any marker.

    Membership is by class identity. Instances are never modified after
    construction, so a whitelist can be shared between threads freely.
    """

    __slots__ = ("_contracts",)

    def __init__(self, contracts: Iterable[type]):
        contracts = frozenset(contracts)
        for candidate in contracts:
            if not isinstance(candidate, type):
                raise TypeError(f"Whitelisted contract must be a class, got {candidate!r}")
        self._contracts: FrozenSet[type] = contracts

    @classmethod
    def from_config(
        cls, config: ProvidersConfig, base: Optional["ProviderContractWhitelist"] = None
    ) -> "ProviderContractWhitelist":
        """
        Build a whitelist extending ``base`` with the configured extra contracts.

        Args:
            config: Provider configuration listing 'module:ClassName' import paths
            base: Whitelist to extend, DEFAULT_WHITELIST if None

        Raises:
            ConfigurationError: If an extra contract cannot be imported
        """
        base = DEFAULT_WHITELIST if base is None else base
        extras = [_import_contract(path) for path in config.extra_contracts]
        if extras:
            logger.info(f"Extending provider contract whitelist with {len(extras)} contract(s)")
        return cls(base.contracts | frozenset(extras))

    @property
    def contracts(self) -> FrozenSet[type]:
        return self._contracts

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._contracts

    def __iter__(self) -> Iterator[type]:
        return iter(self._contracts)

    def __len__(self) -> int:
        return len(self._contracts)

    def __repr__(self) -> str:
        names = sorted(c.__qualname__ for c in self._contracts)
        return f"{type(self).__name__}({', '.join(names)})"


def _import_contract(path: str) -> type:
    module_name, _, qualname = path.partition(":")
    try:
        target = importlib.import_module(module_name)
        for attr in qualname.split("."):
            target = getattr(target, attr)
    except (ImportError, AttributeError) as e:
        raise ConfigurationError(f"Cannot import provider contract '{path}': {e}") from e
    if not isinstance(target, type):
        raise ConfigurationError(f"Provider contract '{path}' is not a class")
    return target


# Built once at import, read-only afterwards
DEFAULT_WHITELIST = ProviderContractWhitelist(BUILTIN_PROVIDER_CONTRACTS)
