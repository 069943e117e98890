"""Tests for the provider contract whitelist."""
from collections.abc import Iterable

import pytest
from pydantic import ValidationError

from contract_providers.config.schemas import ProvidersConfig
from contract_providers.domain.base.exceptions import ConfigurationError
from contract_providers.domain.extensions import (
    BUILTIN_PROVIDER_CONTRACTS,
    DynamicFeature,
    HeaderDelegate,
    MessageBodyWriter,
)
from contract_providers.infrastructure.di.contract_resolver import get_provider_contracts
from contract_providers.infrastructure.di.whitelist import (
    DEFAULT_WHITELIST,
    ProviderContractWhitelist,
)


class Bag(Iterable):
    def __iter__(self):
        return iter(())


class TestDefaultWhitelist:
    """Test the process-wide default whitelist."""

    def test_contains_builtin_contracts(self):
        assert len(DEFAULT_WHITELIST) == 13
        assert set(DEFAULT_WHITELIST) == set(BUILTIN_PROVIDER_CONTRACTS)
        for candidate in (DynamicFeature, HeaderDelegate, MessageBodyWriter):
            assert candidate in DEFAULT_WHITELIST

    def test_is_immutable(self):
        assert isinstance(DEFAULT_WHITELIST.contracts, frozenset)
        with pytest.raises(AttributeError):
            DEFAULT_WHITELIST.extra = object

    def test_membership_is_by_identity_of_class(self):
        class MessageBodyWriter:
            pass

        assert MessageBodyWriter not in DEFAULT_WHITELIST

    def test_rejects_non_classes(self):
        with pytest.raises(TypeError):
            ProviderContractWhitelist(["MessageBodyWriter"])


class TestWhitelistFromConfig:
    """Test building whitelists from configuration."""

    def test_extra_contracts_are_added(self):
        config = ProvidersConfig(extra_contracts=["collections.abc:Iterable"])

        whitelist = ProviderContractWhitelist.from_config(config)

        assert Iterable in whitelist
        assert DynamicFeature in whitelist
        assert get_provider_contracts(Bag, whitelist) == {Iterable}
        # the default whitelist is untouched
        assert Iterable not in DEFAULT_WHITELIST

    def test_extends_given_base(self):
        base = ProviderContractWhitelist([])
        config = ProvidersConfig(extra_contracts=["collections.abc:Iterable"])

        whitelist = ProviderContractWhitelist.from_config(config, base)

        assert whitelist.contracts == frozenset({Iterable})

    def test_no_extras_keeps_defaults(self):
        whitelist = ProviderContractWhitelist.from_config(ProvidersConfig())
        assert whitelist.contracts == DEFAULT_WHITELIST.contracts

    def test_unimportable_contract(self):
        config = ProvidersConfig(extra_contracts=["no_such_module_xyz:Thing"])
        with pytest.raises(ConfigurationError):
            ProviderContractWhitelist.from_config(config)

    def test_missing_attribute(self):
        config = ProvidersConfig(extra_contracts=["collections.abc:NoSuchThing"])
        with pytest.raises(ConfigurationError):
            ProviderContractWhitelist.from_config(config)

    def test_non_class_contract(self):
        config = ProvidersConfig(extra_contracts=["os:sep"])
        with pytest.raises(ConfigurationError):
            ProviderContractWhitelist.from_config(config)

    def test_malformed_import_path(self):
        with pytest.raises(ValidationError):
            ProvidersConfig(extra_contracts=["collections.abc.Iterable"])
