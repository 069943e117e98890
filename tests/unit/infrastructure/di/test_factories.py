"""Tests for instance factories."""
from contract_providers.domain.base.ports.factory_port import FactoryPort
from contract_providers.infrastructure.di.factories import InstanceFactory, factory_of


class Service:
    def __init__(self):
        self.closed = False


class TestFactoryOf:
    """Test factory_of and InstanceFactory."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = Service()
        self.factory = factory_of(self.service)

    def test_returns_instance_factory(self):
        assert isinstance(self.factory, FactoryPort)
        assert isinstance(self.factory, InstanceFactory)

    def test_provides_same_instance(self):
        assert self.factory.provide() is self.service
        assert self.factory.provide() is self.service

    def test_dispose_leaves_instance_alone(self):
        self.factory.dispose(self.service)

        assert self.service.closed is False
        assert self.factory.provide() is self.service

    def test_wraps_falsy_instances(self):
        assert factory_of(0).provide() == 0
