"""
DI components package.

This package provides an in-memory service locator:
- ActiveDescriptor: Registration identity
- DependencyRegistration: Registration record and its materialization
- ServiceHandle: Lookup result bound to one registration
- ServiceRegistry: Thread-safe registry answering lookups by contract
"""

from .descriptors import ActiveDescriptor, DependencyRegistration, DIScope, ServiceHandle
from .service_registry import ServiceRegistry

__all__ = [
    "ActiveDescriptor",
    "DependencyRegistration",
    "DIScope",
    "ServiceHandle",
    "ServiceRegistry",
]
