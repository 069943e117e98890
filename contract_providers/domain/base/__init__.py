"""Base domain layer - shared kernel for contract discovery and aggregation."""

from .contract import contract, is_contract
from .exceptions import ConfigurationError, DomainException
from .qualifiers import CUSTOM, Qualifier

__all__ = [
    "contract",
    "is_contract",
    "ConfigurationError",
    "DomainException",
    "CUSTOM",
    "Qualifier",
]
