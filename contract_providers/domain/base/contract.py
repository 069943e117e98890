"""
Contract marker decorator.

A class decorated with ``@contract`` is recognised as a provider contract
even when it is not part of the built-in whitelist. The marker belongs to
the decorated class only: subclasses of a contract are not contracts
themselves unless they are decorated too.

Usage:
    @contract
    class AuditSink(ABC):
        @abstractmethod
        def record(self, event): ...
"""
from typing import Type, TypeVar

T = TypeVar("T")

CONTRACT_MARKER = "__provider_contract__"


def contract(cls: Type[T]) -> Type[T]:
    """Mark a class as a provider contract."""
    if not isinstance(cls, type):
        raise TypeError(f"@contract can only decorate classes, got {cls!r}")
    setattr(cls, CONTRACT_MARKER, True)
    return cls


def is_contract(cls: type) -> bool:
    """Check whether the marker is declared on ``cls`` itself (not inherited)."""
    return vars(cls).get(CONTRACT_MARKER, False) is True
