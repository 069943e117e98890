"""Domain exceptions."""
from typing import Any, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    pass
