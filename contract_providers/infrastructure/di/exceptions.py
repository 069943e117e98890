"""Exceptions raised by the dependency injection infrastructure."""
from typing import Any, Optional


class DependencyInjectionError(Exception):
    """Base exception for dependency injection errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class DependencyRegistrationError(DependencyInjectionError):
    """Raised when a registration is malformed."""
    pass


class FactoryError(DependencyInjectionError):
    """Raised when a registration fails to produce its service instance."""

    def __init__(self, dependency_type: Any, message: str, cause: Optional[BaseException] = None):
        type_name = getattr(dependency_type, "__name__", str(dependency_type))
        super().__init__(f"Failed to create {type_name}: {message}")
        self.dependency_type = dependency_type
        self.cause = cause
