"""Service locator port for bulk lookups by contract."""
from abc import ABC, abstractmethod
from typing import Any, Generic, Hashable, List, TypeVar

T = TypeVar("T")


class ServiceHandlePort(ABC, Generic[T]):
    """Handle to a single registration known to a service locator."""

    @property
    @abstractmethod
    def active_descriptor(self) -> Hashable:
        """
        Identity of the underlying registration.

        Two handles refer to the same registration iff their descriptors are
        equal, whichever lookup produced them.
        """

    @abstractmethod
    def get_service(self) -> T:
        """Materialize the service instance owned by the locator."""


class ServiceLocatorPort(ABC):
    """Port for service locator lookups."""

    @abstractmethod
    def get_all_service_handles(self, contract: type, *qualifiers: Any) -> List[ServiceHandlePort]:
        """
        Get handles for every registration advertising ``contract``.

        Args:
            contract: Contract type to look up
            qualifiers: Optional qualifiers every returned registration must carry;
                none means the unqualified (default) lookup

        Returns:
            Handles in locator order, possibly empty
        """
