"""
Built-in extension contracts.

These abstract classes are the provider contracts recognised out of the box:
any class implementing one of them is a provider, with no marker needed.
They form the default provider contract whitelist.
"""
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Generic, Mapping, Optional, Type, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


class ContextResolver(ABC, Generic[T]):
    """Supplies context objects of type T to resources and other providers."""

    @abstractmethod
    def get_context(self, target_type: type) -> Optional[T]:
        pass


class ExceptionMapper(ABC, Generic[E]):
    """Maps an exception to a response."""

    @abstractmethod
    def to_response(self, exception: E) -> Any:
        pass


class MessageBodyReader(ABC, Generic[T]):
    """Converts a stream into an object of type T."""

    @abstractmethod
    def is_readable(self, target_type: type, media_type: str) -> bool:
        pass

    @abstractmethod
    def read_from(
        self,
        target_type: Type[T],
        media_type: str,
        headers: Mapping[str, str],
        stream: BinaryIO,
    ) -> T:
        pass


class MessageBodyWriter(ABC, Generic[T]):
    """Converts an object of type T into a stream."""

    @abstractmethod
    def is_writeable(self, source_type: type, media_type: str) -> bool:
        pass

    @abstractmethod
    def write_to(
        self,
        entity: T,
        media_type: str,
        headers: Mapping[str, str],
        stream: BinaryIO,
    ) -> None:
        pass


class Providers(ABC):
    """Injectable lookup of the other providers."""

    @abstractmethod
    def get_message_body_reader(self, target_type: type, media_type: str) -> Optional[MessageBodyReader]:
        pass

    @abstractmethod
    def get_message_body_writer(self, source_type: type, media_type: str) -> Optional[MessageBodyWriter]:
        pass

    @abstractmethod
    def get_exception_mapper(self, exception_type: Type[BaseException]) -> Optional[ExceptionMapper]:
        pass

    @abstractmethod
    def get_context_resolver(self, context_type: type, media_type: str) -> Optional[ContextResolver]:
        pass


class HeaderDelegate(ABC, Generic[T]):
    """Converts between a header value string and an object of type T."""

    @abstractmethod
    def from_string(self, value: str) -> T:
        pass

    @abstractmethod
    def to_string(self, value: T) -> str:
        pass


class ReaderInterceptor(ABC):
    """Wraps calls to MessageBodyReader.read_from."""

    @abstractmethod
    def around_read_from(self, context: Any) -> Any:
        pass


class WriterInterceptor(ABC):
    """Wraps calls to MessageBodyWriter.write_to."""

    @abstractmethod
    def around_write_to(self, context: Any) -> None:
        pass


class ContainerRequestFilter(ABC):
    """Server-side request filter."""

    @abstractmethod
    def filter(self, request_context: Any) -> None:
        pass


class ContainerResponseFilter(ABC):
    """Server-side response filter."""

    @abstractmethod
    def filter(self, request_context: Any, response_context: Any) -> None:
        pass


class ClientRequestFilter(ABC):
    """Client-side request filter."""

    @abstractmethod
    def filter(self, request_context: Any) -> None:
        pass


class ClientResponseFilter(ABC):
    """Client-side response filter."""

    @abstractmethod
    def filter(self, request_context: Any, response_context: Any) -> None:
        pass


class DynamicFeature(ABC):
    """Registers providers per resource method at deployment time."""

    @abstractmethod
    def configure(self, resource_info: Any, context: Any) -> None:
        pass


BUILTIN_PROVIDER_CONTRACTS = (
    ContextResolver,
    ExceptionMapper,
    MessageBodyReader,
    MessageBodyWriter,
    Providers,
    HeaderDelegate,
    ReaderInterceptor,
    WriterInterceptor,
    ContainerRequestFilter,
    ContainerResponseFilter,
    ClientResponseFilter,
    ClientRequestFilter,
    DynamicFeature,
)
