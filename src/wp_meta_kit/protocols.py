"""Protocol definitions for dependency injection.

These protocols describe the collaborators the exporter, importer and HTTP
client depend on, so each can be replaced (for example with an in-memory
record store in tests) without subclassing.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models.config import RetryConfig
    from .models.record import Record


@runtime_checkable
class RecordStore(Protocol):
    """Host content store holding records and their attributes."""

    def list_public_types(self) -> Sequence[str]:
        """Return the names of publicly visible content types."""
        ...

    def list_records(self, record_type: str, status: str = "any") -> Sequence["Record"]:
        """Return every record of a type matching the status filter."""
        ...

    def get_attribute(self, record_id: int, key: str) -> str | None:
        """Return a record's attribute value, or None if unset."""
        ...

    def set_attribute(self, record_id: int, key: str, value: str) -> None:
        """Overwrite a record's attribute value."""
        ...

    def find_one_record(
        self, slug: str, record_type: str, status: str = "any"
    ) -> "Record | None":
        """Return the first record with the given slug and type, if any."""
        ...


@runtime_checkable
class ConfigProvider(Protocol):
    """Connection settings consumed by WordPressClient."""

    def get_base_url(self) -> str: ...

    def get_username(self) -> str: ...

    def get_application_password(self) -> str: ...

    @property
    def timeout(self) -> float: ...

    @property
    def max_connections(self) -> int: ...

    @property
    def verify_ssl(self) -> bool: ...

    @property
    def retry(self) -> "RetryConfig": ...


@runtime_checkable
class AuthProvider(Protocol):
    """Supplies authentication headers for REST requests."""

    def get_headers(self) -> dict[str, str]: ...

    def validate_credentials(self) -> bool: ...


@runtime_checkable
class HTTPClient(Protocol):
    """Minimal synchronous HTTP client interface (satisfied by httpx.Client)."""

    def request(self, method: str, url: str, **kwargs: Any) -> Any: ...

    def close(self) -> None: ...
