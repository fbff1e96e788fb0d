"""Exception hierarchy for wp-meta-kit.

All exceptions raised by this package derive from WPMetaKitError, so callers
can catch a single base class. Transfer problems (bad input, failed writes)
are ImportExportError subclasses; failures of the host record store are
StoreError subclasses.
"""

from typing import Any


class WPMetaKitError(Exception):
    """Base exception for all wp-meta-kit errors.

    Attributes:
        message: Human-readable error message
        details: Additional error context
    """

    detail_code = "unknown"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(WPMetaKitError):
    """Invalid or missing configuration."""


# Transfer errors


class ImportExportError(WPMetaKitError):
    """Export or import operation failed."""


class InvalidJSONError(ImportExportError):
    """Import document is not a JSON array of objects.

    Raised before any record is touched.
    """

    detail_code = "invalid_json"


class UploadError(ImportExportError):
    """Import document could not be read."""

    detail_code = "upload_failed"


class ExportWriteError(ImportExportError):
    """Export document could not be written to its destination."""

    detail_code = "export_write_failed"


class StoreWriteError(ImportExportError):
    """Writing an attribute to the record store failed mid-import.

    Attributes:
        record_id: Identifier of the record whose write failed
        summary: Summary of the items processed before the failure
    """

    detail_code = "store_write_failed"

    def __init__(
        self,
        message: str,
        record_id: int | None = None,
        summary: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.record_id = record_id
        self.summary = summary


# Store errors


class StoreError(WPMetaKitError):
    """Record store collaborator failed."""

    detail_code = "store_error"


class StoreUnavailableError(StoreError):
    """Record store could not be reached or failed internally."""

    detail_code = "store_unavailable"


class ConnectionError(StoreUnavailableError):
    """Failed to connect to the WordPress site."""


class TimeoutError(StoreUnavailableError):
    """Request to the WordPress site timed out."""


class InvalidResponseError(StoreUnavailableError):
    """WordPress answered with a body that is not JSON.

    Usually an HTML page served in place of the REST API, for example when
    pretty permalinks are disabled or a security plugin intercepts the call.
    """

    detail_code = "invalid_response"


class ServerError(StoreUnavailableError):
    """WordPress returned a 5xx response.

    Attributes:
        status_code: HTTP status code
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code


class AuthenticationError(StoreError):
    """Credentials were rejected (HTTP 401)."""


class AuthorizationError(StoreError):
    """Authenticated user lacks the required capability (HTTP 403)."""


class NotFoundError(StoreError):
    """Requested REST resource does not exist (HTTP 404)."""


class ValidationError(StoreError):
    """WordPress rejected the request parameters (HTTP 400)."""


class WriteNotAppliedError(StoreError):
    """WordPress accepted a write but did not store the submitted value.

    Happens when the meta key is not registered with ``show_in_rest``.
    """
