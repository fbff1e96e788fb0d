"""Base HTTP client for the WordPress REST API.

This module provides URL building, authentication headers, error mapping and
the retry policy shared by the concrete client.
"""

import logging
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..auth.application_password import ApplicationPasswordAuth
from ..exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ServerError,
    StoreError,
    ValidationError,
)
from ..exceptions import (
    ConnectionError as WPConnectionError,
)
from ..protocols import AuthProvider, ConfigProvider

logger = logging.getLogger(__name__)

REST_PREFIX = "wp-json"


class BaseClient:
    """Base HTTP client for WordPress REST operations.

    Handles:
    - Application password authentication
    - ``/wp-json`` URL construction
    - Mapping HTTP error statuses to exceptions
    - Retry policy for read requests

    Not intended to be used directly - use WordPressClient instead.
    """

    def __init__(self, config: ConfigProvider, auth: AuthProvider | None = None) -> None:
        """Initialize the base client.

        Args:
            config: Connection settings (typically WordPressConfig)
            auth: Authentication provider (defaults to application password auth)

        Raises:
            ValueError: If credentials are missing
        """
        self.config = config
        self.base_url = config.get_base_url()
        self.auth: AuthProvider = auth or ApplicationPasswordAuth(
            config.get_username(), config.get_application_password()
        )

        if not self.auth.validate_credentials():
            raise ValueError("WordPress username and application password are required")

        logger.info(f"Initialized WordPress client for {self.base_url}")

    def _get_headers(self, extra_headers: dict[str, str] | None = None) -> dict[str, str]:
        """Build request headers with authentication."""
        headers = {
            "Accept": "application/json",
            **self.auth.get_headers(),
        }

        if extra_headers:
            headers.update(extra_headers)

        return headers

    def _build_url(self, endpoint: str) -> str:
        """Build full URL for an endpoint.

        Args:
            endpoint: REST route (e.g., "wp/v2/posts" or "/wp-json/wp/v2/posts")

        Returns:
            Complete URL
        """
        endpoint = endpoint.strip("/")

        if not endpoint.startswith(f"{REST_PREFIX}/"):
            endpoint = f"{REST_PREFIX}/{endpoint}"

        return f"{self.base_url}/{endpoint}"

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Raise the exception matching an HTTP error response.

        WordPress error bodies look like ``{"code": ..., "message": ..., "data": {...}}``.

        Raises:
            StoreError subclass based on status code
        """
        status_code = response.status_code

        try:
            error_data = response.json()
            error_message = error_data.get("message") or response.text
            error_details = {"code": error_data.get("code"), "data": error_data.get("data")}
        except Exception:
            error_message = response.text or f"HTTP {status_code}"
            error_details = {}

        if status_code == 401:
            raise AuthenticationError(
                f"Authentication failed: {error_message}", details=error_details
            )
        elif status_code == 403:
            raise AuthorizationError(
                f"Authorization failed: {error_message}", details=error_details
            )
        elif status_code == 404:
            raise NotFoundError(f"Resource not found: {error_message}", details=error_details)
        elif status_code == 400:
            raise ValidationError(f"Validation error: {error_message}", details=error_details)
        elif 500 <= status_code < 600:
            raise ServerError(
                f"Server error: {error_message}",
                status_code=status_code,
                details=error_details,
            )
        else:
            raise StoreError(
                f"Unexpected error (HTTP {status_code}): {error_message}",
                details=error_details,
            )

    def _create_retry_decorator(self) -> Any:
        """Create the retry decorator for read requests.

        Returns:
            Configured tenacity retry decorator
        """
        retry_config = self.config.retry

        return retry(
            stop=stop_after_attempt(retry_config.max_attempts),
            wait=wait_exponential(
                multiplier=retry_config.exponential_base,
                min=retry_config.initial_wait,
                max=retry_config.max_wait,
            ),
            retry=retry_if_exception_type((ServerError, WPConnectionError)),
            reraise=True,
        )
