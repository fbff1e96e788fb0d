"""Synchronous HTTP client for the WordPress REST API."""

import logging
from typing import Any

import httpx

from ..exceptions import (
    ConnectionError as WPConnectionError,
)
from ..exceptions import (
    InvalidResponseError,
)
from ..exceptions import (
    TimeoutError as WPTimeoutError,
)
from ..protocols import AuthProvider, ConfigProvider, HTTPClient
from .base import BaseClient

logger = logging.getLogger(__name__)


class WordPressClient(BaseClient):
    """Synchronous HTTP client for the WordPress REST API.

    GET requests are retried on server and connection errors according to
    the configured RetryConfig. POST requests are sent once.

    Example:
        ```python
        from wp_meta_kit import WordPressClient, WordPressConfig

        config = WordPressConfig(
            base_url="https://example.com",
            username="admin",
            application_password="xxxx xxxx xxxx xxxx",
        )

        with WordPressClient(config) as client:
            types = client.get("wp/v2/types", params={"context": "edit"})
        ```
    """

    def __init__(
        self,
        config: ConfigProvider,
        http_client: HTTPClient | None = None,
        auth: AuthProvider | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Connection settings (typically WordPressConfig)
            http_client: HTTP client (defaults to httpx.Client with pooling)
            auth: Authentication provider
        """
        super().__init__(config, auth=auth)

        self._client: HTTPClient | httpx.Client = (
            http_client or self._create_default_http_client()
        )
        self._owns_client = http_client is None

    def _create_default_http_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            limits=httpx.Limits(
                max_connections=self.config.max_connections,
                max_keepalive_connections=self.config.max_connections,
            ),
        )

    def __enter__(self) -> "WordPressClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()
        logger.debug("Closed WordPress client")

    def send(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send a request and return the successful response.

        Raises:
            StoreError: On HTTP error statuses
            ConnectionError: On connection failures
            TimeoutError: On request timeout
        """
        url = self._build_url(endpoint)
        headers = self._get_headers()

        logger.debug(f"{method} {url} params={params}")

        try:
            response = self._client.request(
                method=method,
                url=url,
                params=params,
                json=json,
                headers=headers,
            )
        except httpx.ConnectError as e:
            raise WPConnectionError(f"Failed to connect to {self.base_url}: {e}") from e
        except httpx.TimeoutException as e:
            raise WPTimeoutError(f"Request timed out after {self.config.timeout}s: {e}") from e

        if not response.is_success:
            self._handle_error_response(response)

        logger.debug(f"Response: {response.status_code}")
        return response

    def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            InvalidResponseError: If the body is not JSON
        """
        return self._decode(self.send(method, endpoint, params=params, json=json))

    def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Make a GET request, retrying transient failures.

        Returns:
            Decoded JSON body
        """
        retrying = self._create_retry_decorator()
        return retrying(self.request)("GET", endpoint, params=params)

    def get_page(
        self, endpoint: str, params: dict[str, Any] | None = None
    ) -> tuple[list[Any], int]:
        """Fetch one page of a collection route.

        Returns:
            Tuple of (items, total_pages). ``total_pages`` comes from the
            ``X-WP-TotalPages`` header and is 1 when the header is absent.
        """
        retrying = self._create_retry_decorator()
        response = retrying(self.send)("GET", endpoint, params=params)

        data = self._decode(response)
        items = data if isinstance(data, list) else []

        try:
            total_pages = int(response.headers.get("X-WP-TotalPages", "1"))
        except ValueError:
            total_pages = 1

        return items, total_pages

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            content_type = response.headers.get("content-type", "unknown")
            raise InvalidResponseError(
                f"Invalid JSON response (HTTP {response.status_code}, {content_type})",
                details={"status_code": response.status_code},
            ) from e

    def post(
        self,
        endpoint: str,
        json: dict[str, Any],
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a POST request. Never retried.

        Returns:
            Decoded JSON body
        """
        return self.request("POST", endpoint, params=params, json=json)
