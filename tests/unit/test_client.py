"""Unit tests for the WordPress REST client."""

import base64
import json

import httpx
import pytest
import respx

from wp_meta_kit import (
    AuthenticationError,
    AuthorizationError,
    InvalidResponseError,
    NotFoundError,
    RetryConfig,
    ServerError,
    StoreUnavailableError,
    ValidationError,
    WordPressClient,
    WordPressConfig,
)
from wp_meta_kit.exceptions import ConnectionError as WPConnectionError
from wp_meta_kit.exceptions import TimeoutError as WPTimeoutError

BASE = "https://example.test/wp-json"


@pytest.fixture
def retrying_config() -> WordPressConfig:
    """Config with two attempts and the shortest allowed waits."""
    return WordPressConfig(
        base_url="https://example.test",
        username="admin",
        application_password="abcd efgh ijkl mnop",
        retry=RetryConfig(max_attempts=2, initial_wait=0.1, max_wait=1.0, exponential_base=1.0),
    )


class TestWordPressClient:
    """Test cases for WordPressClient."""

    def test_initialization(self, wp_config: WordPressConfig) -> None:
        """Test client initialization."""
        with WordPressClient(wp_config) as client:
            assert client.base_url == "https://example.test"
            assert client.config == wp_config

    def test_build_url(self, wp_config: WordPressConfig) -> None:
        """Test /wp-json prefixing."""
        with WordPressClient(wp_config) as client:
            assert client._build_url("wp/v2/posts") == f"{BASE}/wp/v2/posts"
            assert client._build_url("/wp-json/wp/v2/posts/") == f"{BASE}/wp/v2/posts"

    def test_missing_credentials(self) -> None:
        """Test that an empty username is rejected."""
        config = WordPressConfig(
            base_url="https://example.test", username=" ", application_password="x"
        )
        with pytest.raises(ValueError, match="username and application password"):
            WordPressClient(config)

    @respx.mock
    def test_sends_basic_auth(self, wp_config: WordPressConfig) -> None:
        """Test application password header without spaces."""
        route = respx.get(f"{BASE}/wp/v2/types").mock(return_value=httpx.Response(200, json={}))

        with WordPressClient(wp_config) as client:
            client.get("wp/v2/types")

        expected = base64.b64encode(b"admin:abcdefghijklmnop").decode()
        assert route.calls.last.request.headers["Authorization"] == f"Basic {expected}"

    @respx.mock
    def test_post_sends_json(self, wp_config: WordPressConfig) -> None:
        """Test POST body encoding."""
        route = respx.post(f"{BASE}/wp/v2/posts/1").mock(
            return_value=httpx.Response(200, json={"id": 1})
        )

        with WordPressClient(wp_config) as client:
            response = client.post("wp/v2/posts/1", json={"meta": {"_k": "v"}})

        assert response == {"id": 1}
        assert json.loads(route.calls.last.request.content) == {"meta": {"_k": "v"}}

    @respx.mock
    def test_get_page_reads_total_pages(self, wp_config: WordPressConfig) -> None:
        """Test X-WP-TotalPages handling."""
        respx.get(f"{BASE}/wp/v2/posts").mock(
            return_value=httpx.Response(200, json=[{"id": 1}], headers={"X-WP-TotalPages": "3"})
        )

        with WordPressClient(wp_config) as client:
            items, total_pages = client.get_page("wp/v2/posts", params={"page": 1})

        assert items == [{"id": 1}]
        assert total_pages == 3

    @respx.mock
    def test_get_page_without_header(self, wp_config: WordPressConfig) -> None:
        """Test that a missing header means a single page."""
        respx.get(f"{BASE}/wp/v2/posts").mock(return_value=httpx.Response(200, json=[]))

        with WordPressClient(wp_config) as client:
            assert client.get_page("wp/v2/posts") == ([], 1)

    @pytest.mark.parametrize(
        ("status", "error_class"),
        [
            (400, ValidationError),
            (401, AuthenticationError),
            (403, AuthorizationError),
            (404, NotFoundError),
            (500, ServerError),
            (503, ServerError),
        ],
    )
    @respx.mock
    def test_error_mapping(
        self, wp_config: WordPressConfig, status: int, error_class: type
    ) -> None:
        """Test HTTP status to exception mapping."""
        respx.get(f"{BASE}/wp/v2/posts").mock(
            return_value=httpx.Response(
                status, json={"code": "rest_error", "message": "Nope", "data": {"status": status}}
            )
        )

        with WordPressClient(wp_config) as client:
            with pytest.raises(error_class, match="Nope") as exc_info:
                client.get("wp/v2/posts")

        assert exc_info.value.details["code"] == "rest_error"

    @respx.mock
    def test_server_error_is_store_unavailable(self, wp_config: WordPressConfig) -> None:
        """Test that 5xx responses belong to the unavailable family."""
        respx.get(f"{BASE}/wp/v2/posts").mock(return_value=httpx.Response(502, text="Bad Gateway"))

        with WordPressClient(wp_config) as client:
            with pytest.raises(StoreUnavailableError):
                client.get("wp/v2/posts")

    @respx.mock
    def test_html_body_is_invalid_response(self, wp_config: WordPressConfig) -> None:
        """Test that an HTML page served with 200 is a store failure."""
        respx.get(f"{BASE}/wp/v2/types").mock(
            return_value=httpx.Response(
                200, text="<html>not wp</html>", headers={"content-type": "text/html"}
            )
        )

        with WordPressClient(wp_config) as client:
            with pytest.raises(InvalidResponseError, match="Invalid JSON response") as exc_info:
                client.get("wp/v2/types")

        assert isinstance(exc_info.value, StoreUnavailableError)
        assert exc_info.value.details["status_code"] == 200

    @respx.mock
    def test_get_page_html_body(self, wp_config: WordPressConfig) -> None:
        """Test that collection pages are decoded the same way."""
        respx.get(f"{BASE}/wp/v2/posts").mock(
            return_value=httpx.Response(200, text="<html></html>")
        )

        with WordPressClient(wp_config) as client:
            with pytest.raises(InvalidResponseError):
                client.get_page("wp/v2/posts")

    @respx.mock
    def test_post_html_body(self, wp_config: WordPressConfig) -> None:
        """Test that a non-JSON reply to a write is wrapped too."""
        respx.post(f"{BASE}/wp/v2/posts/1").mock(
            return_value=httpx.Response(200, text="Saved!")
        )

        with WordPressClient(wp_config) as client:
            with pytest.raises(InvalidResponseError):
                client.post("wp/v2/posts/1", json={"meta": {}})

    @respx.mock
    def test_connection_error(self, wp_config: WordPressConfig) -> None:
        """Test connection failures are wrapped."""
        respx.get(f"{BASE}/wp/v2/posts").mock(side_effect=httpx.ConnectError)

        with WordPressClient(wp_config) as client:
            with pytest.raises(WPConnectionError, match="Failed to connect"):
                client.get("wp/v2/posts")

    @respx.mock
    def test_timeout(self, wp_config: WordPressConfig) -> None:
        """Test timeouts are wrapped."""
        respx.get(f"{BASE}/wp/v2/posts").mock(side_effect=httpx.ReadTimeout)

        with WordPressClient(wp_config) as client:
            with pytest.raises(WPTimeoutError, match="timed out"):
                client.get("wp/v2/posts")


class TestRetry:
    """Retry behaviour of reads and writes."""

    @respx.mock
    def test_get_retries_server_error(self, retrying_config: WordPressConfig) -> None:
        """Test a GET succeeds after one 500."""
        route = respx.get(f"{BASE}/wp/v2/types")
        route.side_effect = [
            httpx.Response(500, json={"message": "boom"}),
            httpx.Response(200, json={"post": {}}),
        ]

        with WordPressClient(retrying_config) as client:
            assert client.get("wp/v2/types") == {"post": {}}

        assert route.call_count == 2

    @respx.mock
    def test_get_does_not_retry_client_errors(self, retrying_config: WordPressConfig) -> None:
        """Test that 404 is raised immediately."""
        route = respx.get(f"{BASE}/wp/v2/posts/9").mock(
            return_value=httpx.Response(404, json={"message": "Invalid post ID."})
        )

        with WordPressClient(retrying_config) as client:
            with pytest.raises(NotFoundError):
                client.get("wp/v2/posts/9")

        assert route.call_count == 1

    @respx.mock
    def test_get_does_not_retry_invalid_body(self, retrying_config: WordPressConfig) -> None:
        """Test that a non-JSON body is raised without retrying."""
        route = respx.get(f"{BASE}/wp/v2/types").mock(
            return_value=httpx.Response(200, text="<html>login</html>")
        )

        with WordPressClient(retrying_config) as client:
            with pytest.raises(InvalidResponseError):
                client.get("wp/v2/types")

        assert route.call_count == 1

    @respx.mock
    def test_post_is_not_retried(self, retrying_config: WordPressConfig) -> None:
        """Test that writes are sent exactly once."""
        route = respx.post(f"{BASE}/wp/v2/posts/1").mock(
            return_value=httpx.Response(500, json={"message": "boom"})
        )

        with WordPressClient(retrying_config) as client:
            with pytest.raises(ServerError):
                client.post("wp/v2/posts/1", json={"meta": {}})

        assert route.call_count == 1


class TestInjectedHTTPClient:
    """Dependency injection of the underlying HTTP client."""

    def test_injected_client_is_not_closed(self, wp_config: WordPressConfig) -> None:
        """Test that an injected client stays open."""
        http_client = httpx.Client()

        with WordPressClient(wp_config, http_client=http_client):
            pass

        assert not http_client.is_closed
        http_client.close()

    def test_injected_auth(self, wp_config: WordPressConfig) -> None:
        """Test a custom auth provider."""

        class TokenAuth:
            def get_headers(self) -> dict[str, str]:
                return {"Authorization": "Bearer token"}

            def validate_credentials(self) -> bool:
                return True

        with WordPressClient(wp_config, auth=TokenAuth()) as client:
            assert client._get_headers()["Authorization"] == "Bearer token"
