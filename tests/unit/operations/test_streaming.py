"""Tests for streaming pagination."""

import httpx
import respx

from wp_meta_kit import WordPressClient, WordPressConfig
from wp_meta_kit.operations import stream_records

API = "https://example.test/wp-json/wp/v2"


@respx.mock
def test_stream_single_page(wp_config: WordPressConfig) -> None:
    """Test one page of results."""
    route = respx.get(f"{API}/posts").mock(
        return_value=httpx.Response(
            200, json=[{"id": 1}, {"id": 2}], headers={"X-WP-TotalPages": "1"}
        )
    )

    with WordPressClient(wp_config) as client:
        items = list(stream_records(client, "wp/v2/posts"))

    assert [item["id"] for item in items] == [1, 2]
    assert route.call_count == 1


@respx.mock
def test_stream_multiple_pages(wp_config: WordPressConfig) -> None:
    """Test pages are fetched until X-WP-TotalPages is reached."""
    route = respx.get(f"{API}/pages")
    route.side_effect = [
        httpx.Response(200, json=[{"id": 1}, {"id": 2}], headers={"X-WP-TotalPages": "3"}),
        httpx.Response(200, json=[{"id": 3}, {"id": 4}], headers={"X-WP-TotalPages": "3"}),
        httpx.Response(200, json=[{"id": 5}], headers={"X-WP-TotalPages": "3"}),
    ]

    with WordPressClient(wp_config) as client:
        items = list(stream_records(client, "wp/v2/pages", {"status": "any"}, page_size=2))

    assert [item["id"] for item in items] == [1, 2, 3, 4, 5]
    assert route.call_count == 3
    last_params = route.calls.last.request.url.params
    assert (last_params["page"], last_params["per_page"], last_params["status"]) == (
        "3",
        "2",
        "any",
    )


@respx.mock
def test_stream_stops_on_empty_page(wp_config: WordPressConfig) -> None:
    """Test an empty page ends iteration even if the header claims more."""
    route = respx.get(f"{API}/posts").mock(
        return_value=httpx.Response(200, json=[], headers={"X-WP-TotalPages": "5"})
    )

    with WordPressClient(wp_config) as client:
        assert list(stream_records(client, "wp/v2/posts")) == []

    assert route.call_count == 1
