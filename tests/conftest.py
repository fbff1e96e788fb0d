"""Pytest configuration and shared fixtures."""

from typing import Any

import pytest

from wp_meta_kit import META_DESCRIPTION_KEY, InMemoryRecordStore, RetryConfig, WordPressConfig

BASE_URL = "https://example.test"


@pytest.fixture
def wp_config() -> WordPressConfig:
    """Create a test WordPress configuration.

    Returns:
        Configuration pointing at a mocked site, with retries disabled
    """
    return WordPressConfig(
        base_url=BASE_URL,
        username="admin",
        application_password="abcd efgh ijkl mnop",
        retry=RetryConfig(max_attempts=1),
    )


@pytest.fixture
def store() -> InMemoryRecordStore:
    """Create an in-memory store with a mix of described and bare records.

    Returns:
        Store with two posts, two pages and one private type
    """
    store = InMemoryRecordStore()
    store.add_type("post")
    store.add_type("page")
    store.add_type("revision", public=False)

    store.add_record(
        1, "post", "hello-world", title="Hello World",
        attributes={META_DESCRIPTION_KEY: "A first post."},
    )
    store.add_record(2, "post", "no-description", title="Bare")
    store.add_record(
        3, "page", "about-us", title="About Us", status="draft",
        attributes={META_DESCRIPTION_KEY: "Learn more about our company."},
    )
    store.add_record(
        4, "page", "empty", title="Empty",
        attributes={META_DESCRIPTION_KEY: ""},
    )
    store.add_record(
        5, "revision", "hello-world-rev", title="Revision",
        attributes={META_DESCRIPTION_KEY: "Hidden"},
    )
    return store


@pytest.fixture
def types_response() -> dict[str, Any]:
    """Mock response of GET /wp/v2/types?context=edit.

    Returns:
        Post, page, attachment and one non-content type
    """
    return {
        "post": {"slug": "post", "rest_base": "posts", "rest_namespace": "wp/v2", "viewable": True},
        "page": {"slug": "page", "rest_base": "pages", "rest_namespace": "wp/v2", "viewable": True},
        "attachment": {
            "slug": "attachment",
            "rest_base": "media",
            "rest_namespace": "wp/v2",
            "viewable": True,
        },
        "wp_block": {
            "slug": "wp_block",
            "rest_base": "blocks",
            "rest_namespace": "wp/v2",
            "viewable": False,
        },
    }


def _wp_post(
    post_id: int, post_type: str, slug: str, title: str, description: str | None = None
) -> dict[str, Any]:
    meta = {} if description is None else {META_DESCRIPTION_KEY: description}
    return {
        "id": post_id,
        "type": post_type,
        "slug": slug,
        "status": "publish",
        "title": {"raw": title, "rendered": title},
        "meta": meta,
    }


@pytest.fixture
def make_post() -> Any:
    """Factory for post objects as returned by the REST API in edit context.

    Returns:
        Callable (post_id, post_type, slug, title, description=None) -> dict
    """
    return _wp_post
