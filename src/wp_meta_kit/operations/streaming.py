"""Streaming pagination over WordPress collection routes.

WordPress caps ``per_page`` at 100, so listing every post of a type means
walking pages until ``X-WP-TotalPages`` is reached.
"""

from collections.abc import Generator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..client.sync_client import WordPressClient


def stream_records(
    client: "WordPressClient",
    endpoint: str,
    params: dict[str, Any] | None = None,
    page_size: int = 100,
) -> Generator[dict[str, Any], None, None]:
    """Stream raw items from a collection route with automatic pagination.

    Args:
        client: WordPressClient instance
        endpoint: Collection route (e.g., "wp/v2/posts")
        params: Extra query parameters (filters, context, ...)
        page_size: Items per page, at most 100

    Yields:
        Raw JSON objects one at a time, in the order WordPress returns them

    Example:
        >>> with WordPressClient(config) as client:
        ...     for post in stream_records(client, "wp/v2/pages", {"status": "any"}):
        ...         print(post["slug"])
    """
    current_page = 1

    while True:
        page_params = {**(params or {}), "page": current_page, "per_page": page_size}

        items, total_pages = client.get_page(endpoint, params=page_params)

        yield from items

        if not items or current_page >= total_pages:
            break

        current_page += 1
