"""Record store backed by the WordPress REST API.

The Yoast meta description lives in the protected post meta key
``_yoast_wpseo_metadesc``. WordPress only exposes meta over REST once it is
registered with ``show_in_rest``, for example in a must-use plugin::

    register_post_meta('', '_yoast_wpseo_metadesc', [
        'show_in_rest'  => true,
        'single'        => true,
        'type'          => 'string',
        'auth_callback' => fn() => current_user_can('edit_posts'),
    ]);
"""

import logging
from typing import TYPE_CHECKING, Any

from ..exceptions import NotFoundError, WriteNotAppliedError
from ..models.record import STATUS_ANY, Record
from ..operations.streaming import stream_records

if TYPE_CHECKING:
    from ..client.sync_client import WordPressClient

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "wp/v2"

# Viewable post types that hold site structure rather than content
NON_CONTENT_TYPES = frozenset(
    {
        "nav_menu_item",
        "wp_block",
        "wp_template",
        "wp_template_part",
        "wp_navigation",
        "wp_global_styles",
        "wp_font_family",
        "wp_font_face",
    }
)


class WordPressRecordStore:
    """RecordStore implementation for a live WordPress site.

    Type metadata is fetched once per store instance. Meta values seen while
    listing records are cached, so an export costs one request per page of
    records rather than one per record.
    """

    def __init__(self, client: "WordPressClient", *, page_size: int = 100) -> None:
        self.client = client
        self.page_size = page_size
        self._types: dict[str, dict[str, Any]] | None = None
        self._routes: dict[int, str] = {}
        self._meta: dict[int, dict[str, Any]] = {}
        self._warned_unregistered = False

    def _load_types(self) -> dict[str, dict[str, Any]]:
        if self._types is None:
            data = self.client.get(f"{DEFAULT_NAMESPACE}/types", params={"context": "edit"})
            self._types = data if isinstance(data, dict) else {}
            logger.debug(f"Loaded {len(self._types)} post types")
        return self._types

    def _route(self, record_type: str) -> str | None:
        info = self._load_types().get(record_type)
        if not info or not info.get("rest_base"):
            return None
        namespace = info.get("rest_namespace") or DEFAULT_NAMESPACE
        return f"{namespace}/{info['rest_base']}"

    @staticmethod
    def _status_params(record_type: str, status: str) -> dict[str, str]:
        # Attachments only accept their own statuses ("inherit", ...)
        if record_type == "attachment":
            return {}
        return {"status": status}

    def list_public_types(self) -> list[str]:
        names = []
        for name, info in self._load_types().items():
            if name in NON_CONTENT_TYPES or not info.get("rest_base"):
                continue
            if info.get("viewable") is False:
                continue
            names.append(name)
        return names

    def list_records(self, record_type: str, status: str = STATUS_ANY) -> list[Record]:
        route = self._route(record_type)
        if route is None:
            logger.warning(f"Post type {record_type!r} is not available over REST")
            return []

        params = {"context": "edit", **self._status_params(record_type, status)}
        return [
            self._remember(route, item)
            for item in stream_records(self.client, route, params, page_size=self.page_size)
        ]

    def get_attribute(self, record_id: int, key: str) -> str | None:
        meta = self._meta.get(record_id)
        if meta is None:
            endpoint = f"{self._record_route(record_id)}/{record_id}"
            item = self.client.get(endpoint, params={"context": "edit"})
            meta = item.get("meta") if isinstance(item, dict) else None
            meta = meta if isinstance(meta, dict) else {}
            self._meta[record_id] = meta

        if key not in meta:
            self._warn_unregistered(key)
            return None

        return self._meta_value(meta[key])

    def set_attribute(self, record_id: int, key: str, value: str) -> None:
        """Write ``value`` to meta ``key`` and confirm the site stored it.

        Raises:
            WriteNotAppliedError: If the returned record does not carry the
                value, which is how WordPress reports an unregistered key
        """
        endpoint = f"{self._record_route(record_id)}/{record_id}"
        item = self.client.post(endpoint, json={"meta": {key: value}})

        meta = item.get("meta") if isinstance(item, dict) else None
        if not isinstance(meta, dict) or key not in meta:
            stored = None
        else:
            stored = self._meta_value(meta[key]) or ""
        if stored != value:
            raise WriteNotAppliedError(
                f"Record {record_id} did not store the new {key!r} value; "
                "check that the key is registered with show_in_rest",
                details={"record_id": record_id, "stored": stored},
            )

        self._meta[record_id] = meta
        logger.debug(f"Set {key} on record {record_id}")

    def find_one_record(
        self, slug: str, record_type: str, status: str = STATUS_ANY
    ) -> Record | None:
        route = self._route(record_type)
        if route is None:
            return None

        params = {
            "slug": slug,
            "per_page": 1,
            "context": "edit",
            **self._status_params(record_type, status),
        }
        items, _ = self.client.get_page(route, params=params)
        if not items:
            return None
        return self._remember(route, items[0])

    def _record_route(self, record_id: int) -> str:
        route = self._routes.get(record_id)
        if route is None:
            raise NotFoundError(f"Record {record_id} has not been listed or looked up")
        return route

    def _remember(self, route: str, item: dict[str, Any]) -> Record:
        record = self._to_record(item)
        self._routes[record.id] = route
        meta = item.get("meta")
        if isinstance(meta, dict):
            self._meta[record.id] = meta
        return record

    def _warn_unregistered(self, key: str) -> None:
        if not self._warned_unregistered:
            logger.warning(
                f"Meta key {key!r} is missing from REST responses; "
                "register it with show_in_rest to export or import it"
            )
            self._warned_unregistered = True

    @staticmethod
    def _meta_value(value: Any) -> str | None:
        if value is None:
            return None
        # Meta registered with single=false comes back as a list
        if isinstance(value, list):
            return str(value[0]) if value else None
        return str(value)

    @staticmethod
    def _to_record(item: dict[str, Any]) -> Record:
        title = item.get("title", "")
        if isinstance(title, dict):
            title = title.get("raw", title.get("rendered", ""))
        return Record(
            id=item["id"],
            type=item.get("type", ""),
            title=title or "",
            slug=item.get("slug", ""),
        )
