"""Single-use, expiring storage for import summaries.

A web adapter that redirects after an import stores the summary here, then
pops it when rendering the next page. Each entry can be read once, and
entries nobody reads disappear after the TTL.
"""

import logging
import time
from collections.abc import Callable

from ..models.export_format import ImportSummary

logger = logging.getLogger(__name__)

DEFAULT_RESULT_TTL = 60.0


class ImportResultCache:
    """In-memory import summary cache with expiry and read-once semantics.

    Example:
        >>> cache = ImportResultCache()
        >>> cache.put("user-1", summary)
        >>> cache.pop("user-1") is summary
        True
        >>> cache.pop("user-1") is None
        True
    """

    def __init__(
        self,
        ttl: float = DEFAULT_RESULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize cache.

        Args:
            ttl: Seconds an unread entry is kept
            clock: Monotonic time source

        Raises:
            ValueError: If ttl is not positive
        """
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, tuple[float, ImportSummary]] = {}

    def put(self, key: str, summary: ImportSummary) -> None:
        """Store a summary, replacing any unread one under the same key."""
        self.purge_expired()
        self._entries[key] = (self._clock() + self.ttl, summary)

    def pop(self, key: str) -> ImportSummary | None:
        """Return and remove the summary for ``key``.

        Returns:
            The summary, or None if absent or expired
        """
        entry = self._entries.pop(key, None)
        if entry is None:
            return None

        expires_at, summary = entry
        if self._clock() >= expires_at:
            logger.debug(f"Import result for {key!r} expired unread")
            return None
        return summary

    def purge_expired(self) -> int:
        """Drop expired entries.

        Returns:
            Number of entries removed
        """
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        entry = self._entries.get(key) if isinstance(key, str) else None
        return entry is not None and self._clock() < entry[0]
