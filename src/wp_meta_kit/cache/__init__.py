"""Short-lived storage for import results awaiting display."""

from .result_cache import DEFAULT_RESULT_TTL, ImportResultCache

__all__ = ["DEFAULT_RESULT_TTL", "ImportResultCache"]
