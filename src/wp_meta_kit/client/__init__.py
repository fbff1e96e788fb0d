"""WordPress REST API client."""

from .base import BaseClient
from .sync_client import WordPressClient

__all__ = ["BaseClient", "WordPressClient"]
