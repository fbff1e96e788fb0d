"""wp-meta-kit: move Yoast SEO meta descriptions between WordPress sites.

This package provides:
- Export of every non-empty meta description to a portable JSON file
- Import by slug and post type, with a summary of unmatched items
- A WordPress REST API record store and an in-memory one for tests
- A command-line interface (``wp-meta-kit export`` / ``wp-meta-kit import``)
"""

from .__version__ import __version__
from .cache import ImportResultCache
from .client import WordPressClient
from .config_factory import ConfigFactory, create_config, load_config
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ExportWriteError,
    ImportExportError,
    InvalidJSONError,
    InvalidResponseError,
    NotFoundError,
    ServerError,
    StoreError,
    StoreUnavailableError,
    StoreWriteError,
    UploadError,
    ValidationError,
    WPMetaKitError,
    WriteNotAppliedError,
)
from .export import MetaDescriptionExporter, MetaDescriptionImporter
from .models import (
    META_DESCRIPTION_KEY,
    ExportFile,
    ExportRecord,
    ImportItem,
    ImportSummary,
    Record,
    RetryConfig,
    WordPressConfig,
)
from .protocols import AuthProvider, ConfigProvider, HTTPClient, RecordStore
from .service import MetaTransferService
from .store import InMemoryRecordStore, WordPressRecordStore

__all__ = [
    "__version__",
    # Service
    "MetaTransferService",
    "MetaDescriptionExporter",
    "MetaDescriptionImporter",
    "ImportResultCache",
    # Stores and client
    "RecordStore",
    "InMemoryRecordStore",
    "WordPressRecordStore",
    "WordPressClient",
    # Configuration
    "WordPressConfig",
    "RetryConfig",
    "ConfigFactory",
    "load_config",
    "create_config",
    # Models
    "Record",
    "ExportRecord",
    "ImportItem",
    "ImportSummary",
    "ExportFile",
    "META_DESCRIPTION_KEY",
    # Protocols (for dependency injection)
    "AuthProvider",
    "ConfigProvider",
    "HTTPClient",
    # Exceptions
    "WPMetaKitError",
    "ConfigurationError",
    "ImportExportError",
    "InvalidJSONError",
    "UploadError",
    "ExportWriteError",
    "StoreWriteError",
    "StoreError",
    "StoreUnavailableError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ServerError",
    "InvalidResponseError",
    "ValidationError",
    "WriteNotAppliedError",
]
