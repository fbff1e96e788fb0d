"""Data models for wp-meta-kit."""

from .config import RetryConfig, WordPressConfig
from .export_format import (
    EXPORT_FILENAME_PREFIX,
    EXPORT_MIME_TYPE,
    ExportFile,
    ExportRecord,
    ImportItem,
    ImportSummary,
)
from .record import META_DESCRIPTION_KEY, STATUS_ANY, Record

__all__ = [
    "WordPressConfig",
    "RetryConfig",
    "Record",
    "ExportRecord",
    "ImportItem",
    "ImportSummary",
    "ExportFile",
    "META_DESCRIPTION_KEY",
    "STATUS_ANY",
    "EXPORT_MIME_TYPE",
    "EXPORT_FILENAME_PREFIX",
]
