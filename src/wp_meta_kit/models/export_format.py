"""Interchange format models for meta description export/import.

The export file is a JSON array of ExportRecord objects. Import reads the same
shape back as ImportItem objects, which are deliberately lenient so a
hand-edited file with a missing key still imports.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

EXPORT_MIME_TYPE = "application/json"
EXPORT_FILENAME_PREFIX = "yoast-meta-descriptions"


class ExportRecord(BaseModel):
    """One element of the exported JSON array.

    Field order here is the key order in the written document.

    Attributes:
        post_id: Source record ID (informational, not used for matching)
        post_type: Content type name
        post_title: Record title (informational)
        post_slug: Record slug, matched together with post_type on import
        meta_description: The transferred value, never empty
    """

    post_id: int
    post_type: str
    post_title: str
    post_slug: str
    meta_description: str


class ImportItem(BaseModel):
    """One element of a parsed import document.

    Missing keys become empty strings and scalar values are coerced to
    strings. Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    post_id: Any = None
    post_type: str = ""
    post_title: str = ""
    post_slug: str = ""
    meta_description: str = ""

    @field_validator("post_type", "post_title", "post_slug", "meta_description", mode="before")
    @classmethod
    def _coerce_to_string(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            return "1" if value else ""
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            return value
        raise ValueError(f"expected a string, got {type(value).__name__}")

    @property
    def label(self) -> str:
        """Human-readable identity used in not-found listings."""
        return f"{self.post_slug} ({self.post_type})"


class ImportSummary(BaseModel):
    """Outcome of one import run.

    Attributes:
        updated_count: Items matched to a record and written
        not_found_count: Items with no matching record
        not_found_entries: "<slug> (<type>)" per unmatched item, in input order
    """

    model_config = ConfigDict(populate_by_name=True)

    updated_count: int = Field(default=0, ge=0, alias="updatedCount")
    not_found_count: int = Field(default=0, ge=0, alias="notFoundCount")
    not_found_entries: list[str] = Field(default_factory=list, alias="notFoundEntries")

    def record_updated(self) -> None:
        """Count one successful update."""
        self.updated_count += 1

    def record_not_found(self, item: ImportItem) -> None:
        """Count one unmatched item and remember its label."""
        self.not_found_count += 1
        self.not_found_entries.append(item.label)

    @property
    def total(self) -> int:
        """Number of items processed."""
        return self.updated_count + self.not_found_count

    def to_json(self) -> str:
        """Serialize with the camelCase keys used by the presentation layer."""
        return self.model_dump_json(by_alias=True, indent=2)


class ExportFile(BaseModel):
    """A rendered export ready for delivery as a download.

    Attributes:
        content: UTF-8 encoded JSON document
        filename: Suggested download filename
        mime_type: Content type of the document
    """

    content: bytes
    filename: str
    mime_type: str = EXPORT_MIME_TYPE
