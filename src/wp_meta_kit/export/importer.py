"""Meta description import.

This module reads an export document and writes each meta description onto
the record with the same slug and type in the target store.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import InvalidJSONError, StoreWriteError, UploadError, WPMetaKitError
from ..models.export_format import ImportItem, ImportSummary
from ..models.record import META_DESCRIPTION_KEY, STATUS_ANY
from ..protocols import RecordStore

logger = logging.getLogger(__name__)


class MetaDescriptionImporter:
    """Import meta descriptions into a record store.

    The whole document is parsed and checked before the first write. Items
    are then applied in input order; existing values are overwritten, empty
    values included. Items without a matching record are reported in the
    summary rather than failing the import.

    Example:
        >>> importer = MetaDescriptionImporter(store)
        >>> summary = importer.import_data(Path("export.json").read_bytes())
        >>> print(f"Updated {summary.updated_count}, missing {summary.not_found_count}")
    """

    def __init__(self, store: RecordStore, *, attribute_key: str = META_DESCRIPTION_KEY) -> None:
        """Initialize importer.

        Args:
            store: Record store to write to
            attribute_key: Attribute holding the meta description
        """
        self.store = store
        self.attribute_key = attribute_key

    @staticmethod
    def parse(data: bytes | str) -> list[ImportItem]:
        """Parse an import document.

        Args:
            data: Raw document, UTF-8 bytes (a leading BOM is accepted) or text

        Returns:
            Import items in document order

        Raises:
            InvalidJSONError: If the document is not a JSON array of objects
        """
        if isinstance(data, bytes):
            try:
                data = data.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise InvalidJSONError(f"Import file is not valid UTF-8: {e}") from e

        try:
            document: Any = json.loads(data)
        except json.JSONDecodeError as e:
            raise InvalidJSONError(f"Import file is not valid JSON: {e}") from e

        if not isinstance(document, list):
            raise InvalidJSONError(
                f"Import file must contain a JSON array, got {type(document).__name__}"
            )

        items: list[ImportItem] = []
        for index, element in enumerate(document):
            if not isinstance(element, dict):
                raise InvalidJSONError(
                    f"Item {index} must be a JSON object, got {type(element).__name__}",
                    details={"index": index},
                )
            try:
                items.append(ImportItem.model_validate(element))
            except PydanticValidationError as e:
                raise InvalidJSONError(
                    f"Item {index} is malformed: {e}", details={"index": index}
                ) from e

        return items

    def import_data(self, data: bytes | str) -> ImportSummary:
        """Parse an import document and apply it.

        Raises:
            InvalidJSONError: If the document is malformed (nothing is written)
            StoreWriteError: If a write fails; earlier writes stay applied
            StoreError: If a record lookup fails
        """
        items = self.parse(data)
        logger.info(f"Importing {len(items)} meta descriptions")
        return self.import_items(items)

    def import_items(self, items: list[ImportItem]) -> ImportSummary:
        """Apply parsed import items in order.

        Returns:
            Summary of updated and unmatched items
        """
        summary = ImportSummary()

        for item in items:
            if not item.post_slug or not item.post_type:
                logger.warning(f"Item {item.label!r} lacks a slug or type, counted as not found")
                summary.record_not_found(item)
                continue

            record = self.store.find_one_record(item.post_slug, item.post_type, STATUS_ANY)

            if record is None:
                logger.debug(f"No record for {item.label}")
                summary.record_not_found(item)
                continue

            try:
                self.store.set_attribute(record.id, self.attribute_key, item.meta_description)
            except WPMetaKitError as e:
                raise StoreWriteError(
                    f"Failed to update {item.label} (record {record.id}): {e}",
                    record_id=record.id,
                    summary=summary,
                ) from e

            summary.record_updated()

        logger.info(
            f"Import finished: {summary.updated_count} updated, "
            f"{summary.not_found_count} not found"
        )
        return summary

    @staticmethod
    def load_from_file(file_path: str | Path) -> bytes:
        """Read an import document from disk.

        Raises:
            UploadError: If the file cannot be read
        """
        path = Path(file_path)
        try:
            return path.read_bytes()
        except OSError as e:
            raise UploadError(f"Failed to read import file {path}: {e}") from e
