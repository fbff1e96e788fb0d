"""Meta description export.

This module walks every public content type in a record store and renders
the records that carry a meta description as a JSON document.
"""

import json
import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from ..exceptions import ExportWriteError
from ..models.export_format import (
    EXPORT_FILENAME_PREFIX,
    EXPORT_MIME_TYPE,
    ExportFile,
    ExportRecord,
)
from ..models.record import META_DESCRIPTION_KEY, STATUS_ANY
from ..protocols import RecordStore

logger = logging.getLogger(__name__)


def is_empty_value(value: str | None) -> bool:
    """Return True for attribute values that count as unset.

    "0" is unset too, following WordPress's own emptiness rule for meta.
    """
    return value is None or value == "" or value == "0"


class MetaDescriptionExporter:
    """Export meta descriptions from a record store.

    Records appear type by type, in the order the store enumerates them.
    Records without a meta description are left out.

    Example:
        >>> exporter = MetaDescriptionExporter(store)
        >>> export_file = exporter.export_file()
        >>> MetaDescriptionExporter.save_to_file(export_file.content, export_file.filename)
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        attribute_key: str = META_DESCRIPTION_KEY,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize exporter.

        Args:
            store: Record store to read from
            attribute_key: Attribute holding the meta description
            clock: Source of the timestamp used in export filenames
        """
        self.store = store
        self.attribute_key = attribute_key
        self.clock = clock

    def collect(self) -> list[ExportRecord]:
        """Gather every record with a non-empty meta description.

        Returns:
            Export records in store order
        """
        records: list[ExportRecord] = []
        record_types = list(self.store.list_public_types())

        for record_type in record_types:
            scanned = 0
            for record in self.store.list_records(record_type, STATUS_ANY):
                scanned += 1
                value = self.store.get_attribute(record.id, self.attribute_key)

                if is_empty_value(value):
                    continue

                records.append(
                    ExportRecord(
                        post_id=record.id,
                        post_type=record.type,
                        post_title=record.title,
                        post_slug=record.slug,
                        meta_description=value,
                    )
                )

            logger.debug(f"Scanned {scanned} {record_type} records")

        logger.info(
            f"Collected {len(records)} meta descriptions across {len(record_types)} types"
        )
        return records

    def export(self) -> bytes:
        """Render the export document.

        Returns:
            Indented UTF-8 JSON with non-ASCII characters written literally
        """
        return self.render(self.collect())

    def export_file(self) -> ExportFile:
        """Render the export document together with its download metadata."""
        return ExportFile(
            content=self.export(),
            filename=self.export_filename(self.clock()),
            mime_type=EXPORT_MIME_TYPE,
        )

    @staticmethod
    def render(records: list[ExportRecord]) -> bytes:
        """Serialize export records to the interchange format."""
        payload = [record.model_dump(mode="json") for record in records]
        return json.dumps(payload, indent=4, ensure_ascii=False).encode("utf-8")

    @staticmethod
    def export_filename(moment: datetime) -> str:
        """Build the download filename for an export taken at ``moment``.

        Example:
            >>> MetaDescriptionExporter.export_filename(datetime(2024, 3, 5, 14, 7, 9))
            'yoast-meta-descriptions-2024-03-05-140709.json'
        """
        return f"{EXPORT_FILENAME_PREFIX}-{moment:%Y-%m-%d-%H%M%S}.json"

    @staticmethod
    def save_to_file(content: bytes, file_path: str | Path) -> Path:
        """Write an export document to disk.

        Args:
            content: Rendered export document
            file_path: Path to output file

        Returns:
            Path written to

        Raises:
            ExportWriteError: If the file cannot be written
        """
        path = Path(file_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as e:
            raise ExportWriteError(f"Cannot write export to {path}: {e}") from e

        logger.info(f"Export saved to {path}")
        return path
