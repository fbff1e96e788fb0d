"""Presentation-facing entry points for export and import.

A web handler, CLI command or scheduled job calls MetaTransferService and
takes care of delivery itself (download headers, redirects, printing).
"""

import logging

from .export.exporter import MetaDescriptionExporter
from .export.importer import MetaDescriptionImporter
from .models.export_format import ExportFile, ImportSummary
from .protocols import RecordStore

logger = logging.getLogger(__name__)


class MetaTransferService:
    """Run meta description exports and imports against one record store.

    Example:
        >>> with WordPressClient(config) as client:
        ...     service = MetaTransferService(WordPressRecordStore(client))
        ...     export_file = service.run_export()
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        exporter: MetaDescriptionExporter | None = None,
        importer: MetaDescriptionImporter | None = None,
    ) -> None:
        self.store = store
        self.exporter = exporter or MetaDescriptionExporter(store)
        self.importer = importer or MetaDescriptionImporter(store)

    def run_export(self) -> ExportFile:
        """Export every meta description as a downloadable JSON file."""
        export_file = self.exporter.export_file()
        logger.info(f"Prepared {export_file.filename} ({len(export_file.content)} bytes)")
        return export_file

    def run_import(self, data: bytes | str) -> ImportSummary:
        """Apply an uploaded export document.

        Raises:
            InvalidJSONError: If the document is malformed
            StoreWriteError: If a write fails mid-import
            StoreError: If the record store fails
        """
        return self.importer.import_data(data)
