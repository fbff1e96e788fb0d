"""Export and import of meta descriptions.

The interchange format is a JSON array of records keyed by slug and type,
so descriptions can move between sites whose record IDs differ.
"""

from .exporter import MetaDescriptionExporter
from .importer import MetaDescriptionImporter

__all__ = ["MetaDescriptionExporter", "MetaDescriptionImporter"]
