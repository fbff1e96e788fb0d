"""In-memory record store."""

import logging

from ..exceptions import NotFoundError, StoreUnavailableError
from ..models.record import STATUS_ANY, Record

logger = logging.getLogger(__name__)


class InMemoryRecordStore:
    """Record store kept entirely in process memory.

    Records keep their insertion order within each type, and types keep
    their registration order, so enumeration is stable.

    Example:
        >>> store = InMemoryRecordStore()
        >>> store.add_type("page")
        >>> store.add_record(1, "page", "about-us", title="About Us")
        Record(id=1, type='page', title='About Us', slug='about-us')
    """

    def __init__(self) -> None:
        self._types: dict[str, bool] = {}
        self._records: dict[str, list[Record]] = {}
        self._statuses: dict[int, str] = {}
        self._attributes: dict[int, dict[str, str]] = {}
        self._failing_writes: set[int] = set()
        self.write_count = 0

    def add_type(self, name: str, *, public: bool = True) -> None:
        """Register a content type."""
        self._types[name] = public
        self._records.setdefault(name, [])

    def add_record(
        self,
        record_id: int,
        record_type: str,
        slug: str,
        *,
        title: str = "",
        status: str = "publish",
        attributes: dict[str, str] | None = None,
    ) -> Record:
        """Add a record, registering its type as public if unknown."""
        if record_type not in self._types:
            self.add_type(record_type)

        record = Record(id=record_id, type=record_type, title=title, slug=slug)
        self._records[record_type].append(record)
        self._statuses[record_id] = status
        self._attributes[record_id] = dict(attributes or {})
        return record

    def fail_writes_for(self, record_id: int) -> None:
        """Make every later write to ``record_id`` raise StoreUnavailableError."""
        self._failing_writes.add(record_id)

    def list_public_types(self) -> list[str]:
        return [name for name, public in self._types.items() if public]

    def list_records(self, record_type: str, status: str = STATUS_ANY) -> list[Record]:
        records = self._records.get(record_type, [])
        if status == STATUS_ANY:
            return list(records)
        return [record for record in records if self._statuses[record.id] == status]

    def get_attribute(self, record_id: int, key: str) -> str | None:
        if record_id not in self._attributes:
            raise NotFoundError(f"Record {record_id} does not exist")
        return self._attributes[record_id].get(key)

    def set_attribute(self, record_id: int, key: str, value: str) -> None:
        if record_id not in self._attributes:
            raise NotFoundError(f"Record {record_id} does not exist")
        if record_id in self._failing_writes:
            raise StoreUnavailableError(f"Write to record {record_id} failed")

        self._attributes[record_id][key] = value
        self.write_count += 1
        logger.debug(f"Set {key} on record {record_id}")

    def find_one_record(
        self, slug: str, record_type: str, status: str = STATUS_ANY
    ) -> Record | None:
        for record in self.list_records(record_type, status):
            if record.slug == slug:
                return record
        return None
