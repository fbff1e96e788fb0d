"""Record store implementations.

InMemoryRecordStore backs tests and dry experiments; WordPressRecordStore
talks to a live site through the REST API.
"""

from .memory import InMemoryRecordStore
from .wordpress import WordPressRecordStore

__all__ = ["InMemoryRecordStore", "WordPressRecordStore"]
