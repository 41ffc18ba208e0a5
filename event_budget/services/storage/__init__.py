"""
Storage Services Package

Provides the Record Store, its abstract interfaces, and the storage
backends it can persist through. JSON files are the default backend,
but the store only depends on StorageBackend.
"""

from event_budget.services.storage.interface import (
    InvalidUpdateError,
    NotFoundError,
    RecordStoreInterface,
    StorageBackend,
    StorageError,
)
from event_budget.services.storage.json_file import JsonFileBackend
from event_budget.services.storage.memory import InMemoryBackend
from event_budget.services.storage.record_store import RecordStore, new_record_id

__all__ = [
    # Interfaces
    "RecordStoreInterface",
    "StorageBackend",
    # Exceptions
    "InvalidUpdateError",
    "NotFoundError",
    "StorageError",
    # Implementations
    "InMemoryBackend",
    "JsonFileBackend",
    "RecordStore",
    "new_record_id",
]
