"""Services package."""

from event_budget.services.export import (
    build_export,
    default_export_path,
    write_export,
)
from event_budget.services.storage import (
    InMemoryBackend,
    InvalidUpdateError,
    JsonFileBackend,
    NotFoundError,
    RecordStore,
    RecordStoreInterface,
    StorageBackend,
    StorageError,
)

__all__ = [
    # Export
    "build_export",
    "default_export_path",
    "write_export",
    # Storage
    "InMemoryBackend",
    "InvalidUpdateError",
    "JsonFileBackend",
    "NotFoundError",
    "RecordStore",
    "RecordStoreInterface",
    "StorageBackend",
    "StorageError",
]
