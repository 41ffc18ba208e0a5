"""In-memory storage backend, for tests and throwaway sessions."""

import copy
from typing import Any, Optional

from event_budget.services.storage.interface import StorageBackend


class InMemoryBackend(StorageBackend):
    """
    Dict-backed storage.

    Values are deep-copied on the way in and out so callers can never
    alias the stored record.
    """

    def __init__(self, records: Optional[dict[str, Any]] = None):
        self._records: dict[str, Any] = copy.deepcopy(records or {})

    def load_record(self, name: str) -> Optional[Any]:
        if name not in self._records:
            return None
        return copy.deepcopy(self._records[name])

    def save_record(self, name: str, data: Any) -> None:
        self._records[name] = copy.deepcopy(data)
