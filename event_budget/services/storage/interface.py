"""
Abstract Storage Interfaces

DESIGN DECISION: Two seams, kept deliberately small.

1. RecordStoreInterface - what the aggregation engine and the facade
   read from. Just two point-in-time snapshots.
2. StorageBackend - where the Record Store puts its two named records.
   Swap the JSON files for anything that can hold a list of dicts.

Neither is an ORM. There are exactly two collections and they are
always read and written whole.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from event_budget.models.records import Guest, LineItem


class RecordStoreInterface(ABC):
    """
    Read-only view of the canonical collections.

    Snapshots are immutable tuples of frozen models. Holding one never
    blocks a later mutation and never observes it either.
    """

    @abstractmethod
    def get_all_items(self) -> tuple[LineItem, ...]:
        """
        Snapshot of every line item.

        Returns:
            All items, in insertion order
        """
        pass

    @abstractmethod
    def get_all_guests(self) -> tuple[Guest, ...]:
        """
        Snapshot of every guest.

        Returns:
            All guests, in insertion order
        """
        pass


class StorageBackend(ABC):
    """
    Abstract interface for persisting named records.

    A record is a JSON-compatible value (in practice a list of dicts).
    """

    @abstractmethod
    def load_record(self, name: str) -> Optional[Any]:
        """
        Load a named record.

        Args:
            name: Record name (e.g. "event-items")

        Returns:
            The decoded record, or None if it is missing or unreadable
        """
        pass

    @abstractmethod
    def save_record(self, name: str, data: Any) -> None:
        """
        Replace a named record.

        Args:
            name: Record name
            data: JSON-compatible value to store

        Raises:
            StorageError: If the write fails
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """Entity not found in storage."""
    pass


class InvalidUpdateError(StorageError):
    """Attempted to change a field that is fixed after creation."""
    pass
