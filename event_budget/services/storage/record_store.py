"""
Record Store

The single owner of the line item and guest collections.

DESIGN DECISION: The store is an explicit object handed to whoever
needs it. There is no module-level collection anywhere, so "which data
did this summary see?" always has one answer: the snapshot the caller
took from this store.

Mutations:
- Build the new collection from frozen records (never edit in place)
- Persist the affected record
- Only then swap the new collection in

If the write fails the in-memory state is left untouched, so memory and
disk never disagree.
"""

from decimal import Decimal
from typing import Any, Optional, TypeVar, Union
from uuid import uuid4

from pydantic import BaseModel, TypeAdapter, ValidationError

from event_budget.config import get_settings
from event_budget.logs import get_logger
from event_budget.models.category import is_known_category
from event_budget.models.records import Guest, LineItem
from event_budget.services.storage.interface import (
    InvalidUpdateError,
    NotFoundError,
    RecordStoreInterface,
    StorageBackend,
)


logger = get_logger(__name__)

Amount = Union[Decimal, int, float, str]
RecordT = TypeVar("RecordT", bound=BaseModel)

_ITEMS_ADAPTER = TypeAdapter(tuple[LineItem, ...])
_GUESTS_ADAPTER = TypeAdapter(tuple[Guest, ...])

# Fields fixed at creation time
_ITEM_FIXED_FIELDS = ("id", "category_id")
_GUEST_FIXED_FIELDS = ("id",)


def new_record_id() -> str:
    """Generate an opaque record identifier."""
    return uuid4().hex


class RecordStore(RecordStoreInterface):
    """
    Canonical item and guest collections with load/save on every mutation.

    Usage:
        store = RecordStore(JsonFileBackend("data"))
        store.load()
        item = store.add_item("venue", "Hall rental", cost=1000)
        store.update_item(item.id, paid=300)
    """

    def __init__(
        self,
        backend: StorageBackend,
        items_record: Optional[str] = None,
        guests_record: Optional[str] = None,
    ):
        storage_settings = get_settings().storage
        self._backend = backend
        self._items_record = items_record or storage_settings.items_record
        self._guests_record = guests_record or storage_settings.guests_record
        self._items: tuple[LineItem, ...] = ()
        self._guests: tuple[Guest, ...] = ()

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load(self) -> None:
        """(Re)load both collections from the backend."""
        self._items = self._load_collection(self._items_record, _ITEMS_ADAPTER)
        self._guests = self._load_collection(self._guests_record, _GUESTS_ADAPTER)
        logger.info(
            "records_loaded",
            items=len(self._items),
            guests=len(self._guests),
        )

    def _load_collection(self, name: str, adapter: TypeAdapter) -> tuple:
        """
        Load one record, falling back to an empty collection.

        A record that is missing, unreadable or the wrong shape is
        treated as empty. It is never an error for the caller.
        """
        raw = self._backend.load_record(name)
        if raw is None:
            return ()

        try:
            return adapter.validate_python(raw)
        except ValidationError as e:
            logger.warning(
                "record_load_failed",
                record=name,
                error_count=e.error_count(),
                first_error=e.errors()[0]["msg"] if e.errors() else None,
            )
            return ()

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------

    def get_all_items(self) -> tuple[LineItem, ...]:
        return self._items

    def get_all_guests(self) -> tuple[Guest, ...]:
        return self._guests

    def get_item(self, item_id: str) -> Optional[LineItem]:
        return next((item for item in self._items if item.id == item_id), None)

    def get_guest(self, guest_id: str) -> Optional[Guest]:
        return next((guest for guest in self._guests if guest.id == guest_id), None)

    # -------------------------------------------------------------------------
    # Line items
    # -------------------------------------------------------------------------

    def add_item(
        self,
        category_id: str,
        name: str = "",
        cost: Amount = 0,
        deposit: Amount = 0,
        paid: Amount = 0,
        notes: str = "",
    ) -> LineItem:
        """
        Create a line item at the end of its category.

        New items start not completed. `order` is the number of items the
        category already holds.
        """
        category_key = str(getattr(category_id, "value", category_id))
        if not is_known_category(category_key):
            logger.warning("item_category_unknown", category_id=category_key)

        order = sum(1 for item in self._items if item.category_id == category_key)
        item = LineItem(
            id=new_record_id(),
            category_id=category_key,
            name=name,
            cost=cost,
            deposit=deposit,
            paid=paid,
            completed=False,
            notes=notes,
            order=order,
        )

        self._commit_items(self._items + (item,))
        logger.info(
            "item_added",
            item_id=item.id,
            category_id=item.category_id,
            cost=str(item.cost),
        )
        return item

    def update_item(self, item_id: str, **changes: Any) -> LineItem:
        """
        Apply field changes to an item and revalidate it.

        Raises:
            NotFoundError: If no item has this id
            InvalidUpdateError: If a fixed or unknown field is changed
            pydantic.ValidationError: If a new value is invalid
        """
        current = self.get_item(item_id)
        if current is None:
            raise NotFoundError(f"Item not found: {item_id}")

        updated = _apply_changes(current, changes, _ITEM_FIXED_FIELDS)
        self._commit_items(_replace(self._items, updated))
        logger.info("item_updated", item_id=item_id, fields=sorted(changes))
        return updated

    def toggle_item_completed(self, item_id: str) -> LineItem:
        current = self.get_item(item_id)
        if current is None:
            raise NotFoundError(f"Item not found: {item_id}")
        return self.update_item(item_id, completed=not current.completed)

    def delete_item(self, item_id: str) -> bool:
        """Delete an item. Returns False if nothing matched."""
        remaining = tuple(item for item in self._items if item.id != item_id)
        if len(remaining) == len(self._items):
            return False

        self._commit_items(remaining)
        logger.info("item_deleted", item_id=item_id)
        return True

    # -------------------------------------------------------------------------
    # Guests
    # -------------------------------------------------------------------------

    def add_guest(
        self,
        name: str = "",
        confirmed: bool = False,
        amount_due: Amount = 0,
        amount_paid: Amount = 0,
        table: str = "",
        relation: str = "",
        notes: str = "",
    ) -> Guest:
        guest = Guest(
            id=new_record_id(),
            name=name,
            confirmed=confirmed,
            amount_due=amount_due,
            amount_paid=amount_paid,
            table=table,
            relation=relation,
            notes=notes,
        )

        self._commit_guests(self._guests + (guest,))
        logger.info(
            "guest_added",
            guest_id=guest.id,
            amount_due=str(guest.amount_due),
        )
        return guest

    def update_guest(self, guest_id: str, **changes: Any) -> Guest:
        """
        Apply field changes to a guest and revalidate it.

        Raises:
            NotFoundError: If no guest has this id
            InvalidUpdateError: If the id or an unknown field is changed
            pydantic.ValidationError: If a new value is invalid
        """
        current = self.get_guest(guest_id)
        if current is None:
            raise NotFoundError(f"Guest not found: {guest_id}")

        updated = _apply_changes(current, changes, _GUEST_FIXED_FIELDS)
        self._commit_guests(_replace(self._guests, updated))
        logger.info("guest_updated", guest_id=guest_id, fields=sorted(changes))
        return updated

    def delete_guest(self, guest_id: str) -> bool:
        """Delete a guest. Returns False if nothing matched."""
        remaining = tuple(guest for guest in self._guests if guest.id != guest_id)
        if len(remaining) == len(self._guests):
            return False

        self._commit_guests(remaining)
        logger.info("guest_deleted", guest_id=guest_id)
        return True

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def _commit_items(self, items: tuple[LineItem, ...]) -> None:
        self._backend.save_record(self._items_record, _dump(items))
        self._items = items

    def _commit_guests(self, guests: tuple[Guest, ...]) -> None:
        self._backend.save_record(self._guests_record, _dump(guests))
        self._guests = guests


def _dump(records: tuple[BaseModel, ...]) -> list[dict]:
    """Persisted shape: camelCase keys, JSON numbers and booleans."""
    return [record.model_dump(mode="json", by_alias=True) for record in records]


def _apply_changes(
    current: RecordT,
    changes: dict[str, Any],
    fixed_fields: tuple[str, ...],
) -> RecordT:
    model = type(current)

    unknown = sorted(set(changes) - set(model.model_fields))
    if unknown:
        raise InvalidUpdateError(f"Unknown field(s) for {model.__name__}: {unknown}")

    for field in fixed_fields:
        if field in changes and changes[field] != getattr(current, field):
            raise InvalidUpdateError(
                f"{model.__name__}.{field} cannot be changed after creation"
            )

    return model.model_validate({**current.model_dump(), **changes})


def _replace(records: tuple[RecordT, ...], updated: RecordT) -> tuple[RecordT, ...]:
    return tuple(updated if record.id == updated.id else record for record in records)
