"""
Main Orchestrator for Event Budget

Ties the Record Store to the aggregation engine and assembles the
summaries each screen of a front end needs:
1. Dashboard (overall totals, paid/pending split, category cards, guests)
2. Category view (ordered items + totals)
3. Guest view (guest list + summary)
4. Budget report (overall totals + breakdown table)
5. Export (backup document written to disk)

DESIGN DECISION: Every method takes ONE snapshot of each collection
and derives everything from it. Nothing is cached between calls, so a
view can never show totals from before the last edit.
"""

from pathlib import Path
from typing import Optional, Union

from event_budget.config import get_settings
from event_budget.engine import (
    category_breakdown,
    category_totals,
    guest_summary,
    items_in_category,
    overall_totals,
    payment_split,
)
from event_budget.logs import configure_logging, get_logger
from event_budget.models.category import CATEGORIES, get_category
from event_budget.models.views import (
    BudgetReport,
    CategoryCard,
    CategoryView,
    DashboardSummary,
    GuestView,
)
from event_budget.services.export import build_export, default_export_path, write_export
from event_budget.services.storage import (
    InMemoryBackend,
    JsonFileBackend,
    RecordStore,
    RecordStoreInterface,
    StorageBackend,
)


logger = get_logger(__name__)


class BudgetTracker:
    """
    Read side of the application.

    Holds a reference to the store, never a copy of its data.
    Mutations go straight to the store.
    """

    def __init__(self, store: RecordStoreInterface):
        self._store = store

    @property
    def store(self) -> RecordStoreInterface:
        return self._store

    def dashboard(self) -> DashboardSummary:
        items = self._store.get_all_items()
        guests = self._store.get_all_guests()

        overall = overall_totals(items, guests)
        cards = [
            CategoryCard(category=category, totals=category_totals(category.id, items))
            for category in CATEGORIES
        ]

        return DashboardSummary(
            overall=overall,
            payment_split=payment_split(overall),
            categories=cards,
            guests=guest_summary(guests),
        )

    def category_view(self, category_id: str) -> CategoryView:
        """
        Items and totals for one configured category.

        Raises:
            KeyError: If the category is not configured
        """
        category = get_category(category_id)
        if category is None:
            raise KeyError(f"Unknown category: {category_id}")

        items = self._store.get_all_items()
        return CategoryView(
            category=category,
            items=items_in_category(category.id, items),
            totals=category_totals(category.id, items),
        )

    def guest_view(self) -> GuestView:
        guests = self._store.get_all_guests()
        return GuestView(
            guests=list(guests),
            summary=guest_summary(guests),
        )

    def budget_report(self) -> BudgetReport:
        items = self._store.get_all_items()
        guests = self._store.get_all_guests()
        return BudgetReport(
            overall=overall_totals(items, guests),
            rows=category_breakdown(items, guests),
        )

    def export(self, path: Optional[Union[str, Path]] = None) -> Path:
        """Write the export document. Returns the path written."""
        document = build_export(self._store)
        return write_export(document, path or default_export_path())


def create_app_components(
    data_dir: Optional[Union[str, Path]] = None,
    in_memory: bool = False,
) -> tuple[BudgetTracker, RecordStore]:
    """
    Factory function to create all application components.

    Args:
        data_dir: Where the JSON records live. Defaults to the
                  configured storage directory.
        in_memory: Use a throwaway in-memory backend instead of files.

    Returns:
        (tracker, store) - the store is loaded and ready for mutations
    """
    configure_logging()
    settings = get_settings()

    backend: StorageBackend
    if in_memory:
        backend = InMemoryBackend()
    else:
        backend = JsonFileBackend(data_dir or settings.storage.data_dir)

    store = RecordStore(backend)
    store.load()

    logger.info(
        "app_components_created",
        environment=settings.app.app_environment,
        backend=type(backend).__name__,
        data_dir=str(backend.data_dir) if isinstance(backend, JsonFileBackend) else None,
    )
    return BudgetTracker(store), store
