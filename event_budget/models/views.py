"""
View and Export Models

Bundles of engine output shaped for the screens a front end would draw,
plus the export document. A renderer only formats these, it never
recomputes anything.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from event_budget.models.category import Category
from event_budget.models.records import Guest, LineItem
from event_budget.models.summary import (
    BreakdownRow,
    CategoryTotals,
    GuestSummary,
    OverallTotals,
    SplitSlice,
)


VIEW_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    alias_generator=to_camel,
)


class CategoryCard(BaseModel):
    """A category together with its current totals."""
    model_config = VIEW_CONFIG

    category: Category
    totals: CategoryTotals


class DashboardSummary(BaseModel):
    """Everything the main dashboard shows."""
    model_config = VIEW_CONFIG

    overall: OverallTotals
    payment_split: list[SplitSlice]
    categories: list[CategoryCard]
    guests: GuestSummary


class CategoryView(BaseModel):
    """One category with its items in display order."""
    model_config = VIEW_CONFIG

    category: Category
    items: list[LineItem]
    totals: CategoryTotals


class GuestView(BaseModel):
    model_config = VIEW_CONFIG

    guests: list[Guest]
    summary: GuestSummary


class BudgetReport(BaseModel):
    """Overall totals plus the per-category breakdown table."""
    model_config = VIEW_CONFIG

    overall: OverallTotals
    rows: list[BreakdownRow]


class ExportDocument(BaseModel):
    """
    The downloadable backup.

    Serializes to {"items": [...], "guests": [...], "exportDate": "..."}.
    Write-only: there is no import path for this document.
    """
    model_config = VIEW_CONFIG

    items: list[LineItem] = Field(default_factory=list)
    guests: list[Guest] = Field(default_factory=list)
    export_date: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the export was generated (UTC)"
    )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
