"""
Data Models Package

This package contains all Pydantic models used in Event Budget.
All data flowing between the Record Store, the engine and any front end
conforms to these schemas.
"""

from event_budget.models.category import (
    CATEGORIES,
    Category,
    CategoryId,
    get_category,
    is_known_category,
)
from event_budget.models.records import (
    Guest,
    LineItem,
    Money,
    SignedMoney,
)
from event_budget.models.summary import (
    BreakdownRow,
    CategoryTotals,
    GuestSummary,
    GuestSums,
    ItemSums,
    OverallTotals,
    SplitSlice,
)
from event_budget.models.views import (
    BudgetReport,
    CategoryCard,
    CategoryView,
    DashboardSummary,
    ExportDocument,
    GuestView,
)

__all__ = [
    # Categories
    "CATEGORIES",
    "Category",
    "CategoryId",
    "get_category",
    "is_known_category",
    # Records
    "Guest",
    "LineItem",
    "Money",
    "SignedMoney",
    # Summaries
    "BreakdownRow",
    "CategoryTotals",
    "GuestSummary",
    "GuestSums",
    "ItemSums",
    "OverallTotals",
    "SplitSlice",
    # Views
    "BudgetReport",
    "CategoryCard",
    "CategoryView",
    "DashboardSummary",
    "ExportDocument",
    "GuestView",
]
