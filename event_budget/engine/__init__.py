"""Aggregation engine package."""

from event_budget.engine.aggregation import (
    GUEST_ROW_LABEL,
    PAID_LABEL,
    PENDING_LABEL,
    category_breakdown,
    category_totals,
    completion_progress,
    guest_balance,
    guest_summary,
    item_balance,
    items_in_category,
    overall_totals,
    payment_split,
    sum_guests,
    sum_items,
)

__all__ = [
    "GUEST_ROW_LABEL",
    "PAID_LABEL",
    "PENDING_LABEL",
    "category_breakdown",
    "category_totals",
    "completion_progress",
    "guest_balance",
    "guest_summary",
    "item_balance",
    "items_in_category",
    "overall_totals",
    "payment_split",
    "sum_guests",
    "sum_items",
]
