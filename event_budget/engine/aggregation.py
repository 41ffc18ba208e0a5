"""
Aggregation Engine

DESIGN DECISION: Every summary is built from two primitives,
sum_items() and sum_guests(). Category totals, overall totals and the
budget breakdown all compose those same sums, so the dashboard and the
report cannot disagree with each other.

GUARANTEES:
- Pure: inputs are only read, results are new frozen models
- Total: empty collections give zeros, never a division error
- No caching: callers re-derive from the current snapshot every time

Items whose category_id matches no configured category are left out of
every per-category result but still count in overall_totals(), which
sums across all items regardless of category.
"""

from decimal import Decimal
from typing import Iterable, Sequence

from event_budget.models.category import CATEGORIES, Category
from event_budget.models.records import Guest, LineItem
from event_budget.models.summary import (
    BreakdownRow,
    CategoryTotals,
    GuestSummary,
    GuestSums,
    ItemSums,
    OverallTotals,
    SplitSlice,
)


GUEST_ROW_LABEL = "Guests"
PAID_LABEL = "Paid"
PENDING_LABEL = "Pending"

ZERO = Decimal("0")


# =============================================================================
# PRIMITIVES
# =============================================================================

def item_balance(item: LineItem) -> Decimal:
    """cost - deposit - paid. Not clamped: negative means overpaid."""
    return item.balance


def guest_balance(guest: Guest) -> Decimal:
    """amount_due - amount_paid. Not clamped."""
    return guest.balance


def completion_progress(completed: int, total: int) -> float:
    """
    Percentage of completed items.

    An empty collection has 0% progress. This is a policy, not a
    mathematical result, and callers rely on it.
    """
    if total <= 0:
        return 0.0
    return 100.0 * completed / total


def sum_items(items: Iterable[LineItem]) -> ItemSums:
    """Sum cost, deposit and paid and count completed items in one pass."""
    cost = deposit = paid = ZERO
    completed = count = 0
    for item in items:
        cost += item.cost
        deposit += item.deposit
        paid += item.paid
        if item.completed:
            completed += 1
        count += 1
    return ItemSums(
        cost=cost,
        deposit=deposit,
        paid=paid,
        completed=completed,
        count=count,
    )


def sum_guests(guests: Iterable[Guest]) -> GuestSums:
    """Sum dues and payments and count confirmed guests in one pass."""
    amount_due = amount_paid = ZERO
    confirmed = count = 0
    for guest in guests:
        amount_due += guest.amount_due
        amount_paid += guest.amount_paid
        if guest.confirmed:
            confirmed += 1
        count += 1
    return GuestSums(
        amount_due=amount_due,
        amount_paid=amount_paid,
        confirmed=confirmed,
        count=count,
    )


# =============================================================================
# CATEGORY LEVEL
# =============================================================================

def _category_key(category_id) -> str:
    return str(getattr(category_id, "value", category_id))


def items_in_category(category_id: str, items: Iterable[LineItem]) -> list[LineItem]:
    """
    Items of one category in display order.

    Sorted by `order`; ties keep their original relative position.
    """
    key = _category_key(category_id)
    matching = [item for item in items if item.category_id == key]
    return sorted(matching, key=lambda item: item.order)


def category_totals(category_id: str, items: Iterable[LineItem]) -> CategoryTotals:
    """Totals and progress for the items of a single category."""
    key = _category_key(category_id)
    sums = sum_items(item for item in items if item.category_id == key)
    return CategoryTotals(
        category_id=key,
        total_cost=sums.cost,
        total_deposit=sums.deposit,
        total_paid=sums.paid,
        total_due=sums.cost - sums.deposit - sums.paid,
        progress=completion_progress(sums.completed, sums.count),
    )


# =============================================================================
# OVERALL
# =============================================================================

def overall_totals(
    items: Iterable[LineItem],
    guests: Iterable[Guest],
) -> OverallTotals:
    """
    Totals across the whole item collection and the whole guest list.

    Progress counts items only - guests have no notion of "completed".
    """
    item_sums = sum_items(items)
    guest_sums = sum_guests(guests)

    total_estimated = item_sums.cost + guest_sums.amount_due
    total_paid_overall = item_sums.deposit + item_sums.paid + guest_sums.amount_paid

    return OverallTotals(
        total_estimated=total_estimated,
        total_paid_overall=total_paid_overall,
        total_pending=total_estimated - total_paid_overall,
        progress=completion_progress(item_sums.completed, item_sums.count),
        completed_items=item_sums.completed,
        total_items=item_sums.count,
    )


def payment_split(totals: OverallTotals) -> list[SplitSlice]:
    """The paid/pending split behind the dashboard chart."""
    return [
        SplitSlice(label=PAID_LABEL, value=totals.total_paid_overall),
        SplitSlice(label=PENDING_LABEL, value=totals.total_pending),
    ]


# =============================================================================
# GUESTS
# =============================================================================

def guest_summary(guests: Iterable[Guest]) -> GuestSummary:
    sums = sum_guests(guests)
    return GuestSummary(
        total_guests=sums.count,
        confirmed_guests=sums.confirmed,
        total_due=sums.amount_due,
        total_paid=sums.amount_paid,
        total_pending=sums.amount_due - sums.amount_paid,
    )


# =============================================================================
# REPORTING
# =============================================================================

def category_breakdown(
    items: Iterable[LineItem],
    guests: Iterable[Guest],
    categories: Sequence[Category] = CATEGORIES,
) -> list[BreakdownRow]:
    """
    One row per configured category, then one row for all guests.

    Rows follow the configured category order exactly. This list is
    the contract any table or chart renders from. items is read once
    per category, so one-shot iterables are materialized first.
    """
    items = tuple(items)
    rows = []
    for category in categories:
        totals = category_totals(category.id, items)
        rows.append(BreakdownRow(
            label=category.name,
            category_id=totals.category_id,
            estimated=totals.total_cost,
            paid_so_far=totals.total_deposit + totals.total_paid,
            pending=totals.total_due,
        ))

    guest_sums = sum_guests(guests)
    rows.append(BreakdownRow(
        label=GUEST_ROW_LABEL,
        category_id=None,
        estimated=guest_sums.amount_due,
        paid_so_far=guest_sums.amount_paid,
        pending=guest_sums.amount_due - guest_sums.amount_paid,
    ))
    return rows
