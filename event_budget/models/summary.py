"""
Summary Models

Derived values produced by the aggregation engine. Each model is returned
whole, so a caller never stitches together sums taken at different times.

None of these are persisted. They are recomputed on every read.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from event_budget.models.records import SignedMoney


SUMMARY_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    alias_generator=to_camel,
)


# =============================================================================
# PER-COLLECTION SUMS - the building blocks every roll-up composes
# =============================================================================

class ItemSums(BaseModel):
    """Raw sums over a collection of line items."""
    model_config = SUMMARY_CONFIG

    cost: SignedMoney = Decimal("0")
    deposit: SignedMoney = Decimal("0")
    paid: SignedMoney = Decimal("0")
    completed: int = Field(default=0, ge=0)
    count: int = Field(default=0, ge=0)


class GuestSums(BaseModel):
    """Raw sums over a collection of guests."""
    model_config = SUMMARY_CONFIG

    amount_due: SignedMoney = Decimal("0")
    amount_paid: SignedMoney = Decimal("0")
    confirmed: int = Field(default=0, ge=0)
    count: int = Field(default=0, ge=0)


# =============================================================================
# ROLL-UPS
# =============================================================================

class CategoryTotals(BaseModel):
    """Totals for the items of one category."""
    model_config = SUMMARY_CONFIG

    category_id: str
    total_cost: SignedMoney
    total_deposit: SignedMoney
    total_paid: SignedMoney
    total_due: SignedMoney
    progress: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Percentage of completed items (0 when empty)"
    )


class OverallTotals(BaseModel):
    """
    Totals across every line item and every guest.

    This is the only summary that mixes the two collections.
    """
    model_config = SUMMARY_CONFIG

    total_estimated: SignedMoney
    total_paid_overall: SignedMoney
    total_pending: SignedMoney
    progress: float = Field(..., ge=0.0, le=100.0)
    completed_items: int = Field(default=0, ge=0)
    total_items: int = Field(default=0, ge=0)


class BreakdownRow(BaseModel):
    """
    One row of the budget report.

    category_id is None for the trailing guest row.
    """
    model_config = SUMMARY_CONFIG

    label: str
    estimated: SignedMoney
    paid_so_far: SignedMoney
    pending: SignedMoney
    category_id: Optional[str] = None

    @property
    def is_guest_row(self) -> bool:
        return self.category_id is None


class GuestSummary(BaseModel):
    """Headline numbers for the guest list."""
    model_config = SUMMARY_CONFIG

    total_guests: int = Field(default=0, ge=0)
    confirmed_guests: int = Field(default=0, ge=0)
    total_due: SignedMoney = Decimal("0")
    total_paid: SignedMoney = Decimal("0")
    total_pending: SignedMoney = Decimal("0")


class SplitSlice(BaseModel):
    """A labelled share of a paid/pending split."""
    model_config = SUMMARY_CONFIG

    label: str
    value: SignedMoney
