"""
Record Models for Event Budget

These are the two kinds of user data the Record Store owns:
1. LineItem - a budgeted expense inside one category
2. Guest - an invitee with an expected contribution

Both models are frozen. The Record Store replaces a record on edit
rather than mutating it, so every snapshot handed to the engine stays
exactly as it was when it was taken.

DESIGN DECISION: Python attributes are snake_case, persisted and
exported field names are camelCase (cost, deposit, paid, amountDue,
amountPaid, ...). Use model_dump(mode="json", by_alias=True) for the
on-disk shape.
"""

from decimal import Decimal
from typing import Annotated, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    StringConstraints,
)
from pydantic.alias_generators import to_camel


def money_to_json(value: Decimal) -> Union[int, float]:
    """Render a Decimal amount as a JSON number."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Amounts entered by the user. Never negative.
Money = Annotated[
    Decimal,
    Field(ge=0),
    PlainSerializer(money_to_json, when_used="json"),
]

# Derived amounts (balances, pending totals). Sign is significant.
SignedMoney = Annotated[
    Decimal,
    PlainSerializer(money_to_json, when_used="json"),
]

# Identifiers and display names. Free text such as notes keeps its
# whitespace and has no length limit.
TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True)]


RECORD_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    alias_generator=to_camel,
)


class LineItem(BaseModel):
    """
    A single budgeted expense belonging to exactly one category.

    category_id is a plain string rather than a CategoryId: an item that
    points at a category we no longer know about still loads, still
    counts towards overall totals, and is simply left out of every
    per-category view.
    """
    model_config = RECORD_CONFIG

    id: TrimmedStr = Field(
        ...,
        min_length=1,
        description="Opaque unique identifier"
    )
    category_id: TrimmedStr = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("categoryId", "sectionId", "category_id"),
        serialization_alias="categoryId",
        description="Category this item belongs to (fixed at creation)"
    )
    name: TrimmedStr = Field(
        default="",
        description="Display name"
    )
    cost: Money = Field(
        default=Decimal("0"),
        description="Total expected cost"
    )
    deposit: Money = Field(
        default=Decimal("0"),
        description="Amount pre-paid when the item was committed"
    )
    paid: Money = Field(
        default=Decimal("0"),
        description="Additional amount paid after the deposit"
    )
    completed: bool = False
    notes: str = ""
    order: int = Field(
        default=0,
        description="Display position within the category"
    )

    @property
    def balance(self) -> Decimal:
        """Amount still owed. Negative means overpaid."""
        return self.cost - self.deposit - self.paid


class Guest(BaseModel):
    """
    A single invitee record.

    Guests are independent of categories and line items. Their dues are
    part of the overall estimate but never of the completion metric.
    """
    model_config = RECORD_CONFIG

    id: TrimmedStr = Field(
        ...,
        min_length=1,
        description="Opaque unique identifier"
    )
    name: TrimmedStr = ""
    confirmed: bool = Field(
        default=False,
        description="Attendance confirmed"
    )
    amount_due: Money = Field(
        default=Decimal("0"),
        description="Expected contribution attributable to this guest"
    )
    amount_paid: Money = Field(
        default=Decimal("0"),
        description="Amount received from this guest so far"
    )
    table: str = Field(
        default="",
        description="Table assignment"
    )
    relation: str = Field(
        default="",
        description="Relation/group tag"
    )
    notes: str = ""

    @property
    def balance(self) -> Decimal:
        """Amount still expected from this guest. Negative means overpaid."""
        return self.amount_due - self.amount_paid
