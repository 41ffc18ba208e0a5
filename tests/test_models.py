"""
Tests for Event Budget

Test strategy:
1. Unit tests for individual components (models, engine, store)
2. Integration tests for the facade with an in-memory or tmp-dir backend
3. No shared state between tests (every test builds its own store)
"""

import pytest
from decimal import Decimal

from pydantic import ValidationError

from event_budget.models.category import (
    CATEGORIES,
    Category,
    CategoryId,
    get_category,
    is_known_category,
)
from event_budget.models.records import Guest, LineItem
from event_budget.models.summary import BreakdownRow, CategoryTotals
from event_budget.models.views import ExportDocument


class TestLineItemModel:
    """Tests for the LineItem model."""

    def test_line_item_creation(self):
        """Test LineItem model creation with defaults."""
        item = LineItem(id="i1", category_id="venue", name="Hall", cost=1000)
        assert item.cost == Decimal("1000")
        assert item.deposit == Decimal("0")
        assert item.paid == Decimal("0")
        assert item.completed is False
        assert item.notes == ""
        assert item.order == 0

    def test_line_item_strips_whitespace(self):
        """Test that whitespace is stripped from the name."""
        item = LineItem(id="i1", category_id="venue", name="  Hall  ")
        assert item.name == "Hall"

    def test_line_item_keeps_notes_verbatim(self):
        """Test that notes keep indentation and trailing newlines."""
        notes = "  - call florist\n  - confirm menu\n"
        item = LineItem(id="i1", category_id="venue", notes=notes)
        assert item.notes == notes
        assert LineItem.model_validate(item.model_dump(by_alias=True)).notes == notes

    def test_line_item_free_text_has_no_length_limit(self):
        item = LineItem(id="i1", category_id="venue", name="H" * 500, notes="n" * 10000)
        assert len(item.name) == 500
        assert len(item.notes) == 10000

    def test_line_item_rejects_negative_amounts(self):
        """Test that negative cost, deposit and paid are rejected."""
        for field in ("cost", "deposit", "paid"):
            with pytest.raises(ValidationError):
                LineItem(id="i1", category_id="venue", **{field: Decimal("-1")})

    def test_line_item_is_frozen(self):
        """Test that records cannot be mutated in place."""
        item = LineItem(id="i1", category_id="venue")
        with pytest.raises(ValidationError):
            item.cost = Decimal("5")

    def test_line_item_balance_can_be_negative(self):
        """Test balance = cost - deposit - paid, including overpayment."""
        item = LineItem(id="i1", category_id="venue", cost=100, deposit=80, paid=50)
        assert item.balance == Decimal("-30")

    def test_line_item_accepts_camel_case_and_legacy_keys(self):
        """Test loading from persisted camelCase and legacy sectionId keys."""
        current = LineItem.model_validate({"id": "i1", "categoryId": "attire"})
        legacy = LineItem.model_validate({"id": "i2", "sectionId": "tasks"})
        assert current.category_id == "attire"
        assert legacy.category_id == "tasks"

    def test_line_item_json_shape(self):
        """Test the persisted shape uses camelCase keys and JSON numbers."""
        item = LineItem(
            id="i1",
            category_id="venue",
            name="Hall",
            cost=Decimal("1000"),
            deposit=Decimal("200.50"),
            completed=True,
            order=2,
        )
        data = item.model_dump(mode="json", by_alias=True)
        assert data == {
            "id": "i1",
            "categoryId": "venue",
            "name": "Hall",
            "cost": 1000,
            "deposit": 200.5,
            "paid": 0,
            "completed": True,
            "notes": "",
            "order": 2,
        }

    def test_line_item_unknown_category_is_representable(self):
        """Test that an item may reference a category we do not know."""
        item = LineItem(id="i1", category_id="honeymoon", cost=10)
        assert item.category_id == "honeymoon"


class TestGuestModel:
    """Tests for the Guest model."""

    def test_guest_creation(self):
        """Test Guest model creation with defaults."""
        guest = Guest(id="g1", name="Ana", amount_due=100)
        assert guest.confirmed is False
        assert guest.amount_paid == Decimal("0")
        assert guest.table == ""
        assert guest.relation == ""

    def test_guest_free_text_has_no_length_limit(self):
        """Test long names, tables, relations and notes are accepted as-is."""
        guest = Guest(
            id="g1",
            name="A" * 300,
            table="T" * 150,
            relation="R" * 150,
            notes=" n" * 2000,
        )
        assert len(guest.table) == 150
        assert len(guest.relation) == 150
        assert guest.notes == " n" * 2000

    def test_guest_rejects_negative_amounts(self):
        """Test that negative dues and payments are rejected."""
        with pytest.raises(ValidationError):
            Guest(id="g1", amount_due=-1)
        with pytest.raises(ValidationError):
            Guest(id="g1", amount_paid=-1)

    def test_guest_balance(self):
        """Test balance = amount_due - amount_paid."""
        assert Guest(id="g1", amount_due=50, amount_paid=20).balance == Decimal("30")
        assert Guest(id="g1", amount_due=50, amount_paid=70).balance == Decimal("-20")

    def test_guest_aliases(self):
        """Test camelCase aliases for the amount fields."""
        guest = Guest.model_validate({"id": "g1", "amountDue": 80, "amountPaid": 30})
        data = guest.model_dump(mode="json", by_alias=True)
        assert data["amountDue"] == 80
        assert data["amountPaid"] == 30
        assert "amount_due" not in data


class TestCategories:
    """Tests for the fixed category configuration."""

    def test_category_order(self):
        """Test categories are configured in canonical order."""
        assert [c.id.value for c in CATEGORIES] == [
            "civil", "religious", "venue", "attire",
            "vendors", "souvenirs", "transport", "tasks",
        ]

    def test_enum_order_matches_configuration(self):
        """Test the enum and the configured list agree."""
        assert [c.id for c in CATEGORIES] == list(CategoryId)

    def test_get_category(self):
        """Test lookup by string and by enum member."""
        assert get_category("venue").id == CategoryId.VENUE
        assert get_category(CategoryId.TASKS).id == CategoryId.TASKS
        assert get_category("honeymoon") is None

    def test_is_known_category(self):
        assert is_known_category("civil") is True
        assert is_known_category("") is False

    def test_category_is_frozen(self):
        """Test configured categories cannot be edited."""
        with pytest.raises(ValidationError):
            CATEGORIES[0].name = "Renamed"

    def test_category_requires_known_id(self):
        with pytest.raises(ValidationError):
            Category(id="honeymoon", name="Honeymoon")


class TestSummaryModels:
    """Tests for derived summary models."""

    def test_category_totals_aliases(self):
        """Test summaries serialize with camelCase keys."""
        totals = CategoryTotals(
            category_id="venue",
            total_cost=Decimal("1500"),
            total_deposit=Decimal("200"),
            total_paid=Decimal("300"),
            total_due=Decimal("1000"),
            progress=50.0,
        )
        data = totals.model_dump(mode="json", by_alias=True)
        assert data["totalCost"] == 1500
        assert data["totalDue"] == 1000
        assert data["progress"] == 50.0

    def test_breakdown_guest_row(self):
        row = BreakdownRow(
            label="Guests",
            estimated=Decimal("10"),
            paid_so_far=Decimal("5"),
            pending=Decimal("5"),
        )
        assert row.is_guest_row is True

    def test_export_document_keys(self):
        """Test the export document top-level keys."""
        document = ExportDocument()
        data = document.model_dump(mode="json", by_alias=True)
        assert set(data) == {"items", "guests", "exportDate"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
