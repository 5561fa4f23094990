import pytest

from models.transaction import Transaction
from services.report_service import ReportService, category_totals
from utils.constants import CATEGORIES, CATEGORY_COLORS


def _tx(amount: float, category: str) -> Transaction:
    return Transaction(id=f"{category}-{amount}", amount=amount, category=category, date="2024-01-01")


class TestCategoryTotals:
    """Tests for per-category aggregation."""

    def test_empty_has_every_category_at_zero(self):
        """Test that all four categories appear even with no data."""
        assert category_totals([]) == {"Food": 0.0, "Transport": 0.0, "Bills": 0.0, "Other": 0.0}

    def test_order_is_fixed(self):
        """Test that categories come back in their fixed order."""
        totals = category_totals([_tx(1.0, "Other"), _tx(2.0, "Food")])

        assert list(totals) == CATEGORIES

    def test_sums_per_category(self):
        """Test summing several transactions per category."""
        totals = category_totals([
            _tx(10.0, "Food"), _tx(5.5, "Food"), _tx(3.0, "Bills"),
        ])

        assert totals == {"Food": 15.5, "Transport": 0.0, "Bills": 3.0, "Other": 0.0}

    def test_cent_sums_are_exact(self):
        """Test that cent amounts do not accumulate float error."""
        totals = category_totals([_tx(0.1, "Food")] * 3)

        assert totals["Food"] == 0.3

    def test_conservation(self):
        """Test that category totals add up to the grand total."""
        transactions = [
            _tx(12.35, "Food"), _tx(0.01, "Transport"), _tx(99.99, "Bills"),
            _tx(7.5, "Other"), _tx(1.1, "Food"), _tx(2.2, "Bills"),
        ]

        totals = category_totals(transactions)

        assert sum(totals.values()) == pytest.approx(sum(t.amount for t in transactions))
        assert sum(totals.values()) == pytest.approx(ReportService().get_grand_total(transactions))


class TestReportService:
    """Tests for the pie chart breakdown."""

    def test_breakdown_keeps_zero_slices(self):
        """Test that zero-total categories stay in the breakdown."""
        breakdown = ReportService().get_category_breakdown([_tx(20.0, "Food")])

        assert [d["category"] for d in breakdown] == CATEGORIES
        assert [d["total"] for d in breakdown] == [20.0, 0.0, 0.0, 0.0]

    def test_breakdown_colors_are_stable_and_distinct(self):
        """Test that each category always gets its own color."""
        first = ReportService().get_category_breakdown([])
        second = ReportService().get_category_breakdown([_tx(5.0, "Bills")])

        colors = [d["color_hex"] for d in first]
        assert colors == [d["color_hex"] for d in second]
        assert colors == [CATEGORY_COLORS[c] for c in CATEGORIES]
        assert len(set(colors)) == len(CATEGORIES)

    def test_grand_total_empty(self):
        """Test the grand total of nothing."""
        assert ReportService().get_grand_total([]) == 0.0

    def test_table_rows_one_per_transaction_in_order(self):
        """Test that every transaction gets a row, newest first, with no cap."""
        transactions = [
            Transaction(id=f"id-{n}", amount=1.0, category="Other", date="2024-01-01")
            for n in range(250)
        ]

        rows = ReportService().get_table_rows(transactions, "USD")

        assert len(rows) == 250
        assert [r["id"] for r in rows] == [t.id for t in transactions]

    def test_table_rows_are_formatted(self):
        """Test display formatting of date and amount."""
        rows = ReportService().get_table_rows(
            [_tx(1234.5, "Food")], "EUR", date_format="DD.MM.YYYY"
        )

        assert rows == [{
            "id": "Food-1234.5",
            "date": "01.01.2024",
            "category": "Food",
            "amount": "1.234,50\u00a0€",
        }]

    def test_table_rows_empty(self):
        """Test that no transactions give no rows (the table shows its placeholder)."""
        assert ReportService().get_table_rows([], "USD") == []
