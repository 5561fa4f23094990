from decimal import Decimal
from models.transaction import Transaction
from utils.constants import CATEGORIES, CATEGORY_COLORS
from utils.currency import format_currency
from utils.date_helpers import format_display_date


def category_totals(transactions: list[Transaction]) -> dict[str, float]:
    """Sum amounts per category. Every category is present, in fixed order."""
    sums = {c: Decimal(0) for c in CATEGORIES}
    for tx in transactions:
        if tx.category in sums:
            # Decimal keeps cent sums exact
            sums[tx.category] += Decimal(str(tx.amount))
    return {c: float(total) for c, total in sums.items()}


class ReportService:
    def get_category_breakdown(self, transactions: list[Transaction]) -> list[dict]:
        """Return [{category, color_hex, total}, ...] for the pie chart.

        Zero-total categories stay in the list as zero-size slices.
        """
        return [
            {"category": c, "color_hex": CATEGORY_COLORS[c], "total": total}
            for c, total in category_totals(transactions).items()
        ]

    def get_grand_total(self, transactions: list[Transaction]) -> float:
        return float(sum((Decimal(str(tx.amount)) for tx in transactions), Decimal(0)))

    def get_table_rows(
        self, transactions: list[Transaction], currency: str, date_format: str = "YYYY-MM-DD"
    ) -> list[dict]:
        """Return one display row per transaction, in list order (newest first)."""
        return [
            {
                "id": tx.id,
                "date": format_display_date(tx.date, date_format),
                "category": tx.category,
                "amount": format_currency(tx.amount, currency),
            }
            for tx in transactions
        ]
