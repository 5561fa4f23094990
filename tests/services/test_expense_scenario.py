from services.report_service import ReportService, category_totals
from services.transaction_service import TransactionService


class TestExpenseScenario:
    """End-to-end walk through a session, without the GUI."""

    def test_add_add_delete(self, tx_service, store):
        """Test the add Food, add Transport, delete Food walk-through."""
        food = tx_service.add("20", "Food", "2024-01-01")
        tx_service.add("15", "Transport", "2024-01-02")

        assert tx_service.count == 2
        assert category_totals(tx_service.transactions) == {
            "Food": 20.0, "Transport": 15.0, "Bills": 0.0, "Other": 0.0,
        }

        tx_service.delete(food.id)

        assert tx_service.count == 1
        assert category_totals(tx_service.transactions)["Food"] == 0.0
        assert [t.category for t in tx_service.transactions] == ["Transport"]

        reloaded = TransactionService(store)
        assert reloaded.load() == tx_service.transactions

    def test_refresh_listener_sees_current_breakdown(self, tx_service):
        """Test that a listener can recompute the chart data on each change."""
        report = ReportService()
        seen = []
        tx_service.add_listener(
            lambda: seen.append(report.get_category_breakdown(tx_service.transactions)[0]["total"])
        )

        tx = tx_service.add("9.99", "Food", "2024-05-05")
        tx_service.add("0.01", "Food", "2024-05-06")
        tx_service.delete(tx.id)

        assert seen == [9.99, 10.0, 0.01]
