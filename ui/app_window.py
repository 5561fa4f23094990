import customtkinter as ctk
from services.transaction_service import TransactionService
from services.report_service import ReportService
from services.currency_service import CurrencyService
from ui.components.transaction_form import TransactionForm
from ui.components.category_chart import CategoryChart
from ui.components.transaction_table import TransactionTable
from utils.constants import APP_NAME, APP_WIDTH, APP_HEIGHT, DEFAULT_DATE_FORMAT


class AppWindow(ctk.CTk):
    """Single screen: add form and category chart on the left, expenses table
    on the right. Every mutation or currency change triggers refresh()."""

    def __init__(
        self,
        tx_service: TransactionService,
        report_service: ReportService,
        currency_service: CurrencyService,
        date_format: str = DEFAULT_DATE_FORMAT,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._tx_svc = tx_service
        self._report_svc = report_service
        self._currency_svc = currency_service
        self._date_format = date_format

        self.title(APP_NAME)
        self.minsize(APP_WIDTH * 3 // 4, APP_HEIGHT * 3 // 4)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure((0, 1), weight=1, uniform="col")
        self.grid_rowconfigure(0, weight=1)

        self._build_left_column()
        self._build_table()

        self._tx_svc.add_listener(self.refresh)
        self.refresh()

    def _build_left_column(self):
        left = ctk.CTkFrame(self, fg_color="transparent")
        left.grid(row=0, column=0, sticky="nsew", padx=(16, 8), pady=16)
        left.grid_columnconfigure(0, weight=1)
        left.grid_rowconfigure(1, weight=1)

        self._form = TransactionForm(
            left,
            tx_service=self._tx_svc,
            currency_service=self._currency_svc,
            on_currency_changed=lambda _code: self.refresh(),
            date_format=self._date_format,
        )
        self._form.grid(row=0, column=0, sticky="ew", pady=(0, 12))

        self._chart = CategoryChart(left)
        self._chart.grid(row=1, column=0, sticky="nsew")

    def _build_table(self):
        self._table = TransactionTable(
            self, on_delete=self._tx_svc.delete,
        )
        self._table.grid(row=0, column=1, sticky="nsew", padx=(8, 16), pady=16)

    # ── Refresh ──────────────────────────────────────────────────────────────
    def refresh(self):
        transactions = self._tx_svc.transactions
        currency = self._currency_svc.active
        self._chart.render(self._report_svc.get_category_breakdown(transactions), currency)
        self._table.render(
            self._report_svc.get_table_rows(transactions, currency, self._date_format)
        )
