import customtkinter as ctk
from services.transaction_service import TransactionService
from services.currency_service import CurrencyService
from ui.components.currency_picker import CurrencyPicker
from ui.components.date_picker import DatePickerWidget
from utils.constants import CATEGORIES, DEFAULT_CATEGORY


class TransactionForm(ctk.CTkFrame):
    """Add Transaction card: amount, category, date and display currency.

    Invalid input is ignored without a message. After a successful add the
    amount and date are cleared; category and currency stay as chosen.
    """

    def __init__(
        self,
        master,
        tx_service: TransactionService,
        currency_service: CurrencyService,
        on_currency_changed=None,   # callable(code)
        date_format: str = "YYYY-MM-DD",
        **kwargs,
    ):
        super().__init__(master, fg_color=("gray90", "gray20"), corner_radius=10, **kwargs)
        self._tx_svc = tx_service
        self._currency_svc = currency_service
        self._on_currency_changed = on_currency_changed
        self._date_format = date_format

        self.grid_columnconfigure((0, 1), weight=1)

        ctk.CTkLabel(
            self, text="Add Transaction",
            font=ctk.CTkFont(size=15, weight="bold"), anchor="w",
        ).grid(row=0, column=0, columnspan=2, padx=16, pady=(12, 6), sticky="ew")

        # Amount
        self._label("Amount", row=1, column=0)
        self._amount_entry = ctk.CTkEntry(self, placeholder_text="0.00")
        self._amount_entry.grid(row=2, column=0, padx=(16, 8), pady=(0, 8), sticky="ew")
        self._amount_entry.bind("<Return>", lambda e: self._on_add())

        # Category
        self._label("Category", row=1, column=1)
        self._cat_var = ctk.StringVar(value=DEFAULT_CATEGORY)
        ctk.CTkComboBox(
            self, values=CATEGORIES, variable=self._cat_var, state="readonly",
        ).grid(row=2, column=1, padx=(8, 16), pady=(0, 8), sticky="ew")

        # Date
        self._label("Date", row=3, column=0)
        self._date_picker = DatePickerWidget(self, date_format=date_format)
        self._date_picker.grid(row=4, column=0, columnspan=2, padx=16, pady=(0, 8), sticky="ew")

        # Currency
        self._label("Currency", row=5, column=0)
        self._currency_btn = ctk.CTkButton(
            self, text=self._currency_text(), anchor="w",
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self._open_currency_picker,
        )
        self._currency_btn.grid(row=6, column=0, columnspan=2, padx=16, pady=(0, 8), sticky="ew")

        ctk.CTkButton(self, text="Add", width=110, command=self._on_add).grid(
            row=7, column=0, padx=16, pady=(4, 16), sticky="w"
        )

    def _label(self, text, row, column):
        ctk.CTkLabel(self, text=text, anchor="w").grid(
            row=row, column=column,
            padx=(16, 8) if column == 0 else (8, 16), pady=(4, 0), sticky="ew",
        )

    def _currency_text(self) -> str:
        return f"{self._currency_svc.active}   ▾"

    def _open_currency_picker(self):
        CurrencyPicker(
            self.winfo_toplevel(), self._currency_svc,
            on_select=self._on_currency_picked,
        )

    def _on_currency_picked(self, code: str):
        self._currency_btn.configure(text=self._currency_text())
        if self._on_currency_changed:
            self._on_currency_changed(code)

    def _on_add(self):
        tx = self._tx_svc.add(
            self._amount_entry.get(), self._cat_var.get(), self._date_picker.get()
        )
        if tx is None:
            return
        self._amount_entry.delete(0, "end")
        self._date_picker.clear()
