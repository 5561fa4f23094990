import customtkinter as ctk


_COLUMNS = [("Date", 100), ("Category", 110), ("Amount", 110), ("", 40)]


class TransactionTable(ctk.CTkFrame):
    """Expenses card: one row per transaction, newest first, with delete."""

    def __init__(self, master, on_delete, **kwargs):
        super().__init__(master, fg_color=("gray90", "gray20"), corner_radius=10, **kwargs)
        self._on_delete = on_delete   # callable(tx_id)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        ctk.CTkLabel(
            self, text="Expenses",
            font=ctk.CTkFont(size=15, weight="bold"), anchor="w",
        ).grid(row=0, column=0, padx=16, pady=(12, 6), sticky="ew")

        self._build_header()

        self._scroll = ctk.CTkScrollableFrame(self, fg_color="transparent")
        self._scroll.grid(row=2, column=0, sticky="nsew", padx=8, pady=(0, 12))
        self._scroll.grid_columnconfigure(0, weight=1)

    def _build_header(self):
        hdr = ctk.CTkFrame(self, fg_color=("gray82", "gray22"), corner_radius=0)
        hdr.grid(row=1, column=0, sticky="ew", padx=8)
        for i, (label, width) in enumerate(_COLUMNS):
            ctk.CTkLabel(
                hdr, text=label, width=width,
                anchor="e" if label == "Amount" else "w",
                font=ctk.CTkFont(weight="bold"),
            ).grid(row=0, column=i, padx=4, pady=4, sticky="w")

    def render(self, rows: list[dict]):
        """Draw rows from ReportService.get_table_rows()."""
        for w in self._scroll.winfo_children():
            w.destroy()

        if not rows:
            ctk.CTkLabel(
                self._scroll, text="No transactions yet.", text_color="gray60",
            ).grid(row=0, column=0, pady=20)
            return

        for idx, item in enumerate(rows):
            self._add_row(idx, item)

    def _add_row(self, idx: int, item: dict):
        bg = ("gray92", "gray17") if idx % 2 == 0 else ("gray88", "gray21")
        row = ctk.CTkFrame(self._scroll, fg_color=bg, corner_radius=4)
        row.grid(row=idx, column=0, sticky="ew", pady=1, padx=2)

        ctk.CTkLabel(
            row, text=item["date"],
            width=_COLUMNS[0][1], anchor="w",
        ).grid(row=0, column=0, padx=4, pady=4)
        ctk.CTkLabel(row, text=item["category"], width=_COLUMNS[1][1], anchor="w").grid(
            row=0, column=1, padx=4
        )
        ctk.CTkLabel(
            row, text=item["amount"],
            width=_COLUMNS[2][1], anchor="e",
        ).grid(row=0, column=2, padx=4)
        ctk.CTkButton(
            row, text="🗑", width=32, height=24,
            fg_color="transparent", hover_color=("#fecdd3", "#4c0519"),
            text_color=("gray10", "gray90"),
            command=lambda tx_id=item["id"]: self._on_delete(tx_id),
        ).grid(row=0, column=3, padx=(4, 6))
