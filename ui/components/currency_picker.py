import customtkinter as ctk
from services.currency_service import CurrencyService
from utils.currencies import CURRENCY_NAMES


class CurrencyPicker(ctk.CTkToplevel):
    """Searchable currency list. Picking an entry sets the active display
    currency, calls on_select and closes the popup."""

    def __init__(self, master, currency_service: CurrencyService, on_select=None, **kwargs):
        super().__init__(master, **kwargs)
        self._currency_svc = currency_service
        self._on_select = on_select

        self.title("Select currency")
        self.resizable(False, False)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._search = ctk.CTkEntry(self, placeholder_text="Search currency...", width=260)
        self._search.bind("<KeyRelease>", lambda e: self._load())
        self._search.grid(row=0, column=0, padx=12, pady=(12, 6), sticky="ew")

        self._list = ctk.CTkScrollableFrame(self, width=260, height=300)
        self._list.grid(row=1, column=0, padx=12, pady=(0, 12), sticky="nsew")
        self._list.grid_columnconfigure(0, weight=1)

        self._load()

        self.bind("<Escape>", lambda e: self.destroy())
        self.transient(master)
        self.grab_set()
        self._center()
        self._search.focus_set()

    def _load(self):
        for w in self._list.winfo_children():
            w.destroy()

        sections = self._currency_svc.sections(self._search.get())
        if not sections:
            ctk.CTkLabel(
                self._list, text="No currency found.", text_color="gray60",
            ).grid(row=0, column=0, pady=16)
            return

        row = 0
        for idx, (heading, codes) in enumerate(sections):
            if idx:
                ctk.CTkFrame(self._list, height=1, fg_color=("gray75", "gray30")).grid(
                    row=row, column=0, sticky="ew", padx=4, pady=6
                )
                row += 1
            ctk.CTkLabel(
                self._list, text=heading, anchor="w", text_color="gray60",
                font=ctk.CTkFont(size=11, weight="bold"),
            ).grid(row=row, column=0, sticky="ew", padx=6, pady=(2, 2))
            row += 1
            for code in codes:
                self._add_item(row, code)
                row += 1

    def _add_item(self, row: int, code: str):
        check = "✓" if code == self._currency_svc.active else "  "
        ctk.CTkButton(
            self._list,
            text=f"{code}   {CURRENCY_NAMES.get(code, '')}   {check}",
            anchor="w", height=26,
            fg_color="transparent", hover_color=("gray85", "gray25"),
            text_color=("gray10", "gray90"),
            command=lambda c=code: self._pick(c),
        ).grid(row=row, column=0, sticky="ew", padx=2, pady=1)

    def _pick(self, code: str):
        self._currency_svc.select(code)
        self.destroy()
        if self._on_select:
            self._on_select(code)

    def _center(self):
        self.update_idletasks()
        mw = self.master.winfo_x() + self.master.winfo_width() // 2
        mh = self.master.winfo_y() + self.master.winfo_height() // 2
        w, h = self.winfo_reqwidth(), self.winfo_reqheight()
        self.geometry(f"+{mw - w//2}+{mh - h//2}")
