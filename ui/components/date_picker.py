import customtkinter as ctk
from tkcalendar import Calendar
import tkinter as tk
from tkinter import ttk
from utils.date_helpers import (
    parse_date, format_date, format_display_date, parse_display_date,
)
from datetime import date


class DatePickerWidget(ctk.CTkFrame):
    """Date entry (in display format) + calendar popup button.

    .get() always returns a YYYY-MM-DD string for storage, or '' when the
    entry is empty or unparseable.
    """

    def __init__(
        self,
        master,
        initial_date: str | None = None,
        date_format: str = "YYYY-MM-DD",
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)

        self._date_format = date_format
        self._popup: ctk.CTkToplevel | None = None

        self._var = tk.StringVar(
            value=format_display_date(initial_date, date_format) if initial_date else ""
        )

        self._entry = ctk.CTkEntry(self, textvariable=self._var)
        self._entry.grid(row=0, column=0, sticky="ew")
        self._entry.bind("<FocusOut>", self._on_focus_out)
        self._entry.bind("<Return>", self._on_focus_out)

        ctk.CTkButton(
            self, text="📅", width=32, command=self._open_popup
        ).grid(row=0, column=1, padx=(4, 0))

    def _parse(self) -> date | None:
        raw = self._var.get().strip()
        if not raw:
            return None
        d = parse_display_date(raw, self._date_format)
        if d is None:
            d = parse_date(raw.replace("/", "-").replace(".", "-"))
        return d

    def get(self) -> str:
        d = self._parse()
        return format_date(d) if d else ""

    def clear(self):
        self._var.set("")
        self._reset_border()

    def _on_focus_out(self, _event=None):
        if not self._var.get().strip():
            self._reset_border()
            return
        d = self._parse()
        if d:
            self._var.set(format_display_date(format_date(d), self._date_format))
            self._reset_border()
        else:
            self._entry.configure(border_color="#e11d48")

    def _reset_border(self):
        self._entry.configure(border_color=("gray65", "gray35"))

    def _open_popup(self):
        if self._popup and self._popup.winfo_exists():
            self._popup.destroy()
            self._popup = None
            return

        popup = ctk.CTkToplevel(self)
        popup.overrideredirect(True)
        popup.resizable(False, False)
        self._popup = popup

        # Theme the calendar to match CTk appearance
        if ctk.get_appearance_mode() == "Dark":
            bg, fg = "#2b2b2b", "#ffffff"
        else:
            bg, fg = "#ffffff", "#000000"
        style = ttk.Style(popup)
        style.theme_use("default")
        style.configure(
            "Calendar.Treeview",
            background=bg, foreground=fg, fieldbackground=bg,
        )

        current = self._parse() or date.today()

        # Calendar always uses yyyy-mm-dd internally; we format the result ourselves
        cal = Calendar(
            popup,
            selectmode="day",
            year=current.year,
            month=current.month,
            day=current.day,
            date_pattern="yyyy-mm-dd",
            background=bg,
            foreground=fg,
            headersbackground=bg,
            headersforeground=fg,
            selectbackground="#6366f1",
            weekendbackground=bg,
            weekendforeground=fg,
            othermonthforeground="gray60",
            bordercolor=bg,
        )
        cal.pack(padx=4, pady=4)
        cal.bind("<<CalendarSelected>>", lambda e: self._on_date_selected(cal, popup))

        # Position below the entry
        self._entry.update_idletasks()
        x = self._entry.winfo_rootx()
        y = self._entry.winfo_rooty() + self._entry.winfo_height() + 2
        popup.geometry(f"+{x}+{y}")

        popup.bind("<FocusOut>", lambda e: self._maybe_close(popup))

    def _on_date_selected(self, cal, popup):
        d = parse_date(cal.get_date())
        if d:
            self._var.set(format_display_date(format_date(d), self._date_format))
        self._reset_border()
        popup.destroy()
        self._popup = None

    def _maybe_close(self, popup):
        try:
            focused = popup.focus_get()
        except (KeyError, tk.TclError):
            # focus_get() fails while a ttk popdown holds focus
            focused = None
        if focused is None or not str(focused).startswith(str(popup)):
            popup.destroy()
            self._popup = None
