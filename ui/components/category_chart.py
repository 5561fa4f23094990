import math
import customtkinter as ctk
import tkinter as tk
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from utils.currency import format_currency


class CategoryChart(ctk.CTkFrame):
    """Spending by Category card: donut chart plus a legend of totals."""

    def __init__(self, master, **kwargs):
        super().__init__(master, fg_color=("gray90", "gray20"), corner_radius=10, **kwargs)

        ctk.CTkLabel(
            self, text="Spending by Category",
            font=ctk.CTkFont(size=15, weight="bold"), anchor="w",
        ).pack(fill="x", padx=16, pady=(12, 0))

        self._fig = Figure(figsize=(3, 3), dpi=80, tight_layout=True)
        self._ax = self._fig.add_subplot(111)
        self._mpl = FigureCanvasTkAgg(self._fig, master=self)
        self._mpl.get_tk_widget().pack(fill="both", expand=True, padx=8, pady=(4, 4))

        self._legend_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._legend_frame.pack(fill="x", padx=16, pady=(0, 12))

    def _style_ax(self):
        is_dark = ctk.get_appearance_mode() == "Dark"
        bg = "#2b2b2b" if is_dark else "#e4e4e4"
        self._fig.patch.set_facecolor(bg)
        self._ax.set_facecolor(bg)

    def render(self, breakdown: list[dict], currency: str):
        """Draw [{category, color_hex, total}, ...]; zero totals stay as empty slices."""
        self._draw_pie(breakdown)

        for w in self._legend_frame.winfo_children():
            w.destroy()
        for item in breakdown:
            row = ctk.CTkFrame(self._legend_frame, fg_color="transparent")
            row.pack(fill="x", pady=1)
            tk.Label(row, bg=item["color_hex"], width=2).pack(side="left", padx=(0, 6))
            ctk.CTkLabel(row, text=item["category"], anchor="w").pack(side="left")
            ctk.CTkLabel(
                row, text=format_currency(item["total"], currency), anchor="e",
            ).pack(side="right")

    def _draw_pie(self, breakdown: list[dict]):
        ax = self._ax
        ax.clear()
        self._style_ax()
        ax.set_axis_off()

        total = sum(d["total"] for d in breakdown)
        if total == 0 or not math.isfinite(total):
            ax.text(0.5, 0.5, "No data", ha="center", va="center",
                    transform=ax.transAxes, color="gray")
            self._mpl.draw_idle()
            return

        ax.pie(
            [d["total"] for d in breakdown],
            colors=[d["color_hex"] for d in breakdown],
            startangle=90,
            counterclock=False,
            wedgeprops={"width": 0.55, "linewidth": 0},
        )
        ax.set_aspect("equal")
        self._mpl.draw_idle()
