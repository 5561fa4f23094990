import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.local_storage import LocalStorage
from database.transaction_store import TransactionStore

from services.transaction_service import TransactionService
from services.report_service import ReportService
from services.currency_service import CurrencyService

from ui.app_window import AppWindow
from utils import app_config
from utils.constants import (
    APP_NAME, STORAGE_FILE, LOG_DIR_NAME, LOG_LEVELS, APPEARANCE_MODES, DEFAULT_DATE_FORMAT,
)
from utils.logger import setup_logging


def main():
    # ── Bootstrap: read data folder and preferences from pre-storage config ───
    config = app_config.load_config()
    data_folder = app_config.get_data_folder()
    log_level = str(config.get("log_level", "INFO")).upper()
    if log_level not in LOG_LEVELS:
        log_level = "INFO"
    logger = setup_logging(data_folder / LOG_DIR_NAME, log_level)
    logger.info(f"Starting {APP_NAME} with data folder {data_folder}")

    # ── Storage ──────────────────────────────────────────────────────────────
    storage = LocalStorage(data_folder / STORAGE_FILE)
    store = TransactionStore(storage)

    # ── Services ─────────────────────────────────────────────────────────────
    tx_svc = TransactionService(store)
    tx_svc.load()
    report_svc = ReportService()
    currency_svc = CurrencyService(
        initial=config.get("currency"),
        on_change=lambda code: app_config.set_setting("currency", code),
    )

    # ── Appearance ───────────────────────────────────────────────────────────
    appearance = config.get("appearance_mode", "system")
    ctk.set_appearance_mode(appearance if appearance in APPEARANCE_MODES else "system")
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        tx_service=tx_svc,
        report_service=report_svc,
        currency_service=currency_svc,
        date_format=config.get("date_format", DEFAULT_DATE_FORMAT),
    )
    app.mainloop()
    logger.info(f"{APP_NAME} closed with {tx_svc.count} transactions")


if __name__ == "__main__":
    main()
