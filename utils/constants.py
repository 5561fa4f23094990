APP_NAME = "CoinKeeper"
APP_WIDTH = 1100
APP_HEIGHT = 680

STORAGE_FILE = "storage.json"
STORAGE_KEY = "coinkeeper:transactions"
LOG_DIR_NAME = "logs"

DATE_FORMAT = "%Y-%m-%d"
DEFAULT_DATE_FORMAT = "YYYY-MM-DD"

CATEGORIES = ["Food", "Transport", "Bills", "Other"]
DEFAULT_CATEGORY = "Food"

# Stable slice color per category
CATEGORY_COLORS = {
    "Food":      "#6366f1",
    "Transport": "#22c55e",
    "Bills":     "#f97316",
    "Other":     "#e11d48",
}

APPEARANCE_MODES = ["system", "light", "dark"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
