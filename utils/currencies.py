"""Static currency tables for the display-currency picker."""

# ISO 4217 code → English name, in picker order
CURRENCY_NAMES = {
    "USD": "US Dollar",
    "EUR": "Euro",
    "JPY": "Japanese Yen",
    "GBP": "British Pound",
    "AUD": "Australian Dollar",
    "CAD": "Canadian Dollar",
    "CHF": "Swiss Franc",
    "CNY": "Chinese Yuan",
    "SEK": "Swedish Krona",
    "NZD": "New Zealand Dollar",
    "MXN": "Mexican Peso",
    "SGD": "Singapore Dollar",
    "HKD": "Hong Kong Dollar",
    "NOK": "Norwegian Krone",
    "KRW": "South Korean Won",
    "TRY": "Turkish Lira",
    "INR": "Indian Rupee",
    "RUB": "Russian Ruble",
    "BRL": "Brazilian Real",
    "ZAR": "South African Rand",
    "PHP": "Philippine Peso",
}

ALL_CURRENCIES = list(CURRENCY_NAMES)

# Shown first in the picker
TOP_CURRENCIES = ["USD", "EUR", "JPY", "GBP", "AUD", "PHP"]

DEFAULT_CURRENCY = "USD"
