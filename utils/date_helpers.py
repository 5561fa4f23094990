from datetime import date, datetime
from utils.constants import DATE_FORMAT

_STRFTIME_MAP = {
    "YYYY-MM-DD": "%Y-%m-%d",
    "MM/DD/YYYY": "%m/%d/%Y",
    "DD/MM/YYYY": "%d/%m/%Y",
    "DD.MM.YYYY": "%d.%m.%Y",
}


def parse_date(date_str: str | None) -> date | None:
    """Parse a date string in YYYY-MM-DD format, returning None on failure."""
    if not date_str:
        return None
    for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d"):
        try:
            return datetime.strptime(date_str.strip(), fmt).date()
        except ValueError:
            continue
    return None


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def format_display_date(date_str: str, fmt_key: str = "YYYY-MM-DD") -> str:
    """Convert a YYYY-MM-DD storage string to the user-facing display format."""
    d = parse_date(date_str)
    if d is None:
        return date_str
    return d.strftime(_STRFTIME_MAP.get(fmt_key, DATE_FORMAT))


def parse_display_date(display_str: str, fmt_key: str) -> date | None:
    """Parse a date in the given display format. Returns None on failure.

    Falls back to ISO 8601 parse if the display format doesn't match.
    """
    if not display_str:
        return None
    fmt = _STRFTIME_MAP.get(fmt_key, DATE_FORMAT)
    try:
        return datetime.strptime(display_str.strip(), fmt).date()
    except ValueError:
        return parse_date(display_str)
