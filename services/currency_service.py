from typing import Callable
from utils.currencies import ALL_CURRENCIES, TOP_CURRENCIES, CURRENCY_NAMES, DEFAULT_CURRENCY
from utils.logger import get_logger

logger = get_logger()


def _matches(code: str, query: str) -> bool:
    q = query.strip().lower()
    return not q or q in code.lower() or q in CURRENCY_NAMES.get(code, "").lower()


class CurrencyService:
    """Holds the active display currency. Display only: nothing is converted."""

    def __init__(
        self,
        initial: str | None = None,
        on_change: Callable[[str], None] | None = None,
    ):
        self._active = initial if initial in ALL_CURRENCIES else DEFAULT_CURRENCY
        self._on_change = on_change

    @property
    def active(self) -> str:
        return self._active

    def sections(self, query: str = "") -> list[tuple[str, list[str]]]:
        """Return the picker groups filtered by query; empty groups are dropped."""
        top = [c for c in TOP_CURRENCIES if _matches(c, query)]
        rest = [c for c in ALL_CURRENCIES if c not in TOP_CURRENCIES and _matches(c, query)]
        return [
            (heading, codes)
            for heading, codes in (("Top Currencies", top), ("All Currencies", rest))
            if codes
        ]

    def select(self, code: str):
        if code not in ALL_CURRENCIES:
            raise ValueError(f"Unknown currency: {code}")
        if code == self._active:
            return
        self._active = code
        logger.info(f"Display currency set to {code}")
        if self._on_change:
            self._on_change(code)
