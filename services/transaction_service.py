import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Callable
from models.transaction import Transaction, new_transaction_id
from database.transaction_store import TransactionStore
from utils.constants import CATEGORIES
from utils.date_helpers import parse_date, format_date
from utils.logger import get_logger

logger = get_logger()

_CENT = Decimal("0.01")


def parse_amount(text: str | None) -> Decimal | None:
    """Parse user-entered amount text, returning None unless it is a finite number."""
    if text is None:
        return None
    try:
        value = Decimal(str(text).strip())
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def round_amount(value: Decimal | float | str) -> float:
    """Round to cents, halves away from zero ('12.345' → 12.35).

    Amounts beyond float range come back as inf.
    """
    d = Decimal(str(value))
    if d.adjusted() > 308:
        return float(d)
    with localcontext() as ctx:
        # quantize needs every integer digit plus two cents digits
        ctx.prec = max(ctx.prec, d.adjusted() + 3)
        return float(d.quantize(_CENT, rounding=ROUND_HALF_UP))


class TransactionService:
    """Owns the session's transaction list and mirrors it to the store."""

    def __init__(self, store: TransactionStore):
        self._store = store
        self._transactions: list[Transaction] = []
        self._listeners: list[Callable[[], None]] = []

    @property
    def transactions(self) -> list[Transaction]:
        """Newest first."""
        return list(self._transactions)

    @property
    def count(self) -> int:
        return len(self._transactions)

    def load(self) -> list[Transaction]:
        self._transactions = self._store.load()
        return self.transactions

    def add_listener(self, callback: Callable[[], None]):
        self._listeners.append(callback)

    def add(self, amount_text: str, category: str, date: str | None) -> Transaction | None:
        """Record a new expense from raw form input.

        Returns None, leaving the list untouched, when the amount is not a
        positive number, the date is missing or invalid, or the category is
        unknown.
        """
        amount = parse_amount(amount_text)
        if amount is None or amount <= 0:
            logger.debug(f"Rejected amount {amount_text!r}")
            return None
        rounded = round_amount(amount)
        if not math.isfinite(rounded) or rounded <= 0:
            logger.debug(f"Rejected amount {amount_text!r}: out of range after rounding")
            return None
        d = parse_date(date)
        if d is None:
            logger.debug(f"Rejected date {date!r}")
            return None
        if category not in CATEGORIES:
            logger.debug(f"Rejected category {category!r}")
            return None

        tx = Transaction(
            id=new_transaction_id(),
            amount=rounded,
            category=category,
            date=format_date(d),
        )
        self._transactions.insert(0, tx)
        logger.info(f"Added {tx.category} expense of {tx.amount:.2f} on {tx.date}")
        self._commit()
        return tx

    def delete(self, tx_id: str) -> bool:
        """Remove the transaction with this id. Unknown ids are a no-op."""
        remaining = [tx for tx in self._transactions if tx.id != tx_id]
        if len(remaining) == len(self._transactions):
            return False
        self._transactions = remaining
        logger.info(f"Deleted transaction {tx_id}")
        self._commit()
        return True

    def _commit(self):
        self._store.save(self._transactions)
        for callback in self._listeners:
            callback()
