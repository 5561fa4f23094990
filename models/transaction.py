import math
import uuid
from dataclasses import dataclass, asdict
from utils.constants import CATEGORIES
from utils.date_helpers import parse_date, format_date


def new_transaction_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Transaction:
    id: str
    amount: float           # > 0, two fraction digits
    category: str           # one of CATEGORIES
    date: str               # 'YYYY-MM-DD'

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data) -> "Transaction":
        """Build a Transaction from its persisted shape.

        Raises ValueError when any field is missing or malformed.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")
        try:
            tx_id, amount = data["id"], data["amount"]
            category, date_str = data["category"], data["date"]
        except KeyError as e:
            raise ValueError(f"Missing field: {e.args[0]}") from None

        if not isinstance(tx_id, str) or not tx_id:
            raise ValueError("Invalid id.")
        # bool is an int subclass; reject it explicitly
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise ValueError("Invalid amount.")
        try:
            amount = float(amount)
        except OverflowError:
            raise ValueError("Amount out of range.") from None
        if not math.isfinite(amount) or amount <= 0:
            raise ValueError("Amount must be positive.")
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category: {category!r}")
        d = parse_date(date_str) if isinstance(date_str, str) else None
        if d is None or format_date(d) != date_str:
            raise ValueError("Invalid date format. Use YYYY-MM-DD.")

        return cls(id=tx_id, amount=amount, category=category, date=date_str)
