import json
from models.transaction import Transaction
from database.local_storage import LocalStorage
from utils.constants import STORAGE_KEY
from utils.logger import get_logger

logger = get_logger()


class TransactionStore:
    """Mirrors the transaction list into one persisted slot.

    The slot holds a JSON array of transaction objects, newest first.
    """

    def __init__(self, storage: LocalStorage, key: str = STORAGE_KEY):
        self._storage = storage
        self._key = key

    def load(self) -> list[Transaction]:
        """Read the slot. Missing, unparseable or malformed data yields []."""
        raw = self._storage.get_item(self._key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"Expected a list, got {type(data).__name__}")
            transactions = [Transaction.from_dict(item) for item in data]
        except (ValueError, RecursionError) as e:
            logger.warning(f"Discarding unreadable transactions in '{self._key}': {e}")
            return []
        logger.debug(f"Loaded {len(transactions)} transactions from '{self._key}'")
        return transactions

    def save(self, transactions: list[Transaction]) -> None:
        """Overwrite the slot with the full list."""
        self._storage.set_item(
            self._key, json.dumps([tx.to_dict() for tx in transactions])
        )
