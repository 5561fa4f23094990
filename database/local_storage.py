import json
import os
from pathlib import Path
from utils.constants import STORAGE_FILE
from utils.logger import get_logger

logger = get_logger()


class LocalStorage:
    """String key → string value store kept in a single JSON file.

    Every write rewrites the whole file (atomic via .tmp + os.replace()).
    There is no locking; two app instances writing the same file race and the
    last write wins.
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path or STORAGE_FILE)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Storage file {self.path} is unreadable, treating as empty: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Storage file {self.path} does not hold an object, treating as empty")
            return {}
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp, self.path)
        except OSError:
            logger.exception(f"Could not write storage file {self.path}")
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                pass

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)
