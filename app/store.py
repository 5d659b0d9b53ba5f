import logging
import threading
from typing import Dict, List, Optional

from fastapi import Request

from app.schemas import StringResponse

logger = logging.getLogger(__name__)


class StringStore:
    """
    In-memory store of analyzed strings, keyed by the exact value.

    Starts empty and is never persisted; everything is lost on restart.
    Sync endpoints run in a thread pool, so access goes through ``lock``.
    """

    def __init__(self) -> None:
        self._records: Dict[str, StringResponse] = {}
        self.lock = threading.RLock()

    def has(self, value: str) -> bool:
        with self.lock:
            return value in self._records

    def get(self, value: str) -> Optional[StringResponse]:
        with self.lock:
            return self._records.get(value)

    def put(self, record: StringResponse) -> None:
        """Insert a record. Callers check ``has`` first; uniqueness is not re-validated here."""
        with self.lock:
            self._records[record.value] = record

    def delete(self, value: str) -> bool:
        with self.lock:
            return self._records.pop(value, None) is not None

    def values(self) -> List[StringResponse]:
        """Snapshot of all records in insertion order"""
        with self.lock:
            return list(self._records.values())

    def clear(self) -> None:
        with self.lock:
            self._records.clear()
        logger.info("String store cleared")

    def __len__(self) -> int:
        with self.lock:
            return len(self._records)


# ------------------------------------------------------------------------------
# STORE DEPENDENCY
# ------------------------------------------------------------------------------
def get_store(request: Request) -> StringStore:
    """Dependency to provide the application's store."""
    return request.app.state.store
