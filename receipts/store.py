"""In-memory, thread-safe receipt store. Write-once, read-many; volatile."""

import threading
from typing import Callable

from receipts.ids import new_id
from receipts.models import ScoreRecord


class ReceiptNotFoundError(LookupError):
    """Raised when no receipt is stored under the requested id."""

    def __init__(self, receipt_id: str):
        super().__init__(f"No receipt found for id {receipt_id!r}")
        self.receipt_id = receipt_id


class ReceiptStore:
    """
    Maps receipt ids to ScoreRecords. One coarse lock serializes every insert and read;
    entries are never updated or removed.
    """

    def __init__(self, id_factory: Callable[[], str] = new_id):
        self._id_factory = id_factory
        self._records: dict[str, ScoreRecord] = {}
        self._lock = threading.Lock()

    def submit(self, record: ScoreRecord) -> str:
        """Store record under a fresh id and return the id. Never overwrites an entry."""
        with self._lock:
            receipt_id = self._id_factory()
            while receipt_id in self._records:
                receipt_id = self._id_factory()
            self._records[receipt_id] = record
        return receipt_id

    def lookup(self, receipt_id: str) -> ScoreRecord:
        """Return the record stored under receipt_id. Raises ReceiptNotFoundError if unknown."""
        with self._lock:
            record = self._records.get(receipt_id)
        if record is None:
            raise ReceiptNotFoundError(receipt_id)
        return record

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
