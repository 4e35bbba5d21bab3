"""Receipt scoring core: models, scoring engine, identifier generation, store."""

from receipts.ids import new_id
from receipts.models import Item, Receipt, ScoreRecord
from receipts.scoring import score, score_breakdown
from receipts.store import ReceiptNotFoundError, ReceiptStore

__all__ = [
    "Item",
    "Receipt",
    "ScoreRecord",
    "ReceiptStore",
    "ReceiptNotFoundError",
    "new_id",
    "score",
    "score_breakdown",
]
