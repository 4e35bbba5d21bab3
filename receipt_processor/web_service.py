"""Web app service layer: decode, score, store and look up receipts."""

import logging

from receipts import Receipt, ReceiptStore, ScoreRecord
from receipts.scoring import score_breakdown

log = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "No receipt found for that ID."
INVALID_RECEIPT_MESSAGE = "The receipt is invalid."


def score_receipt(receipt: Receipt) -> ScoreRecord:
    """Score a receipt and wrap it in an immutable record."""
    breakdown = score_breakdown(receipt)
    points = sum(breakdown.values())
    log.debug("Scored receipt retailer=%r points=%d breakdown=%s", receipt.retailer, points, breakdown)
    return ScoreRecord(receipt=receipt, points=points)


def process_receipt(store: ReceiptStore, payload: dict) -> tuple[str, ScoreRecord]:
    """
    Validate a receipt payload, score it and store it.
    Returns (receipt_id, record). Raises InvalidReceiptError for a malformed payload.
    """
    receipt = Receipt.from_payload(payload)
    record = score_receipt(receipt)
    receipt_id = store.submit(record)
    return receipt_id, record


def get_points(store: ReceiptStore, receipt_id: str) -> int:
    """Points for a stored receipt. Raises ReceiptNotFoundError if the id is unknown."""
    return store.lookup(receipt_id).points
