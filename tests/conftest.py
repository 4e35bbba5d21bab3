"""Shared fixtures. Logs go to a temporary directory, never the repo."""

import os
import tempfile

os.environ.setdefault("RECEIPT_PROCESSOR_LOG_DIR", tempfile.mkdtemp(prefix="receipt_processor_logs_"))

import copy

import pytest

from receipts import Item, Receipt, ReceiptStore


SCENARIO_A_PAYLOAD = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

SCENARIO_B_PAYLOAD = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [{"shortDescription": "Gatorade", "price": "2.25"}] * 4,
    "total": "9.00",
}


def _make_receipt(
    retailer="",
    purchase_date="2022-01-02",
    purchase_time="09:00",
    items=(),
    total="",
) -> Receipt:
    """Receipt that scores zero on every rule unless a field is overridden."""
    return Receipt(
        retailer=retailer,
        purchase_date=purchase_date,
        purchase_time=purchase_time,
        items=tuple(Item(d, p) for d, p in items),
        total=total,
    )


@pytest.fixture
def make_receipt():
    return _make_receipt


@pytest.fixture
def scenario_a_payload() -> dict:
    return copy.deepcopy(SCENARIO_A_PAYLOAD)


@pytest.fixture
def scenario_a() -> Receipt:
    return Receipt.from_payload(SCENARIO_A_PAYLOAD)


@pytest.fixture
def scenario_b() -> Receipt:
    return Receipt.from_payload(SCENARIO_B_PAYLOAD)


@pytest.fixture
def store() -> ReceiptStore:
    return ReceiptStore()
