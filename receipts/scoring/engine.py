"""Deterministic receipt scoring engine. Pure code, no I/O."""

import math
from datetime import time
from decimal import Decimal
from fractions import Fraction

from receipts.models import Receipt
from receipts.scoring.parsing import parse_amount, parse_date, parse_time

ROUND_DOLLAR_SUFFIX = ".00"
ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
DESCRIPTION_LENGTH_FACTOR = 3
DESCRIPTION_PRICE_MULTIPLIER = Fraction(1, 5)
TOTAL_THRESHOLD = Decimal("10.00")
TOTAL_THRESHOLD_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)
AFTERNOON_POINTS = 10


def retailer_name_points(receipt: Receipt) -> int:
    """One point per alphanumeric character in the retailer name."""
    return sum(1 for c in receipt.retailer if c.isalnum())


def round_dollar_points(receipt: Receipt) -> int:
    return ROUND_DOLLAR_POINTS if receipt.total.endswith(ROUND_DOLLAR_SUFFIX) else 0


def quarter_multiple_points(receipt: Receipt) -> int:
    """Total in cents must be a whole number divisible by 25. Exact for any number of digits."""
    total = parse_amount(receipt.total)
    if total is None:
        return 0
    cents = Fraction(total) * 100
    if cents.denominator != 1 or cents.numerator % 25 != 0:
        return 0
    return QUARTER_MULTIPLE_POINTS


def item_pair_points(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def item_description_points(receipt: Receipt) -> int:
    """
    For each item whose trimmed description length is a non-zero multiple of 3,
    add ceil(price * 0.2). Items with an unparseable price add nothing.
    """
    points = 0
    for item in receipt.items:
        desc = item.short_description.strip()
        if not desc or len(desc) % DESCRIPTION_LENGTH_FACTOR != 0:
            continue
        price = parse_amount(item.price)
        if price is None:
            continue
        points += max(math.ceil(Fraction(price) * DESCRIPTION_PRICE_MULTIPLIER), 0)
    return points


def total_threshold_points(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    if total is None or total <= TOTAL_THRESHOLD:
        return 0
    return TOTAL_THRESHOLD_POINTS


def odd_day_points(receipt: Receipt) -> int:
    purchased_on = parse_date(receipt.purchase_date)
    if purchased_on is None or purchased_on.day % 2 == 0:
        return 0
    return ODD_DAY_POINTS


def afternoon_window_points(receipt: Receipt) -> int:
    """Purchases strictly between 14:00 and 16:00."""
    purchased_at = parse_time(receipt.purchase_time)
    if purchased_at is None or not (AFTERNOON_START < purchased_at < AFTERNOON_END):
        return 0
    return AFTERNOON_POINTS


RULES = (
    ("retailer_name", retailer_name_points),
    ("round_dollar", round_dollar_points),
    ("quarter_multiple", quarter_multiple_points),
    ("item_pairs", item_pair_points),
    ("item_descriptions", item_description_points),
    ("total_threshold", total_threshold_points),
    ("odd_day", odd_day_points),
    ("afternoon_window", afternoon_window_points),
)


def score_breakdown(receipt: Receipt) -> dict[str, int]:
    """Points contributed by each rule, keyed by rule name."""
    return {name: rule(receipt) for name, rule in RULES}


def score(receipt: Receipt) -> int:
    """
    Total loyalty points for a receipt.
    Always returns a non-negative int; fields that fail to parse only disqualify their own rule.
    """
    return sum(score_breakdown(receipt).values())
