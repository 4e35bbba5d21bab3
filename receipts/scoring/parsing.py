"""Lenient field parsers for scoring. Each returns None when the text does not parse."""

import re
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

# Plain signed decimal literal: no exponent, no underscores, no surrounding whitespace.
_AMOUNT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_amount(text: str) -> Decimal | None:
    """Parse a money string such as "35.35" into a Decimal."""
    if not isinstance(text, str) or not _AMOUNT_RE.fullmatch(text):
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def parse_date(text: str) -> date | None:
    """Parse a YYYY-MM-DD purchase date."""
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except (TypeError, ValueError):
        return None


def parse_time(text: str) -> time | None:
    """Parse an HH:MM (24-hour) purchase time."""
    try:
        return datetime.strptime(text, TIME_FORMAT).time()
    except (TypeError, ValueError):
        return None
