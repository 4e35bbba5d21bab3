"""Schema validation for incoming receipt payloads."""

import json
from functools import lru_cache
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


class InvalidReceiptError(ValueError):
    """Raised when a receipt payload does not match the receipt schema."""


@lru_cache(maxsize=None)
def _load_schema(name: str) -> dict:
    path = SCHEMAS_DIR / f"{name}.schema.json"
    return json.loads(path.read_text(encoding="utf-8"))


def validate_receipt_payload(data) -> None:
    """
    Validate a decoded receipt payload against the receipt schema.
    Only structure and types are checked; date, time and amount formats are left
    to the scoring rules. Raises InvalidReceiptError if invalid.
    """
    schema = _load_schema("receipt")
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise InvalidReceiptError(f"{where}: {e.message}") from e
