"""Utilities for hashing and audit metadata."""

import hashlib
import json
from datetime import datetime, timezone


def hash_text(text: str) -> str:
    """Compute SHA256 hash of text. Deterministic."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def hash_payload(payload: dict) -> str:
    """SHA256 of a JSON payload in canonical form (sorted keys, compact separators)."""
    return hash_text(json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False))


def iso_now() -> str:
    """Current UTC timestamp as ISO string."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
