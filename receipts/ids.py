"""Receipt identifiers."""

import uuid


def new_id() -> str:
    """Random 128-bit identifier (UUID4) in canonical hyphenated form. Thread-safe."""
    return str(uuid.uuid4())
