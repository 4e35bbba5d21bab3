"""Identifier generation."""

import re
import uuid
from concurrent.futures import ThreadPoolExecutor

from receipts import new_id

CANONICAL_UUID = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


def test_new_id_is_canonical_uuid4():
    receipt_id = new_id()
    assert CANONICAL_UUID.match(receipt_id)
    assert str(uuid.UUID(receipt_id)) == receipt_id


def test_new_id_unique_across_threads():
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: new_id(), range(2000)))
    assert len(set(ids)) == len(ids)
