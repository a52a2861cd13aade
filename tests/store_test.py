"""Receipt store: id minting, lookups, not-found, independence of instances."""

import re

from src.models import Receipt
from src.store import ReceiptStore

UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


def test_add_returns_url_safe_uuid(store, target_payload):
    receipt_id = store.add(Receipt.from_dict(target_payload))
    assert UUID_RE.match(receipt_id)


def test_identical_receipts_get_distinct_ids(store, target_payload):
    receipt = Receipt.from_dict(target_payload)
    first = store.add(receipt)
    second = store.add(receipt)
    assert first != second
    assert store.get(first) == (28, True)
    assert store.get(second) == (28, True)
    assert len(store) == 2


def test_unknown_id_is_not_found_not_zero(store):
    points, found = store.get("00000000-0000-4000-8000-000000000000")
    assert found is False
    assert points == 0


def test_get_is_idempotent(store, corner_market_payload):
    receipt_id = store.add(Receipt.from_dict(corner_market_payload))
    results = [store.get(receipt_id) for _ in range(10)]
    assert results == [(109, True)] * 10
    assert len(store) == 1


def test_stores_are_independent(target_payload):
    a, b = ReceiptStore(), ReceiptStore()
    receipt_id = a.add(Receipt.from_dict(target_payload))
    assert receipt_id in a
    assert receipt_id not in b
    assert b.get(receipt_id) == (0, False)


def test_add_scored_stores_given_points(store):
    receipt_id = store.add_scored(42)
    assert store.get(receipt_id) == (42, True)
