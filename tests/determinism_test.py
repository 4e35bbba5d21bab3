"""Determinism test: same receipt scored 10x -> identical scores and breakdowns."""

from concurrent.futures import ThreadPoolExecutor

from receipts.scoring import score, score_breakdown


def test_score_determinism(scenario_a, scenario_b):
    """Same inputs -> identical scores across 10 runs."""
    for receipt in (scenario_a, scenario_b):
        results = [score_breakdown(receipt) for _ in range(10)]
        first = results[0]
        for r in results[1:]:
            assert r == first
        assert score(receipt) == sum(first.values())


def test_score_is_thread_safe(scenario_a):
    """Concurrent scoring of one receipt never disagrees."""
    with ThreadPoolExecutor(max_workers=8) as pool:
        scores = set(pool.map(lambda _: score(scenario_a), range(200)))
    assert scores == {33}


def test_score_never_negative(make_receipt):
    receipts = [
        make_receipt(total="-1.00", items=[("abc", "-99.99")] * 3),
        make_receipt(retailer="!!!", total="-0.25"),
        make_receipt(purchase_date="", purchase_time=""),
    ]
    for r in receipts:
        assert score(r) >= 0
