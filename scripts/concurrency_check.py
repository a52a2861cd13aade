#!/usr/bin/env python3
"""
Concurrency harness: submit the same receipt N times from W threads against one app;
assert every submission got a unique id and every id reads back the expected points.
Exits 0 if consistent, 1 otherwise. Prints a variance report on failure.

Usage: python scripts/concurrency_check.py [--runs 200] [--workers 16] [--receipt samples/target.json]
"""

import argparse
import json
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app import create_app
from src.models import Receipt
from src.scoring import compute_points
from src.store import ReceiptStore

DEFAULT_RUNS = 200
DEFAULT_WORKERS = 16
DEFAULT_RECEIPT = "samples/target.json"


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS)
    parser.add_argument("--receipt", default=DEFAULT_RECEIPT)
    args = parser.parse_args()

    root = Path(__file__).resolve().parent.parent
    receipt_path = root / args.receipt
    if not receipt_path.exists():
        print(f"Error: Receipt file not found: {receipt_path}", file=sys.stderr)
        sys.exit(1)

    payload = json.loads(receipt_path.read_text(encoding="utf-8"))
    expected = compute_points(Receipt.from_dict(payload))

    store = ReceiptStore()
    app = create_app(store)

    def submit(_):
        with app.test_client() as client:
            resp = client.post("/receipts/process", json=payload)
            return resp.status_code, resp.get_json()

    print(f"Submitting {args.runs} receipts from {args.workers} threads (expected points={expected})...")
    with ThreadPoolExecutor(max_workers=args.workers) as pool:
        results = list(pool.map(submit, range(args.runs)))

    variances = []
    ids = []
    for i, (status, body) in enumerate(results, start=1):
        if status != 200:
            variances.append(("status", i, f"{status} {body}"))
            continue
        ids.append(body["id"])

    if len(set(ids)) != len(ids):
        variances.append(("duplicate_ids", 0, f"{len(ids) - len(set(ids))} duplicates"))
    if len(store) != len(set(ids)):
        variances.append(("store_size", 0, f"{len(store)} != {len(set(ids))}"))

    client = app.test_client()
    for receipt_id in ids:
        resp = client.get(f"/receipts/{receipt_id}/points")
        points = (resp.get_json() or {}).get("points")
        if resp.status_code != 200 or points != expected:
            variances.append(("points", receipt_id, f"{resp.status_code} {points} != {expected}"))

    if variances:
        print("\n=== VARIANCE REPORT ===\n")
        print(f"Runs: {args.runs} | Workers: {args.workers}")
        for stage, run, detail in variances[:20]:
            print(f"  {run} - {stage}: {detail}")
        print("\nConcurrency check FAILED.")
        sys.exit(1)
    else:
        print("\nPASS: Concurrency check passed.")
        print(f"  unique_ids: {len(set(ids))}")
        print(f"  store_size: {len(store)}")
        print(f"  points: {expected}")
        sys.exit(0)


if __name__ == "__main__":
    main()
