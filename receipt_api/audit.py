"""Audit trail and application logging for the receipt service."""

import csv
import json
import logging
import os
import threading
from pathlib import Path

from src.utils import iso_now

DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"

SCORING_CSV_HEADERS = [
    "timestamp",
    "receipt_id",
    "retailer",
    "purchase_date",
    "purchase_time",
    "total",
    "item_count",
    "points",
    "retailer_points",
    "round_dollar_points",
    "quarter_multiple_points",
    "item_pairs_points",
    "item_descriptions_points",
    "odd_day_points",
    "afternoon_points",
]

_write_lock = threading.Lock()


def get_log_dir() -> Path:
    """Log directory: RECEIPT_API_LOG_DIR if set, else logs/ in the project root."""
    configured = os.environ.get("RECEIPT_API_LOG_DIR", "").strip()
    return Path(configured) if configured else DEFAULT_LOG_DIR


def _ensure_log_dir() -> Path:
    log_dir = get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _append_line(path: Path, line: str) -> None:
    with _write_lock:
        with open(path, "a", encoding="utf-8") as f:
            f.write(line + "\n")


def log_scoring(
    *,
    receipt_id: str,
    receipt: dict,
    points: int,
    breakdown: dict[str, int],
):
    """
    Record how a receipt was scored: time, inputs, per-rule contributions.
    Writes to scoring_history.jsonl (append) and scoring_history.csv.
    Append-only; nothing reads these back.
    """
    log_dir = _ensure_log_dir()
    ts = iso_now()
    items = receipt.get("items", [])

    entry = {
        "timestamp": ts,
        "receipt_id": receipt_id,
        "retailer": receipt.get("retailer"),
        "purchase_date": receipt.get("purchaseDate"),
        "purchase_time": receipt.get("purchaseTime"),
        "total": receipt.get("total"),
        "item_count": len(items),
        "points": points,
        "breakdown": breakdown,
    }
    _append_line(log_dir / "scoring_history.jsonl", json.dumps(entry, default=str))

    csv_path = log_dir / "scoring_history.csv"
    row = {k: entry[k] for k in SCORING_CSV_HEADERS if k in entry}
    for rule, rule_points in breakdown.items():
        row[f"{rule}_points"] = rule_points
    with _write_lock:
        csv_exists = csv_path.exists()
        with open(csv_path, "a", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=SCORING_CSV_HEADERS)
            if not csv_exists:
                writer.writeheader()
            writer.writerow(row)


def audit_log(
    action: str,
    status: str,
    *,
    receipt_id: str | None = None,
    points: int | None = None,
    error: str | None = None,
    extra: dict | None = None,
):
    """Append a structured audit entry to the audit log (JSONL)."""
    log_dir = _ensure_log_dir()
    entry = {
        "timestamp": iso_now(),
        "action": action,
        "status": status,
    }
    if receipt_id:
        entry["receipt_id"] = receipt_id
    if points is not None:
        entry["points"] = points
    if error:
        entry["error"] = error
    if extra:
        entry.update(extra)

    _append_line(log_dir / "audit.log", json.dumps(entry, default=str))


def setup_app_logging():
    """Configure application logging to console and file."""
    log_dir = _ensure_log_dir()
    logger = logging.getLogger("receipt_api")
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(ch)

    # File
    fh = logging.FileHandler(log_dir / "app.log", encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(fh)

    return logger
