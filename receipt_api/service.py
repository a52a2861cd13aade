"""Boundary orchestration between the HTTP layer and the scoring core."""

import logging

import jsonschema

from receipt_api.audit import audit_log, log_scoring
from src.models import Receipt
from src.scoring import score_breakdown
from src.store import ReceiptStore
from src.validation import format_error_path, validate_receipt

log = logging.getLogger("receipt_api.service")

NOT_FOUND_MESSAGE = "Receipt not found"


class InvalidReceiptError(ValueError):
    """Raised when a payload does not decode into a Receipt."""


def decode_receipt(payload) -> Receipt:
    """Validate payload against the receipt schema and build a Receipt."""
    try:
        validate_receipt(payload)
    except jsonschema.ValidationError as e:
        raise InvalidReceiptError(f"Invalid receipt: {format_error_path(e)}: {e.message}") from e
    return Receipt.from_dict(payload)


def submit_receipt(store: ReceiptStore, payload) -> str:
    """
    Decode, score and store a receipt payload. Returns the new receipt id.
    Raises InvalidReceiptError before the store is touched if decoding fails.
    """
    try:
        receipt = decode_receipt(payload)
    except InvalidReceiptError as e:
        audit_log(action="process", status="rejected", error=str(e))
        log.warning("Receipt rejected: %s", e)
        raise

    breakdown = score_breakdown(receipt)
    points = sum(breakdown.values())
    receipt_id = store.add_scored(points)

    audit_log(
        action="process",
        status="success",
        receipt_id=receipt_id,
        points=points,
        extra={"retailer": receipt.retailer, "item_count": len(receipt.items)},
    )
    log_scoring(receipt_id=receipt_id, receipt=receipt.to_dict(), points=points, breakdown=breakdown)
    log.info("Receipt processed: id=%s points=%d", receipt_id, points)
    log.debug("Score breakdown for %s: %s", receipt_id, breakdown)
    return receipt_id


def lookup_points(store: ReceiptStore, receipt_id: str) -> tuple[int, bool]:
    """Return (points, found) for a receipt id, recording the lookup in the audit log."""
    points, found = store.get(receipt_id)
    if found:
        audit_log(action="points", status="success", receipt_id=receipt_id, points=points)
    else:
        audit_log(action="points", status="not_found", receipt_id=receipt_id)
        log.info("Points lookup for unknown receipt id=%s", receipt_id)
    return points, found
