"""Receipt Processor - scores purchase receipts and serves points by receipt id."""

from receipt_api.service import InvalidReceiptError, lookup_points, submit_receipt

__all__ = ["InvalidReceiptError", "lookup_points", "submit_receipt"]
