"""In-memory receipt store: receipt id -> points, guarded by a single lock."""

import threading

from src.models import Receipt
from src.scoring import compute_points
from src.utils import new_receipt_id


class ReceiptStore:
    """
    Owns the id -> points mapping for the lifetime of the process.
    Construct one per app (or per test); there is no module-level instance.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._points: dict[str, int] = {}

    def add(self, receipt: Receipt) -> str:
        """Score the receipt, mint a fresh id, store the pair. Returns the id."""
        return self.add_scored(compute_points(receipt))

    def add_scored(self, points: int) -> str:
        """Store an already computed score under a fresh id. Returns the id."""
        receipt_id = new_receipt_id()
        with self._lock:
            if receipt_id in self._points:
                raise RuntimeError(f"Receipt id collision: {receipt_id}")
            self._points[receipt_id] = points
        return receipt_id

    def get(self, receipt_id: str) -> tuple[int, bool]:
        """Return (points, found). Points is 0 when the id is unknown."""
        with self._lock:
            if receipt_id not in self._points:
                return 0, False
            return self._points[receipt_id], True

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)

    def __contains__(self, receipt_id: str) -> bool:
        with self._lock:
            return receipt_id in self._points
