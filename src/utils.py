"""Utilities for receipt identifiers and audit metadata."""

import uuid
from datetime import datetime, timezone


def new_receipt_id() -> str:
    """Mint a random (uuid4) receipt id. Canonical hyphenated form is URL-path safe."""
    return str(uuid.uuid4())


def iso_now() -> str:
    """Current UTC timestamp as ISO string."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
