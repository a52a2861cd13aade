"""Best-effort parsing of numeric receipt fields. Failures return None, never raise."""

import math
import re

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_int(s: str) -> int | None:
    """Parse a base-10 integer. No whitespace, no digit separators."""
    if not isinstance(s, str) or not _INT_RE.fullmatch(s):
        return None
    return int(s)


def parse_float(s: str) -> float | None:
    """Parse a decimal amount. Rejects whitespace, separators, nan and inf."""
    if not isinstance(s, str) or not _FLOAT_RE.fullmatch(s):
        return None
    value = float(s)
    if not math.isfinite(value):
        return None
    return value


def split_exact(s: str, sep: str, parts: int) -> list[str] | None:
    """Split on sep; None unless there are exactly `parts` segments."""
    segments = s.split(sep)
    if len(segments) != parts:
        return None
    return segments
