"""Deterministic receipt scoring engine. Pure code, no I/O, no shared state."""

import math
import string

from src.models import Receipt
from src.scoring.parsing import parse_float, parse_int, split_exact

ALNUM = frozenset(string.ascii_letters + string.digits)

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
DESCRIPTION_MULTIPLE = 3
DESCRIPTION_PRICE_MULTIPLIER = 0.2
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16


def retailer_points(receipt: Receipt) -> int:
    """One point per ASCII letter or digit in the retailer name."""
    return sum(1 for c in receipt.retailer if c in ALNUM)


def round_dollar_points(receipt: Receipt) -> int:
    """50 points if the total ends in '.00'. Totals shorter than 3 chars score 0."""
    total = receipt.total
    if len(total) >= 3 and total[-3:] == ".00":
        return ROUND_DOLLAR_POINTS
    return 0


def quarter_multiple_points(receipt: Receipt) -> int:
    """25 points if the total, in whole cents (truncated), is a multiple of 25."""
    total = parse_float(receipt.total)
    if total is None:
        return 0
    scaled = total * 100
    if not math.isfinite(scaled):
        return 0
    cents = int(scaled)
    return QUARTER_MULTIPLE_POINTS if cents % 25 == 0 else 0


def item_pair_points(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def item_description_points(receipt: Receipt) -> int:
    """
    For each item whose trimmed description length in UTF-8 bytes is a
    multiple of 3 (including 0), add ceil(price * 0.2). Unparseable prices add nothing.
    """
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip().encode("utf-8")) % DESCRIPTION_MULTIPLE != 0:
            continue
        price = parse_float(item.price)
        if price is None:
            continue
        points += max(0, math.ceil(price * DESCRIPTION_PRICE_MULTIPLIER))
    return points


def odd_day_points(receipt: Receipt) -> int:
    parts = split_exact(receipt.purchase_date, "-", 3)
    if parts is None:
        return 0
    day = parse_int(parts[2])
    if day is None or day % 2 != 1:
        return 0
    return ODD_DAY_POINTS


def afternoon_points(receipt: Receipt) -> int:
    """10 points if the purchase hour is 14 or 15 (2:00pm up to, not including, 4:00pm)."""
    parts = split_exact(receipt.purchase_time, ":", 2)
    if parts is None:
        return 0
    hour = parse_int(parts[0])
    if hour is None or not AFTERNOON_START_HOUR <= hour < AFTERNOON_END_HOUR:
        return 0
    return AFTERNOON_POINTS


RULES = (
    ("retailer", retailer_points),
    ("round_dollar", round_dollar_points),
    ("quarter_multiple", quarter_multiple_points),
    ("item_pairs", item_pair_points),
    ("item_descriptions", item_description_points),
    ("odd_day", odd_day_points),
    ("afternoon", afternoon_points),
)


def score_breakdown(receipt: Receipt) -> dict[str, int]:
    """Points contributed by each rule, keyed by rule name, in rule order."""
    return {name: rule(receipt) for name, rule in RULES}


def compute_points(receipt: Receipt) -> int:
    """Total points for a receipt. Always >= 0."""
    return sum(score_breakdown(receipt).values())
