# core/rules.py
# Production rules: sheets, per-sheet costs, packaging, margin band.
# Everything here normalises its inputs instead of raising.

from __future__ import annotations

import math
from typing import Any

from . import rates


def clamp(n: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, n))


def _as_number(value: Any) -> float | None:
    try:
        n = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(n):
        return None
    return n


def normalize_size(value: Any) -> int:
    """Size in cm, rounded and clamped to 1..10. Garbage -> 1."""
    n = _as_number(value)
    if n is None:
        return rates.MIN_SIZE_CM
    n = clamp(n, rates.MIN_SIZE_CM, rates.MAX_SIZE_CM)
    return int(math.floor(n + 0.5))


def normalize_quantity(value: Any) -> int:
    """Whole stickers, never negative. Garbage -> 0."""
    n = _as_number(value)
    if n is None or n <= 0:
        return 0
    if math.isinf(n):
        return 0
    return int(math.floor(n))


def normalize_amount(value: Any) -> float:
    """Non-negative money amount (shipping, fees). Garbage -> 0."""
    n = _as_number(value)
    if n is None or math.isinf(n) or n < 0:
        return 0.0
    return n


def stickers_per_sheet(size_cm: int) -> int:
    return rates.STICKERS_PER_SHEET.get(size_cm, 0)


def cost_per_sheet(finish: str) -> float:
    return rates.COST_PER_SHEET.get(finish, 0.0)


def finish_label(finish: str) -> str:
    return rates.FINISH_LABELS.get(finish, finish)


def margin_rate(size_cm: int) -> float:
    """46% up to 7 cm, 33% from 8 cm."""
    return rates.MARGIN_SMALL if size_cm <= rates.MARGIN_BAND_LIMIT else rates.MARGIN_LARGE


def sheets_needed(quantity: int, size_cm: int) -> int:
    per = stickers_per_sheet(size_cm)
    if not quantity or not per:
        return 0
    return math.ceil(quantity / per)


def fixed_costs_total() -> float:
    return sum(c.amount for c in rates.FIXED_COSTS)


def variable_costs(sheets: int) -> dict[str, float]:
    """Ink, cutting and tape for the given number of sheets."""
    ink = sheets * rates.INK_RATE
    cutting = sheets * rates.CUTTING_RATE
    tape = sheets * rates.TAPE_RATE
    return {"ink": ink, "cutting": cutting, "tape": tape, "total": ink + cutting + tape}


def packaging_cost(quantity: int) -> float:
    if quantity <= 0:
        return 0.0
    blocks = math.ceil(quantity / rates.PACKAGING_BLOCK)
    return blocks * rates.PACKAGING_UNIT_COST
