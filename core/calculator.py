from __future__ import annotations

import logging
import math
from typing import Iterable

from . import rates, rules
from .models import (
    BenefitSplit,
    FixedCostLine,
    QuoteBreakdown,
    QuoteTotals,
    VariableCosts,
)

logger = logging.getLogger(__name__)


def compute_totals(base: float, margin_rate: float, tax_rate: float = rates.IVA_RATE) -> QuoteTotals:
    """base -> profit, subtotal, IVA and the raw (unrounded) total."""
    profit = base * margin_rate
    subtotal = base + profit
    iva = subtotal * tax_rate
    total = subtotal + iva
    return QuoteTotals(profit=profit, subtotal=subtotal, iva=iva, total=total)


def compute_benefit_split(base: float) -> BenefitSplit:
    return BenefitSplit(
        base=base,
        part_a=base * rates.SPLIT_PART_A,
        part_b=base * rates.SPLIT_PART_B,
    )


def operating_cost_without_shipping(quantity: int, size: int, finish: str) -> float:
    """Vinyl + fixed + per-sheet variables + packaging. Shared by every total."""
    quantity = rules.normalize_quantity(quantity)
    size = rules.normalize_size(size)

    sheets = rules.sheets_needed(quantity, size)
    vinyl = sheets * rules.cost_per_sheet(finish)
    fixed = rules.fixed_costs_total()
    variable = rules.variable_costs(sheets)["total"]
    packaging = rules.packaging_cost(quantity)
    return vinyl + fixed + variable + packaging


def compute_no_shipping_total(quantity: int, size: int, finish: str) -> int:
    size = rules.normalize_size(size)
    base = operating_cost_without_shipping(quantity, size, finish)
    totals = compute_totals(base, rules.margin_rate(size))
    return math.ceil(totals.total)


def included_fee_totals(quantity: int, size: int, finish: str, fee: float) -> QuoteTotals:
    size = rules.normalize_size(size)
    base = operating_cost_without_shipping(quantity, size, finish) + rules.normalize_amount(fee)
    return compute_totals(base, rules.margin_rate(size))


def compute_included_fee_total(
    quantity: int,
    size: int,
    finish: str,
    fee: float = rates.INCLUDED_FEE_PER_QUOTE,
) -> int:
    """Total with a flat fee standing in for shipping. This is what gets saved."""
    return math.ceil(included_fee_totals(quantity, size, finish, fee).total)


def compute_live_quote(quantity: int, size: int, finish: str, shipping: float) -> QuoteBreakdown:
    """Quote shown while editing: the real shipping goes into the base."""
    quantity = rules.normalize_quantity(quantity)
    size = rules.normalize_size(size)
    shipping = rules.normalize_amount(shipping)

    per_sheet = rules.stickers_per_sheet(size)
    sheets = rules.sheets_needed(quantity, size)
    sheet_cost = rules.cost_per_sheet(finish)
    variable = rules.variable_costs(sheets)
    packaging = rules.packaging_cost(quantity)

    base = operating_cost_without_shipping(quantity, size, finish) + shipping
    margin = rules.margin_rate(size)
    totals = compute_totals(base, margin)
    total_rounded = math.ceil(totals.total)

    logger.debug(
        "live quote size=%s qty=%s finish=%s shipping=%s -> %s",
        size, quantity, finish, shipping, total_rounded,
    )

    return QuoteBreakdown(
        size=size,
        quantity=quantity,
        finish=finish,
        finish_label=rules.finish_label(finish),
        stickers_per_sheet=per_sheet,
        sheets_needed=sheets,
        cost_per_sheet=sheet_cost,
        vinyl_cost=sheets * sheet_cost,
        fixed_costs=[FixedCostLine(key=c.key, label=c.label, amount=c.amount) for c in rates.FIXED_COSTS],
        fixed_total=rules.fixed_costs_total(),
        variable_costs=VariableCosts(**variable),
        packaging=packaging,
        shipping=shipping,
        operating_cost=base,
        margin_rate=margin,
        profit=totals.profit,
        subtotal=totals.subtotal,
        iva=totals.iva,
        total=totals.total,
        total_rounded=total_rounded,
        price_per_sticker=total_rounded / quantity if quantity > 0 else 0.0,
        split=compute_benefit_split(totals.profit + totals.iva),
    )


# ---------- multi-quote ----------

def compute_remaining_shipping(
    quote_count: int,
    shipping: float,
    fee_per_quote: float = rates.INCLUDED_FEE_PER_QUOTE,
) -> float:
    """Shipping not yet covered by the fee each saved quote already carries."""
    fee = rules.normalize_amount(fee_per_quote)
    return max(0.0, rules.normalize_amount(shipping) - fee * quote_count)


def compute_combined_total(
    totals_with_fee: Iterable[int],
    shipping: float,
    fee_per_quote: float = rates.INCLUDED_FEE_PER_QUOTE,
) -> int:
    # assumes every quote carried the same fee_per_quote
    totals = list(totals_with_fee)
    remainder = compute_remaining_shipping(len(totals), shipping, fee_per_quote)
    return math.ceil(sum(totals) + remainder)
