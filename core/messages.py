# core/messages.py
# Customer-facing text (WhatsApp style). Fixed es-MX / MXN formatting.

from __future__ import annotations

from typing import Sequence

from . import rates
from .calculator import compute_combined_total, compute_remaining_shipping
from .models import SavedQuote

HEADER = "Perfecto, ya tenemos tu cotización:"
FREE_SHIPPING = "Envío gratis 🙌"
NO_QUOTES = "— Sin cotizaciones guardadas —"


def format_currency(x: float) -> str:
    """$1,234.56"""
    return f"${x:,.2f}"


def format_currency_int(x: float) -> str:
    return f"${x:,.0f}"


def format_percent(rate: float) -> str:
    return f"{round(rate * 100)}%"


def quote_line(size_cm: int, quantity: int, finish_label: str, total: int) -> str:
    return f"- {size_cm} cm · {quantity} stickers · {finish_label} — {format_currency_int(total)}"


def format_single_message(
    size_cm: int,
    quantity: int,
    finish_label: str,
    total_rounded: int,
    shipping: float,
) -> str:
    lines = [HEADER, quote_line(size_cm, quantity, finish_label, total_rounded)]
    if shipping <= 0:
        lines.append(FREE_SHIPPING)
    return "\n".join(lines)


def format_multi_message(
    quotes: Sequence[SavedQuote],
    shipping: float,
    fee_per_quote: float = rates.INCLUDED_FEE_PER_QUOTE,
) -> str:
    lines = [HEADER]
    if not quotes:
        lines.append(NO_QUOTES)
        return "\n".join(lines)

    for q in quotes:
        lines.append(quote_line(q.size, q.quantity, q.finish_label, q.total_with_included_rounded))

    totals = [q.total_with_included_rounded for q in quotes]
    combined = compute_combined_total(totals, shipping, fee_per_quote)
    lines.append(f"Total por todo: {format_currency_int(combined)}")
    if compute_remaining_shipping(len(quotes), shipping, fee_per_quote) <= 0:
        lines.append(FREE_SHIPPING)
    return "\n".join(lines)
