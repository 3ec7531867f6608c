# core/session.py
# One operator session: saved quotes + the shared shipping value. In memory only.

from __future__ import annotations

import itertools
import logging
import math
from typing import Optional

from . import rates, rules
from .calculator import (
    compute_benefit_split,
    compute_combined_total,
    compute_no_shipping_total,
    compute_remaining_shipping,
    included_fee_totals,
)
from .config import settings
from .messages import format_multi_message
from .models import BenefitSplit, SavedQuote

logger = logging.getLogger(__name__)


class QuoteSession:
    def __init__(
        self,
        shipping: Optional[float] = None,
        fee_per_quote: float = rates.INCLUDED_FEE_PER_QUOTE,
    ) -> None:
        if shipping is None:
            shipping = settings.DEFAULT_SHIPPING
        self.shipping = rules.normalize_amount(shipping)
        self.fee_per_quote = rules.normalize_amount(fee_per_quote)
        self._quotes: list[SavedQuote] = []
        self._ids = itertools.count(1)

    @property
    def quotes(self) -> tuple[SavedQuote, ...]:
        return tuple(self._quotes)

    def __len__(self) -> int:
        return len(self._quotes)

    def set_shipping(self, shipping: float) -> float:
        self.shipping = rules.normalize_amount(shipping)
        return self.shipping

    def save_quote(
        self,
        client_name: str,
        size: int,
        quantity: int,
        finish: str,
        shipping: Optional[float] = None,
    ) -> SavedQuote:
        """Snapshot the current inputs with the included fee and append it.

        The saved total never uses the real shipping; passing `shipping`
        only updates the session's shared value used when combining.
        """
        if shipping is not None:
            self.set_shipping(shipping)

        size = rules.normalize_size(size)
        quantity = rules.normalize_quantity(quantity)
        totals = included_fee_totals(quantity, size, finish, self.fee_per_quote)

        quote = SavedQuote(
            id=next(self._ids),
            client_name=(client_name or "").strip(),
            size=size,
            quantity=quantity,
            finish=finish,
            finish_label=rules.finish_label(finish),
            margin_rate=rules.margin_rate(size),
            total_no_shipping_rounded=compute_no_shipping_total(quantity, size, finish),
            total_with_included_rounded=math.ceil(totals.total),
            profit_included=totals.profit,
            iva_included=totals.iva,
            included_fee=self.fee_per_quote,
        )
        self._quotes.append(quote)
        logger.info(
            "Saved quote id=%s size=%s qty=%s finish=%s total=%s",
            quote.id, size, quantity, finish, quote.total_with_included_rounded,
        )
        return quote

    def remove_quote(self, quote_id: int) -> bool:
        before = len(self._quotes)
        self._quotes = [q for q in self._quotes if q.id != quote_id]
        removed = len(self._quotes) < before
        if removed:
            logger.info("Removed quote id=%s", quote_id)
        else:
            logger.debug("remove_quote: no quote with id=%s", quote_id)
        return removed

    def clear(self) -> None:
        self._quotes.clear()
        logger.info("Cleared saved quotes")

    def combined_total(self) -> int:
        totals = [q.total_with_included_rounded for q in self._quotes]
        return compute_combined_total(totals, self.shipping, self.fee_per_quote)

    def remaining_shipping(self) -> float:
        return compute_remaining_shipping(len(self._quotes), self.shipping, self.fee_per_quote)

    def combined_split(self) -> BenefitSplit:
        base = sum(q.profit_included + q.iva_included for q in self._quotes)
        return compute_benefit_split(base)

    def multi_message(self) -> str:
        return format_multi_message(self._quotes, self.shipping, self.fee_per_quote)
