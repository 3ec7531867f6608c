from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any

from . import rates
from .rules import normalize_amount, normalize_quantity, normalize_size

DEFAULT_FINISH = "vinil_blanco"


class QuoteRequest(BaseModel):
    # out-of-range values are normalised, never rejected
    size: int = 5
    quantity: int = 100
    finish: str = DEFAULT_FINISH
    shipping: float = 159.0

    @field_validator("size", mode="before")
    @classmethod
    def _size(cls, v: Any) -> int:
        return normalize_size(v)

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity(cls, v: Any) -> int:
        return normalize_quantity(v)

    @field_validator("shipping", mode="before")
    @classmethod
    def _shipping(cls, v: Any) -> float:
        return normalize_amount(v)

    @field_validator("finish", mode="before")
    @classmethod
    def _finish(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()


class QuoteTotals(BaseModel):
    profit: float
    subtotal: float
    iva: float
    total: float


class BenefitSplit(BaseModel):
    base: float
    part_a: float
    part_b: float


class VariableCosts(BaseModel):
    ink: float
    cutting: float
    tape: float
    total: float


class FixedCostLine(BaseModel):
    key: str
    label: str
    amount: float


class QuoteBreakdown(BaseModel):
    """Live quote: every intermediate figure plus the rounded price."""

    size: int
    quantity: int
    finish: str
    finish_label: str

    stickers_per_sheet: int
    sheets_needed: int
    cost_per_sheet: float
    vinyl_cost: float

    fixed_costs: list[FixedCostLine]
    fixed_total: float
    variable_costs: VariableCosts
    packaging: float
    shipping: float
    operating_cost: float

    margin_rate: float
    profit: float
    subtotal: float
    iva: float
    total: float
    total_rounded: int
    price_per_sticker: float

    split: BenefitSplit


class SavedQuote(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    client_name: str = ""
    size: int
    quantity: int
    finish: str
    finish_label: str
    margin_rate: float

    total_no_shipping_rounded: int  # reference only
    total_with_included_rounded: int  # used when combining
    profit_included: float
    iva_included: float
    included_fee: float = Field(default=rates.INCLUDED_FEE_PER_QUOTE, ge=0)
