from __future__ import annotations

import logging

from fastapi import Body, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional

from core import rates
from core.calculator import (
    compute_combined_total,
    compute_included_fee_total,
    compute_live_quote,
    compute_no_shipping_total,
    compute_remaining_shipping,
)
from core.config import settings
from core.messages import format_single_message
from core.models import BenefitSplit, QuoteBreakdown, QuoteRequest, SavedQuote
from core.rules import normalize_amount
from core.session import QuoteSession

logger = logging.getLogger(__name__)

app = FastAPI(title="Sticker Quote API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# one operator, one session per process
app.state.session = QuoteSession(shipping=settings.DEFAULT_SHIPPING)


def get_session(request: Request) -> QuoteSession:
    return request.app.state.session


# ---- request / response bodies ----

class IncludedFeeRequest(QuoteRequest):
    fee: float = rates.INCLUDED_FEE_PER_QUOTE

    @field_validator("fee", mode="before")
    @classmethod
    def _fee(cls, v: Any) -> float:
        return normalize_amount(v)


class CombinedRequest(BaseModel):
    totals: list[int] = Field(default_factory=list)
    shipping: float = 0.0
    fee_per_quote: float = rates.INCLUDED_FEE_PER_QUOTE

    @field_validator("shipping", "fee_per_quote", mode="before")
    @classmethod
    def _amounts(cls, v: Any) -> float:
        return normalize_amount(v)


class SaveQuoteRequest(QuoteRequest):
    client_name: str = ""
    # missing or null -> keep the session's shared shipping
    shipping: Optional[float] = None

    @field_validator("shipping", mode="before")
    @classmethod
    def _shipping(cls, v: Any) -> Optional[float]:
        return None if v is None else normalize_amount(v)


class ShippingUpdate(BaseModel):
    shipping: float


class TotalResponse(BaseModel):
    total: int


class CombinedResponse(BaseModel):
    total: int
    remaining_shipping: float


class SessionSummary(BaseModel):
    count: int
    shipping: float
    remaining_shipping: float
    combined_total: int
    split: BenefitSplit


class MessageResponse(BaseModel):
    text: str


# ---- stateless pricing ----

@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/finishes")
def finishes() -> dict[str, str]:
    return dict(rates.FINISH_LABELS)


@app.post("/quote", response_model=QuoteBreakdown)
def quote(req: QuoteRequest = Body(...)) -> QuoteBreakdown:
    """Live quote with the real shipping folded into the base."""
    return compute_live_quote(req.quantity, req.size, req.finish, req.shipping)


@app.post("/quote/no-shipping", response_model=TotalResponse)
def quote_no_shipping(req: QuoteRequest = Body(...)) -> TotalResponse:
    return TotalResponse(total=compute_no_shipping_total(req.quantity, req.size, req.finish))


@app.post("/quote/included-fee", response_model=TotalResponse)
def quote_included_fee(req: IncludedFeeRequest = Body(...)) -> TotalResponse:
    return TotalResponse(total=compute_included_fee_total(req.quantity, req.size, req.finish, req.fee))


@app.post("/combined", response_model=CombinedResponse)
def combined(req: CombinedRequest = Body(...)) -> CombinedResponse:
    return CombinedResponse(
        total=compute_combined_total(req.totals, req.shipping, req.fee_per_quote),
        remaining_shipping=compute_remaining_shipping(len(req.totals), req.shipping, req.fee_per_quote),
    )


@app.post("/message/single", response_model=MessageResponse)
def message_single(req: QuoteRequest = Body(...)) -> MessageResponse:
    b = compute_live_quote(req.quantity, req.size, req.finish, req.shipping)
    return MessageResponse(text=format_single_message(b.size, b.quantity, b.finish_label, b.total_rounded, b.shipping))


# ---- session (saved quotes) ----

@app.get("/session/quotes", response_model=list[SavedQuote])
def list_quotes(session: QuoteSession = Depends(get_session)) -> list[SavedQuote]:
    return list(session.quotes)


@app.post("/session/quotes", response_model=SavedQuote, status_code=201)
def save_quote(req: SaveQuoteRequest = Body(...), session: QuoteSession = Depends(get_session)) -> SavedQuote:
    saved = session.save_quote(req.client_name, req.size, req.quantity, req.finish, req.shipping)
    logger.info("API saved quote id=%s (%s in session)", saved.id, len(session))
    return saved


@app.delete("/session/quotes/{quote_id}", status_code=204)
def remove_quote(quote_id: int, session: QuoteSession = Depends(get_session)) -> None:
    if not session.remove_quote(quote_id):
        logger.warning("API remove: no quote with id=%s", quote_id)
        raise HTTPException(status_code=404, detail="quote not found")
    logger.info("API removed quote id=%s", quote_id)


@app.put("/session/shipping", response_model=SessionSummary)
def update_shipping(upd: ShippingUpdate, session: QuoteSession = Depends(get_session)) -> SessionSummary:
    session.set_shipping(upd.shipping)
    logger.info("API shared shipping set to %s", session.shipping)
    return summary(session)


@app.get("/session/summary", response_model=SessionSummary)
def summary(session: QuoteSession = Depends(get_session)) -> SessionSummary:
    return SessionSummary(
        count=len(session),
        shipping=session.shipping,
        remaining_shipping=session.remaining_shipping(),
        combined_total=session.combined_total(),
        split=session.combined_split(),
    )


@app.get("/session/message", response_model=MessageResponse)
def session_message(session: QuoteSession = Depends(get_session)) -> MessageResponse:
    return MessageResponse(text=session.multi_message())
