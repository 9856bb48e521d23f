"""Validated inputs accepted by the gateway's outer callers."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from zenguess.models.market import MarketCategory, as_utc
from zenguess.models.trade import TradeSide

MIN_TRADE_AMOUNT = 1.0
MAX_TRADE_AMOUNT = 1_000_000.0


class CreateMarketInput(BaseModel):
    """Fields needed to open a new market."""

    question: str = Field(..., min_length=10, max_length=200)
    description: str = ""
    category: MarketCategory = MarketCategory.OTHER
    end_time: datetime
    outcomes: list[str] = Field(..., min_length=2, max_length=10)
    initial_liquidity: float = Field(0.0, ge=0, allow_inf_nan=False)
    resolution_source: str = ""
    creator_address: str
    tags: list[str] = Field(default_factory=list)

    @field_validator("end_time")
    @classmethod
    def _end_time_utc(cls, v: datetime) -> datetime:
        return as_utc(v)

    @field_validator("outcomes")
    @classmethod
    def _distinct_labels(cls, v: list[str]) -> list[str]:
        labels = [label.strip() for label in v]
        if any(not label for label in labels):
            raise ValueError("outcome labels must not be blank")
        if len({label.lower() for label in labels}) != len(labels):
            raise ValueError("outcome labels must be unique")
        return labels


class TradeRequest(BaseModel):
    """A trade intent as received from an outer surface, checked before reaching the gateway."""

    market_id: str = Field(..., min_length=1)
    outcome_index: int = Field(..., ge=0)
    amount: float = Field(..., ge=MIN_TRADE_AMOUNT, le=MAX_TRADE_AMOUNT, allow_inf_nan=False)
    side: TradeSide
    slippage: float = Field(1.0, ge=0, le=50, description="Tolerance in percent")
    trader_address: str | None = None
