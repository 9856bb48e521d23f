"""Trade, Quote and TradeReceipt - execution records and price estimates."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from zenguess.models.market import as_utc


class TradeSide(str, Enum):
    BUY = "buy"
    SELL = "sell"


class Trade(BaseModel):
    """Immutable execution record. outcome_label is a snapshot taken at execution time."""

    model_config = ConfigDict(frozen=True)

    id: str
    market_id: str
    trader_address: str
    outcome_index: int = Field(..., ge=0)
    outcome_label: str
    side: TradeSide
    shares: float = Field(..., gt=0)
    price: float = Field(..., ge=0, le=1)
    total: float = Field(..., ge=0)
    timestamp: datetime
    tx_hash: str

    @field_validator("timestamp")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class Quote(BaseModel):
    """Read-only price estimate for a prospective trade (full precision)."""

    estimated_cost: float
    estimated_shares: float
    fee: float
    average_price: float


class TradeReceipt(BaseModel):
    success: bool = True
    tx_hash: str
    trade: Trade
