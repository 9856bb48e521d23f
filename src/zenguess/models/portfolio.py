"""Per-account positions and settlement results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class PositionStatus(str, Enum):
    OPEN = "open"
    RESOLVED = "resolved"


class PortfolioPosition(BaseModel):
    """Aggregate holding of one account in one outcome of one market."""

    market_id: str
    market_title: str
    outcome_index: int
    outcome: str
    shares: float
    avg_price: float
    current_price: float
    pnl: float
    status: PositionStatus


class ClaimResult(BaseModel):
    success: bool = True
    market_id: str
    account: str
    shares: float = 0.0
    amount: float = 0.0
