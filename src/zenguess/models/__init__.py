"""Canonical schema (Pydantic) - Market, Trade, ActivityEvent, PortfolioPosition."""

from zenguess.models.activity import ActivityEvent, ActivityType
from zenguess.models.market import (
    PROBABILITY_TOLERANCE,
    Market,
    MarketCategory,
    MarketFilters,
    MarketSort,
    MarketStatus,
    Outcome,
    PricePoint,
)
from zenguess.models.portfolio import ClaimResult, PortfolioPosition, PositionStatus
from zenguess.models.requests import CreateMarketInput, TradeRequest
from zenguess.models.trade import Quote, Trade, TradeReceipt, TradeSide

__all__ = [
    "PROBABILITY_TOLERANCE",
    "Market",
    "MarketCategory",
    "MarketFilters",
    "MarketSort",
    "MarketStatus",
    "Outcome",
    "PricePoint",
    "Trade",
    "TradeSide",
    "TradeReceipt",
    "Quote",
    "ActivityEvent",
    "ActivityType",
    "PortfolioPosition",
    "PositionStatus",
    "ClaimResult",
    "CreateMarketInput",
    "TradeRequest",
]
