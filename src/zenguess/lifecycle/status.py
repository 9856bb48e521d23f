"""Effective market status derived from stored status and the clock."""

from __future__ import annotations

from datetime import datetime, timezone

from zenguess.models.market import Market, MarketStatus, as_utc


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def derive_status(market: Market, now: datetime | None = None) -> MarketStatus:
    """resolved is terminal; otherwise closed once now reaches end_time, else open."""
    if market.status is MarketStatus.RESOLVED:
        return MarketStatus.RESOLVED
    now = as_utc(now) if now is not None else utc_now()
    if now >= market.end_time:
        return MarketStatus.CLOSED
    return MarketStatus.OPEN


def with_derived_status(market: Market, now: datetime | None = None) -> Market:
    """Deep copy of market whose status field carries the derived value."""
    return market.model_copy(update={"status": derive_status(market, now)}, deep=True)
