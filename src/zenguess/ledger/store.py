"""In-memory ledger: sole owner of markets, trades, activity and claims.

Every public method runs under one re-entrant lock and either applies all of
its changes or none. Reads hand out deep copies.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
from threading import RLock
from typing import TypeVar

import structlog

from zenguess.errors import (
    InvalidOutcomeError,
    InvariantViolationError,
    MarketAlreadyResolvedError,
    MarketNotFoundError,
    MarketNotOpenError,
    MarketNotResolvedError,
    WinningsAlreadyClaimedError,
)
from zenguess.ledger import seed
from zenguess.ledger.ids import new_id, new_tx_hash
from zenguess.lifecycle.status import derive_status, utc_now, with_derived_status
from zenguess.models import (
    PROBABILITY_TOLERANCE,
    ActivityEvent,
    ActivityType,
    ClaimResult,
    CreateMarketInput,
    Market,
    MarketFilters,
    MarketSort,
    MarketStatus,
    Outcome,
    PortfolioPosition,
    PositionStatus,
    Trade,
    TradeSide,
)
from zenguess.models.market import as_utc
from zenguess.pricing.impact import PriceImpactModel, StaticPriceImpact, normalize

log = structlog.get_logger(__name__)

MAX_ACTIVITY_LIMIT = 500
PAYOUT_PER_SHARE = 1.0
MONEY_DECIMALS = 4

T = TypeVar("T", Trade, ActivityEvent)


def _newest_first(items: list[T]) -> list[T]:
    """Sort by timestamp descending; equal timestamps keep later insertions first."""
    ordered = sorted(enumerate(items), key=lambda pair: (pair[1].timestamp, pair[0]), reverse=True)
    return [item for _, item in ordered]


def _sort_markets(markets: list[Market], sort: MarketSort) -> list[Market]:
    if sort is MarketSort.NEWEST:
        return sorted(markets, key=lambda m: m.created_at, reverse=True)
    if sort is MarketSort.ENDING_SOON:
        return sorted(markets, key=lambda m: m.end_time)
    if sort is MarketSort.LIQUIDITY:
        return sorted(markets, key=lambda m: m.liquidity, reverse=True)
    if sort is MarketSort.VOLUME:
        return sorted(markets, key=lambda m: m.volume, reverse=True)
    raise ValueError(f"Unhandled sort: {sort}")


def _matches_query(market: Market, query: str) -> bool:
    return query in market.question.lower() or any(query in tag.lower() for tag in market.tags)


def _usd(amount: float) -> str:
    return f"${amount:,.2f}"


def _trade_event(market: Market, trade: Trade) -> ActivityEvent:
    return ActivityEvent(
        id=new_id("event"),
        type=ActivityType.TRADE,
        market_id=market.id,
        market_title=market.question,
        description=(
            f"{trade.side.value.upper()} {trade.shares:.2f} {trade.outcome_label} "
            f"shares at ${trade.price:.2f}"
        ),
        actor=trade.trader_address,
        timestamp=trade.timestamp,
        tx_hash=trade.tx_hash,
        metadata={
            "outcome_index": trade.outcome_index,
            "shares": trade.shares,
            "total": trade.total,
        },
    )


def _market_created_event(market: Market) -> ActivityEvent:
    return ActivityEvent(
        id=new_id("event"),
        type=ActivityType.MARKET_CREATED,
        market_id=market.id,
        market_title=market.question,
        description=f"New market created with {_usd(market.liquidity)} initial liquidity",
        actor=market.creator_address,
        timestamp=market.created_at,
        tx_hash=new_tx_hash(),
        metadata={"outcomes": len(market.outcomes), "initial_liquidity": market.liquidity},
    )


class LedgerStore:
    """Markets, trade ledger, activity feed and claimed-winnings set for one process."""

    def __init__(
        self,
        price_impact: PriceImpactModel | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.price_impact = price_impact or StaticPriceImpact()
        self._clock = clock or utc_now
        self._lock = RLock()
        self._markets: dict[str, Market] = {}
        self._trades: list[Trade] = []
        self._activity: list[ActivityEvent] = []
        self._trade_ids: set[str] = set()
        self._tx_hashes: set[str] = set()
        self._claims: set[tuple[str, str]] = set()

    @classmethod
    def seeded(
        cls,
        price_impact: PriceImpactModel | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> LedgerStore:
        """Store preloaded with the demo markets, trades and activity feed."""
        store = cls(price_impact=price_impact, clock=clock)
        for market in seed.seed_markets():
            store._markets[market.id] = market
        for trade in seed.seed_trades():
            store._trades.append(trade)
            store._trade_ids.add(trade.id)
            store._tx_hashes.add(trade.tx_hash)
        store._activity.extend(seed.seed_activity())
        store._backfill_activity()
        log.debug("store_seeded", markets=len(store._markets), trades=len(store._trades))
        return store

    @contextmanager
    def transaction(self) -> Iterator[LedgerStore]:
        """Hold the store lock across several calls (quote then commit)."""
        with self._lock:
            yield self

    def now(self) -> datetime:
        return as_utc(self._clock())

    # --- Reads ---

    def list_markets(self, filters: MarketFilters | None = None) -> list[Market]:
        filters = filters or MarketFilters()
        with self._lock:
            now = self.now()
            markets = [with_derived_status(m, now) for m in self._markets.values()]
        if filters.category is not None:
            markets = [m for m in markets if m.category is filters.category]
        if filters.status is not None:
            markets = [m for m in markets if m.status is filters.status]
        query = (filters.query or "").strip().lower()
        if query:
            markets = [m for m in markets if _matches_query(m, query)]
        return _sort_markets(markets, filters.sort)

    def get_market(self, market_id: str) -> Market | None:
        with self._lock:
            market = self._markets.get(market_id)
            if market is None:
                log.debug("market_not_found", market_id=market_id)
                return None
            return with_derived_status(market, self.now())

    def list_trades_by_market(self, market_id: str) -> list[Trade]:
        with self._lock:
            trades = [t for t in self._trades if t.market_id == market_id]
        return [t.model_copy() for t in _newest_first(trades)]

    def list_activity(self, limit: int = 100) -> list[ActivityEvent]:
        limit = max(1, min(MAX_ACTIVITY_LIMIT, int(limit)))
        with self._lock:
            events = list(self._activity)
        return [e.model_copy(deep=True) for e in _newest_first(events)[:limit]]

    def get_portfolio(self, account: str) -> list[PortfolioPosition]:
        """Positions derived from the trade ledger; empty when the account never traded."""
        with self._lock:
            holdings = self._holdings(account)
            positions = []
            for (market_id, outcome_index), (shares, cost) in holdings.items():
                market = self._markets.get(market_id)
                if market is None or shares <= 0:
                    continue
                avg_price = cost / shares
                current = self._mark_price(market, outcome_index)
                label = (
                    market.outcomes[outcome_index].label
                    if outcome_index < len(market.outcomes)
                    else f"Outcome {outcome_index}"
                )
                positions.append(
                    PortfolioPosition(
                        market_id=market_id,
                        market_title=market.question,
                        outcome_index=outcome_index,
                        outcome=label,
                        shares=round(shares, MONEY_DECIMALS),
                        avg_price=round(avg_price, MONEY_DECIMALS),
                        current_price=round(current, MONEY_DECIMALS),
                        pnl=round(shares * (current - avg_price), MONEY_DECIMALS),
                        status=PositionStatus.RESOLVED if market.is_resolved else PositionStatus.OPEN,
                    )
                )
        return positions

    # --- Writes ---

    def create_market(self, data: CreateMarketInput) -> Market:
        with self._lock:
            now = self.now()
            uniform = 1.0 / len(data.outcomes)
            market = Market(
                id=self._unused_market_id(),
                question=data.question,
                description=data.description,
                category=data.category,
                resolution_source=data.resolution_source,
                tags=list(data.tags),
                creator_address=data.creator_address,
                created_at=now,
                end_time=data.end_time,
                outcomes=normalize([Outcome(label=label, probability=uniform) for label in data.outcomes]),
                volume=0.0,
                liquidity=data.initial_liquidity,
                status=MarketStatus.OPEN,
            )
            event = _market_created_event(market)
            self._markets[market.id] = market
            self._activity.append(event)
            log.info("market_created", market_id=market.id, outcomes=len(market.outcomes))
            return with_derived_status(market, now)

    def record_trade(self, trade: Trade) -> Trade:
        """Append trade, add its total to market volume, move prices, append one activity event."""
        with self._lock:
            market = self._markets.get(trade.market_id)
            if market is None:
                raise MarketNotFoundError(trade.market_id)
            if market.is_resolved:
                raise MarketNotOpenError(market.id, MarketStatus.RESOLVED.value)
            if trade.id in self._trade_ids or trade.tx_hash in self._tx_hashes:
                raise InvariantViolationError(f"Duplicate trade {trade.id} / {trade.tx_hash}")
            if not 0 <= trade.outcome_index < len(market.outcomes):
                raise InvalidOutcomeError(market.id, trade.outcome_index)
            if not math.isfinite(trade.total):
                raise InvariantViolationError(f"Non-finite trade total {trade.total}")

            outcomes = self._checked_outcomes(
                self.price_impact.apply(market.outcomes, trade.outcome_index, trade.side, trade.shares)
            )
            event = _trade_event(market, trade)

            self._trades.append(trade)
            self._trade_ids.add(trade.id)
            self._tx_hashes.add(trade.tx_hash)
            market.volume += trade.total
            market.outcomes = outcomes
            self._activity.append(event)
            log.info(
                "trade_recorded",
                market_id=market.id,
                trade_id=trade.id,
                side=trade.side.value,
                shares=trade.shares,
                total=trade.total,
            )
            return trade.model_copy()

    def resolve_market(self, market_id: str, outcome_index: int, actor: str | None = None) -> Market | None:
        """Mark market resolved to outcome_index. None when the market does not exist."""
        with self._lock:
            market = self._markets.get(market_id)
            if market is None:
                log.debug("market_not_found", market_id=market_id)
                return None
            if market.resolved_outcome is not None:
                raise MarketAlreadyResolvedError(market_id, market.resolved_outcome)
            if not 0 <= outcome_index < len(market.outcomes):
                raise InvalidOutcomeError(market_id, outcome_index)

            now = self.now()
            winner = market.outcomes[outcome_index].label
            event = ActivityEvent(
                id=new_id("event"),
                type=ActivityType.MARKET_RESOLVED,
                market_id=market.id,
                market_title=market.question,
                description=f"Market resolved: {winner}",
                actor=actor or market.creator_address,
                timestamp=now,
                tx_hash=new_tx_hash(),
                metadata={"resolved_outcome": outcome_index},
            )
            market.status = MarketStatus.RESOLVED
            market.resolved_outcome = outcome_index
            self._activity.append(event)
            log.info("market_resolved", market_id=market_id, outcome=outcome_index, label=winner)
            return with_derived_status(market, now)

    def claim_winnings(self, market_id: str, account: str) -> ClaimResult:
        """Pay PAYOUT_PER_SHARE per net winning share, once per (market, account)."""
        key = (market_id, account.lower())
        with self._lock:
            market = self._markets.get(market_id)
            if market is None:
                raise MarketNotFoundError(market_id)
            if derive_status(market, self.now()) is not MarketStatus.RESOLVED:
                raise MarketNotResolvedError(market_id)
            if key in self._claims:
                raise WinningsAlreadyClaimedError(market_id, account)

            shares, _ = self._holdings(account).get((market_id, market.resolved_outcome), (0.0, 0.0))
            shares = max(0.0, shares)
            amount = round(shares * PAYOUT_PER_SHARE, MONEY_DECIMALS)
            self._claims.add(key)
            log.info("winnings_claimed", market_id=market_id, account=key[1], shares=shares, amount=amount)
            return ClaimResult(
                market_id=market_id,
                account=account,
                shares=round(shares, MONEY_DECIMALS),
                amount=amount,
            )

    def has_claimed(self, market_id: str, account: str) -> bool:
        with self._lock:
            return (market_id, account.lower()) in self._claims

    # --- Internals (callers hold the lock) ---

    def _backfill_activity(self) -> None:
        """Add the market_created and trade events the loaded activity feed lacks."""
        created = {e.market_id for e in self._activity if e.type is ActivityType.MARKET_CREATED}
        traded = {e.tx_hash for e in self._activity if e.type is ActivityType.TRADE}
        for market in self._markets.values():
            if market.id not in created:
                self._activity.append(_market_created_event(market))
        for trade in self._trades:
            if trade.tx_hash not in traded:
                self._activity.append(_trade_event(self._markets[trade.market_id], trade))

    def _holdings(self, account: str) -> dict[tuple[str, int], tuple[float, float]]:
        """(market_id, outcome_index) -> (net shares, cost basis), in first-trade order."""
        account = account.lower()
        holdings: dict[tuple[str, int], tuple[float, float]] = {}
        for trade in self._trades:
            if trade.trader_address.lower() != account:
                continue
            key = (trade.market_id, trade.outcome_index)
            shares, cost = holdings.get(key, (0.0, 0.0))
            if trade.side is TradeSide.BUY:
                shares += trade.shares
                cost += trade.shares * trade.price
            elif shares > 0:
                sold = min(trade.shares, shares)
                cost -= cost / shares * sold
                shares -= sold
            holdings[key] = (shares, cost)
        return holdings

    @staticmethod
    def _mark_price(market: Market, outcome_index: int) -> float:
        if market.resolved_outcome is not None:
            return PAYOUT_PER_SHARE if outcome_index == market.resolved_outcome else 0.0
        return market.outcome_probability(outcome_index, default=0.0)

    @staticmethod
    def _checked_outcomes(outcomes: list[Outcome]) -> list[Outcome]:
        total = sum(o.probability for o in outcomes)
        if len(outcomes) < 2 or not math.isclose(total, 1.0, abs_tol=PROBABILITY_TOLERANCE):
            raise InvariantViolationError(f"Outcome probabilities sum to {total}, expected 1.0")
        return outcomes

    def _unused_market_id(self) -> str:
        market_id = new_id("market")
        while market_id in self._markets:
            market_id = new_id("market")
        return market_id
