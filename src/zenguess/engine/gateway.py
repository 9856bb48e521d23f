"""Quoting and settlement gateway - the engine's single entry point.

Reads go straight to the ledger store. Trades are quoted and committed inside
one store transaction so no other trade can move the market in between.
"""

from __future__ import annotations

import structlog

from zenguess.config.settings import DEFAULT_TRADER, Settings
from zenguess.errors import (
    InvalidArgumentError,
    InvalidOutcomeError,
    MarketNotFoundError,
    MarketNotOpenError,
    SlippageExceededError,
)
from zenguess.ledger.ids import new_id, new_tx_hash
from zenguess.ledger.store import MONEY_DECIMALS, LedgerStore
from zenguess.models import (
    ActivityEvent,
    ClaimResult,
    CreateMarketInput,
    Market,
    MarketFilters,
    MarketStatus,
    PortfolioPosition,
    PricePoint,
    Quote,
    Trade,
    TradeReceipt,
    TradeRequest,
    TradeSide,
)
from zenguess.pricing.history import price_history
from zenguess.pricing.impact import build_price_impact
from zenguess.pricing.quote import DEFAULT_FEE_RATE, quote

log = structlog.get_logger(__name__)

FALLBACK_PROBABILITY = 0.5


class MarketGateway:
    """Facade over a LedgerStore: simulate, submit, create, resolve, claim."""

    def __init__(
        self,
        store: LedgerStore,
        fee_rate: float = DEFAULT_FEE_RATE,
        default_trader: str = DEFAULT_TRADER,
    ) -> None:
        self.store = store
        self.fee_rate = fee_rate
        self.default_trader = default_trader

    # --- Reads ---

    def list_markets(self, filters: MarketFilters | None = None) -> list[Market]:
        return self.store.list_markets(filters)

    def get_market(self, market_id: str) -> Market | None:
        return self.store.get_market(market_id)

    def list_trades(self, market_id: str) -> list[Trade]:
        return self.store.list_trades_by_market(market_id)

    def list_activity(self, limit: int = 100) -> list[ActivityEvent]:
        return self.store.list_activity(limit)

    def get_portfolio(self, account: str) -> list[PortfolioPosition]:
        return self.store.get_portfolio(account)

    def price_history(self, market_id: str, outcome_index: int = 0, days: int = 30) -> list[PricePoint]:
        """Daily odds series for one outcome, drifting from the uniform prior to its current probability."""
        market = self.store.get_market(market_id)
        if market is None:
            raise MarketNotFoundError(market_id)
        if not 0 <= outcome_index < len(market.outcomes):
            raise InvalidOutcomeError(market_id, outcome_index)
        prior = 1.0 / len(market.outcomes)
        return price_history(prior, market.outcomes[outcome_index].probability, days, now=self.store.now())

    # --- Trading ---

    def simulate_trade(
        self,
        market_id: str,
        outcome_index: int,
        amount: float,
        side: TradeSide | str,
    ) -> Quote:
        """Quote without side effects. Unknown outcome indexes price at 0.5."""
        market = self.store.get_market(market_id)
        if market is None:
            raise MarketNotFoundError(market_id)
        probability = market.outcome_probability(outcome_index, default=FALLBACK_PROBABILITY)
        return quote(amount, probability, side, self.fee_rate)

    def submit_trade(
        self,
        market_id: str,
        outcome_index: int,
        amount: float,
        side: TradeSide | str,
        slippage: float = 1.0,
        trader_address: str | None = None,
    ) -> TradeReceipt:
        """Quote and commit a trade; slippage is a percentage tolerance on price movement."""
        side = TradeSide(side)
        with self.store.transaction() as store:
            market = store.get_market(market_id)
            if market is None:
                raise MarketNotFoundError(market_id)
            if market.status is not MarketStatus.OPEN:
                raise MarketNotOpenError(market_id, market.status.value)
            if not 0 <= outcome_index < len(market.outcomes):
                raise InvalidOutcomeError(market_id, outcome_index)

            estimate = quote(amount, market.outcomes[outcome_index].probability, side, self.fee_rate)
            shares = round(estimate.estimated_shares, MONEY_DECIMALS)
            if shares <= 0:
                raise InvalidArgumentError(f"Trade amount {amount} buys no shares")
            self._check_slippage(market, outcome_index, side, shares, slippage)

            tx_hash = new_tx_hash()
            trade = Trade(
                id=new_id("trade"),
                market_id=market_id,
                trader_address=trader_address or self.default_trader,
                outcome_index=outcome_index,
                outcome_label=market.outcomes[outcome_index].label,
                side=side,
                shares=shares,
                price=round(estimate.average_price, MONEY_DECIMALS),
                total=round(estimate.estimated_cost, MONEY_DECIMALS),
                timestamp=store.now(),
                tx_hash=tx_hash,
            )
            recorded = store.record_trade(trade)
        return TradeReceipt(success=True, tx_hash=tx_hash, trade=recorded)

    def submit_request(self, request: TradeRequest) -> TradeReceipt:
        """submit_trade for an already validated TradeRequest."""
        return self.submit_trade(
            request.market_id,
            request.outcome_index,
            request.amount,
            request.side,
            slippage=request.slippage,
            trader_address=request.trader_address,
        )

    def _check_slippage(
        self,
        market: Market,
        outcome_index: int,
        side: TradeSide,
        shares: float,
        slippage: float,
    ) -> None:
        current = market.outcomes[outcome_index].probability
        projected = self.store.price_impact.apply(market.outcomes, outcome_index, side, shares)[
            outcome_index
        ].probability
        if current <= 0:
            return
        moved_pct = abs(projected - current) / current * 100
        if moved_pct > max(0.0, slippage):
            log.info(
                "slippage_exceeded",
                market_id=market.id,
                outcome=outcome_index,
                current=current,
                projected=projected,
                tolerance=slippage,
            )
            raise SlippageExceededError(current, projected, slippage)

    # --- Lifecycle and settlement ---

    def create_market(self, data: CreateMarketInput) -> Market:
        return self.store.create_market(data)

    def resolve_market(self, market_id: str, outcome_index: int, actor: str | None = None) -> Market | None:
        return self.store.resolve_market(market_id, outcome_index, actor=actor)

    def claim_winnings(self, market_id: str, account: str) -> ClaimResult:
        return self.store.claim_winnings(market_id, account)


def build_gateway(settings: Settings, store: LedgerStore | None = None) -> MarketGateway:
    """Wire a store (seeded per settings) and its price-impact model into a gateway."""
    if store is None:
        impact = build_price_impact(settings.price_impact, settings.lmsr_liquidity)
        store = LedgerStore.seeded(price_impact=impact) if settings.seed_store else LedgerStore(price_impact=impact)
    return MarketGateway(store, fee_rate=settings.fee_rate, default_trader=settings.default_trader)
