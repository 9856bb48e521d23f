"""Gateway: simulate and submit trades."""

import threading

import pytest
from pydantic import ValidationError

from conftest import TRADER, market_input
from zenguess.config.settings import DEFAULT_TRADER
from zenguess.engine.gateway import MarketGateway
from zenguess.errors import (
    InvalidArgumentError,
    InvalidOutcomeError,
    MarketNotFoundError,
    MarketNotOpenError,
    SlippageExceededError,
)
from zenguess.ledger.store import LedgerStore
from zenguess.models import TradeRequest, TradeSide
from zenguess.pricing.impact import LmsrPriceImpact


def test_simulate_trade_uses_outcome_probability(gateway):
    market = gateway.create_market(market_input())
    q = gateway.simulate_trade(market.id, 0, 100, "buy")
    assert q.fee == 2
    assert q.estimated_cost == 100
    assert q.estimated_shares == pytest.approx(196.0)


def test_simulate_trade_out_of_range_outcome_defaults_to_half(seeded_store):
    gateway = MarketGateway(seeded_store)
    q = gateway.simulate_trade("market_1", 7, 100, "buy")
    assert q.average_price == 0.5


def test_simulate_trade_has_no_side_effects(gateway):
    market = gateway.create_market(market_input())
    gateway.simulate_trade(market.id, 0, 100, "buy")
    assert gateway.list_trades(market.id) == []
    assert gateway.get_market(market.id).volume == 0


def test_simulate_and_submit_unknown_market(gateway):
    with pytest.raises(MarketNotFoundError) as exc:
        gateway.simulate_trade("nope", 0, 10, "buy")
    assert exc.value.code == 3001
    with pytest.raises(MarketNotFoundError):
        gateway.submit_trade("nope", 0, 10, "buy")


def test_submit_trade_records_rounded_trade(gateway):
    market = gateway.create_market(market_input())
    receipt = gateway.submit_trade(market.id, 1, 33.333333, "buy", trader_address=TRADER)
    trade = receipt.trade
    assert receipt.success
    assert receipt.tx_hash == trade.tx_hash
    assert receipt.tx_hash.startswith("0x") and len(receipt.tx_hash) == 66
    assert trade.outcome_label == "No"
    assert trade.side is TradeSide.BUY
    assert trade.total == 33.3333
    assert trade.shares == round((33.333333 * 0.98) / 0.5, 4)
    assert trade.price == 0.5
    assert gateway.get_market(market.id).volume == pytest.approx(33.3333)
    assert gateway.list_trades(market.id) == [trade]


def test_submit_trade_defaults_trader(gateway):
    market = gateway.create_market(market_input())
    trade = gateway.submit_trade(market.id, 0, 10, "sell").trade
    assert trade.trader_address == DEFAULT_TRADER
    assert trade.shares == 5.0
    assert trade.total == 9.8


def test_submit_trade_unique_tx_hashes(gateway):
    market = gateway.create_market(market_input())
    hashes = {gateway.submit_trade(market.id, 0, 10, "buy").tx_hash for _ in range(20)}
    assert len(hashes) == 20


def test_submit_trade_rejects_bad_outcome_and_zero_amount(gateway):
    market = gateway.create_market(market_input())
    with pytest.raises(InvalidOutcomeError):
        gateway.submit_trade(market.id, 2, 10, "buy")
    with pytest.raises(InvalidArgumentError):
        gateway.submit_trade(market.id, 0, 0, "buy")
    assert gateway.list_trades(market.id) == []


def test_submit_trade_rejects_closed_and_resolved_markets(gateway, clock):
    closing = gateway.create_market(market_input())
    resolved = gateway.create_market(market_input(question="Will this one resolve early?"))
    gateway.resolve_market(resolved.id, 0)
    with pytest.raises(MarketNotOpenError):
        gateway.submit_trade(resolved.id, 0, 10, "buy")
    clock.advance(days=31)
    with pytest.raises(MarketNotOpenError):
        gateway.submit_trade(closing.id, 0, 10, "buy")


def test_slippage_enforced_with_lmsr(clock):
    gateway = MarketGateway(LedgerStore(price_impact=LmsrPriceImpact(liquidity=10_000), clock=clock))
    market = gateway.create_market(market_input())
    with pytest.raises(SlippageExceededError):
        gateway.submit_trade(market.id, 0, 100, "buy", slippage=0.5)
    assert gateway.list_trades(market.id) == []
    assert gateway.get_market(market.id).outcomes[0].probability == 0.5

    gateway.submit_trade(market.id, 0, 100, "buy", slippage=2)
    outcomes = gateway.get_market(market.id).outcomes
    assert outcomes[0].probability > 0.5
    assert sum(o.probability for o in outcomes) == pytest.approx(1.0)


def test_submit_request_and_request_validation(gateway):
    market = gateway.create_market(market_input())
    req = TradeRequest(market_id=market.id, outcome_index=0, amount=50, side="buy", trader_address=TRADER)
    receipt = gateway.submit_request(req)
    assert receipt.trade.trader_address == TRADER
    for bad in (
        {"amount": 0.5},
        {"amount": 2_000_000},
        {"amount": float("nan")},
        {"outcome_index": -1},
        {"side": "hold"},
        {"slippage": 75},
    ):
        data = {"market_id": market.id, "outcome_index": 0, "amount": 10, "side": "buy"} | bad
        with pytest.raises(ValidationError):
            TradeRequest(**data)


def test_concurrent_submits_keep_volume_consistent(gateway):
    market = gateway.create_market(market_input())

    def worker():
        for _ in range(25):
            gateway.submit_trade(market.id, 0, 10, "buy")

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(gateway.list_trades(market.id)) == 100
    assert gateway.get_market(market.id).volume == pytest.approx(1000.0)
    trade_events = [e for e in gateway.list_activity(500) if e.type.value == "trade"]
    assert len(trade_events) == 100
