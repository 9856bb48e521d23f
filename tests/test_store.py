"""Ledger store: creation, trades, listing, ordering, portfolio."""

from datetime import datetime, timedelta, timezone

import pytest

from conftest import NOW, TRADER, FakeClock, market_input
from zenguess.errors import (
    InvalidOutcomeError,
    InvariantViolationError,
    MarketNotFoundError,
    MarketNotOpenError,
)
from zenguess.ledger.seed import DEMO_ACCOUNT
from zenguess.ledger.store import LedgerStore
from zenguess.models import (
    ActivityType,
    MarketCategory,
    MarketFilters,
    MarketSort,
    MarketStatus,
    PositionStatus,
    Trade,
    TradeSide,
)


def _trade(market_id: str, n: int, side: str = "buy", shares: float = 100, price: float = 0.5, **kw) -> Trade:
    data = {
        "id": f"trade_t{n}",
        "market_id": market_id,
        "trader_address": TRADER,
        "outcome_index": 0,
        "outcome_label": "Yes",
        "side": side,
        "shares": shares,
        "price": price,
        "total": round(shares * price, 4),
        "timestamp": NOW,
        "tx_hash": f"0x{n:064x}",
    }
    data.update(kw)
    return Trade(**data)


def test_create_market_uniform_prior(store):
    market = store.create_market(market_input(outcomes=["A", "B", "C"]))
    assert market.id.startswith("market_")
    assert len(market.outcomes) == 3
    for o in market.outcomes:
        assert o.probability == pytest.approx(1 / 3)
    assert sum(o.probability for o in market.outcomes) == pytest.approx(1.0)
    assert market.status is MarketStatus.OPEN
    assert market.volume == 0
    assert market.liquidity == 1000.0
    assert market.created_at == NOW


def test_create_market_appends_one_event(store):
    market = store.create_market(market_input())
    events = store.list_activity()
    assert len(events) == 1
    assert events[0].type is ActivityType.MARKET_CREATED
    assert events[0].market_id == market.id
    assert events[0].description == "New market created with $1,000.00 initial liquidity"
    assert events[0].tx_hash.startswith("0x") and len(events[0].tx_hash) == 66


def test_record_trade_appends_once_and_adds_volume(store):
    market = store.create_market(market_input())
    before = len(store.list_activity())
    trade = _trade(market.id, 1, shares=200, price=0.5)
    store.record_trade(trade)

    trades = store.list_trades_by_market(market.id)
    assert [t.id for t in trades].count(trade.id) == 1
    assert store.get_market(market.id).volume == pytest.approx(trade.total)
    events = store.list_activity()
    assert len(events) == before + 1
    assert events[0].type is ActivityType.TRADE
    assert events[0].description == "BUY 200.00 Yes shares at $0.50"
    assert events[0].metadata == {"outcome_index": 0, "shares": 200.0, "total": 100.0}


def test_record_trade_unknown_market_changes_nothing(store):
    store.create_market(market_input())
    with pytest.raises(MarketNotFoundError):
        store.record_trade(_trade("market_missing", 1))
    assert len(store.list_activity()) == 1


def test_record_trade_rejects_duplicates_and_bad_outcomes(store):
    market = store.create_market(market_input())
    store.record_trade(_trade(market.id, 1))
    with pytest.raises(InvariantViolationError):
        store.record_trade(_trade(market.id, 1))
    with pytest.raises(InvalidOutcomeError):
        store.record_trade(_trade(market.id, 2, outcome_index=5))
    assert len(store.list_trades_by_market(market.id)) == 1


def test_static_trades_do_not_move_probabilities(store):
    market = store.create_market(market_input())
    store.record_trade(_trade(market.id, 1, shares=10_000))
    assert [o.probability for o in store.get_market(market.id).outcomes] == [0.5, 0.5]


def test_get_market_not_found(store):
    assert store.get_market("does-not-exist") is None


def test_reads_are_defensive_copies(store):
    market = store.create_market(market_input())
    listed = store.list_markets()[0]
    listed.volume = 999
    listed.outcomes[0].probability = 0.99
    fetched = store.get_market(market.id)
    fetched.tags.append("mutated")
    again = store.get_market(market.id)
    assert again.volume == 0
    assert again.outcomes[0].probability == 0.5
    assert "mutated" not in again.tags


def test_same_timestamp_tiebreak_is_insertion_order(store):
    market = store.create_market(market_input())
    store.record_trade(_trade(market.id, 1))
    store.record_trade(_trade(market.id, 2))
    store.record_trade(_trade(market.id, 3, timestamp=NOW - timedelta(minutes=1)))
    assert [t.id for t in store.list_trades_by_market(market.id)] == ["trade_t2", "trade_t1", "trade_t3"]
    assert [e.tx_hash for e in store.list_activity(2)] == [f"0x{2:064x}", f"0x{1:064x}"]


def test_list_activity_limit_is_clamped(seeded_store):
    assert len(seeded_store.list_activity(0)) == 1
    assert len(seeded_store.list_activity(3)) == 3
    assert len(seeded_store.list_activity(10_000)) == 18


def test_list_markets_sorting(seeded_store):
    ids = lambda sort: [m.id for m in seeded_store.list_markets(MarketFilters(sort=sort))]  # noqa: E731
    assert ids(MarketSort.VOLUME)[:3] == ["market_5", "market_8", "market_3"]
    assert ids(MarketSort.NEWEST)[0] == "market_7"
    assert ids(MarketSort.ENDING_SOON)[:2] == ["market_8", "market_5"]
    assert ids(MarketSort.LIQUIDITY)[0] == "market_5"
    assert ids(MarketSort.LIQUIDITY)[-1] == "market_8"


def test_list_markets_filters(seeded_store):
    crypto = seeded_store.list_markets(MarketFilters(category=MarketCategory.CRYPTO))
    assert {m.id for m in crypto} == {"market_1", "market_2", "market_8"}

    resolved = seeded_store.list_markets(MarketFilters(status=MarketStatus.RESOLVED))
    assert [m.id for m in resolved] == ["market_8"]
    assert len(seeded_store.list_markets(MarketFilters(status=MarketStatus.OPEN))) == 7

    assert [m.id for m in seeded_store.list_markets(MarketFilters(query="  BITCOIN "))] == ["market_1"]
    assert [m.id for m in seeded_store.list_markets(MarketFilters(query="soccer"))] == ["market_5"]


def test_status_filter_uses_derived_status(store, clock):
    market = store.create_market(market_input(end_time=NOW + timedelta(days=1)))
    clock.advance(days=2)
    closed = store.list_markets(MarketFilters(status=MarketStatus.CLOSED))
    assert [m.id for m in closed] == [market.id]
    assert store.list_markets(MarketFilters(status=MarketStatus.OPEN)) == []


def test_seeded_portfolio_derived_from_trades(seeded_store):
    positions = seeded_store.get_portfolio(DEMO_ACCOUNT.upper())
    assert [(p.market_id, p.outcome) for p in positions] == [
        ("market_1", "Yes"),
        ("market_8", "Yes"),
        ("market_3", "Yes"),
    ]
    btc, sol, reg = positions
    assert (btc.shares, btc.avg_price, btc.current_price, btc.pnl) == (500, 0.55, 0.62, 35.0)
    assert btc.status is PositionStatus.OPEN
    assert (sol.current_price, sol.pnl, sol.status) == (1.0, 130.0, PositionStatus.RESOLVED)
    assert reg.pnl == 15.0


def test_portfolio_unknown_account_is_empty(seeded_store):
    assert seeded_store.get_portfolio("0xnobody") == []


def test_portfolio_weighted_average_and_sells(store):
    market = store.create_market(market_input())
    store.record_trade(_trade(market.id, 1, shares=100, price=0.4))
    store.record_trade(_trade(market.id, 2, shares=300, price=0.6))
    [position] = store.get_portfolio(TRADER.lower())
    assert position.shares == 400
    assert position.avg_price == 0.55
    assert position.current_price == 0.5
    assert position.pnl == -20.0

    store.record_trade(_trade(market.id, 3, side="sell", shares=100, price=0.5))
    [position] = store.get_portfolio(TRADER)
    assert position.shares == 300
    assert position.avg_price == 0.55

    store.record_trade(_trade(market.id, 4, side="sell", shares=500, price=0.5))
    assert store.get_portfolio(TRADER) == []


def test_trade_side_is_enum(store):
    market = store.create_market(market_input())
    recorded = store.record_trade(_trade(market.id, 1, side="sell"))
    assert recorded.side is TradeSide.SELL


def test_naive_trade_timestamp_is_stored_as_utc(store):
    market = store.create_market(market_input())
    recorded = store.record_trade(_trade(market.id, 1, timestamp=datetime(2026, 3, 1, 12)))
    assert recorded.timestamp == datetime(2026, 3, 1, 12, tzinfo=timezone.utc)
    store.record_trade(_trade(market.id, 2))
    assert [t.id for t in store.list_trades_by_market(market.id)] == ["trade_t1", "trade_t2"]
    assert store.list_activity(1)[0].tx_hash == f"0x{1:064x}"


def test_naive_clock_is_read_as_utc():
    store = LedgerStore.seeded(clock=FakeClock(datetime(2026, 3, 1)))
    assert store.now() == NOW
    assert len(store.list_markets()) == 8
    market = store.create_market(market_input())
    assert market.created_at == NOW


def test_record_trade_rejects_resolved_market(store):
    market = store.create_market(market_input())
    store.record_trade(_trade(market.id, 1))
    store.resolve_market(market.id, 1)
    events = len(store.list_activity(500))
    with pytest.raises(MarketNotOpenError):
        store.record_trade(_trade(market.id, 2))
    assert len(store.list_trades_by_market(market.id)) == 1
    assert len(store.list_activity(500)) == events
    assert store.get_market(market.id).volume == 50


def test_seeded_activity_has_one_event_per_trade_and_market(seeded_store):
    events = seeded_store.list_activity(500)
    trade_events = [e for e in events if e.type is ActivityType.TRADE]
    trades = [t for m in seeded_store.list_markets() for t in seeded_store.list_trades_by_market(m.id)]
    assert len(trade_events) == len(trades) == 8
    assert {e.tx_hash for e in trade_events} == {t.tx_hash for t in trades}
    created = [e.market_id for e in events if e.type is ActivityType.MARKET_CREATED]
    assert sorted(created) == [f"market_{n}" for n in range(1, 9)]


def test_seeded_trade_event_describes_the_trade(seeded_store):
    [event] = [e for e in seeded_store.list_activity(500) if e.tx_hash.startswith("0x111222333")]
    assert event.description == "SELL 100.00 Yes shares at $0.61"
    assert event.actor == "0xuser3333user3333user3333user3333user3333"
    assert event.metadata == {"outcome_index": 0, "shares": 100, "total": 61}
