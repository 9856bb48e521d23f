"""Demo dataset loaded by LedgerStore.seeded()."""

from __future__ import annotations

from typing import Any

from zenguess.models import ActivityEvent, Market, Trade

DEMO_ACCOUNT = "0x1000000000000000000000000000000000000001"

SEED_MARKETS: list[dict[str, Any]] = [
    {
        "id": "market_1",
        "question": "Will Bitcoin exceed $150,000 by end of 2026?",
        "description": "Resolves YES if BTC/USD on CoinGecko exceeds $150,000 before December 31, 2026 23:59 UTC.",
        "category": "crypto",
        "outcomes": [{"label": "Yes", "probability": 0.62}, {"label": "No", "probability": 0.38}],
        "end_time": "2026-12-31T23:59:00Z",
        "created_at": "2026-01-15T10:00:00Z",
        "volume": 2_450_000,
        "liquidity": 890_000,
        "resolution_source": "CoinGecko BTC/USD price feed",
        "tags": ["bitcoin", "price", "2026"],
        "creator_address": "0x1234567890abcdef1234567890abcdef12345678",
    },
    {
        "id": "market_2",
        "question": "Will Ethereum transition to full danksharding in 2026?",
        "description": "Resolves YES if Ethereum mainnet activates full danksharding before December 31, 2026.",
        "category": "crypto",
        "outcomes": [{"label": "Yes", "probability": 0.24}, {"label": "No", "probability": 0.76}],
        "end_time": "2026-12-31T23:59:00Z",
        "created_at": "2026-02-01T14:30:00Z",
        "volume": 1_120_000,
        "liquidity": 450_000,
        "resolution_source": "Ethereum Foundation announcements",
        "tags": ["ethereum", "danksharding", "scaling"],
        "creator_address": "0xabcdefabcdefabcdefabcdefabcdefabcdefabcd",
    },
    {
        "id": "market_3",
        "question": "Will the US pass a comprehensive crypto regulation bill by Q3 2026?",
        "description": (
            "Resolves YES if the US Congress passes and the President signs a comprehensive "
            "cryptocurrency regulation bill by September 30, 2026."
        ),
        "category": "politics",
        "outcomes": [{"label": "Yes", "probability": 0.45}, {"label": "No", "probability": 0.55}],
        "end_time": "2026-09-30T23:59:00Z",
        "created_at": "2026-01-20T09:00:00Z",
        "volume": 3_200_000,
        "liquidity": 1_200_000,
        "resolution_source": "Congress.gov official records",
        "tags": ["regulation", "usa", "policy"],
        "creator_address": "0x9876543210fedcba9876543210fedcba98765432",
    },
    {
        "id": "market_4",
        "question": "Will SpaceX successfully land Starship on Mars by 2030?",
        "description": "Resolves YES if SpaceX successfully lands a Starship vehicle on Mars before January 1, 2030.",
        "category": "science",
        "outcomes": [{"label": "Yes", "probability": 0.08}, {"label": "No", "probability": 0.92}],
        "end_time": "2029-12-31T23:59:00Z",
        "created_at": "2026-01-10T12:00:00Z",
        "volume": 890_000,
        "liquidity": 340_000,
        "resolution_source": "SpaceX official communications / NASA confirmation",
        "tags": ["spacex", "mars", "space"],
        "creator_address": "0x1111222233334444555566667777888899990000",
    },
    {
        "id": "market_5",
        "question": "Will the next FIFA World Cup winner be a South American team?",
        "description": "Resolves YES if a South American national team wins the 2026 FIFA World Cup.",
        "category": "sports",
        "outcomes": [{"label": "Yes", "probability": 0.41}, {"label": "No", "probability": 0.59}],
        "end_time": "2026-07-19T23:59:00Z",
        "created_at": "2026-02-05T08:00:00Z",
        "volume": 5_600_000,
        "liquidity": 2_100_000,
        "resolution_source": "FIFA official results",
        "tags": ["fifa", "world cup", "soccer"],
        "creator_address": "0xaaaabbbbccccddddeeeeffffaaaabbbbccccdddd",
    },
    {
        "id": "market_6",
        "question": "Will global AI chip revenue surpass $200B in 2026?",
        "description": "Resolves YES if worldwide AI chip revenue exceeds $200 billion in calendar year 2026.",
        "category": "economics",
        "outcomes": [{"label": "Yes", "probability": 0.71}, {"label": "No", "probability": 0.29}],
        "end_time": "2027-03-31T23:59:00Z",
        "created_at": "2026-02-10T16:00:00Z",
        "volume": 1_800_000,
        "liquidity": 720_000,
        "resolution_source": "Gartner / IDC annual report",
        "tags": ["ai", "chips", "revenue"],
        "creator_address": "0xdeadbeefdeadbeefdeadbeefdeadbeefdeadbeef",
    },
    {
        "id": "market_7",
        "question": "Will a new Taylor Swift album be released in 2026?",
        "description": (
            "Resolves YES if Taylor Swift releases a new studio album (not a re-recording) "
            "before December 31, 2026."
        ),
        "category": "culture",
        "outcomes": [{"label": "Yes", "probability": 0.55}, {"label": "No", "probability": 0.45}],
        "end_time": "2026-12-31T23:59:00Z",
        "created_at": "2026-02-14T10:00:00Z",
        "volume": 420_000,
        "liquidity": 180_000,
        "resolution_source": "Official release platforms",
        "tags": ["music", "taylor swift", "entertainment"],
        "creator_address": "0xfeedface0feedface0feedface0feedface0feed",
    },
    {
        "id": "market_8",
        "question": "Will Solana flip Ethereum in daily transaction count in Q2 2026?",
        "description": (
            "Resolves YES if Solana daily transaction count exceeds Ethereum for at least "
            "30 consecutive days in Q2 2026."
        ),
        "category": "crypto",
        "status": "resolved",
        "resolved_outcome": 0,
        "outcomes": [{"label": "Yes", "probability": 1.0}, {"label": "No", "probability": 0.0}],
        "end_time": "2026-06-30T23:59:00Z",
        "created_at": "2026-01-05T09:00:00Z",
        "volume": 4_200_000,
        "liquidity": 0,
        "resolution_source": "Dune Analytics dashboard",
        "tags": ["solana", "ethereum", "transactions"],
        "creator_address": "0xbadcafe0badcafe0badcafe0badcafe0badcafe0b",
    },
]

# Oldest first: the store appends in this order.
SEED_TRADES: list[dict[str, Any]] = [
    {
        "id": "trade_s1",
        "market_id": "market_1",
        "trader_address": DEMO_ACCOUNT,
        "outcome_index": 0,
        "outcome_label": "Yes",
        "side": "buy",
        "shares": 500,
        "price": 0.55,
        "total": 275,
        "timestamp": "2026-01-20T12:00:00Z",
        "tx_hash": "0x5eed000000000000000000000000000000000000000000000000000000000001",
    },
    {
        "id": "trade_s2",
        "market_id": "market_8",
        "trader_address": DEMO_ACCOUNT,
        "outcome_index": 0,
        "outcome_label": "Yes",
        "side": "buy",
        "shares": 200,
        "price": 0.35,
        "total": 70,
        "timestamp": "2026-01-22T09:30:00Z",
        "tx_hash": "0x5eed000000000000000000000000000000000000000000000000000000000002",
    },
    {
        "id": "trade_s3",
        "market_id": "market_3",
        "trader_address": DEMO_ACCOUNT,
        "outcome_index": 0,
        "outcome_label": "Yes",
        "side": "buy",
        "shares": 300,
        "price": 0.40,
        "total": 120,
        "timestamp": "2026-02-02T15:00:00Z",
        "tx_hash": "0x5eed000000000000000000000000000000000000000000000000000000000003",
    },
    {
        "id": "trade_5",
        "market_id": "market_5",
        "trader_address": "0xuser5555user5555user5555user5555user5555",
        "outcome_index": 0,
        "outcome_label": "Yes",
        "side": "buy",
        "shares": 750,
        "price": 0.41,
        "total": 307.5,
        "timestamp": "2026-02-24T19:40:00Z",
        "tx_hash": "0x999888777666555444333222111000fffeeecccbbbaaa999888777666555444",
    },
    {
        "id": "trade_4",
        "market_id": "market_3",
        "trader_address": "0xuser4444user4444user4444user4444user4444",
        "outcome_index": 0,
        "outcome_label": "Yes",
        "side": "buy",
        "shares": 1000,
        "price": 0.45,
        "total": 450,
        "timestamp": "2026-02-25T16:40:00Z",
        "tx_hash": "0xfff000eee111ddd222ccc333bbb444aaa555999888777666555444333222111",
    },
    {
        "id": "trade_3",
        "market_id": "market_1",
        "trader_address": "0xuser3333user3333user3333user3333user3333",
        "outcome_index": 0,
        "outcome_label": "Yes",
        "side": "sell",
        "shares": 100,
        "price": 0.61,
        "total": 61,
        "timestamp": "2026-02-25T17:55:00Z",
        "tx_hash": "0x111222333444555666777888999000aaabbbcccdddeeefff000111222333444",
    },
    {
        "id": "trade_2",
        "market_id": "market_1",
        "trader_address": "0xuser2222user2222user2222user2222user2222",
        "outcome_index": 1,
        "outcome_label": "No",
        "side": "buy",
        "shares": 200,
        "price": 0.38,
        "total": 76,
        "timestamp": "2026-02-25T18:25:00Z",
        "tx_hash": "0xdef789abc012def789abc012def789abc012def789abc012def789abc012def7",
    },
    {
        "id": "trade_1",
        "market_id": "market_1",
        "trader_address": "0xuser1111user1111user1111user1111user1111",
        "outcome_index": 0,
        "outcome_label": "Yes",
        "side": "buy",
        "shares": 500,
        "price": 0.62,
        "total": 310,
        "timestamp": "2026-02-25T18:35:00Z",
        "tx_hash": "0xabc123def456abc123def456abc123def456abc123def456abc123def456abc1",
    },
]

SEED_ACTIVITY: list[dict[str, Any]] = [
    {
        "id": "event_4",
        "type": "market_resolved",
        "market_id": "market_8",
        "market_title": "Will Solana flip Ethereum in daily transaction count in Q2 2026?",
        "description": "Market resolved: Yes",
        "actor": "0xbadcafe0badcafe0badcafe0badcafe0badcafe0b",
        "timestamp": "2026-02-23T18:35:00Z",
        "tx_hash": "0x000111222333444555666777888999aaabbbcccdddeeefff000111222333444",
        "metadata": {"resolved_outcome": 0},
    },
    {
        "id": "event_6",
        "type": "liquidity_added",
        "market_id": "market_5",
        "market_title": "Will the next FIFA World Cup winner be a South American team?",
        "description": "Added $50,000 liquidity",
        "actor": "0xaaaabbbbccccddddeeeeffffaaaabbbbccccdddd",
        "timestamp": "2026-02-24T15:20:00Z",
        "tx_hash": "0xaaabbb000111ccc222ddd333eee444fff555666777888999aaabbb000111ccc",
    },
    {
        "id": "event_3",
        "type": "market_created",
        "market_id": "market_7",
        "market_title": "Will a new Taylor Swift album be released in 2026?",
        "description": "New market created with $180,000.00 initial liquidity",
        "actor": "0xfeedface0feedface0feedface0feedface0feed",
        "timestamp": "2026-02-24T17:35:00Z",
        "tx_hash": "0x444333222111000fffeeecccbbbaaa999888777666555444333222111000fff",
    },
    {
        "id": "event_5",
        "type": "trade",
        "market_id": "market_3",
        "market_title": "Will the US pass a comprehensive crypto regulation bill by Q3 2026?",
        "description": "BUY 1000.00 Yes shares at $0.45",
        "actor": "0xuser4444user4444user4444user4444user4444",
        "timestamp": "2026-02-25T16:40:00Z",
        "tx_hash": "0xfff000eee111ddd222ccc333bbb444aaa555999888777666555444333222111",
    },
    {
        "id": "event_2",
        "type": "trade",
        "market_id": "market_1",
        "market_title": "Will Bitcoin exceed $150,000 by end of 2026?",
        "description": "BUY 200.00 No shares at $0.38",
        "actor": "0xuser2222user2222user2222user2222user2222",
        "timestamp": "2026-02-25T18:25:00Z",
        "tx_hash": "0xdef789abc012def789abc012def789abc012def789abc012def789abc012def7",
    },
    {
        "id": "event_1",
        "type": "trade",
        "market_id": "market_1",
        "market_title": "Will Bitcoin exceed $150,000 by end of 2026?",
        "description": "BUY 500.00 Yes shares at $0.62",
        "actor": "0xuser1111user1111user1111user1111user1111",
        "timestamp": "2026-02-25T18:35:00Z",
        "tx_hash": "0xabc123def456abc123def456abc123def456abc123def456abc123def456abc1",
    },
]


def seed_markets() -> list[Market]:
    return [Market.model_validate(raw) for raw in SEED_MARKETS]


def seed_trades() -> list[Trade]:
    return [Trade.model_validate(raw) for raw in SEED_TRADES]


def seed_activity() -> list[ActivityEvent]:
    return [ActivityEvent.model_validate(raw) for raw in SEED_ACTIVITY]
