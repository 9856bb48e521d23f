"""Shared fixtures: a controllable clock, fresh stores and gateways."""

from datetime import datetime, timedelta, timezone

import pytest

from zenguess.engine.gateway import MarketGateway
from zenguess.ledger.store import LedgerStore
from zenguess.models import CreateMarketInput, MarketCategory

NOW = datetime(2026, 3, 1, tzinfo=timezone.utc)
TRADER = "0xAbC0000000000000000000000000000000000001"


class FakeClock:
    def __init__(self, start: datetime = NOW) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return LedgerStore(clock=clock)


@pytest.fixture
def seeded_store(clock):
    return LedgerStore.seeded(clock=clock)


@pytest.fixture
def gateway(store):
    return MarketGateway(store)


def market_input(**overrides) -> CreateMarketInput:
    data = {
        "question": "Will the test suite pass on the first run?",
        "description": "Resolves YES if every test passes.",
        "category": MarketCategory.SCIENCE,
        "end_time": NOW + timedelta(days=30),
        "outcomes": ["Yes", "No"],
        "initial_liquidity": 1000.0,
        "resolution_source": "CI logs",
        "creator_address": "0xcreator",
        "tags": ["ci", "testing"],
    }
    data.update(overrides)
    return CreateMarketInput(**data)
