"""ActivityEvent - append-only feed entries."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from zenguess.models.market import as_utc


class ActivityType(str, Enum):
    TRADE = "trade"
    MARKET_CREATED = "market_created"
    MARKET_RESOLVED = "market_resolved"
    LIQUIDITY_ADDED = "liquidity_added"


class ActivityEvent(BaseModel):
    """Denormalized description of a market-affecting action."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: ActivityType
    market_id: str
    market_title: str
    description: str
    actor: str
    timestamp: datetime
    tx_hash: str
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("timestamp")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        return as_utc(v)
