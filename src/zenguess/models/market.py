"""Market, Outcome and the closed enumerations around them."""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

PROBABILITY_TOLERANCE = 1e-6


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class MarketCategory(str, Enum):
    CRYPTO = "crypto"
    POLITICS = "politics"
    SPORTS = "sports"
    SCIENCE = "science"
    CULTURE = "culture"
    ECONOMICS = "economics"
    OTHER = "other"


class MarketStatus(str, Enum):
    """Effective status as seen by readers. CLOSED is only ever derived."""

    OPEN = "open"
    CLOSED = "closed"
    RESOLVED = "resolved"


class MarketSort(str, Enum):
    VOLUME = "volume"
    NEWEST = "newest"
    ENDING_SOON = "ending_soon"
    LIQUIDITY = "liquidity"


class Outcome(BaseModel):
    """Single outcome of a market with its implied probability."""

    label: str
    probability: float = Field(..., ge=0, le=1, description="Implied probability in [0, 1]")


class Market(BaseModel):
    """A tradeable question."""

    id: str
    question: str
    description: str = ""
    category: MarketCategory = MarketCategory.OTHER
    resolution_source: str = ""
    tags: list[str] = Field(default_factory=list)
    creator_address: str = ""
    created_at: datetime
    end_time: datetime
    outcomes: list[Outcome] = Field(..., min_length=2)
    volume: float = Field(0.0, ge=0)
    liquidity: float = Field(0.0, ge=0)
    status: MarketStatus = MarketStatus.OPEN
    resolved_outcome: int | None = None

    @field_validator("created_at", "end_time")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        return as_utc(v)

    @model_validator(mode="after")
    def _check_outcomes(self) -> Market:
        total = sum(o.probability for o in self.outcomes)
        if not math.isclose(total, 1.0, abs_tol=PROBABILITY_TOLERANCE):
            raise ValueError(f"outcome probabilities must sum to 1.0, got {total}")
        if self.resolved_outcome is not None and not 0 <= self.resolved_outcome < len(self.outcomes):
            raise ValueError(f"resolved_outcome {self.resolved_outcome} out of range")
        return self

    @property
    def is_resolved(self) -> bool:
        return self.resolved_outcome is not None

    def outcome_probability(self, index: int, default: float = 0.5) -> float:
        """Probability of outcome `index`, or `default` when the index is out of bounds."""
        if 0 <= index < len(self.outcomes):
            return self.outcomes[index].probability
        return default


class PricePoint(BaseModel):
    """One daily sample of a two-outcome odds series, in whole percent."""

    day: date
    yes: int = Field(..., ge=0, le=100)
    no: int = Field(..., ge=0, le=100)


class MarketFilters(BaseModel):
    """Filters for listing markets. None means "all"."""

    category: MarketCategory | None = None
    status: MarketStatus | None = None
    query: str | None = None
    sort: MarketSort = MarketSort.VOLUME
