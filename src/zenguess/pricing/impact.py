"""Price-impact strategies applied to outcome probabilities after each trade."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from zenguess.models.market import Outcome
from zenguess.models.trade import TradeSide

_MIN_LOG_PROBABILITY = 1e-9


def normalize(outcomes: list[Outcome]) -> list[Outcome]:
    """Rescale probabilities so they sum to exactly 1.0 (last outcome absorbs rounding)."""
    total = sum(o.probability for o in outcomes)
    if total <= 0:
        uniform = 1.0 / len(outcomes)
        scaled = [uniform] * len(outcomes)
    else:
        scaled = [o.probability / total for o in outcomes]
    scaled[-1] = max(0.0, 1.0 - sum(scaled[:-1]))
    return [Outcome(label=o.label, probability=p) for o, p in zip(outcomes, scaled)]


class PriceImpactModel(ABC):
    """Maps (current outcomes, executed trade) to new outcome probabilities."""

    name: str = ""

    @abstractmethod
    def apply(
        self,
        outcomes: list[Outcome],
        outcome_index: int,
        side: TradeSide,
        shares: float,
    ) -> list[Outcome]:
        """Return new outcomes. Must not mutate the input and must sum to 1.0."""
        ...


class StaticPriceImpact(PriceImpactModel):
    """Probabilities never move on trade."""

    name = "static"

    def apply(
        self,
        outcomes: list[Outcome],
        outcome_index: int,
        side: TradeSide,
        shares: float,
    ) -> list[Outcome]:
        return [o.model_copy() for o in outcomes]


class LmsrPriceImpact(PriceImpactModel):
    """Logarithmic market scoring rule with liquidity parameter b.

    Current probabilities are read back as share quantities q_i = b * ln(p_i);
    the traded outcome moves by +shares (buy) or -shares (sell) and prices
    are the softmax of q / b.
    """

    name = "lmsr"

    def __init__(self, liquidity: float = 10000.0) -> None:
        if not liquidity > 0:
            raise ValueError("LMSR liquidity must be positive")
        self.liquidity = liquidity

    def apply(
        self,
        outcomes: list[Outcome],
        outcome_index: int,
        side: TradeSide,
        shares: float,
    ) -> list[Outcome]:
        if not 0 <= outcome_index < len(outcomes) or shares <= 0:
            return [o.model_copy() for o in outcomes]
        b = self.liquidity
        q = [b * math.log(max(o.probability, _MIN_LOG_PROBABILITY)) for o in outcomes]
        q[outcome_index] += shares if side is TradeSide.BUY else -shares
        peak = max(q)
        weights = [math.exp((qi - peak) / b) for qi in q]
        total = sum(weights)
        moved = [Outcome(label=o.label, probability=w / total) for o, w in zip(outcomes, weights)]
        return normalize(moved)


def build_price_impact(name: str, liquidity: float = 10000.0) -> PriceImpactModel:
    """Instantiate a price-impact model by its configured name."""
    key = (name or "static").strip().lower()
    if key == StaticPriceImpact.name:
        return StaticPriceImpact()
    if key == LmsrPriceImpact.name:
        return LmsrPriceImpact(liquidity=liquidity)
    raise ValueError(f"Unknown price impact model: {name!r}")
