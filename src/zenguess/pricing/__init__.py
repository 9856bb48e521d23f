"""Pricing model: quotes and price-impact strategies."""

from zenguess.pricing.history import price_history
from zenguess.pricing.impact import (
    LmsrPriceImpact,
    PriceImpactModel,
    StaticPriceImpact,
    build_price_impact,
)
from zenguess.pricing.quote import clamp_probability, quote

__all__ = [
    "quote",
    "clamp_probability",
    "price_history",
    "PriceImpactModel",
    "StaticPriceImpact",
    "LmsrPriceImpact",
    "build_price_impact",
]
