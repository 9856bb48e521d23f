"""Constant-probability pricing: (stake, probability, side) -> Quote.

Inputs are clamped rather than rejected so a quote never fails:
non-finite or negative amounts become 0, probability is held in
[MIN_PROBABILITY, MAX_PROBABILITY], fee rate in [0, MAX_FEE_RATE].
There is no slippage curve here; execution price is the market probability.
"""

from __future__ import annotations

import math

from zenguess.models.trade import Quote, TradeSide

MIN_PROBABILITY = 0.01
MAX_PROBABILITY = 0.99
DEFAULT_FEE_RATE = 0.02
MAX_FEE_RATE = 0.10


def clamp_probability(probability: float) -> float:
    """Clamp into [0.01, 0.99]; non-finite input maps to 0.5."""
    if not math.isfinite(probability):
        return 0.5
    return max(MIN_PROBABILITY, min(MAX_PROBABILITY, probability))


def _safe_amount(amount: float) -> float:
    if not math.isfinite(amount):
        return 0.0
    return max(0.0, amount)


def _safe_fee_rate(fee_rate: float) -> float:
    if not math.isfinite(fee_rate):
        return DEFAULT_FEE_RATE
    return max(0.0, min(MAX_FEE_RATE, fee_rate))


def quote(
    amount_usd: float,
    probability: float,
    side: TradeSide | str,
    fee_rate: float = DEFAULT_FEE_RATE,
) -> Quote:
    """Price a trade at the current implied probability.

    Buy: amount is the USD stake; shares = (amount - fee) / p, cost = amount.
    Sell: shares = amount * p, cost = amount - fee (net proceeds).
    """
    side = TradeSide(side)
    amount = _safe_amount(amount_usd)
    p = clamp_probability(probability)
    fee = amount * _safe_fee_rate(fee_rate)
    notional = max(0.0, amount - fee)

    if side is TradeSide.BUY:
        shares = notional / p
        cost = amount
    else:
        shares = amount * p
        cost = notional

    return Quote(
        estimated_cost=cost,
        estimated_shares=shares,
        fee=fee,
        average_price=p,
    )
