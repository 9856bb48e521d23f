"""Synthetic daily odds series between two probabilities, for charts and demos."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from zenguess.lifecycle.status import utc_now
from zenguess.models.market import PricePoint, as_utc
from zenguess.pricing.quote import clamp_probability

NOISE_AMPLITUDE = 0.04


def _percent(p: float) -> int:
    # half-up, not banker's rounding
    return math.floor(p * 100 + 0.5)


def price_history(
    start_prob: float,
    end_prob: float,
    days: int,
    now: datetime | None = None,
) -> list[PricePoint]:
    """days + 1 points from `days` ago to today, drifting linearly from start_prob to end_prob.

    The wobble is a fixed function of the day offset and the endpoints, so the
    same arguments always give the same series.
    """
    days = max(0, int(days))
    now = as_utc(now) if now is not None else utc_now()
    points = []
    for i in range(days, -1, -1):
        progress = (days - i) / max(days, 1)
        base = start_prob + (end_prob - start_prob) * progress
        noise = math.sin((i + 1) * 97 + start_prob * 137 + end_prob * 83) * NOISE_AMPLITUDE
        yes = clamp_probability(base + noise)
        points.append(
            PricePoint(
                day=(now - timedelta(days=i)).date(),
                yes=_percent(yes),
                no=_percent(1 - yes),
            )
        )
    return points
