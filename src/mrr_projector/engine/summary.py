"""Headline figures — current MRR and period-over-period growth.

  growth_pct = (last(actual) − first(actual)) / first(actual) × 100

A zero (or missing) first value has no defined growth.  Depending on
``DisplayConfig.zero_start_growth`` that case reports ``0.0`` or ``None``
(rendered as ``n/a``).  A ratio too large to represent as a float falls
back the same way; the result is never NaN or infinity.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Literal

from mrr_projector.config.display import DisplayConfig
from mrr_projector.engine.formatting import format_currency, format_growth
from mrr_projector.models.results import ProjectionResult, RevenueSummary


def compute_growth_pct(
    actual: Sequence[float],
    zero_policy: Literal["zero", "undefined"] = "zero",
    decimals: int = 1,
) -> float | None:
    """Growth from the first to the last value, rounded to ``decimals``."""
    if not actual or actual[0] == 0:
        return 0.0 if zero_policy == "zero" else None
    first, last = actual[0], actual[-1]
    ratio = (last - first) / first * 100
    if not math.isfinite(ratio):
        return 0.0 if zero_policy == "zero" else None
    pct = round(ratio, decimals)
    return 0.0 if pct == 0 else pct


def summarize(projection: ProjectionResult, display: DisplayConfig | None = None) -> RevenueSummary:
    """Build the headline figures from the actual series."""
    if display is None:
        display = DisplayConfig()
    actual = projection.actual
    starting = actual[0] if actual else 0.0
    current = actual[-1] if actual else 0.0
    growth = compute_growth_pct(actual, display.zero_start_growth, display.growth_decimals)

    def money(v: float) -> str:
        return format_currency(v, display.headline_decimals, display.currency_symbol)

    return RevenueSummary(
        starting_mrr=starting,
        starting_mrr_label=money(starting),
        current_mrr=current,
        current_mrr_label=money(current),
        growth_pct=growth,
        growth_label=format_growth(growth, display.growth_decimals),
    )
