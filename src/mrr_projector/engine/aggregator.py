"""Tier aggregation — pricing tiers → base monthly recurring revenue.

  base_mrr = Σ unit_price × subscriber_count

Inputs are trusted: range checks live on ``PricingTier``.  Out-of-range
values that slip past validation produce a wrong number, never an error.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from mrr_projector.config.tier import PricingTier


def compute_tier_revenue(tier: PricingTier) -> float:
    """Monthly revenue contributed by a single tier."""
    return tier.unit_price * tier.subscriber_count


def compute_base_revenue(tiers: Iterable[PricingTier]) -> float:
    """Sum of ``unit_price × subscriber_count`` over all tiers.

    Empty input → 0.0.  Uses ``math.fsum`` so the result does not depend
    on tier order.
    """
    return math.fsum(compute_tier_revenue(t) for t in tiers)


def compute_tier_shares(tiers: Iterable[PricingTier]) -> list[tuple[str, float, float]]:
    """Per-tier ``(name, revenue, share_of_total)`` sorted largest first.

    Share is 0.0 for every tier when the total is zero.
    """
    rows = [(t.name, compute_tier_revenue(t)) for t in tiers]
    total = math.fsum(r for _, r in rows)
    shares = [
        (name, rev, rev / total if total > 0 else 0.0)
        for name, rev in rows
    ]
    shares.sort(key=lambda x: x[1], reverse=True)
    return shares
