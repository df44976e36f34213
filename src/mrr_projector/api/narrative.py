"""Narrative generator — plain-English interpretation of a projection.

Converts a ``PipelineResult`` into a short text report: where the base
MRR comes from, what the projection window looks like, and how the
"actual" series ended up relative to the smooth curve.
"""

from __future__ import annotations

from mrr_projector.config.scenario import Scenario
from mrr_projector.engine.aggregator import compute_tier_shares
from mrr_projector.engine.formatting import format_currency
from mrr_projector.models.results import PipelineResult


def generate_narrative(result: PipelineResult, scenario: Scenario) -> str:
    """Generate a plain-English narrative for one pipeline run.

    Sections:
      1. Tier breakdown (largest contributor first)
      2. Projection window and growth assumption
      3. Headline figures and chart range
    """
    p = result.projection
    s = result.summary
    d = scenario.display
    sym = d.currency_symbol

    def money(v: float) -> str:
        return format_currency(v, d.headline_decimals, sym)

    sections: list[str] = []

    # ── 1. Tier breakdown ──
    sections.append("=" * 60)
    sections.append("TIER BREAKDOWN")
    sections.append("=" * 60)
    shares = compute_tier_shares(scenario.tiers)
    if shares:
        for name, rev, share in shares:
            sections.append(f"  {name or '(unnamed)':30s}  {money(rev):>14s}  ({share * 100:5.1f}%)")
    else:
        sections.append("  No pricing tiers defined.")
    sections.append(f"\nBase MRR: {money(p.base_revenue)}")

    # ── 2. Projection ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("PROJECTION")
    sections.append("=" * 60)
    if not p.projected:
        sections.append("Empty projection window — nothing to plot.")
        return "\n".join(sections)

    rate = p.monthly_growth_rate_pct
    if rate > 0:
        trend = f"growing {rate:.1f}% per month"
    elif rate < 0:
        trend = f"declining {abs(rate):.1f}% per month"
    else:
        trend = "flat"
    sections.append(
        f"Window: {result.period_labels.start} → {result.period_labels.end} "
        f"({len(p.projected)} months)\n"
        f"Assumption: {trend}\n"
        f"Projected MRR at end of window: {money(p.projected[-1])}"
    )

    # ── 3. Headline ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("HEADLINE")
    sections.append("=" * 60)
    gap = s.current_mrr - p.projected[-1]
    position = "above" if gap > 0 else "below" if gap < 0 else "on"
    lo, hi = result.geometry.value_range
    sections.append(
        f"Starting MRR: {s.starting_mrr_label}\n"
        f"Current MRR: {s.current_mrr_label} ({s.growth_label} over the window)\n"
        f"Last actual month landed {money(abs(gap))} {position} the projection.\n"
        f"Chart range: {format_currency(lo, d.axis_decimals, sym)} – "
        f"{format_currency(hi, d.axis_decimals, sym)}"
    )

    return "\n".join(sections)
