"""Result types — the contract between engine, API, and dashboard.

Everything here is derived, never persisted.  A fresh set of results is
built on every pipeline run; nothing is mutated once returned.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


# ═══════════════════════════════════════════════════════════════════════════
# Projection
# ═══════════════════════════════════════════════════════════════════════════

class ProjectionResult(BaseModel):
    """Smooth projected series plus its jittered "actual" twin.

    ``projected``, ``actual`` and ``periods`` always share one length;
    index *i* is the month ``start_period + i``.
    """

    base_revenue: float
    """Aggregated MRR at the first period (Σ price × subscribers)."""

    monthly_growth_rate_pct: float

    projected: list[float]
    """base_revenue × (1 + g/100)^i — deterministic."""

    actual: list[float]
    """projected[i] × (1 + u_i), u_i ~ U[−5%, +5%] — noisy, no monotonicity."""

    periods: list[date]
    """First day of each projected month."""


# ═══════════════════════════════════════════════════════════════════════════
# Plot geometry
# ═══════════════════════════════════════════════════════════════════════════

class PlotPoint(BaseModel):
    """One vertex of a polyline in normalised 0–100 chart space."""

    x: float
    y: float
    value: float
    """The raw series value this point was mapped from."""


class AxisLabel(BaseModel):
    """One y-axis tick."""

    value: float
    label: str
    """Currency string, e.g. '€2,825'."""
    y: float
    """Normalised vertical position of the tick."""


class PlotGeometry(BaseModel):
    """Normalised geometry for every series drawn on one shared scale.

    ``y`` is inverted (screen coordinates): the series maximum sits at
    ``band[0]`` (top) and the minimum at ``band[1]`` (bottom).  When the
    range collapses to a single value every point is placed on the band
    midpoint instead of dividing by zero.
    """

    value_range: tuple[float, float]
    """(min, max) across the union of all input series."""

    band: tuple[float, float] = (10.0, 90.0)
    """(top, bottom) y-coordinates of the plotting band."""

    series: list[list[PlotPoint]] = Field(default_factory=list)
    """One polyline per input series, in input order."""

    axis_labels: list[AxisLabel] = Field(default_factory=list)
    """Ticks at max, midpoint, min (top to bottom)."""

    grid_lines: list[float] = Field(default_factory=list)
    """y-coordinates of horizontal grid lines."""

    @property
    def is_degenerate(self) -> bool:
        lo, hi = self.value_range
        return lo == hi

    def normalize(self, value: float) -> float:
        """Map a raw value into the plotting band."""
        lo, hi = self.value_range
        top, bottom = self.band
        if hi == lo:
            return (top + bottom) / 2
        # halved operands keep the subtraction finite near the float64 limit
        frac = (value / 2 - lo / 2) / (hi / 2 - lo / 2)
        return bottom - frac * (bottom - top)


class PeriodLabels(BaseModel):
    """Horizontal axis captions for the first and last projected month."""

    start: str
    end: str


# ═══════════════════════════════════════════════════════════════════════════
# Headline figures
# ═══════════════════════════════════════════════════════════════════════════

class RevenueSummary(BaseModel):
    """Scalar figures shown above the chart."""

    starting_mrr: float
    starting_mrr_label: str
    current_mrr: float
    """Last value of the actual series."""
    current_mrr_label: str
    growth_pct: float | None
    """(last − first) / first × 100, rounded. None = undefined (first is 0)."""
    growth_label: str
    """Signed display string, e.g. '+10.2%', or 'n/a'."""


class PipelineResult(BaseModel):
    """Complete output of one aggregate → project → map run."""

    projection: ProjectionResult
    geometry: PlotGeometry
    period_labels: PeriodLabels
    summary: RevenueSummary
