"""Coordinate mapper — numeric series → normalised chart geometry.

All series passed in one call share a single vertical scale computed from
the union of their values:

  normalize(v) = bottom − (v − min) / (max − min) × (bottom − top)

With the default 10/90 band that is ``90 − (v − min)/(max − min) × 80``:
the minimum plots at y = 90, the maximum at y = 10 (screen coordinates,
larger values higher).  A collapsed range (min == max) maps every value to
the band midpoint (50) instead of dividing by zero.

The range is taken over finite values only.  Non-finite inputs are clamped
before plotting: +inf to the maximum, -inf to the minimum, NaN to the
midpoint of the range, so no NaN or infinity reaches the geometry.

Horizontal placement for a series of length L:

  x_k = left_margin + k × plot_width / (L − 1)     (L > 1)
  x_0 = left_margin                                 (L == 1)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import date

from mrr_projector.config.display import DisplayConfig
from mrr_projector.engine.formatting import format_currency, format_period
from mrr_projector.models.results import AxisLabel, PeriodLabels, PlotGeometry, PlotPoint

logger = logging.getLogger(__name__)


def value_range(series: Sequence[Sequence[float]]) -> tuple[float, float]:
    """``(min, max)`` across the finite values of every series; ``(0.0, 0.0)`` when there are none."""
    values = [v for s in series for v in s if math.isfinite(v)]
    if not values:
        return 0.0, 0.0
    return float(min(values)), float(max(values))


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Finite stand-in for a non-finite value; finite values pass through."""
    if math.isnan(value):
        return lo / 2 + hi / 2
    if math.isinf(value):
        return hi if value > 0 else lo
    return value


def x_positions(length: int, left_margin: float = 16.0, plot_width: float = 84.0) -> list[float]:
    """Horizontal coordinates for ``length`` evenly spaced points."""
    if length <= 0:
        return []
    if length == 1:
        return [left_margin]
    step = plot_width / (length - 1)
    return [left_margin + k * step for k in range(length)]


def map_to_plot(
    series: Sequence[Sequence[float]],
    display: DisplayConfig | None = None,
) -> PlotGeometry:
    """Normalise one or more equal-length series onto a shared scale.

    Parameters
    ----------
    series : sequence of sequences of float
        Series to draw together, e.g. ``[projected, actual]``.
    display : DisplayConfig, optional
        Band, margins and label formatting.  Defaults to ``DisplayConfig()``.

    Returns
    -------
    PlotGeometry
        One polyline per input series, three y-axis ticks (max, mid, min)
        and grid lines at the top, middle and bottom of the band.

    Raises
    ------
    ValueError
        If no series is given or the series differ in length.
    """
    if display is None:
        display = DisplayConfig()
    if not series:
        raise ValueError("map_to_plot needs at least one series")

    lengths = {len(s) for s in series}
    if len(lengths) > 1:
        raise ValueError(f"All series must have the same length, got lengths {sorted(lengths)}")
    (length,) = lengths

    lo, hi = value_range(series)
    geometry = PlotGeometry(
        value_range=(lo, hi),
        band=(display.plot_top, display.plot_bottom),
        grid_lines=[display.plot_top, display.plot_mid, display.plot_bottom],
    )
    if geometry.is_degenerate:
        logger.debug("Degenerate value range %.2f; plotting on the midline", lo)

    clamped = [[clamp_value(float(v), lo, hi) for v in s] for s in series]
    if any(not math.isfinite(v) for s in series for v in s):
        logger.debug("Non-finite values clamped into range [%s, %s]", lo, hi)

    xs = x_positions(length, display.left_margin, display.plot_width)
    geometry.series = [
        [PlotPoint(x=x, y=geometry.normalize(v), value=v) for x, v in zip(xs, s)]
        for s in clamped
    ]

    # halves first: lo + hi overflows near the float64 limit
    ticks = [hi, lo / 2 + hi / 2, lo]
    geometry.axis_labels = [
        AxisLabel(
            value=t,
            label=format_currency(t, display.axis_decimals, display.currency_symbol),
            y=geometry.normalize(t),
        )
        for t in ticks
    ]
    return geometry


def period_labels(periods: Sequence[date]) -> PeriodLabels:
    """Captions for the first and last month of the horizontal axis."""
    if not periods:
        return PeriodLabels(start="", end="")
    return PeriodLabels(start=format_period(periods[0]), end=format_period(periods[-1]))
