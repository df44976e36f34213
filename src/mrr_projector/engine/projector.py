"""Revenue projector — base MRR → projected and "actual" monthly series.

Two series are produced per run:
  1. **projected** — deterministic monthly compound growth
       projected[i] = base × (1 + g/100)^i,   i = 0 … months_ahead − 1
  2. **actual** — the projection with independent ±5% noise per month
       actual[i] = projected[i] × (1 + u_i),   u_i ~ U[−0.05, 0.05]

The noise source is a ``numpy.random.Generator`` passed in by the caller.
Pass a seeded generator for reproducible output; ``None`` draws from a
fresh unseeded generator, so repeated calls differ.

``months_ahead < 1`` can only arrive by bypassing validation
(``ProjectionParameters.model_construct``).  It is clamped to zero
months: every series comes back empty.
"""

from __future__ import annotations

import logging
from datetime import date

import numpy as np

from mrr_projector.config.projection import ProjectionParameters
from mrr_projector.models.results import ProjectionResult

logger = logging.getLogger(__name__)

JITTER_AMPLITUDE = 0.05
"""Half-width of the uniform noise band applied to the actual series."""

MAX_FINITE = float(np.finfo(np.float64).max)
"""Ceiling that overflowing values saturate to."""


def saturate(values: np.ndarray) -> np.ndarray:
    """Replace overflow with ±``MAX_FINITE`` and NaN with 0 so every value is finite."""
    return np.nan_to_num(values, nan=0.0, posinf=MAX_FINITE, neginf=-MAX_FINITE)


def compound_growth_series(base_revenue: float, growth_rate_pct: float, months: int) -> np.ndarray:
    """Deterministic compound growth, shape ``(max(months, 0),)``.

    Long horizons at high rates overflow float64; those months saturate
    at ``MAX_FINITE`` instead of becoming infinite.
    """
    months = max(months, 0)
    factor = 1.0 + growth_rate_pct / 100.0
    with np.errstate(over="ignore", invalid="ignore"):
        series = base_revenue * np.power(factor, np.arange(months, dtype=np.float64))
    return saturate(series)


def apply_jitter(
    projected: np.ndarray,
    rng: np.random.Generator,
    amplitude: float = JITTER_AMPLITUDE,
) -> np.ndarray:
    """Multiply every value by an independent ``1 + U[−amplitude, amplitude]`` draw.

    Zero values stay zero.  Values pushed past ``MAX_FINITE`` saturate.
    """
    noise = rng.uniform(-amplitude, amplitude, size=projected.shape)
    with np.errstate(over="ignore"):
        return saturate(projected * (1.0 + noise))


def period_sequence(start: date, months: int) -> list[date]:
    """First-of-month dates ``start, start + 1 month, …`` (``months`` entries)."""
    periods: list[date] = []
    for i in range(max(months, 0)):
        offset = start.month - 1 + i
        periods.append(date(start.year + offset // 12, offset % 12 + 1, 1))
    return periods


def project_series(
    base_revenue: float,
    params: ProjectionParameters,
    rng: np.random.Generator | None = None,
) -> ProjectionResult:
    """Expand a base MRR into projected and actual series.

    Parameters
    ----------
    base_revenue : float
        MRR at the first period, usually from ``compute_base_revenue``.
    params : ProjectionParameters
        Horizon, growth rate and start month.
    rng : numpy.random.Generator, optional
        Noise source for the actual series.  ``None`` = unseeded.

    Returns
    -------
    ProjectionResult
        ``projected``, ``actual`` and ``periods`` of equal length.
    """
    months = params.months_ahead
    if months < 1:
        logger.debug("months_ahead=%s clamped to an empty projection", months)
        months = 0

    if rng is None:
        rng = np.random.default_rng()

    projected = compound_growth_series(base_revenue, params.monthly_growth_rate_pct, months)
    actual = apply_jitter(projected, rng)

    return ProjectionResult(
        base_revenue=base_revenue,
        monthly_growth_rate_pct=params.monthly_growth_rate_pct,
        projected=projected.tolist(),
        actual=actual.tolist(),
        periods=period_sequence(params.start_period, months),
    )
