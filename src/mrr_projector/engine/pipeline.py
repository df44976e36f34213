"""Pipeline — one full aggregate → project → map → summarise run.

Entry point: ``run_pipeline(scenario)``

Callers (dashboard, API) invoke this on every input change.  The result
is assembled in full before it is returned, so a renderer never sees a
projection paired with geometry from an earlier run.
"""

from __future__ import annotations

import logging

import numpy as np

from mrr_projector.config.scenario import Scenario
from mrr_projector.engine.aggregator import compute_base_revenue
from mrr_projector.engine.plot import map_to_plot, period_labels
from mrr_projector.engine.projector import project_series
from mrr_projector.engine.summary import summarize
from mrr_projector.models.results import PipelineResult

logger = logging.getLogger(__name__)


def run_pipeline(scenario: Scenario, rng: np.random.Generator | None = None) -> PipelineResult:
    """Run the projector end-to-end for one scenario.

    ``rng`` takes precedence over ``scenario.random_seed``; with neither
    the actual series is non-reproducible.
    """
    if rng is None:
        rng = np.random.default_rng(scenario.random_seed)

    base = compute_base_revenue(scenario.tiers)
    logger.debug(
        "Projecting base MRR %.2f over %d months at %.2f%%/month",
        base, scenario.projection.months_ahead, scenario.projection.monthly_growth_rate_pct,
    )

    projection = project_series(base, scenario.projection, rng)
    geometry = map_to_plot([projection.projected, projection.actual], scenario.display)

    return PipelineResult(
        projection=projection,
        geometry=geometry,
        period_labels=period_labels(projection.periods),
        summary=summarize(projection, scenario.display),
    )
