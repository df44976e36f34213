"""Engine — aggregation, projection, chart mapping and headline figures."""

from mrr_projector.engine.aggregator import compute_base_revenue, compute_tier_shares
from mrr_projector.engine.projector import project_series, JITTER_AMPLITUDE
from mrr_projector.engine.plot import map_to_plot, period_labels
from mrr_projector.engine.summary import compute_growth_pct, summarize
from mrr_projector.engine.formatting import format_currency, format_growth, format_period
from mrr_projector.engine.pipeline import run_pipeline

__all__ = [
    "compute_base_revenue",
    "compute_tier_shares",
    "project_series",
    "JITTER_AMPLITUDE",
    "map_to_plot",
    "period_labels",
    "compute_growth_pct",
    "summarize",
    "format_currency",
    "format_growth",
    "format_period",
    "run_pipeline",
]
