"""Result models — pipeline output contracts."""

from mrr_projector.models.results import (
    AxisLabel,
    PeriodLabels,
    PipelineResult,
    PlotGeometry,
    PlotPoint,
    ProjectionResult,
    RevenueSummary,
)

__all__ = [
    "AxisLabel",
    "PeriodLabels",
    "PipelineResult",
    "PlotGeometry",
    "PlotPoint",
    "ProjectionResult",
    "RevenueSummary",
]
