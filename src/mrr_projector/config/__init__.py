"""Configuration models — all projector input types."""

from mrr_projector.config.tier import PricingTier
from mrr_projector.config.projection import ProjectionParameters
from mrr_projector.config.display import DisplayConfig
from mrr_projector.config.scenario import Scenario

__all__ = [
    "PricingTier",
    "ProjectionParameters",
    "DisplayConfig",
    "Scenario",
]
