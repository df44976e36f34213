"""Top-level scenario — bundles all projector inputs."""

from pydantic import BaseModel, Field

from mrr_projector.config.tier import PricingTier
from mrr_projector.config.projection import ProjectionParameters
from mrr_projector.config.display import DisplayConfig


def _default_tiers() -> list[PricingTier]:
    return [PricingTier(name="Basic", unit_price=9.99, subscriber_count=100)]


class Scenario(BaseModel):
    """Complete input bundle for one pipeline run."""

    tiers: list[PricingTier] = Field(default_factory=_default_tiers)
    projection: ProjectionParameters = Field(default_factory=ProjectionParameters)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    random_seed: int | None = Field(
        default=None,
        description="Optional RNG seed for a reproducible 'actual' series. "
                    "None = non-deterministic.",
    )
