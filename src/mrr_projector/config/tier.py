"""Pricing tiers — the rows of the tier editor."""

from pydantic import BaseModel, Field


class PricingTier(BaseModel):
    """One subscription plan: a unit price and how many customers pay it."""

    name: str = Field(default="", description="Display name, e.g. 'Basic'. May be empty while editing.")
    unit_price: float = Field(default=0.0, ge=0, allow_inf_nan=False, description="Monthly price per subscriber (€)")
    subscriber_count: int = Field(default=0, ge=0, description="Number of paying subscribers")
