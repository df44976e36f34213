"""Projection window and growth assumptions."""

from datetime import date

from pydantic import BaseModel, Field, field_validator


class ProjectionParameters(BaseModel):
    """How far and how fast to extrapolate the base MRR.

    Only the year and month of ``start_period`` matter; the day is
    normalised to the 1st so that period arithmetic is unambiguous.
    """

    months_ahead: int = Field(default=12, ge=1, le=600, description="Number of monthly periods to project (max 50 years)")
    monthly_growth_rate_pct: float = Field(
        default=10.0,
        allow_inf_nan=False,
        description="Compound growth per month in percent. "
                    "Negative = decline, 0 = flat.",
    )
    start_period: date = Field(
        default=date(2023, 1, 1),
        description="First projected month (day is ignored)",
    )

    @field_validator("start_period")
    @classmethod
    def _first_of_month(cls, v: date) -> date:
        return v.replace(day=1)
