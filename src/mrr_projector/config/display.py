"""Display settings — currency, precisions and chart layout.

The chart lives in a normalised 0–100 coordinate box.  Values are drawn
inside the ``plot_top``–``plot_bottom`` band (y grows downwards, like
screen coordinates) and the first point sits at ``left_margin`` so the
axis labels have room on the left.
"""

from typing import Literal

from pydantic import BaseModel, Field


class DisplayConfig(BaseModel):
    """Formatting and layout inputs for the chart and headline figures."""

    currency_symbol: str = Field(default="€", description="Fixed display currency")
    axis_decimals: int = Field(default=0, ge=0, le=4, description="Decimals on y-axis tick labels")
    headline_decimals: int = Field(default=2, ge=0, le=4, description="Decimals on the headline MRR figures")
    growth_decimals: int = Field(default=1, ge=0, le=4, description="Decimals on the growth percentage")

    plot_top: float = Field(default=10.0, ge=0, le=100, description="y-coordinate of the series maximum")
    plot_bottom: float = Field(default=90.0, ge=0, le=100, description="y-coordinate of the series minimum")
    left_margin: float = Field(default=16.0, ge=0, le=100, description="x-coordinate of the first point")
    plot_width: float = Field(default=84.0, ge=0, le=100, description="Horizontal span from first to last point")

    zero_start_growth: Literal["zero", "undefined"] = Field(
        default="zero",
        description="Growth shown when the first actual value is 0: "
                    "'zero' = 0.0%, 'undefined' = n/a.",
    )

    @property
    def plot_mid(self) -> float:
        """Vertical midpoint of the plot band (50 with the defaults)."""
        return (self.plot_top + self.plot_bottom) / 2
