"""Shared test fixtures — sample tiers, parameters and noise sources."""

from __future__ import annotations

from datetime import date

import numpy as np
import pytest

from mrr_projector.config import DisplayConfig, PricingTier, ProjectionParameters, Scenario


class ZeroNoise:
    """Stand-in for ``numpy.random.Generator`` whose uniform draws are all 0."""

    def uniform(self, low, high, size=None):
        return np.zeros(size)


class EdgeNoise:
    """Uniform draws pinned to one end of the interval."""

    def __init__(self, at_high: bool = True):
        self.at_high = at_high

    def uniform(self, low, high, size=None):
        return np.full(size, high if self.at_high else low)


@pytest.fixture
def zero_noise() -> ZeroNoise:
    return ZeroNoise()


@pytest.fixture
def high_noise() -> EdgeNoise:
    return EdgeNoise(at_high=True)


@pytest.fixture
def low_noise() -> EdgeNoise:
    return EdgeNoise(at_high=False)


@pytest.fixture
def basic_tier() -> PricingTier:
    return PricingTier(name="Basic", unit_price=9.99, subscriber_count=100)


@pytest.fixture
def tiers(basic_tier: PricingTier) -> list[PricingTier]:
    return [
        basic_tier,
        PricingTier(name="Pro", unit_price=29.0, subscriber_count=40),
        PricingTier(name="Enterprise", unit_price=199.5, subscriber_count=3),
    ]


@pytest.fixture
def params() -> ProjectionParameters:
    return ProjectionParameters(
        months_ahead=12,
        monthly_growth_rate_pct=10.0,
        start_period=date(2023, 1, 1),
    )


@pytest.fixture
def display() -> DisplayConfig:
    return DisplayConfig()


@pytest.fixture
def scenario(basic_tier: PricingTier, params: ProjectionParameters) -> Scenario:
    return Scenario(tiers=[basic_tier], projection=params)
