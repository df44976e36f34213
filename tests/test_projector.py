"""Tests for engine/projector.py — compound growth + jittered actual series.

Covers:
  - Exact compound growth values
  - Single-month, zero-base, flat and declining projections
  - Clamping of an unvalidated months_ahead < 1
  - Saturation of long, steep horizons at the float64 limit
  - Jitter bound over many seeds
  - Exact actual values with a seeded / stubbed generator
  - Calendar period sequence across year boundaries
"""

from __future__ import annotations

import math
from datetime import date

import numpy as np
import pytest

from mrr_projector.config import ProjectionParameters
from mrr_projector.engine.projector import (
    JITTER_AMPLITUDE,
    MAX_FINITE,
    apply_jitter,
    compound_growth_series,
    period_sequence,
    project_series,
    saturate,
)


# ═══════════════════════════════════════════════════════════════════════════
# Deterministic growth
# ═══════════════════════════════════════════════════════════════════════════

class TestCompoundGrowth:
    """projected[i] = base × (1 + g/100)^i."""

    def test_ten_percent_three_months(self):
        params = ProjectionParameters(months_ahead=3, monthly_growth_rate_pct=10)
        result = project_series(1000.0, params, np.random.default_rng(0))
        assert result.projected == pytest.approx([1000.0, 1100.0, 1210.0])

    def test_first_value_is_base(self, params: ProjectionParameters):
        result = project_series(999.0, params, np.random.default_rng(0))
        assert result.projected[0] == 999.0

    def test_length_matches_months_ahead(self, params: ProjectionParameters):
        result = project_series(999.0, params, np.random.default_rng(0))
        assert len(result.projected) == 12
        assert len(result.actual) == 12
        assert len(result.periods) == 12

    def test_flat_growth(self):
        params = ProjectionParameters(months_ahead=6, monthly_growth_rate_pct=0)
        result = project_series(500.0, params, np.random.default_rng(0))
        assert result.projected == [500.0] * 6

    def test_negative_growth_declines(self):
        params = ProjectionParameters(months_ahead=3, monthly_growth_rate_pct=-50)
        result = project_series(800.0, params, np.random.default_rng(0))
        assert result.projected == pytest.approx([800.0, 400.0, 200.0])

    def test_single_month_ignores_growth(self):
        params = ProjectionParameters(months_ahead=1, monthly_growth_rate_pct=250)
        result = project_series(42.0, params, np.random.default_rng(0))
        assert result.projected == [42.0]
        assert len(result.actual) == 1

    def test_zero_base_gives_all_zero(self, params: ProjectionParameters):
        result = project_series(0.0, params, np.random.default_rng(0))
        assert all(v == 0.0 for v in result.projected)
        assert all(v == 0.0 for v in result.actual)

    def test_helper_matches_formula(self):
        series = compound_growth_series(200.0, 5.0, 4)
        expected = [200.0 * 1.05 ** i for i in range(4)]
        assert series.tolist() == pytest.approx(expected)


# ═══════════════════════════════════════════════════════════════════════════
# Clamping
# ═══════════════════════════════════════════════════════════════════════════

class TestClamping:
    """months_ahead < 1 that bypassed validation → empty series."""

    @pytest.mark.parametrize("months", [0, -1, -24])
    def test_non_positive_months_give_empty_series(self, months: int):
        params = ProjectionParameters.model_construct(months_ahead=months)
        result = project_series(1000.0, params, np.random.default_rng(0))
        assert result.projected == []
        assert result.actual == []
        assert result.periods == []

    def test_helper_clamps(self):
        assert compound_growth_series(10.0, 5.0, -3).shape == (0,)
        assert period_sequence(date(2023, 1, 1), -3) == []


# ═══════════════════════════════════════════════════════════════════════════
# Saturation
# ═══════════════════════════════════════════════════════════════════════════

class TestSaturation:
    """Overflow saturates at MAX_FINITE instead of becoming infinite."""

    def test_fifty_years_at_steep_growth_stays_finite(self):
        params = ProjectionParameters(months_ahead=600, monthly_growth_rate_pct=1000.0)
        result = project_series(999.0, params, np.random.default_rng(0))
        assert len(result.projected) == 600
        assert all(math.isfinite(v) for v in result.projected)
        assert all(math.isfinite(v) for v in result.actual)
        assert result.projected[-1] == MAX_FINITE

    def test_early_months_unaffected(self):
        series = compound_growth_series(1.0, 1000.0, 600)
        assert series[:3].tolist() == pytest.approx([1.0, 11.0, 121.0])

    def test_jitter_past_the_limit_saturates(self, high_noise):
        out = apply_jitter(np.array([MAX_FINITE, 100.0]), high_noise)
        assert out[0] == MAX_FINITE
        assert out[1] == pytest.approx(105.0)

    def test_saturate_replaces_non_finite(self):
        out = saturate(np.array([np.inf, -np.inf, np.nan, 3.0]))
        assert out.tolist() == [MAX_FINITE, -MAX_FINITE, 0.0, 3.0]


# ═══════════════════════════════════════════════════════════════════════════
# Jitter
# ═══════════════════════════════════════════════════════════════════════════

class TestJitter:
    """actual[i] stays within ±5% of projected[i]."""

    def test_bound_holds_over_many_seeds(self, params: ProjectionParameters):
        for seed in range(200):
            result = project_series(999.0, params, np.random.default_rng(seed))
            for a, p in zip(result.actual, result.projected):
                assert abs(a - p) <= JITTER_AMPLITUDE * p + 1e-9

    def test_bound_holds_with_unseeded_generator(self, params: ProjectionParameters):
        for _ in range(50):
            result = project_series(999.0, params)
            for a, p in zip(result.actual, result.projected):
                assert abs(a - p) <= JITTER_AMPLITUDE * p + 1e-9

    def test_actual_differs_from_projected(self, params: ProjectionParameters):
        result = project_series(999.0, params, np.random.default_rng(1))
        assert result.actual != result.projected

    def test_same_seed_same_actual(self, params: ProjectionParameters):
        a = project_series(999.0, params, np.random.default_rng(42))
        b = project_series(999.0, params, np.random.default_rng(42))
        assert a.actual == b.actual

    def test_different_seeds_differ(self, params: ProjectionParameters):
        a = project_series(999.0, params, np.random.default_rng(1))
        b = project_series(999.0, params, np.random.default_rng(2))
        assert a.actual != b.actual

    def test_exact_values_with_seeded_generator(self):
        """Draws are taken in index order from the injected generator."""
        params = ProjectionParameters(months_ahead=3, monthly_growth_rate_pct=10)
        result = project_series(1000.0, params, np.random.default_rng(7))
        u = np.random.default_rng(7).uniform(-0.05, 0.05, size=3)
        expected = np.array([1000.0, 1100.0, 1210.0]) * (1 + u)
        assert result.actual == pytest.approx(expected.tolist())

    def test_zero_noise_reproduces_projection(self, params: ProjectionParameters, zero_noise):
        result = project_series(999.0, params, zero_noise)
        assert result.actual == result.projected

    def test_extreme_draws_hit_the_bound(self, high_noise, low_noise):
        projected = np.array([100.0, 200.0])
        assert apply_jitter(projected, high_noise).tolist() == pytest.approx([105.0, 210.0])
        assert apply_jitter(projected, low_noise).tolist() == pytest.approx([95.0, 190.0])


# ═══════════════════════════════════════════════════════════════════════════
# Periods
# ═══════════════════════════════════════════════════════════════════════════

class TestPeriods:
    """Index i ↔ start_period + i months."""

    def test_twelve_months_from_january(self, params: ProjectionParameters):
        result = project_series(999.0, params, np.random.default_rng(0))
        assert result.periods[0] == date(2023, 1, 1)
        assert result.periods[-1] == date(2023, 12, 1)

    def test_crosses_year_boundary(self):
        assert period_sequence(date(2023, 11, 1), 4) == [
            date(2023, 11, 1),
            date(2023, 12, 1),
            date(2024, 1, 1),
            date(2024, 2, 1),
        ]

    def test_multi_year(self):
        periods = period_sequence(date(2020, 6, 1), 30)
        assert periods[-1] == date(2022, 11, 1)

    def test_start_day_is_normalised(self):
        params = ProjectionParameters(months_ahead=2, start_period=date(2024, 3, 17))
        result = project_series(1.0, params, np.random.default_rng(0))
        assert result.periods == [date(2024, 3, 1), date(2024, 4, 1)]
