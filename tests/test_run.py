"""
Tests for the recompute entry point and the growth-mode registry.
"""

import math
from dataclasses import replace

import pandas as pd
import pytest

from fireplan.errors import FirePlanError, UnknownGrowthModeError
from fireplan.projection import CORE_COLS, resolve_horizon, run
from fireplan.schema import Assumptions, FinancialProfile
from fireplan.strategies.registry import REGISTRY, get_growth_strategy


@pytest.fixture
def base_profile():
    return FinancialProfile(current_assets=50_000_000, monthly_income=4_000_000,
                            monthly_expenses=2_500_000, side_income=0.0,
                            income_growth_rate=2.0, inflation_rate=2.0,
                            current_age=40, max_annual_income=8_000)


class TestRegistry:
    def test_known_modes(self):
        assert set(REGISTRY) == {"annual", "monthly"}
        assert get_growth_strategy("ANNUAL") is REGISTRY["annual"]

    def test_unknown_mode(self):
        with pytest.raises(UnknownGrowthModeError) as exc:
            get_growth_strategy("weekly")
        assert isinstance(exc.value, ValueError)
        assert isinstance(exc.value, FirePlanError)
        assert "weekly" in str(exc.value)


class TestRun:
    def test_horizon_from_age(self, base_profile):
        assert resolve_horizon(base_profile, Assumptions()) == 60
        result = run(base_profile)
        assert len(result["snapshots"]) == 60 * 12

    def test_explicit_years_win(self, base_profile):
        p = replace(base_profile, years=5)
        assert len(run(p)["snapshots"]) == 60

    def test_non_finite_years_give_empty_projection(self, base_profile):
        for years in (float("nan"), float("inf")):
            result = run(replace(base_profile, years=years))
            assert result["snapshots"] == []
            assert result["table"].empty
            assert result["depletion_month"] is None

    def test_rules_version_is_reported(self, base_profile):
        assert run(base_profile)["rules_version"] == "fire.v1"
        assert run(base_profile, Assumptions(rules_version="custom"))["rules_version"] == "custom"

    def test_table(self, base_profile):
        df = run(base_profile, Assumptions(round_whole=False))["table"]
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == CORE_COLS
        assert len(df) == 720
        assert df["Age"].iloc[0] == 40
        assert df["Age"].iloc[-1] == 99
        assert df["Annual Income"].iloc[0] == pytest.approx(48_000_000)

    def test_rounding(self, base_profile):
        df = run(base_profile, Assumptions(annual_return_rate=7.0))["table"]
        assert (df["Assets"] == df["Assets"].round(0)).all()

    def test_monthly_mode(self, base_profile):
        result = run(base_profile, Assumptions(growth_mode="monthly"))
        assert len(result["snapshots"]) == 60 * 12 + 1
        assert result["snapshots"][0].assets == base_profile.current_assets

    def test_depletion_detected_after_retirement(self, base_profile):
        result = run(base_profile, Assumptions(annual_return_rate=0.0, retirement_offset_years=5))
        broke = result["depletion_month"]
        assert broke is not None and broke >= 60
        snaps = result["snapshots"]
        assert snaps[broke].assets < 0
        assert all(s.assets >= 0 for s in snaps[:broke])

    def test_static_metrics_included(self, base_profile):
        result = run(base_profile)
        assert result["months_until_depletion"] == math.inf
        assert result["safety_score"] == 100
        assert result["months_to_target"] <= 1200

    def test_empty_horizon(self):
        p = FinancialProfile(current_assets=1.0, monthly_income=0.0, monthly_expenses=0.0,
                             current_age=100)
        result = run(p)
        assert result["snapshots"] == []
        assert result["table"].empty
        assert result["depletion_month"] is None

    def test_unknown_mode_propagates(self, base_profile):
        with pytest.raises(UnknownGrowthModeError):
            run(base_profile, Assumptions(growth_mode="daily"))
