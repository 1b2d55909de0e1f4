# fireplan/projection.py
from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional

import pandas as pd

from .ages import age_at_month, horizon_years_from_age
from .metrics import (TARGET_ASSET_MULTIPLE, months_to_target, months_to_target_or_never,
                      months_until_depletion, safety_score)
from .schema import Assumptions, FinancialProfile, MonthlySnapshot
from .strategies.annual import project_scenarios  # noqa: F401  (public engine entry point)
from .strategies.monthly import simulate_investment  # noqa: F401
from .strategies.registry import get_growth_strategy

logger = logging.getLogger(__name__)

CORE_COLS = [
    "Month", "Age", "Assets",
    "Monthly Income", "Monthly Expenses",
    "Annual Income", "Annual Expenses",
]


def depletion_month(snapshots: List[MonthlySnapshot]) -> Optional[int]:
    """First month whose assets are below zero, or None if they never are."""
    for s in snapshots:
        if s.assets < 0:
            return s.month
    return None


def resolve_horizon(profile: FinancialProfile, assumptions: Assumptions) -> int:
    # an explicit horizon on the profile wins; otherwise run until end_age
    if profile.years is not None:
        if not math.isfinite(profile.years):
            return 0
        return max(0, int(profile.years))
    return horizon_years_from_age(profile.current_age, assumptions.end_age)


def to_table(snapshots: List[MonthlySnapshot], current_age: int,
             round_whole: bool = True) -> pd.DataFrame:
    rows = []
    for s in snapshots:
        rows.append({
            "Month": s.month,
            "Age": age_at_month(current_age, s.month),
            "Assets": s.assets,
            "Monthly Income": s.monthly_income,
            "Monthly Expenses": s.monthly_expenses,
            "Annual Income": s.monthly_income * 12,
            "Annual Expenses": s.monthly_expenses * 12,
        })
    df = pd.DataFrame(rows, columns=CORE_COLS)

    if round_whole and not df.empty:
        num_cols = df.select_dtypes(include=["float64", "float32"]).columns
        df[num_cols] = df[num_cols].round(0)
    return df


# -------- Engine --------
def run(profile: FinancialProfile, assumptions: Assumptions | None = None) -> Dict[str, Any]:
    """
    Recompute everything for one profile: the projection in the selected growth
    mode plus the static estimates. Call again whenever an input changes; no state
    is kept between calls.
    """
    assumptions = assumptions or Assumptions()
    horizon = resolve_horizon(profile, assumptions)
    project = get_growth_strategy(assumptions.growth_mode)

    logger.debug("run: mode=%s horizon=%dy age=%d assets=%.0f income=%.0f expenses=%.0f",
                 assumptions.growth_mode, horizon, profile.current_age,
                 profile.current_assets, profile.total_monthly_income, profile.monthly_expenses)

    snapshots = project(profile, assumptions, horizon)
    broke_at = depletion_month(snapshots)
    if broke_at is not None:
        logger.info("assets deplete in month %d (age %d)",
                    broke_at, age_at_month(profile.current_age, broke_at))

    target_amount = profile.current_assets * TARGET_ASSET_MULTIPLE
    return {
        "snapshots": snapshots,
        "table": to_table(snapshots, profile.current_age, assumptions.round_whole),
        "depletion_month": broke_at,
        "months_until_depletion": months_until_depletion(profile),
        "months_to_target": months_to_target(profile, target_amount),
        "months_to_target_or_never": months_to_target_or_never(profile, target_amount),
        "safety_score": safety_score(profile),
        "rules_version": assumptions.rules_version,
    }
