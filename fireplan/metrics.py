# fireplan/metrics.py
# Static estimates computed straight from a profile (no scenario run involved)
from __future__ import annotations

import math
from typing import Tuple

from .rates import annual_to_effective_monthly, annual_to_simple_monthly
from .schema import FinancialProfile

INF = float("inf")
TARGET_MONTH_CAP = 1200        # 100 years; hard stop for non-converging savings
TARGET_ASSET_MULTIPLE = 300    # safety score target: 300x current assets
SURVIVAL_FULL_SCORE_MONTHS = 120


def months_until_depletion(profile: FinancialProfile) -> float:
    """
    Months until assets hit zero at today's burn rate.
    No growth, inflation or returns are applied.
    Returns inf when income covers expenses, otherwise floor(assets / burn).
    """
    net = profile.total_monthly_income - profile.monthly_expenses
    if net >= 0:
        return INF
    months = profile.current_assets / -net
    return math.floor(months) if math.isfinite(months) else months


def _accumulate(profile: FinancialProfile, target_amount: float) -> Tuple[float, float]:
    """Return (months, assets) after saving toward target_amount, stopping at the cap."""
    savings = profile.total_monthly_income - profile.monthly_expenses
    if savings <= 0:
        return INF, profile.current_assets

    # raises compound monthly; inflation is a flat monthly share
    step = 1.0 + annual_to_effective_monthly(profile.income_growth_rate) \
        - annual_to_simple_monthly(profile.inflation_rate)

    assets = profile.current_assets
    months = 0
    while assets < target_amount and months < TARGET_MONTH_CAP:
        assets += savings
        savings *= step
        months += 1
    return months, assets


def months_to_target(profile: FinancialProfile, target_amount: float) -> float:
    """
    Months of saving until assets reach target_amount.
    inf when nothing is saved; a run that never gets there returns TARGET_MONTH_CAP.
    """
    months, _ = _accumulate(profile, target_amount)
    return months


def months_to_target_or_never(profile: FinancialProfile, target_amount: float) -> float:
    """Like months_to_target, but an unreached target is reported as inf."""
    months, assets = _accumulate(profile, target_amount)
    if math.isfinite(months) and assets < target_amount:
        return INF
    return months


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def safety_score(profile: FinancialProfile) -> int:
    """
    Blend of survival time and time-to-target, bounded to [0, 100].
    - never depletes -> 100
    - already depleted -> 0
    - else mean of min(100, survival/120*100) and min(100, 1200/target*100)
    """
    survival = months_until_depletion(profile)
    target = months_to_target(profile, profile.current_assets * TARGET_ASSET_MULTIPLE)

    if survival == INF:
        return 100
    if not survival > 0:
        return 0

    survival_score = min(100.0, survival / SURVIVAL_FULL_SCORE_MONTHS * 100.0)
    # unreachable from here: target 0 needs assets <= 0, handled above
    if target == 0:
        target_score = 100.0
    else:
        target_score = min(100.0, TARGET_MONTH_CAP / target * 100.0)

    return max(0, min(100, _round_half_up((survival_score + target_score) / 2.0)))
