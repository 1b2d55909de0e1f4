# fireplan/strategies/monthly.py
# Monthly compounding: return, raises and inflation all applied every month
# at their effective monthly rates.
from __future__ import annotations

import logging
import math
from typing import List

from ..rates import MONTHS_PER_YEAR, annual_to_effective_monthly
from ..schema import Assumptions, FinancialProfile, MonthlySnapshot

logger = logging.getLogger(__name__)

DEFAULT_HORIZON_MONTHS = 1200


def simulate_investment(profile: FinancialProfile, annual_return_rate: float,
                        retirement_offset_years: int | None = None,
                        horizon_months: int = DEFAULT_HORIZON_MONTHS) -> List[MonthlySnapshot]:
    """
    Returns horizon_months + 1 snapshots: month 0 is the untouched starting
    state, month k the state after k months.
    Once retired, the monthly flow is -expenses and income stops growing.
    No income cap is applied in this mode.
    """
    r_return = annual_to_effective_monthly(annual_return_rate)
    r_growth = annual_to_effective_monthly(profile.income_growth_rate)
    r_infl = annual_to_effective_monthly(profile.inflation_rate)

    assets = profile.current_assets
    income = profile.total_monthly_income
    expenses = profile.monthly_expenses

    rows = [MonthlySnapshot(month=0, assets=assets, monthly_income=income, monthly_expenses=expenses)]
    total_months = int(horizon_months) if math.isfinite(horizon_months) else 0
    for m in range(total_months):
        year = m // MONTHS_PER_YEAR
        retired = retirement_offset_years is not None and year >= retirement_offset_years

        net = -expenses if retired else income - expenses
        assets = assets + assets * r_return + net

        if not retired:
            income *= (1.0 + r_growth)
        expenses *= (1.0 + r_infl)

        rows.append(MonthlySnapshot(month=m + 1, assets=assets,
                                    monthly_income=0.0 if retired else income,
                                    monthly_expenses=expenses))
    return rows


def project_profile(profile: FinancialProfile, assumptions: Assumptions,
                    horizon_years: int) -> List[MonthlySnapshot]:
    logger.debug("monthly projection: %d years, return %.2f%%/yr, retire offset %s",
                 horizon_years, assumptions.annual_return_rate, assumptions.retirement_offset_years)
    return simulate_investment(profile, assumptions.annual_return_rate,
                               retirement_offset_years=assumptions.retirement_offset_years,
                               horizon_months=horizon_years * MONTHS_PER_YEAR if horizon_years > 0 else 0)
