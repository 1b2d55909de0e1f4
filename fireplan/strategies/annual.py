# fireplan/strategies/annual.py
# Year-boundary growth: income raises and inflation land once per year, in month 12.
from __future__ import annotations

import logging
import math
from typing import List, Optional

from ..rates import MONTHS_PER_YEAR, annual_to_simple_monthly, to_base_units
from ..schema import Assumptions, FinancialProfile, MonthlySnapshot

logger = logging.getLogger(__name__)


def _grow_income(income: float, growth_pct: float, max_annual_income: Optional[float]) -> float:
    """
    Apply one year of income growth, clamped to the yearly cap.
    The cap arrives in ten-thousand units; 0 or None means uncapped.
    The clamp is decided on the candidate value, before it is committed.
    """
    factor = 1.0 + growth_pct / 100.0
    if max_annual_income and income * MONTHS_PER_YEAR * factor > to_base_units(max_annual_income):
        return to_base_units(max_annual_income) / MONTHS_PER_YEAR
    return income * factor


def project_scenarios(initial_assets: float, monthly_income: float, monthly_expenses: float,
                      monthly_return_rate: float, inflation_rate_pct: float,
                      income_growth_rate_pct: float, horizon_years: float,
                      retirement_offset_years: int | None = None,
                      max_annual_income: float | None = None) -> List[MonthlySnapshot]:
    """
    Month-by-month projection with annual compounding of income and expenses.

    - monthly_return_rate is a per-month fraction supplied by the caller (0.004 = 0.4%)
      and is applied every month.
    - Income growth and inflation are simple annual percentages applied after
      the last month of each year.
    - From year `retirement_offset_years` on, income is 0.
    - Assets are never floored; negative values mean depletion.

    Returns horizon_years * 12 snapshots, month 0 being the state after the
    first month (there is no leading initial-state row).
    """
    assets = initial_assets
    income = monthly_income
    expenses = monthly_expenses
    # a NaN or infinite horizon projects nothing
    total_months = int(horizon_years * MONTHS_PER_YEAR) if math.isfinite(horizon_years) else 0

    rows: List[MonthlySnapshot] = []
    for i in range(total_months):
        year = i // MONTHS_PER_YEAR
        retired = retirement_offset_years is not None and year >= retirement_offset_years
        effective_income = 0.0 if retired else income

        assets = assets * (1.0 + monthly_return_rate) + (effective_income - expenses)

        if i % MONTHS_PER_YEAR == MONTHS_PER_YEAR - 1:
            income = _grow_income(income, income_growth_rate_pct, max_annual_income)
            expenses *= (1.0 + inflation_rate_pct / 100.0)

        rows.append(MonthlySnapshot(month=i, assets=assets,
                                    monthly_income=effective_income,
                                    monthly_expenses=expenses))
    return rows


def project_profile(profile: FinancialProfile, assumptions: Assumptions,
                    horizon_years: int) -> List[MonthlySnapshot]:
    logger.debug("annual projection: %d years, return %.2f%%/yr, retire offset %s",
                 horizon_years, assumptions.annual_return_rate, assumptions.retirement_offset_years)
    return project_scenarios(
        profile.current_assets,
        profile.total_monthly_income,
        profile.monthly_expenses,
        annual_to_simple_monthly(assumptions.annual_return_rate),
        profile.inflation_rate,
        profile.income_growth_rate,
        horizon_years,
        retirement_offset_years=assumptions.retirement_offset_years,
        max_annual_income=profile.max_annual_income,
    )
