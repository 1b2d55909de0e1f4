from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FinancialProfile:
    current_assets: float
    monthly_income: float
    monthly_expenses: float
    side_income: float = 0.0
    income_growth_rate: float = 2.0      # annual %, 3 means 3%
    inflation_rate: float = 2.0          # annual %
    monthly_return_rate: float = 0.5     # kept for other consumers; engine takes an annual return
    years: Optional[int] = None          # None -> derived from current_age
    current_age: int = 30
    max_annual_income: Optional[float] = 10_000  # ten-thousand units per year

    @property
    def total_monthly_income(self) -> float:
        return self.monthly_income + (self.side_income or 0.0)


@dataclass(frozen=True)
class MonthlySnapshot:
    month: int
    assets: float
    monthly_income: float
    monthly_expenses: float


@dataclass
class Assumptions:
    annual_return_rate: float = 4.0      # annual %
    growth_mode: str = "annual"          # "annual" | "monthly"
    retirement_offset_years: Optional[int] = None
    end_age: int = 100
    round_whole: bool = True
    rules_version: str = "fire.v1"
