# fireplan/ages.py
# Helpers for turning ages into simulation horizons and retirement offsets

from typing import Optional

END_AGE = 100  # projections run until this age


def horizon_years_from_age(current_age: int, end_age: int = END_AGE) -> int:
    """
    Number of years to simulate so the projection ends at end_age.
    Ages at or beyond end_age give 0 (empty projection).
    """
    return max(0, int(end_age) - int(current_age))


def retirement_offset_from_age(retirement_age: Optional[int], current_age: int) -> Optional[int]:
    """
    Convert a retirement age into a year offset from the simulation start.
    Returns None when no retirement age is set or it lies in the past.
    """
    if retirement_age is None:
        return None
    offset = int(retirement_age) - int(current_age)
    return offset if offset >= 0 else None


def age_at_month(current_age: int, month: int) -> int:
    # whole years only; a month index of 11 is still the starting age
    return int(current_age) + int(month) // 12
