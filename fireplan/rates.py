# fireplan/rates.py
# Helpers for converting annual percentage rates and ten-thousand display units

MANWON = 10_000  # one display unit = 10,000 base currency units
MONTHS_PER_YEAR = 12


def annual_to_effective_monthly(annual_percent: float) -> float:
    """
    Convert an annual percentage (e.g. 3 for 3%) to the equivalent monthly rate
    by compounding: (1 + r)^(1/12) - 1.
    Twelve months at the returned rate reproduce the annual rate exactly.
    """
    base = 1.0 + annual_percent / 100.0
    if base < 0:
        return float("nan")  # below -100%: no real monthly rate
    return base ** (1.0 / MONTHS_PER_YEAR) - 1.0


def annual_to_simple_monthly(annual_percent: float) -> float:
    """
    Naive monthly fraction: annual_percent / 100 / 12.
    Used where a plain per-month share of the annual rate is wanted
    (return slider input, inflation drag in the target-time estimate).
    """
    return annual_percent / 100.0 / MONTHS_PER_YEAR


def to_base_units(value: float) -> float:
    """Ten-thousand display units -> base currency units."""
    return value * MANWON


def from_base_units(value: float) -> float:
    """Base currency units -> ten-thousand display units."""
    return value / MANWON
