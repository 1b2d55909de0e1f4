# fireplan/strategies/registry.py
# Simple registry that returns a projection function for a growth mode.
from . import annual
from . import monthly
from ..errors import UnknownGrowthModeError

REGISTRY = {
    "annual": annual.project_profile,    # year-boundary raises/inflation (drives the chart)
    "monthly": monthly.project_profile,  # effective monthly compounding
}


def get_growth_strategy(mode: str):
    """
    Return the projection function registered under `mode`.
    Every strategy has the signature (profile, assumptions, horizon_years) -> snapshots.
    """
    key = (mode or "").lower()
    if key not in REGISTRY:
        raise UnknownGrowthModeError(mode, REGISTRY)
    return REGISTRY[key]
