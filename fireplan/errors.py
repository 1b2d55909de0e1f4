# fireplan/errors.py
# Exceptions raised by the projection engine.


class FirePlanError(Exception):
    """Base class for engine errors."""


class UnknownGrowthModeError(FirePlanError, ValueError):
    """Raised when a growth strategy name is not registered."""

    def __init__(self, mode: str, known):
        self.mode = mode
        self.known = sorted(known)
        super().__init__(f"Unknown growth mode {mode!r}; expected one of {', '.join(self.known)}")
