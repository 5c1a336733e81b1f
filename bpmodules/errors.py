"""Terminal optimizer failures."""
from enum import Enum, unique


@unique
class FailureReason(str, Enum):
    INSUFFICIENT_MODULES              = "insufficient_modules"
    INSUFFICIENT_MODULES_AFTER_FILTER = "insufficient_modules_after_filter"
    NO_FEASIBLE_SOLUTION              = "no_feasible_solution"


class OptimizationError(Exception):
    """Base class for every way an optimize call can fail."""

    reason: FailureReason

    def __init__(self, message: str, num_slots: int, available: int = 0):
        super().__init__(message)
        self.num_slots = num_slots
        self.available = available


class InsufficientModules(OptimizationError):
    reason = FailureReason.INSUFFICIENT_MODULES

    def __init__(self, num_slots: int, available: int):
        super().__init__(
            f"You need at least {num_slots} modules with effects to calculate.",
            num_slots, available,
        )


class InsufficientModulesAfterFilter(OptimizationError):
    reason = FailureReason.INSUFFICIENT_MODULES_AFTER_FILTER

    def __init__(self, num_slots: int, available: int):
        super().__init__(
            f"Only {available} modules remain after filtering; "
            f"at least {num_slots} are required.",
            num_slots, available,
        )


class NoFeasibleSolution(OptimizationError):
    reason = FailureReason.NO_FEASIBLE_SOLUTION

    def __init__(self, num_slots: int, attempts: int, available: int):
        super().__init__(
            f"No valid {num_slots}-module combination found among {available} "
            f"candidates after {attempts} attempts.",
            num_slots, available,
        )
        self.attempts = attempts
