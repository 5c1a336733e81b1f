"""bpmodules: module loadout optimizer."""

from bpmodules.errors import (
    FailureReason,
    OptimizationError,
    InsufficientModules,
    InsufficientModulesAfterFilter,
    NoFeasibleSolution,
)
from bpmodules.models import (
    EffectSlot, Module,
    SearchConfig, DEFAULT_SEARCH_CONFIG,
    Solution, OptimizationResult,
)
from bpmodules.scoring import (
    ModuleScorer, score_by_level, get_combined_effects, calculate_score,
)
from bpmodules.filters import get_valid_modules, prefilter_by_attribute
from bpmodules.optimizer import (
    ModuleOptimizer, SolutionPool,
    optimize, optimize_sync, optimize_exhaustive, get_combinations,
)
from bpmodules.editing import (
    create_empty_module, update_module_effect, remove_module, get_available_effects,
)
from bpmodules.store import ModuleStore

__all__ = [
    # Errors
    "FailureReason", "OptimizationError", "InsufficientModules",
    "InsufficientModulesAfterFilter", "NoFeasibleSolution",
    # Models
    "EffectSlot", "Module",
    "SearchConfig", "DEFAULT_SEARCH_CONFIG",
    "Solution", "OptimizationResult",
    # Scoring
    "ModuleScorer", "score_by_level", "get_combined_effects", "calculate_score",
    # Filtering
    "get_valid_modules", "prefilter_by_attribute",
    # Optimizer
    "ModuleOptimizer", "SolutionPool",
    "optimize", "optimize_sync", "optimize_exhaustive", "get_combinations",
    # Editing
    "create_empty_module", "update_module_effect", "remove_module", "get_available_effects",
    # Persistence
    "ModuleStore",
]
