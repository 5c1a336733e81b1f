"""Pydantic models for modules, solutions, and optimizer results.

These are the FastAPI-ready schemas: keep field names stable.
"""
from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from bpmodules.constants import (
    FULL_SEARCH_LIMIT, GREEDY_POOL_SIZE, MAX_ATTEMPTS, PREFILTER_TOP_K,
    REFINE_MAX_ITERATIONS, REFINE_MIN_RELEVANT, REFINE_SAMPLE_SIZE, SLOT_CHOICES,
    TARGET_SOLUTIONS, YIELD_EVERY,
)


# ---------------------------------------------------------------------------
# Module models
# ---------------------------------------------------------------------------

class EffectSlot(BaseModel):
    """One named effect on a module. An empty slot has name "" and level 0."""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    level: int = Field(default=0, ge=0)

    @property
    def is_active(self) -> bool:
        return bool(self.name) and self.level > 0


class Module(BaseModel):
    """A module owned by the player. Always exactly three effect slots."""
    model_config = ConfigDict(frozen=True)

    id: str
    effects: tuple[EffectSlot, EffectSlot, EffectSlot]

    def active_effects(self) -> list[EffectSlot]:
        return [e for e in self.effects if e.is_active]

    def level_of(self, effect_name: str) -> int:
        """Summed level of effect_name across this module's active slots."""
        return sum(e.level for e in self.effects if e.is_active and e.name == effect_name)


# ---------------------------------------------------------------------------
# Search configuration
# ---------------------------------------------------------------------------

class SearchConfig(BaseModel):
    """Budget and sizing knobs for one optimizer run."""
    model_config = ConfigDict(frozen=True)

    full_search_limit:     int = Field(default=FULL_SEARCH_LIMIT, ge=1)
    prefilter_top_k:       int = Field(default=PREFILTER_TOP_K, ge=1)
    greedy_pool_size:      int = Field(default=GREEDY_POOL_SIZE, ge=max(SLOT_CHOICES))
    refine_max_iterations: int = Field(default=REFINE_MAX_ITERATIONS, ge=0)
    refine_sample_size:    int = Field(default=REFINE_SAMPLE_SIZE, ge=1)
    refine_min_relevant:   int = Field(default=REFINE_MIN_RELEVANT, ge=0)
    target_solutions:      int = Field(default=TARGET_SOLUTIONS, ge=1)
    max_attempts:          int = Field(default=MAX_ATTEMPTS, ge=1)
    yield_every:           int = Field(default=YIELD_EVERY, ge=1)


DEFAULT_SEARCH_CONFIG = SearchConfig()


# ---------------------------------------------------------------------------
# Solutions and results
# ---------------------------------------------------------------------------

class Solution(BaseModel):
    """A complete choice of modules plus its score."""
    model_config = ConfigDict(frozen=True)

    modules: tuple[Module, ...]
    score: int

    @computed_field
    @property
    def key(self) -> tuple[str, ...]:
        """Order-independent identity: the sorted member ids."""
        return tuple(sorted(m.id for m in self.modules))


class OptimizationResult(BaseModel):
    """Best module combination found. Serializes with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_score: int
    optimal_modules: list[Module]
    combined_effects: dict[str, int]
    prioritized_effects: dict[str, int]
