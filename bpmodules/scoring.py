"""Tiered, priority-weighted scoring of module combinations."""
from collections.abc import Iterable, Sequence

from bpmodules.constants import DEFAULT_MULTIPLIER, PRIORITY_MULTIPLIERS, TIER_THRESHOLDS
from bpmodules.models import Module


def score_by_level(level: int) -> int:
    """Tier score of a combined effect level (0 below the lowest threshold)."""
    for threshold, score in TIER_THRESHOLDS:
        if level >= threshold:
            return score
    return 0


def get_combined_effects(combination: Iterable[Module]) -> dict[str, int]:
    """Sum effect levels by name across the combination."""
    combined: dict[str, int] = {}
    for module in combination:
        for effect in module.effects:
            if effect.is_active:
                combined[effect.name] = combined.get(effect.name, 0) + effect.level
    return combined


def get_priority_multipliers(priority_effects: Sequence[str]) -> dict[str, int]:
    """effect name -> multiplier by its position in the priority list."""
    lookup: dict[str, int] = {}
    for idx, name in enumerate(priority_effects):
        if idx < len(PRIORITY_MULTIPLIERS):
            lookup.setdefault(name, PRIORITY_MULTIPLIERS[idx])
        else:
            lookup.setdefault(name, DEFAULT_MULTIPLIER)
    return lookup


def calculate_score(combination: Iterable[Module], priority_effects: Sequence[str]) -> int:
    return ModuleScorer(priority_effects).score(combination)


class ModuleScorer:
    """Scores combinations against one priority list (multiplier lookup built once)."""

    def __init__(self, priority_effects: Sequence[str]):
        self.priority_effects: tuple[str, ...] = tuple(priority_effects)
        self.multipliers = get_priority_multipliers(self.priority_effects)

    def score(self, combination: Iterable[Module]) -> int:
        total = 0
        for name, level in get_combined_effects(combination).items():
            total += score_by_level(level) * self.multipliers.get(name, DEFAULT_MULTIPLIER)
        return total

    def prescore(self, module: Module) -> int:
        """Priority-weighted raw levels of one module; unprioritized effects count 0."""
        return sum(
            e.level * self.multipliers.get(e.name, 0)
            for e in module.effects if e.is_active
        )

    def touches_priority(self, module: Module) -> bool:
        return any(e.is_active and e.name in self.multipliers for e in module.effects)

    def prioritized(self, combined: dict[str, int]) -> dict[str, int]:
        """combined restricted to the prioritized effect names."""
        return {name: level for name, level in combined.items() if name in self.multipliers}
