"""Tests for tier scoring and priority weighting (scoring.py)."""
import pytest

from bpmodules import (
    EffectSlot, Module, ModuleScorer, calculate_score, get_combined_effects, score_by_level,
)


def _make_module(module_id: str, *effects: tuple[str, int]) -> Module:
    slots = [EffectSlot(name=name, level=level) for name, level in effects]
    slots += [EffectSlot()] * (3 - len(slots))
    return Module(id=module_id, effects=tuple(slots))


class TestScoreByLevel:
    @pytest.mark.parametrize("level,expected", [
        (0, 0), (1, 1), (3, 1), (4, 4), (7, 4), (8, 8), (11, 8),
        (12, 12), (15, 12), (16, 16), (19, 16), (20, 20), (35, 20),
    ])
    def test_threshold_table(self, level: int, expected: int) -> None:
        assert score_by_level(level) == expected

    def test_monotonic_non_decreasing(self) -> None:
        scores = [score_by_level(level) for level in range(0, 45)]
        assert scores == sorted(scores)

    def test_zero_level_scores_zero(self) -> None:
        assert score_by_level(0) == 0


class TestGetCombinedEffects:
    def test_sums_same_effect_across_modules(self) -> None:
        a = _make_module("a", ("Str", 10), ("Agi", 3))
        b = _make_module("b", ("Str", 8), ("Int", 5))
        assert get_combined_effects([a, b]) == {"Str": 18, "Agi": 3, "Int": 5}

    def test_ignores_empty_and_zero_slots(self) -> None:
        m = Module(id="m", effects=(
            EffectSlot(name="Str", level=0),
            EffectSlot(name="", level=7),
            EffectSlot(name="Agi", level=2),
        ))
        assert get_combined_effects([m]) == {"Agi": 2}

    def test_empty_combination(self) -> None:
        assert get_combined_effects([]) == {}


class TestCalculateScore:
    def test_unweighted_sum_of_tier_scores(self, abc_modules: list[Module]) -> None:
        a, b, _ = abc_modules
        # Str 18 -> 16, Agi 9 -> 8
        assert calculate_score([a, b], []) == 24

    def test_first_priority_multiplies_by_ten(self, abc_modules: list[Module]) -> None:
        a, b, _ = abc_modules
        assert calculate_score([a, b], ["Str"]) == 16 * 10 + 8

    @pytest.mark.parametrize("position,multiplier", [(0, 10), (1, 7), (2, 5), (3, 3), (4, 2)])
    def test_multiplier_by_priority_position(self, position: int, multiplier: int) -> None:
        m = _make_module("m", ("Target", 8))
        priorities = [f"Other {i}" for i in range(5)]
        priorities[position] = "Target"
        assert calculate_score([m], priorities) == 8 * multiplier

    def test_unlisted_effects_count_once(self) -> None:
        m = _make_module("m", ("Str", 12), ("Agi", 4))
        assert calculate_score([m], ["Str"]) == 12 * 10 + 4

    def test_pure_and_order_independent(self, abc_modules: list[Module]) -> None:
        a, b, c = abc_modules
        first = calculate_score([a, b, c], ["Agi", "Str"])
        assert calculate_score([a, b, c], ["Agi", "Str"]) == first
        assert calculate_score([c, a, b], ["Agi", "Str"]) == first


class TestModuleScorer:
    def test_prescore_counts_only_prioritized_effects(self) -> None:
        scorer = ModuleScorer(["Str", "Agi"])
        m = _make_module("m", ("Str", 8), ("Agi", 9), ("Int", 5))
        assert scorer.prescore(m) == 8 * 10 + 9 * 7

    def test_prescore_without_priorities_is_zero(self, abc_modules: list[Module]) -> None:
        scorer = ModuleScorer([])
        assert all(scorer.prescore(m) == 0 for m in abc_modules)

    def test_touches_priority(self, abc_modules: list[Module]) -> None:
        a, b, c = abc_modules
        scorer = ModuleScorer(["Str"])
        assert scorer.touches_priority(a) is True
        assert scorer.touches_priority(b) is True
        assert scorer.touches_priority(c) is False

    def test_prioritized_restricts_to_priority_names(self) -> None:
        scorer = ModuleScorer(["Str", "Luck"])
        assert scorer.prioritized({"Str": 18, "Agi": 19}) == {"Str": 18}
