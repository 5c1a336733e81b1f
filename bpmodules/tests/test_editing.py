"""Tests for inventory editing helpers (editing.py)."""
from bpmodules import (
    EffectSlot, Module, create_empty_module, get_available_effects, get_valid_modules,
    remove_module, update_module_effect,
)


class TestCreateEmptyModule:
    def test_three_empty_slots(self) -> None:
        m = create_empty_module("Module 1")
        assert m.id == "Module 1"
        assert m.effects == (EffectSlot(), EffectSlot(), EffectSlot())

    def test_empty_module_is_not_valid(self) -> None:
        assert get_valid_modules([create_empty_module("Module 1")]) == []


class TestUpdateModuleEffect:
    def test_sets_name_and_level(self) -> None:
        modules = [create_empty_module("Module 1")]
        modules = update_module_effect(modules, 0, 0, "name", "Armor")
        modules = update_module_effect(modules, 0, 0, "level", 7)
        assert modules[0].effects[0] == EffectSlot(name="Armor", level=7)

    def test_duplicate_name_cleared_from_other_slots(self) -> None:
        modules = [Module(id="Module 1", effects=(
            EffectSlot(name="Armor", level=5),
            EffectSlot(name="Resistance", level=3),
            EffectSlot(),
        ))]
        updated = update_module_effect(modules, 0, 1, "name", "Armor")
        assert updated[0].effects[0] == EffectSlot(name="", level=5)
        assert updated[0].effects[1] == EffectSlot(name="Armor", level=3)

    def test_other_modules_and_input_untouched(self) -> None:
        modules = [create_empty_module("Module 1"), create_empty_module("Module 2")]
        updated = update_module_effect(modules, 1, 2, "level", 4)
        assert updated[0] is modules[0]
        assert modules[1].effects[2].level == 0
        assert updated[1].effects[2].level == 4


class TestRemoveModule:
    def test_renumbers_remaining(self) -> None:
        modules = [create_empty_module(f"Module {i}") for i in (1, 2, 3)]
        remaining = remove_module(modules, 0)
        assert [m.id for m in remaining] == ["Module 1", "Module 2"]

    def test_last_module_kept(self) -> None:
        modules = [create_empty_module("Module 1")]
        assert remove_module(modules, 0) == modules


class TestGetAvailableEffects:
    def test_excludes_prioritized_in_catalogue_order(self) -> None:
        catalogue = ["Armor", "Resistance", "Agility Boost", "Elite Strike"]
        assert get_available_effects(["Elite Strike", "Armor"], catalogue) == [
            "Resistance", "Agility Boost",
        ]
