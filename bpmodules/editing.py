"""Inventory editing helpers. All functions return new lists; inputs are untouched."""
from collections.abc import Sequence
from typing import Literal

from bpmodules.constants import EFFECTS_PER_MODULE, MODULE_DEFAULT_NAME_PREFIX
from bpmodules.models import EffectSlot, Module


def create_empty_module(module_id: str) -> Module:
    """A module with every slot empty.

    Not valid for optimization until effects are filled in: slots 1 and 2 take
    a name and level 1-10, slot 3 (gold modules only) a level 1-5.
    """
    return Module(id=module_id, effects=tuple(EffectSlot() for _ in range(EFFECTS_PER_MODULE)))


def update_module_effect(modules: Sequence[Module], module_index: int, effect_index: int,
                         field: Literal["name", "level"], value: str | int) -> list[Module]:
    """Set one field of one effect slot.

    Setting a name clears that name from the module's other slots so an effect
    never appears twice on the same module.
    """
    result: list[Module] = []
    for i, module in enumerate(modules):
        if i != module_index:
            result.append(module)
            continue

        effects = list(module.effects)
        if field == "name" and isinstance(value, str) and value:
            effects = [
                e.model_copy(update={"name": ""})
                if idx != effect_index and e.name == value else e
                for idx, e in enumerate(effects)
            ]
        effects[effect_index] = EffectSlot.model_validate(
            {**effects[effect_index].model_dump(), field: value})
        result.append(module.model_copy(update={"effects": tuple(effects)}))
    return result


def remove_module(modules: Sequence[Module], index: int,
                  prefix: str = MODULE_DEFAULT_NAME_PREFIX) -> list[Module]:
    """Remove one module and renumber the rest. The last module is never removed."""
    if len(modules) <= 1:
        return list(modules)
    remaining = [m for i, m in enumerate(modules) if i != index]
    return [m.model_copy(update={"id": f"{prefix} {i + 1}"}) for i, m in enumerate(remaining)]


def get_available_effects(priority_effects: Sequence[str],
                          catalogue: Sequence[str]) -> list[str]:
    """Catalogue effect names not already in the priority list."""
    chosen = set(priority_effects)
    return [name for name in catalogue if name not in chosen]
