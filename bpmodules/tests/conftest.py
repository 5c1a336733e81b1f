"""Shared fixtures for bpmodules unit tests.

Modules are constructed directly via Pydantic; no store or API involved.
Every source of randomness is a seeded random.Random so runs are reproducible.
"""
import random

import pytest

from bpmodules import EffectSlot, Module

EFFECT_NAMES = [
    "Strength Boost", "Agility Boost", "Intellect Boost", "Special Attack",
    "Elite Strike", "Healing Boost", "Resistance", "Armor",
]


def _make_module(module_id: str, *effects: tuple[str, int]) -> Module:
    """Module with the given (name, level) effects; missing slots are empty."""
    slots = [EffectSlot(name=name, level=level) for name, level in effects]
    slots += [EffectSlot()] * (3 - len(slots))
    return Module(id=module_id, effects=tuple(slots))


def _random_inventory(rng: random.Random, count: int,
                     names: list[str] | None = None) -> list[Module]:
    names = names or EFFECT_NAMES
    modules = []
    for i in range(count):
        picked = rng.sample(names, rng.choice((2, 3)))
        caps = (10, 10, 5)
        effects = [(name, rng.randint(1, caps[j])) for j, name in enumerate(picked)]
        modules.append(_make_module(f"Module {i + 1}", *effects))
    return modules


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture(scope="session")
def abc_modules() -> list[Module]:
    """A: Str 10 / B: Str 8 + Agi 9 / C: Agi 10."""
    return [
        _make_module("A", ("Str", 10)),
        _make_module("B", ("Str", 8), ("Agi", 9)),
        _make_module("C", ("Agi", 10)),
    ]


@pytest.fixture(scope="session")
def inventory() -> list[Module]:
    """Sixty mixed 2- and 3-effect modules."""
    return _random_inventory(random.Random(42), 60)


@pytest.fixture(scope="session")
def large_inventory() -> list[Module]:
    """Enough modules to trip the attribute prefilter (more than 100 valid)."""
    return _random_inventory(random.Random(7), 180)
