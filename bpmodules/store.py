"""Optimizer inventory persistence (JSON)."""
import logging
import pathlib

import orjson
from pydantic import ValidationError

from bpmodules.constants import MODULE_DEFAULT_NAME_PREFIX, SLOT_CHOICES
from bpmodules.editing import create_empty_module
from bpmodules.models import Module

logger = logging.getLogger(__name__)

DEFAULT_NUM_SLOTS = 2


class ModuleStore:
    """Persists the module inventory, priority list and slot count to a JSON file."""

    CURRENT_VERSION = 1

    def __init__(self, base_dir: pathlib.Path):
        self.file_path = base_dir / "modules_optimizer.json"
        self.modules: list[Module] = _default_modules()
        self.priority_effects: list[str] = []
        self.num_slots: int = DEFAULT_NUM_SLOTS
        self._load()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load(self) -> None:
        if not self.file_path.exists():
            return
        try:
            raw = orjson.loads(self.file_path.read_bytes())
            modules = [Module.model_validate(m) for m in raw.get("modules", [])]
            priority_effects = [str(e) for e in raw.get("priority_effects", [])]
            num_slots = int(raw.get("num_slots", DEFAULT_NUM_SLOTS))
        except (orjson.JSONDecodeError, ValidationError, AttributeError, TypeError, ValueError) as e:
            logger.warning("Failed to load %s, using defaults: %s", self.file_path, e)
            return

        self.modules = modules or _default_modules()
        self.priority_effects = priority_effects
        self.num_slots = num_slots if num_slots in SLOT_CHOICES else DEFAULT_NUM_SLOTS

    def save(self) -> None:
        data = {
            "version": self.CURRENT_VERSION,
            "modules": [m.model_dump() for m in self.modules],
            "priority_effects": self.priority_effects,
            "num_slots": self.num_slots,
        }
        self.file_path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_modules(self, modules: list[Module]) -> None:
        self.modules = list(modules)
        self.save()

    def set_priority_effects(self, priority_effects: list[str]) -> None:
        self.priority_effects = list(priority_effects)
        self.save()

    def set_num_slots(self, num_slots: int) -> None:
        if num_slots not in SLOT_CHOICES:
            raise ValueError(f"num_slots must be one of {SLOT_CHOICES}, got {num_slots}")
        self.num_slots = num_slots
        self.save()

    def clear_all(self) -> None:
        self.modules = _default_modules()
        self.priority_effects = []
        self.num_slots = DEFAULT_NUM_SLOTS
        self.save()


def _default_modules() -> list[Module]:
    return [create_empty_module(f"{MODULE_DEFAULT_NAME_PREFIX} 1")]
