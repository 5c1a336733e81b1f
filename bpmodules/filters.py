"""Candidate filtering: drops empty modules and bounds large inventories."""
import logging
from collections.abc import Sequence

from bpmodules.constants import PREFILTER_TOP_K
from bpmodules.models import Module

logger = logging.getLogger(__name__)


def get_valid_modules(modules: Sequence[Module]) -> list[Module]:
    """Modules with at least one named, non-zero effect (input order kept)."""
    return [m for m in modules if any(e.is_active for e in m.effects)]


def prefilter_by_attribute(modules: Sequence[Module],
                           top_k: int = PREFILTER_TOP_K) -> list[Module]:
    """Union of the top_k modules for every effect name present.

    A module only contributes through its own effects, so one that is never
    among the top_k holders of any of them is dropped. Result keeps input order.
    """
    by_effect: dict[str, list[tuple[int, int]]] = {}
    for idx, module in enumerate(modules):
        for name in dict.fromkeys(e.name for e in module.active_effects()):
            by_effect.setdefault(name, []).append((idx, module.level_of(name)))

    keep: set[int] = set()
    for holders in by_effect.values():
        holders.sort(key=lambda x: x[1], reverse=True)
        keep.update(idx for idx, _ in holders[:top_k])

    reduced = [m for idx, m in enumerate(modules) if idx in keep]
    logger.debug("Prefilter kept %d of %d modules across %d effects",
                 len(reduced), len(modules), len(by_effect))
    return reduced
