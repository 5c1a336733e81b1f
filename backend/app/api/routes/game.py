"""Public scoring-table endpoints. No auth required; the data is static."""
from typing import Any

from fastapi import APIRouter

from bpmodules.constants import EFFECT_LEVEL_CAPS, PRIORITY_MULTIPLIERS, SLOT_CHOICES, TIER_THRESHOLDS

router = APIRouter(prefix="/modules", tags=["modules"])


@router.get("/tiers")
def get_tiers() -> list[dict[str, int]]:
    """Combined-level thresholds and the score each one grants, highest first."""
    return [{"threshold": threshold, "score": score} for threshold, score in TIER_THRESHOLDS]


@router.get("/multipliers")
def get_multipliers() -> list[dict[str, int]]:
    """Score multiplier for each priority list position."""
    return [
        {"position": position, "multiplier": multiplier}
        for position, multiplier in enumerate(PRIORITY_MULTIPLIERS)
    ]


@router.get("/limits")
def get_limits() -> dict[str, Any]:
    """Allowed slot counts and per-slot level caps."""
    return {"slot_choices": list(SLOT_CHOICES), "effect_level_caps": list(EFFECT_LEVEL_CAPS)}
