"""Module optimization endpoint.

The whole inventory and priority list travel in the request body; nothing is
persisted server-side. Supplying a seed makes the search reproducible.
"""
import random

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.config import settings
from bpmodules.constants import MAX_PRIORITY_EFFECTS
from bpmodules.errors import OptimizationError
from bpmodules.models import Module, OptimizationResult
from bpmodules.optimizer import ModuleOptimizer

router = APIRouter(prefix="/modules", tags=["modules"])


class OptimizeRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    modules: list[Module]
    num_slots: int = Field(ge=2, le=4)
    priority_effects: list[str] = Field(default_factory=list, max_length=MAX_PRIORITY_EFFECTS)
    seed: int | None = None


@router.post("/optimize", response_model=OptimizationResult)
async def run_optimize(req: OptimizeRequest) -> OptimizationResult:
    """Best combination of `numSlots` modules for the given priority list.

    ```json
    {
      "modules": [{"id": "Module 1", "effects": [{"name": "Armor", "level": 8}, ...]}],
      "numSlots": 3,
      "priorityEffects": ["Armor"]
    }
    ```
    """
    if len(req.modules) > settings.MAX_MODULES_PER_OPTIMIZE:
        raise HTTPException(
            status_code=422,
            detail=f"Too many modules (max {settings.MAX_MODULES_PER_OPTIMIZE}).",
        )
    if len(set(req.priority_effects)) != len(req.priority_effects):
        raise HTTPException(status_code=422, detail="Priority effects must be distinct.")

    rng = random.Random(req.seed) if req.seed is not None else random.Random()
    optimizer = ModuleOptimizer(rng=rng)
    try:
        return await optimizer.optimize(req.modules, req.num_slots, req.priority_effects)
    except OptimizationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
