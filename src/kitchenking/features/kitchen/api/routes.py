from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from kitchenking.shared.config.settings import settings
from kitchenking.features.kitchen.app.orchestrator import ChefOrchestrator
from kitchenking.features.kitchen.app.state import RoundInProgressError
from kitchenking.features.kitchen.domain.models import Cuisine, KitchenSnapshot
from kitchenking.features.kitchen.domain.roster import DEFAULT_CUISINES, random_ingredients
from .schemas import GeneratePayload, RoundAccepted

router = APIRouter(prefix="/kitchen", tags=["kitchen"])
log = logging.getLogger("api")


def get_orchestrator(request: Request) -> ChefOrchestrator:
    return request.app.state.orchestrator


@router.post("/rounds", response_model=RoundAccepted)
async def start_round(payload: GeneratePayload, orchestrator: ChefOrchestrator = Depends(get_orchestrator)):
    api_key = (payload.api_key or settings.DEEPSEEK_API_KEY or "").strip()
    if not api_key:
        raise HTTPException(status_code=400, detail="DEEPSEEK_API_KEY is not configured")
    try:
        round_id = await orchestrator.launch(
            payload.ingredients,
            api_key,
            roster=payload.cuisines,
            allergies=payload.allergies,
        )
    except RoundInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return RoundAccepted(round_id=round_id)


@router.get("/state", response_model=KitchenSnapshot)
async def get_state(orchestrator: ChefOrchestrator = Depends(get_orchestrator)):
    return orchestrator.state.snapshot()


@router.post("/reset", response_model=KitchenSnapshot)
async def reset(orchestrator: ChefOrchestrator = Depends(get_orchestrator)):
    await orchestrator.reset()
    return orchestrator.state.snapshot()


@router.get("/cuisines", response_model=List[Cuisine])
async def list_cuisines():
    return DEFAULT_CUISINES


@router.get("/random-ingredients")
async def get_random_ingredients(count: int = Query(default=3, ge=1, le=10)):
    return {"ingredients": random_ingredients(count)}
