from __future__ import annotations
import time
from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])

@router.get("/health")
def health(request: Request):
    state = request.app.state.orchestrator.state
    return {"ok": True, "ts": time.time(), "generating": state.is_generating}
