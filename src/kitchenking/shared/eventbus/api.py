from __future__ import annotations

import json

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

router = APIRouter(tags=["stream"])

_TERMINAL = ("done", "reset")


def _ws_send_json(ws: WebSocket, obj: dict):
    return ws.send_text(json.dumps(obj, ensure_ascii=False, default=str))


async def _pump(ws: WebSocket, orchestrator, round_id: str) -> None:
    bus = orchestrator.bus
    # subscribe before the snapshot so nothing falls in between
    q = await bus.subscribe(round_id)
    try:
        # 1) backfill
        snap = orchestrator.state.snapshot()
        if snap.round_id != round_id:
            await _ws_send_json(ws, {"round_id": round_id, "type": "unknown_round"})
            return
        await _ws_send_json(ws, {"round_id": round_id, "type": "snapshot", "state": snap.model_dump(mode="json", by_alias=True)})
        if not snap.is_generating:
            await _ws_send_json(ws, {"round_id": round_id, "type": "done"})
            return

        # 2) live events
        while True:
            ev = await q.get()
            await _ws_send_json(ws, ev)
            if ev.get("type") in _TERMINAL:
                return
    finally:
        await bus.unsubscribe(round_id, q)


@router.websocket("/stream/{round_id}")
async def stream_ws(ws: WebSocket, round_id: str):
    await ws.accept()
    try:
        await _pump(ws, ws.app.state.orchestrator, round_id)
    except WebSocketDisconnect:
        return
    await ws.close()
