from __future__ import annotations

import asyncio
import time
from typing import Any, Dict, List, Optional


class InProcEventBus:
    """Per-round fan-out of kitchen events to any number of subscribers."""

    def __init__(self) -> None:
        self._subs: Dict[str, List[asyncio.Queue]] = {}
        self._seq: Dict[str, int] = {}
        self._lock = asyncio.Lock()

    async def subscribe(self, round_id: str) -> asyncio.Queue:
        q: asyncio.Queue = asyncio.Queue(maxsize=1000)
        async with self._lock:
            self._subs.setdefault(round_id, []).append(q)
        return q

    async def unsubscribe(self, round_id: str, q: asyncio.Queue) -> None:
        async with self._lock:
            lst = self._subs.get(round_id, [])
            if q in lst:
                lst.remove(q)
            if not lst and round_id in self._subs:
                self._subs.pop(round_id, None)

    async def publish(self, event: Dict[str, Any]) -> Dict[str, Any]:
        round_id = event.get("round_id")
        if not round_id:
            raise ValueError("publish: 'round_id' is required in event")
        ev = dict(event)
        async with self._lock:
            seq = self._seq.get(round_id, 0) + 1
            self._seq[round_id] = seq
            ev.setdefault("seq", seq)
            ev.setdefault("created_at", time.time())
            queues = list(self._subs.get(round_id, []))
            if ev.get("type") in ("done", "reset"):
                self._seq.pop(round_id, None)
        for q in queues:
            try:
                q.put_nowait(ev)
            except asyncio.QueueFull:
                pass
        return ev


EVENT_BUS = InProcEventBus()


async def send_round_started(bus: InProcEventBus, round_id: str, chefs: List[Dict[str, Any]]) -> Dict[str, Any]:
    return await bus.publish({"round_id": round_id, "type": "round_started", "chefs": chefs})


async def send_chef_update(bus: InProcEventBus, round_id: str, chef: Dict[str, Any]) -> Dict[str, Any]:
    return await bus.publish({"round_id": round_id, "type": "chef_update", "chef": chef})


async def send_round_completed(bus: InProcEventBus, round_id: str, completion_order: List[str]) -> Dict[str, Any]:
    return await bus.publish(
        {"round_id": round_id, "type": "round_completed", "completion_order": completion_order}
    )


async def send_done(bus: InProcEventBus, round_id: str) -> Dict[str, Any]:
    return await bus.publish({"round_id": round_id, "type": "done"})


async def send_reset(bus: InProcEventBus, round_id: Optional[str]) -> Optional[Dict[str, Any]]:
    if not round_id:
        return None
    return await bus.publish({"round_id": round_id, "type": "reset"})
