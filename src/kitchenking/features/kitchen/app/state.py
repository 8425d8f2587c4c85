"""
Shared kitchen state: the chefs of the current round, the completion ledger
and the in-progress flag.

All writes go through the coroutine methods below, which serialize on one
asyncio.Lock and are gated by the round id so results of a discarded round are
dropped. Readers use ``snapshot()`` without locking.
"""
from __future__ import annotations

import asyncio
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from kitchenking.features.kitchen.domain.models import (
    Chef,
    ChefStatus,
    Cuisine,
    KitchenSnapshot,
    Recipe,
)


class RoundInProgressError(RuntimeError):
    pass


@dataclass
class ChefUpdate:
    """Outcome of one attempted transition."""

    applied: bool
    chef: Optional[Chef] = None
    round_completed: bool = False
    completion_order: List[str] = field(default_factory=list)


_IGNORED = ChefUpdate(applied=False)


class KitchenState:
    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self.round_id: Optional[str] = None
        self.is_generating: bool = False
        self.completion_order: List[str] = []
        self._chefs: Dict[str, Chef] = {}
        self._completion_signaled = False

    # --- reads ---

    @property
    def chefs(self) -> List[Chef]:
        return list(self._chefs.values())

    def chef(self, chef_id: str) -> Optional[Chef]:
        return self._chefs.get(chef_id)

    @property
    def all_finished(self) -> bool:
        return bool(self._chefs) and all(c.status.is_terminal for c in self._chefs.values())

    def sorted_chefs(self) -> List[Chef]:
        """Ranked chefs first in completion order, the rest in roster order."""
        order = {cid: i for i, cid in enumerate(self.completion_order)}
        roster = list(self._chefs)
        return sorted(
            self._chefs.values(),
            key=lambda c: (order.get(c.id, len(order)), roster.index(c.id)),
        )

    def snapshot(self) -> KitchenSnapshot:
        chefs = [c.model_copy() for c in self.sorted_chefs()]
        return KitchenSnapshot(
            round_id=self.round_id,
            is_generating=self.is_generating,
            all_finished=self.all_finished,
            completion_order=list(self.completion_order),
            chefs=chefs,
            cooking=sum(1 for c in chefs if c.status is ChefStatus.COOKING),
            completed=sum(1 for c in chefs if c.status is ChefStatus.COMPLETED),
            errored=sum(1 for c in chefs if c.status is ChefStatus.ERRORED),
        )

    # --- writes ---

    async def start_round(self, cuisines: Sequence[Cuisine], cooking_messages: Sequence[str] = ()) -> str:
        """Open a new round: every chef goes idle -> cooking, ledger cleared."""
        async with self._lock:
            if self.is_generating:
                raise RoundInProgressError(f"round {self.round_id} is still cooking")
            round_id = str(uuid.uuid4())
            chefs = {
                c.name: Chef(id=c.name, name=c.chef_name, cuisine=c.name, emoji=c.emoji)
                for c in cuisines
            }
            for i, chef in enumerate(chefs.values()):
                chef.status = ChefStatus.COOKING
                if cooking_messages:
                    chef.message = cooking_messages[i % len(cooking_messages)]
            self._chefs = chefs
            self.round_id = round_id
            self.completion_order = []
            self.is_generating = True
            self._completion_signaled = False
            return round_id

    def _cooking_chef(self, round_id: str, chef_id: str) -> Optional[Chef]:
        if round_id != self.round_id:
            return None
        chef = self._chefs.get(chef_id)
        if chef is None or chef.status is not ChefStatus.COOKING:
            return None
        return chef

    def _completion_edge(self) -> bool:
        if self._completion_signaled or not self.all_finished:
            return False
        self._completion_signaled = True
        return True

    async def record_success(self, round_id: str, chef_id: str, recipe: Recipe,
                             message: Optional[str] = None) -> ChefUpdate:
        async with self._lock:
            chef = self._cooking_chef(round_id, chef_id)
            if chef is None:
                return _IGNORED
            if chef_id not in self.completion_order:
                self.completion_order.append(chef_id)
            chef.status = ChefStatus.COMPLETED
            chef.recipe = recipe
            chef.message = message
            chef.error = None
            chef.rank = self.completion_order.index(chef_id) + 1
            return ChefUpdate(True, chef.model_copy(), self._completion_edge(), list(self.completion_order))

    async def record_failure(self, round_id: str, chef_id: str, error: str,
                             message: Optional[str] = None) -> ChefUpdate:
        async with self._lock:
            chef = self._cooking_chef(round_id, chef_id)
            if chef is None:
                return _IGNORED
            chef.status = ChefStatus.ERRORED
            chef.recipe = None
            chef.message = message
            chef.error = error
            return ChefUpdate(True, chef.model_copy(), self._completion_edge(), list(self.completion_order))

    async def finish_round(self, round_id: str) -> bool:
        async with self._lock:
            if round_id != self.round_id:
                return False
            self.is_generating = False
            return True

    async def reset(self) -> Optional[str]:
        """Discard the current round; returns the id that was discarded."""
        async with self._lock:
            discarded = self.round_id
            self.round_id = None
            self.is_generating = False
            self.completion_order = []
            self._chefs = {}
            self._completion_signaled = False
            return discarded
