"""
Chef orchestration: one generation round fans out one recipe request per chef
and folds the results back into KitchenState as they arrive.
"""
from __future__ import annotations

import asyncio
import logging
import random
from typing import Awaitable, Callable, List, Optional, Sequence, Set, Tuple

from kitchenking.shared.config.settings import settings
from kitchenking.shared.eventbus.events import (
    EVENT_BUS,
    InProcEventBus,
    send_chef_update,
    send_done,
    send_reset,
    send_round_completed,
    send_round_started,
)
from kitchenking.shared.llm.errors import RequestError
from kitchenking.features.kitchen.app.ambient import AmbientCue, LoggingCue
from kitchenking.features.kitchen.app.recipe_client import request_recipe
from kitchenking.features.kitchen.app.state import ChefUpdate, KitchenState
from kitchenking.features.kitchen.domain.models import Cuisine, Recipe
from kitchenking.features.kitchen.domain.roster import (
    completed_line,
    cooking_line,
    cuisine_for,
    default_roster,
    error_line,
)

log = logging.getLogger("kitchen")

# (ingredients, cuisine, api_key, allergies) -> Recipe
RecipeRequest = Callable[[str, str, str, Optional[str]], Awaitable[Recipe]]


class ChefOrchestrator:
    """Runs generation rounds against a KitchenState."""

    def __init__(
        self,
        state: KitchenState,
        *,
        request: RecipeRequest = request_recipe,
        cue: Optional[AmbientCue] = None,
        bus: Optional[InProcEventBus] = None,
        max_chefs: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.state = state
        self.request = request
        self.cue = cue if cue is not None else LoggingCue()
        self.bus = bus if bus is not None else EVENT_BUS
        self.max_chefs = max_chefs or settings.MAX_CHEFS
        self.rng = rng
        self._background: Set[asyncio.Task] = set()

    def _resolve_roster(self, roster: Optional[Sequence[str]]) -> List[Cuisine]:
        labels = list(roster) if roster is not None else default_roster()
        labels = [(label or "").strip() for label in labels]
        if not labels:
            raise ValueError("roster must contain at least one cuisine")
        if len(labels) > self.max_chefs:
            raise ValueError(f"at most {self.max_chefs} chefs can cook at once, got {len(labels)}")
        if any(not label for label in labels):
            raise ValueError("cuisine labels must not be empty")
        if len(set(labels)) != len(labels):
            raise ValueError("cuisine labels must be unique")
        return [cuisine_for(label) for label in labels]

    async def _open_round(self, ingredients: str, roster: Optional[Sequence[str]]) -> Tuple[str, List[Cuisine]]:
        if not ingredients or not ingredients.strip():
            raise ValueError("ingredients must not be empty")
        cuisines = self._resolve_roster(roster)
        round_id = await self.state.start_round(
            cuisines, [cooking_line(self.rng) for _ in cuisines]
        )
        log.info("round %s: %d chefs cooking [%s]", round_id, len(cuisines),
                 ", ".join(c.name for c in cuisines))
        self.cue.start()
        await send_round_started(
            self.bus, round_id, [c.model_dump(mode="json", by_alias=True) for c in self.state.chefs]
        )
        return round_id, cuisines

    async def run(
        self,
        ingredients: str,
        api_key: str,
        roster: Optional[Sequence[str]] = None,
        allergies: Optional[str] = None,
    ) -> None:
        """
        Cook one full round and return once every chef has finished.

        Results are only observable through the state store and the event bus.
        Individual chef failures never propagate out of here.
        """
        round_id, cuisines = await self._open_round(ingredients, roster)
        await self._cook_all(round_id, cuisines, ingredients, api_key, allergies)

    async def launch(
        self,
        ingredients: str,
        api_key: str,
        roster: Optional[Sequence[str]] = None,
        allergies: Optional[str] = None,
    ) -> str:
        """Open a round and cook it in the background; returns the round id."""
        round_id, cuisines = await self._open_round(ingredients, roster)
        task = asyncio.create_task(
            self._cook_all(round_id, cuisines, ingredients, api_key, allergies),
            name=f"round:{round_id}",
        )
        self._background.add(task)
        task.add_done_callback(self._background.discard)
        return round_id

    async def wait_idle(self) -> None:
        while self._background:
            await asyncio.gather(*list(self._background))

    async def reset(self) -> None:
        discarded = await self.state.reset()
        self.cue.stop()
        if discarded:
            log.info("round %s discarded", discarded)
        await send_reset(self.bus, discarded)

    async def _cook_all(
        self,
        round_id: str,
        cuisines: Sequence[Cuisine],
        ingredients: str,
        api_key: str,
        allergies: Optional[str],
    ) -> None:
        tasks = [
            asyncio.create_task(
                self._cook(round_id, c, ingredients, api_key, allergies),
                name=f"chef:{c.name}",
            )
            for c in cuisines
        ]
        await asyncio.gather(*tasks)
        if await self.state.finish_round(round_id):
            log.info("round %s finished: order=%s", round_id, self.state.completion_order)
            await send_done(self.bus, round_id)

    async def _cook(
        self,
        round_id: str,
        cuisine: Cuisine,
        ingredients: str,
        api_key: str,
        allergies: Optional[str],
    ) -> None:
        try:
            recipe = await self.request(ingredients, cuisine.name, api_key, allergies)
        except RequestError as e:
            log.warning("round %s: chef %s failed: %s", round_id, cuisine.name, e)
            update = await self.state.record_failure(round_id, cuisine.name, str(e), error_line(self.rng))
        except Exception as e:
            log.exception("round %s: chef %s crashed", round_id, cuisine.name)
            update = await self.state.record_failure(
                round_id, cuisine.name, f"未知错误: {e}", error_line(self.rng)
            )
        else:
            update = await self.state.record_success(
                round_id, cuisine.name, recipe, completed_line(cuisine.name, self.rng)
            )
        await self._publish(round_id, update)

    async def _publish(self, round_id: str, update: ChefUpdate) -> None:
        if not update.applied:
            log.debug("round %s: late result discarded", round_id)
            return
        await send_chef_update(self.bus, round_id, update.chef.model_dump(mode="json", by_alias=True))
        if update.round_completed:
            self.cue.stop()
            await send_round_completed(self.bus, round_id, update.completion_order)
