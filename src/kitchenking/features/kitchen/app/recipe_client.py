from __future__ import annotations

import logging
from typing import Optional

import httpx

from kitchenking.shared.llm.deepseek_client import complete_chat
from kitchenking.features.kitchen.domain.models import Recipe
from kitchenking.features.kitchen.domain.parser import parse_recipe
from kitchenking.features.kitchen.domain.prompts import build_recipe_prompt

log = logging.getLogger("kitchen.client")


async def request_recipe(
    ingredients: str,
    cuisine: str,
    api_key: str,
    allergies: Optional[str] = None,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> Recipe:
    """
    Ask one chef for one recipe.

    Raises a RequestError subclass on any failure (transport, HTTP status,
    envelope shape, or recipe parsing). Holds no state between calls.
    """
    prompt = build_recipe_prompt(ingredients, cuisine, allergies)
    messages = [{"role": "user", "content": prompt}]
    content = await complete_chat(messages, api_key=api_key, http_client=http_client)
    recipe = parse_recipe(content)
    log.info("cuisine=%s dish=%s", cuisine, recipe.name)
    return recipe
