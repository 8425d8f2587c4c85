"""
Turn the raw text a chef model answered with into a Recipe.

The model is asked for a fenced ```json block but sometimes wraps the object in
prose or drops the fence. A fenced block always wins; only when there is none do
we go looking for a bare object.
"""
from __future__ import annotations

import json
import re
from typing import Any, Optional

from pydantic import ValidationError

from kitchenking.shared.llm.errors import RequestError

from .models import Recipe

_FENCE_RE = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)
_GREEDY_RE = re.compile(r"\{.*\}", re.DOTALL)

_decoder = json.JSONDecoder()

# raw_decode attempts per answer; stray braces past this point fall through to the greedy span
_MAX_SCAN = 64


class ParseFailure(RequestError):
    pass


class NoJsonFound(ParseFailure):
    def __init__(self) -> None:
        super().__init__("JSON解析错误: 未找到JSON内容")


class MalformedRecipe(ParseFailure):
    def __init__(self, detail: str) -> None:
        super().__init__("JSON解析错误: 菜谱格式不正确")
        self.detail = detail


def _scan_objects(text: str) -> Optional[str]:
    """First decodable object carrying ``dish_name``, else first decodable object."""
    first_obj: Optional[str] = None
    for attempt, m in enumerate(re.finditer(r"\{", text)):
        if attempt >= _MAX_SCAN:
            break
        try:
            obj, end = _decoder.raw_decode(text, m.start())
        except ValueError:
            continue
        if not isinstance(obj, dict):
            continue
        span = text[m.start():end]
        if "dish_name" in obj:
            return span
        if first_obj is None:
            first_obj = span
    return first_obj


def extract_json_block(content: str) -> str:
    """Locate the JSON text of the recipe inside a model answer."""
    fenced = _FENCE_RE.search(content or "")
    if fenced:
        return fenced.group(1)

    found = _scan_objects(content or "")
    if found is not None:
        return found

    greedy = _GREEDY_RE.search(content or "")
    if greedy:
        return greedy.group(0)
    raise NoJsonFound()


def parse_recipe(content: str) -> Recipe:
    raw = extract_json_block(content)
    try:
        data: Any = json.loads(raw)
    except ValueError as e:
        raise MalformedRecipe(f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedRecipe(f"expected a JSON object, got {type(data).__name__}")

    # ids are ours to assign
    data.pop("id", None)
    try:
        # strict: "1" is not a step number
        return Recipe.model_validate_json(json.dumps(data), strict=True)
    except ValidationError as e:
        raise MalformedRecipe(str(e)) from e
