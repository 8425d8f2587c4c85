"""Shared fixtures for the KitchenKing test suite."""

import json

import pytest

from kitchenking.features.kitchen.domain.parser import parse_recipe


@pytest.fixture
def recipe_dict():
    """Complete recipe payload as the model is asked to produce it."""
    return {
        "dish_name": "番茄炒蛋",
        "ingredients": {
            "main": ["🍅 番茄 2个", "🥚 鸡蛋 3个"],
            "auxiliary": ["🧅 葱 1根"],
            "seasoning": ["🧂 盐 2克", "🍬 糖 5克"],
        },
        "steps": [
            {"step": 1, "title": "备料", "details": ["🔪 番茄切块", "🥣 鸡蛋打散"]},
            {"step": 2, "title": "炒蛋", "details": ["🔥 热油下蛋液"]},
            {"step": 3, "title": "合炒", "details": ["🍳 下番茄翻炒", "🧂 调味出锅"]},
        ],
        "tips": ["💡 番茄去皮口感更好"],
        "flavor_profile": {"taste": "😋 酸甜可口", "special_effect": "✨ 下饭神器"},
        "disclaimer": None,
    }


@pytest.fixture
def fenced_answer(recipe_dict):
    """Model answer with prose around a fenced JSON block."""
    body = json.dumps(recipe_dict, ensure_ascii=False, indent=2)
    return f"好的，这是我的作品：\n```json\n{body}\n```\n祝您用餐愉快！"


@pytest.fixture
def recipe(fenced_answer):
    return parse_recipe(fenced_answer)


@pytest.fixture
def make_envelope():
    """Chat-completion response body wrapping ``content``."""
    def _make(content):
        return {
            "id": "chatcmpl-1",
            "object": "chat.completion",
            "choices": [
                {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
            ],
        }
    return _make
