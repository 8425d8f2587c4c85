"""Tests for the recipe prompt builder."""

import pytest

from kitchenking.features.kitchen.domain.prompts import build_recipe_prompt


class TestBuildRecipePrompt:
    def test_embeds_cuisine_and_ingredients(self):
        prompt = build_recipe_prompt("鸡蛋，番茄，牛肉", "湘菜")
        assert "精通湘菜的五星级大厨" in prompt
        assert "食材：鸡蛋，番茄，牛肉" in prompt
        assert "湘菜特色" in prompt

    def test_is_deterministic(self):
        assert build_recipe_prompt("豆腐", "川菜", "花生") == build_recipe_prompt("豆腐", "川菜", "花生")

    def test_contains_output_contract(self):
        prompt = build_recipe_prompt("豆腐", "粤菜")
        assert "```json" in prompt
        for key in ('"dish_name"', '"main"', '"auxiliary"', '"seasoning"', '"step"', '"title"',
                    '"details"', '"tips"', '"taste"', '"special_effect"', '"disclaimer"'):
            assert key in prompt

    def test_contract_braces_are_literal(self):
        prompt = build_recipe_prompt("豆腐", "粤菜")
        assert "{{" not in prompt
        assert '"ingredients": {' in prompt

    def test_mentions_both_registers(self):
        prompt = build_recipe_prompt("键盘，鼠标", "法国菜")
        assert "专业模式" in prompt
        assert "幽默模式" in prompt

    def test_allergy_section_only_when_given(self):
        assert "忌口" not in build_recipe_prompt("虾仁", "泰国菜")
        assert "忌口" not in build_recipe_prompt("虾仁", "泰国菜", "   ")
        with_allergy = build_recipe_prompt("虾仁", "泰国菜", "海鲜过敏")
        assert "⚠️ 忌口/过敏信息：海鲜过敏" in with_allergy

    def test_ingredient_braces_pass_through(self):
        prompt = build_recipe_prompt("{神秘食材}", "俄罗斯菜")
        assert "食材：{神秘食材}" in prompt

    @pytest.mark.parametrize("cuisine", ["", "   "])
    def test_blank_cuisine_rejected(self, cuisine):
        with pytest.raises(ValueError, match="cuisine"):
            build_recipe_prompt("豆腐", cuisine)

    def test_blank_ingredients_rejected(self):
        with pytest.raises(ValueError, match="ingredients"):
            build_recipe_prompt("  ", "湘菜")
