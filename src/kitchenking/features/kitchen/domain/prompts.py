# src/kitchenking/features/kitchen/domain/prompts.py
from __future__ import annotations

from typing import Optional

ALLERGY_SECTION = """

⚠️ 忌口/过敏信息：{allergies}
请特别注意避免使用上述忌口食材，并在制作过程中确保不会引入过敏原。"""

RECIPE_PROMPT = """
你是一名精通{cuisine}的五星级大厨，根据用户提供的食材创作菜谱。

食材：{ingredients}{allergy_section}

**重要指示**：
请根据食材的特性智能判断创作风格：
- 如果是正常食材（如蔬菜、肉类、调料等），请提供专业的烹饪指导
- 如果是非食用物品或奇特组合（如电子产品、办公用品等），请用幽默夸张的方式创作，添加娱乐性质的内容

**通用要求**：
1. **智能判断风格**：根据食材特性决定是专业模式还是幽默模式
2. **{cuisine}特色**：充分体现{cuisine}的烹饪特点
3. **详细步骤**：提供完整详细的制作流程
4. **技术要点**：包含调料的多少、火候控制、时间的控制、预处理技巧等专业指导
5. **除了菜品名称外的所有文字都配上Emoji**

**幽默模式额外要求**（当判断为幽默模式时）：
- 用夸张和网络梗的风格描述
- 保持专业感但内容荒诞有趣
- 添加安全警告和冷笑话
- 必填免责声明提醒这只是娱乐

输出格式（严格JSON）：
```json
{{
  "dish_name": "创意菜名",
  "ingredients": {{
    "main": ["主要食材"],
    "auxiliary": ["辅助食材"],
    "seasoning": ["调料"]
  }},
  "steps": [
    {{
      "step": 1,
      "title": "步骤名称",
      "details": ["详细说明1", "详细说明2"]
    }}
  ],
  "tips": ["小贴士1", "小贴士2"],
  "flavor_profile": {{
    "taste": "口感描述",
    "special_effect": "特殊效果（可选）"
  }},
  "disclaimer": "免责声明（幽默模式时必填）"
}}
```
"""


def build_recipe_prompt(ingredients: str, cuisine: str, allergies: Optional[str] = None) -> str:
    """
    Prompt asking a chef of ``cuisine`` for one recipe as a fenced JSON block.
    Whether the ingredients are edible is left to the model to judge.
    """
    if not cuisine or not cuisine.strip():
        raise ValueError("cuisine must not be empty")
    if not ingredients or not ingredients.strip():
        raise ValueError("ingredients must not be empty")

    allergy_section = ""
    if allergies and allergies.strip():
        allergy_section = ALLERGY_SECTION.format(allergies=allergies.strip())

    return RECIPE_PROMPT.format(
        cuisine=cuisine.strip(),
        ingredients=ingredients.strip(),
        allergy_section=allergy_section,
    ).strip()
