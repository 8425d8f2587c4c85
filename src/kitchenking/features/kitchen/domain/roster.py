"""
Default chef line-up and the canned lines chefs say while cooking,
when a dish is done and when it goes wrong.
"""
from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence

from .models import Cuisine

DEFAULT_CUISINES: List[Cuisine] = [
    Cuisine(
        name="湘菜",
        emoji="🌶️",
        chef_name="辣椒王老张",
        completed_messages=[
            "小心烫手，赶紧尝尝！",
            "辣椒够劲，正宗湘味！",
            "火辣出锅，趁热享用！",
            "这个辣度刚刚好！",
            "湘菜精髓，一尝便知！",
            "麻辣鲜香，回味无穷！",
            "老张出品，必属精品！",
            "够辣够味，就是巴适！",
            "湖南风味，地道正宗！",
            "辣到心坎里，爽！",
        ],
    ),
    Cuisine(
        name="粤菜",
        emoji="🥬",
        chef_name="阿华师傅",
        completed_messages=[
            "请您品鉴，越吃越香！",
            "广式做法，原汁原味！",
            "清淡鲜美，营养丰富！",
            "火候刚好，嫩滑爽口！",
            "粤菜精髓，尽在其中！",
            "色香味俱全，请慢用！",
            "师傅手艺，值得信赖！",
            "岭南风味，独具特色！",
            "清香淡雅，回味甘甜！",
            "粤式经典，传统工艺！",
        ],
    ),
    Cuisine(
        name="川菜",
        emoji="🌶️",
        chef_name="麻辣刘大厨",
        completed_messages=[
            "辣得巴适，赶紧吃起！",
            "川味十足，麻辣过瘾！",
            "正宗川菜，香辣开胃！",
            "麻婆豆腐般的感觉！",
            "四川火锅的味道！",
            "巴蜀风味，地道正宗！",
            "麻辣鲜香，层次丰富！",
            "刘师傅出品，必须安逸！",
            "川菜之魂，尽在此菜！",
            "辣椒花椒，双重享受！",
        ],
    ),
    Cuisine(
        name="法国菜",
        emoji="🍷",
        chef_name="Pierre大师",
        completed_messages=[
            "Bon appétit，慢慢品尝！",
            "C'est magnifique，太棒了！",
            "法式浪漫，尽在盘中！",
            "Très délicieux，非常美味！",
            "米其林级别的享受！",
            "Voilà，完美呈现！",
            "法国大厨的骄傲！",
            "Exquis，精致绝伦！",
            "巴黎风味，浪漫满溢！",
            "Chef Pierre签名菜！",
        ],
    ),
    Cuisine(
        name="泰国菜",
        emoji="🍋",
        chef_name="Somchai师傅",
        completed_messages=[
            "酸辣开胃，请享用！",
            "Sawasdee，泰式风味！",
            "椰浆香浓，回味无穷！",
            "冬阴功般的酸爽！",
            "泰式经典，正宗口味！",
            "香茅柠檬，清香怡人！",
            "曼谷街头的味道！",
            "酸甜辣咸，层次分明！",
            "Very good，非常棒！",
            "泰国师傅亲手制作！",
        ],
    ),
    Cuisine(
        name="俄罗斯菜",
        emoji="🥔",
        chef_name="Ivan大叔",
        completed_messages=[
            "热乎乎出锅，快吃吧！",
            "Очень вкусно，太好吃了！",
            "俄式大餐，分量十足！",
            "西伯利亚的温暖！",
            "伏特加配菜，绝配！",
            "莫斯科风味，正宗地道！",
            "战斗民族的手艺！",
            "红菜汤般的浓郁！",
            "大叔秘制，独家配方！",
            "俄罗斯传统，世代传承！",
        ],
    ),
]

_BY_NAME: Dict[str, Cuisine] = {c.name: c for c in DEFAULT_CUISINES}

COOKING_STEPS: List[str] = [
    "正在热锅...",
    "加点盐...",
    "加点水...",
    "搅拌中...",
    "翻炒中...",
    "加点蒜...",
    "撒点辣椒...",
    "淋点酱油...",
    "切配菜...",
    "挤点柠檬...",
    "撒点香菜...",
    "大火爆炒...",
]

ERROR_MESSAGES: List[str] = [
    "太难了，做不出来！",
    "臣妾做不到呀！",
    "翻车了，下次再来！",
    "这道菜太护心了！",
    "技术不过关，告辞！",
    "实在搭不出来！",
    "我的天，太复杂了！",
    "打败，重新来过！",
    "这个难度超纲了！",
    "做砸了，换个试试！",
]

DEFAULT_COMPLETED_MESSAGE = "菜品完成！"

INGREDIENT_POOL: List[str] = [
    "鸡蛋", "番茄", "牛肉", "土豆", "洋葱", "鸡肉",
    "豆腐", "青菜", "蘑菇", "鱼肉", "生姜", "葱",
    "猪肉", "白菜", "虾仁", "黄瓜", "玉米", "青豆",
    "胡萝卜", "茄子", "青椒", "豆芽", "豆腐皮", "木耳",
    "菠菜", "芹菜", "韭菜", "黄花菜", "冬瓜", "南瓜",
    "豆角", "山药", "莲藕", "竹笋", "百合",
    "西兰花", "菜花", "生菜", "油麦菜", "苋菜", "芥蓝",
]


def default_roster() -> List[str]:
    return [c.name for c in DEFAULT_CUISINES]


def cuisine_for(label: str) -> Cuisine:
    """Display identity for a roster label; unknown labels get a generic chef."""
    found = _BY_NAME.get(label)
    if found is not None:
        return found
    return Cuisine(name=label, emoji="👨‍🍳", chef_name=f"{label}大厨")


def cooking_line(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(COOKING_STEPS)


def error_line(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(ERROR_MESSAGES)


def completed_line(label: str, rng: Optional[random.Random] = None) -> str:
    messages = cuisine_for(label).completed_messages
    if not messages:
        return DEFAULT_COMPLETED_MESSAGE
    return (rng or random).choice(messages)


def random_ingredients(count: int = 3, *, pool: Sequence[str] = INGREDIENT_POOL,
                       rng: Optional[random.Random] = None) -> str:
    """Pick ``count`` distinct ingredients and join them the way users type them."""
    count = max(1, min(count, len(pool)))
    picked = (rng or random).sample(list(pool), count)
    return "，".join(picked)
