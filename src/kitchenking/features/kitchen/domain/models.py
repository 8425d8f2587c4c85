from __future__ import annotations

import uuid
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


def new_recipe_id() -> str:
    return str(uuid.uuid4())


class IngredientGroups(BaseModel):
    model_config = ConfigDict(frozen=True)

    main: List[str]
    auxiliary: List[str]
    seasoning: List[str]


class Step(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: int
    title: str
    details: List[str]


class FlavorProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    taste: str
    special_effect: Optional[str] = None


class Recipe(BaseModel):
    """
    One generated dish. Serialized with the same keys the model is asked to
    produce (``dish_name`` etc.) plus ``id``, so a dumped copy validates back
    into an equal recipe.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_recipe_id)
    name: str = Field(alias="dish_name")
    ingredients: IngredientGroups
    steps: List[Step]
    tips: List[str]
    flavor_profile: FlavorProfile
    disclaimer: Optional[str] = None


class ChefStatus(str, Enum):
    IDLE = "idle"
    COOKING = "cooking"
    COMPLETED = "completed"
    ERRORED = "errored"

    @property
    def is_terminal(self) -> bool:
        return self in (ChefStatus.COMPLETED, ChefStatus.ERRORED)


class Cuisine(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    emoji: str
    chef_name: str
    completed_messages: List[str] = Field(default_factory=list)


class Chef(BaseModel):
    id: str
    name: str
    cuisine: str
    emoji: str
    status: ChefStatus = ChefStatus.IDLE
    recipe: Optional[Recipe] = None
    message: Optional[str] = None
    error: Optional[str] = None
    rank: Optional[int] = None


class KitchenSnapshot(BaseModel):
    round_id: Optional[str] = None
    is_generating: bool = False
    all_finished: bool = False
    completion_order: List[str] = Field(default_factory=list)
    chefs: List[Chef] = Field(default_factory=list)
    cooking: int = 0
    completed: int = 0
    errored: int = 0
