# -*- coding: utf-8 -*-
"""Recipes — Pydantic models.

Request bodies accept both snake_case and the camelCase keys sent by the
intake frontend (``maxCalories``, ``dietaryRestrictions`` ...).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DietaryPreferences(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    max_calories: Optional[float] = Field(None, alias="maxCalories", ge=0)
    dietary_restrictions: List[str] = Field(default_factory=list, alias="dietaryRestrictions")
    allergens: List[str] = Field(default_factory=list)
    preferred_ingredients: List[str] = Field(default_factory=list, alias="preferredIngredients")
    cuisine: Optional[str] = None
    meal_type: Optional[str] = Field(None, alias="mealType")
    spice_level: Optional[str] = Field(None, alias="spiceLevel")


class RecipeGenerateRequest(BaseModel):
    cpf: str = Field(..., min_length=1)
    preferences: DietaryPreferences = Field(default_factory=DietaryPreferences)


class RecipeEntry(BaseModel):
    id: str
    recipe_id: str
    name: str
    description: str = ""
    calories_per_serving: Optional[float] = None
    created_at: str
    preferences: Dict[str, Any] = Field(default_factory=dict)


class RecipeGenerateResponse(BaseModel):
    message: str
    recipes: List[RecipeEntry]
    total_recipes: int
