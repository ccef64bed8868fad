# -*- coding: utf-8 -*-
"""FatSecret — credentials and upstream payload models."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class ConsumerCredentials:
    key: str
    secret: str


class CredentialStore:
    """Holder for the consumer credentials currently used to sign requests.

    Rotation is explicit: callers read a frozen ``ConsumerCredentials`` per
    request and replace it as a whole through ``rotate``.
    """

    def __init__(self, credentials: ConsumerCredentials) -> None:
        self._credentials = credentials
        self._lock = threading.Lock()

    def current(self) -> ConsumerCredentials:
        with self._lock:
            return self._credentials

    def rotate(self, credentials: ConsumerCredentials) -> ConsumerCredentials:
        with self._lock:
            previous = self._credentials
            self._credentials = credentials
        return previous


def as_list(value: Any) -> List[Any]:
    # FatSecret collapses one-element collections into a bare object and omits empty ones.
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _to_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _to_int(value: Any) -> Optional[int]:
    number = _to_float(value)
    return int(number) if number is not None else None


class RecipeCandidate(BaseModel):
    recipe_id: str
    name: str
    description: str = ""
    calories_per_serving: Optional[float] = None
    recipe_url: Optional[str] = None

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "RecipeCandidate":
        nutrition = raw.get("recipe_nutrition") or {}
        calories = nutrition.get("calories") if isinstance(nutrition, dict) else None
        if calories is None:
            calories = raw.get("calories_per_serving")
        return cls(
            recipe_id=str(raw.get("recipe_id") or ""),
            name=str(raw.get("recipe_name") or ""),
            description=str(raw.get("recipe_description") or ""),
            calories_per_serving=_to_float(calories),
            recipe_url=raw.get("recipe_url"),
        )


class RecipeDetail(BaseModel):
    recipe_id: str
    name: str
    description: str = ""
    number_of_servings: Optional[float] = None
    preparation_time_min: Optional[int] = None
    cooking_time_min: Optional[int] = None
    calories_per_serving: Optional[float] = None
    serving_sizes: List[Dict[str, Any]] = Field(default_factory=list)
    ingredients: List[str] = Field(default_factory=list)
    directions: List[str] = Field(default_factory=list)
    recipe_url: Optional[str] = None

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "RecipeDetail":
        servings = as_list((raw.get("serving_sizes") or {}).get("serving"))
        calories = servings[0].get("calories") if servings else None
        ingredients = [
            str(i.get("ingredient_description") or i.get("food_name") or "")
            for i in as_list((raw.get("ingredients") or {}).get("ingredient"))
        ]
        directions = sorted(
            as_list((raw.get("directions") or {}).get("direction")),
            key=lambda d: _to_int(d.get("direction_number")) or 0,
        )
        return cls(
            recipe_id=str(raw.get("recipe_id") or ""),
            name=str(raw.get("recipe_name") or ""),
            description=str(raw.get("recipe_description") or ""),
            number_of_servings=_to_float(raw.get("number_of_servings")),
            preparation_time_min=_to_int(raw.get("preparation_time_min")),
            cooking_time_min=_to_int(raw.get("cooking_time_min")),
            calories_per_serving=_to_float(calories),
            serving_sizes=servings,
            ingredients=[i for i in ingredients if i],
            directions=[str(d.get("direction_description") or "") for d in directions],
            recipe_url=raw.get("recipe_url"),
        )


@dataclass(frozen=True)
class ProfileResult:
    user_id: str
    credentials: Optional[ConsumerCredentials] = None
