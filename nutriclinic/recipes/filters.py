# -*- coding: utf-8 -*-
"""Recipes — search query building and dietary filtering.

FatSecret search hits only carry a name and a short description, so dietary
rules fall back to case-insensitive keyword containment over those two
fields. No stemming or negation handling: "meatless" still contains "meat".
Each rule is a plain predicate so a structured ingredient check can replace
the keyword heuristic without touching ``filter_recipes``.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence

from ..fatsecret.models import RecipeCandidate
from .models import DietaryPreferences

RecipeRule = Callable[[RecipeCandidate, DietaryPreferences], bool]

DEFAULT_SEARCH_TERM = "healthy"

VEGETARIAN_EXCLUDED = ("chicken", "beef", "pork", "fish", "meat", "bacon", "ham")
VEGAN_EXCLUDED = ("chicken", "beef", "pork", "fish", "meat", "cheese", "milk", "egg", "butter", "cream")


def build_search_query(preferences: DietaryPreferences) -> str:
    terms: List[str] = list(preferences.preferred_ingredients)
    terms.append(preferences.cuisine or "")
    terms.append(preferences.meal_type or "")
    query = " ".join(t.strip() for t in terms if t and t.strip())
    return query or DEFAULT_SEARCH_TERM


def _text(recipe: RecipeCandidate) -> str:
    return f"{recipe.name}\n{recipe.description}".lower()


def _mentions_any(recipe: RecipeCandidate, keywords: Iterable[str]) -> bool:
    text = _text(recipe)
    return any(k in text for k in keywords)


def _restrictions(preferences: DietaryPreferences) -> set[str]:
    return {r.strip().lower() for r in preferences.dietary_restrictions}


def within_calorie_ceiling(recipe: RecipeCandidate, preferences: DietaryPreferences) -> bool:
    if preferences.max_calories is None or recipe.calories_per_serving is None:
        return True
    return recipe.calories_per_serving <= preferences.max_calories


def fits_vegetarian(recipe: RecipeCandidate, preferences: DietaryPreferences) -> bool:
    if "vegetarian" not in _restrictions(preferences):
        return True
    return not _mentions_any(recipe, VEGETARIAN_EXCLUDED)


def fits_vegan(recipe: RecipeCandidate, preferences: DietaryPreferences) -> bool:
    if "vegan" not in _restrictions(preferences):
        return True
    return not _mentions_any(recipe, VEGAN_EXCLUDED)


def free_of_allergens(recipe: RecipeCandidate, preferences: DietaryPreferences) -> bool:
    allergens = [a.strip().lower() for a in preferences.allergens if a and a.strip()]
    if not allergens:
        return True
    return not _mentions_any(recipe, allergens)


DEFAULT_RULES: Sequence[RecipeRule] = (
    within_calorie_ceiling,
    fits_vegetarian,
    fits_vegan,
    free_of_allergens,
)


def filter_recipes(
    candidates: Iterable[RecipeCandidate],
    preferences: DietaryPreferences,
    rules: Sequence[RecipeRule] = DEFAULT_RULES,
) -> List[RecipeCandidate]:
    return [c for c in candidates if all(rule(c, preferences) for rule in rules)]
