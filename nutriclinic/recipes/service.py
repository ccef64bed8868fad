# -*- coding: utf-8 -*-
"""Recipes — generation for a patient (FatSecret search, filter, persist)."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List
from uuid import uuid4

from ..config import settings
from ..errors import NotFoundError
from ..fatsecret.client import FatSecretClient
from ..patients.storage import append_recipes, get_patient_by_cpf
from .models import DietaryPreferences, RecipeEntry

logger = logging.getLogger(__name__)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def generate_recipes_for_patient(
    client: FatSecretClient,
    cpf: str,
    preferences: DietaryPreferences,
) -> List[RecipeEntry]:
    patient = get_patient_by_cpf(cpf)
    if not patient:
        raise NotFoundError("Patient not found")

    recipes = client.get_recommended_recipes(preferences, max_results=settings.recipe_page_size)
    now = _utc_now()
    stored_preferences = preferences.model_dump(exclude_none=True)
    entries = [
        RecipeEntry(
            id=str(uuid4()),
            recipe_id=r.recipe_id,
            name=r.name,
            description=r.description,
            calories_per_serving=r.calories_per_serving,
            created_at=now,
            preferences=stored_preferences,
        )
        for r in recipes
    ]
    if entries:
        append_recipes(patient.id, entries)
    logger.info("Stored %d recipes for patient %s", len(entries), patient.id)
    return entries
