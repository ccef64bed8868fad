# -*- coding: utf-8 -*-
"""Recipes — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import get_fatsecret_client
from ..fatsecret.client import FatSecretClient
from ..fatsecret.models import RecipeDetail
from .models import RecipeGenerateRequest, RecipeGenerateResponse
from .service import generate_recipes_for_patient

router = APIRouter(prefix="/recipes", tags=["Recipes"])
legacy_router = APIRouter(tags=["Recipes"])


def _generate(request: RecipeGenerateRequest, client: FatSecretClient) -> RecipeGenerateResponse:
    entries = generate_recipes_for_patient(client, request.cpf, request.preferences)
    return RecipeGenerateResponse(
        message="Recipes generated",
        recipes=entries,
        total_recipes=len(entries),
    )


@router.post("/generate", response_model=RecipeGenerateResponse, summary="Generate and store recipes for a patient")
def generate_recipes_api(
    request: RecipeGenerateRequest,
    client: FatSecretClient = Depends(get_fatsecret_client),
):
    return _generate(request, client)


@router.get("/{recipe_id}", response_model=RecipeDetail, summary="FatSecret recipe details")
def recipe_details_api(recipe_id: str, client: FatSecretClient = Depends(get_fatsecret_client)):
    return client.get_recipe_details(recipe_id)


@legacy_router.post("/gerarReceita", response_model=RecipeGenerateResponse, include_in_schema=False)
def generate_recipes_legacy_api(
    request: RecipeGenerateRequest,
    client: FatSecretClient = Depends(get_fatsecret_client),
):
    return _generate(request, client)
