# -*- coding: utf-8 -*-
"""Foods — API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from ..deps import get_fatsecret_client
from ..fatsecret.client import FatSecretClient
from .service import search_foods

router = APIRouter(prefix="/foods", tags=["Foods"])


@router.get("/search", summary="Search FatSecret foods (first match only)")
def search_foods_api(
    search_expression: str = Query(default="", description="Free-text food name"),
    max_results: int = Query(default=10, description="1..50"),
    page_number: int = Query(default=0, description=">= 0"),
    client: FatSecretClient = Depends(get_fatsecret_client),
) -> Dict[str, Any]:
    result = search_foods(client, search_expression, max_results, page_number)
    return {
        "success": True,
        "data": result,
        "query": {
            "search_expression": search_expression,
            "max_results": max_results,
            "page_number": page_number,
        },
    }


@router.get("/{food_id}", summary="FatSecret food details")
def get_food_api(food_id: str, client: FatSecretClient = Depends(get_fatsecret_client)) -> Dict[str, Any]:
    return {"food": client.get_food(food_id)}
