# -*- coding: utf-8 -*-
"""Foods — FatSecret food search.

``search_foods`` keeps only the first hit of ``foods.food``; the lookup screen
shows a single best match. The rest of the envelope (paging, totals) is
passed through untouched.
"""

from __future__ import annotations

from typing import Any, Dict

from ..fatsecret.client import FatSecretClient
from ..fatsecret.models import as_list


def search_foods(
    client: FatSecretClient,
    search_expression: str,
    max_results: int = 10,
    page_number: int = 0,
) -> Dict[str, Any]:
    payload = client.search_foods(search_expression, max_results, page_number)
    foods = payload.get("foods")
    if not isinstance(foods, dict):
        return payload
    hits = as_list(foods.get("food"))
    if not hits:
        return payload
    return {**payload, "foods": {**foods, "food": hits[0]}}
