# -*- coding: utf-8 -*-
"""FatSecret — signed REST client (food, recipe and profile methods)."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..errors import UpstreamError, ValidationError
from ..recipes.filters import build_search_query, filter_recipes
from ..recipes.models import DietaryPreferences
from .models import (
    ConsumerCredentials,
    CredentialStore,
    ProfileResult,
    RecipeCandidate,
    RecipeDetail,
    as_list,
)
from .signing import signed_parameters

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://platform.fatsecret.com/rest/server.api"
DEFAULT_PROFILE_URL = "https://platform.fatsecret.com/rest/profile/v1"
MAX_PAGE_SIZE = 50


def _check_paging(max_results: int, page_number: int) -> None:
    if not 1 <= int(max_results) <= MAX_PAGE_SIZE:
        raise ValidationError(f"max_results must be between 1 and {MAX_PAGE_SIZE}")
    if int(page_number) < 0:
        raise ValidationError("page_number must be greater than or equal to 0")


class FatSecretClient:
    def __init__(
        self,
        credentials: ConsumerCredentials | CredentialStore,
        *,
        base_url: str = DEFAULT_BASE_URL,
        profile_url: str = DEFAULT_PROFILE_URL,
        timeout: Optional[float] = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if isinstance(credentials, CredentialStore):
            self.credential_store = credentials
        else:
            self.credential_store = CredentialStore(credentials)
        self.base_url = base_url
        self.profile_url = profile_url
        self._http = httpx.Client(timeout=timeout, transport=transport, follow_redirects=True)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "FatSecretClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _call(
        self,
        method: str,
        params: Dict[str, Any],
        *,
        http_method: str = "GET",
        url: Optional[str] = None,
    ) -> Dict[str, Any]:
        target = url or self.base_url
        creds = self.credential_store.current()
        query = signed_parameters(
            http_method,
            target,
            {"method": method, **params},
            consumer_key=creds.key,
            consumer_secret=creds.secret,
        )
        logger.debug("fatsecret %s %s", http_method, method)
        try:
            resp = self._http.request(http_method, target, params=query)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"FatSecret {method} request failed: {exc}", method=method) from exc

        if not resp.is_success:
            snippet = (resp.text or "").replace("\n", " ").strip()[:200]
            raise UpstreamError(
                f"FatSecret {method} returned HTTP {resp.status_code}: {snippet}",
                status=resp.status_code,
                method=method,
            )
        try:
            data = resp.json()
        except ValueError as exc:
            raise UpstreamError(
                f"FatSecret {method} returned non-JSON response",
                status=resp.status_code,
                method=method,
            ) from exc

        if not isinstance(data, dict):
            raise UpstreamError(f"FatSecret {method} returned unexpected payload", method=method)
        error = data.get("error")
        if isinstance(error, dict):
            raise UpstreamError(
                f"FatSecret {method} error {error.get('code')}: {error.get('message')}",
                status=resp.status_code,
                code=error.get("code"),
                method=method,
            )
        return data

    def search_foods(self, search_expression: str, max_results: int = 10, page_number: int = 0) -> Dict[str, Any]:
        """Raw ``food.search`` payload: ``{"foods": {"food": [...], "max_results", "page_number", "total_results"}}``."""
        if not (search_expression or "").strip():
            raise ValidationError("search_expression is required")
        _check_paging(max_results, page_number)
        return self._call(
            "food.search",
            {
                "search_expression": search_expression,
                "max_results": int(max_results),
                "page_number": int(page_number),
            },
        )

    def get_food(self, food_id: str) -> Dict[str, Any]:
        data = self._call("food.get", {"food_id": food_id})
        return data.get("food") or {}

    def search_recipes(
        self,
        search_expression: str,
        max_results: int = 10,
        page_number: int = 0,
    ) -> List[RecipeCandidate]:
        _check_paging(max_results, page_number)
        data = self._call(
            "recipes.search",
            {
                "search_expression": search_expression,
                "max_results": int(max_results),
                "page_number": int(page_number),
            },
        )
        recipes = data.get("recipes") or {}
        return [RecipeCandidate.from_api(r) for r in as_list(recipes.get("recipe")) if isinstance(r, dict)]

    def get_recommended_recipes(self, preferences: DietaryPreferences, max_results: int = 10) -> List[RecipeCandidate]:
        query = build_search_query(preferences)
        candidates = self.search_recipes(query, max_results=max_results, page_number=0)
        kept = filter_recipes(candidates, preferences)
        logger.info("recipes.search %r: %d candidates, %d kept", query, len(candidates), len(kept))
        return kept

    def get_recipe_details(self, recipe_id: str) -> RecipeDetail:
        data = self._call("recipe.get", {"recipe_id": recipe_id})
        recipe = data.get("recipe")
        if not isinstance(recipe, dict):
            raise UpstreamError(f"FatSecret recipe.get returned no recipe for {recipe_id}", method="recipe.get")
        return RecipeDetail.from_api(recipe)

    def create_profile(self, user_id: str) -> ProfileResult:
        """Create a FatSecret profile; returns the token/secret pair it hands back, if any.

        The client keeps signing with its current credentials; switching to the
        returned pair is up to the caller via ``credential_store.rotate``.
        """
        data = self._call(
            "profile.create",
            {"user_id": user_id},
            http_method="POST",
            url=self.profile_url,
        )
        profile = data.get("profile") if isinstance(data.get("profile"), dict) else data
        token = profile.get("auth_token")
        secret = profile.get("auth_secret")
        credentials = ConsumerCredentials(key=str(token), secret=str(secret)) if token and secret else None
        return ProfileResult(user_id=user_id, credentials=credentials)
