# -*- coding: utf-8 -*-
"""In-process FatSecret stand-in built on httpx.MockTransport."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

import httpx

from nutriclinic.fatsecret.client import FatSecretClient
from nutriclinic.fatsecret.models import ConsumerCredentials

Responder = Callable[[httpx.Request], httpx.Response]


def recipe_hit(recipe_id: str, name: str, description: str = "", calories: Optional[str] = None) -> Dict[str, Any]:
    hit: Dict[str, Any] = {
        "recipe_id": recipe_id,
        "recipe_name": name,
        "recipe_description": description,
    }
    if calories is not None:
        hit["recipe_nutrition"] = {"calories": calories}
    return hit


class FakeFatSecret:
    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.responders: Dict[str, Responder] = {}

    def on(self, method: str, payload: Any = None, *, status: int = 200) -> None:
        self.responders[method] = lambda request: httpx.Response(status, json=payload)

    def on_raw(self, method: str, responder: Responder) -> None:
        self.responders[method] = responder

    def params(self, index: int = -1) -> Dict[str, str]:
        return dict(self.requests[index].url.params)

    def calls(self, method: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.params.get("method") == method]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        method = request.url.params.get("method", "")
        responder = self.responders.get(method)
        if responder is None:
            return httpx.Response(200, json={"error": {"code": 2, "message": f"Unknown method: {method}"}})
        return responder(request)

    def client(self, key: str = "test-key", secret: str = "test-secret") -> FatSecretClient:
        return FatSecretClient(
            ConsumerCredentials(key=key, secret=secret),
            transport=httpx.MockTransport(self.handler),
        )
