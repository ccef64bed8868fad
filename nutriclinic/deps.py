# -*- coding: utf-8 -*-
"""Shared FastAPI dependencies (the process-wide FatSecret client)."""

from __future__ import annotations

import threading
from typing import Optional

from .config import settings
from .fatsecret.client import FatSecretClient
from .fatsecret.models import ConsumerCredentials, CredentialStore

_lock = threading.Lock()
_client: Optional[FatSecretClient] = None


def get_fatsecret_client() -> FatSecretClient:
    global _client
    with _lock:
        if _client is None:
            store = CredentialStore(
                ConsumerCredentials(
                    key=settings.fatsecret_consumer_key,
                    secret=settings.fatsecret_consumer_secret,
                )
            )
            _client = FatSecretClient(
                store,
                base_url=settings.fatsecret_base_url,
                profile_url=settings.fatsecret_profile_url,
                timeout=settings.fatsecret_timeout,
            )
        return _client


def close_fatsecret_client() -> None:
    global _client
    with _lock:
        if _client is not None:
            _client.close()
            _client = None
