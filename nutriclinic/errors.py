# -*- coding: utf-8 -*-
"""Error types shared by the service layer; mapped to HTTP statuses in api.py."""

from __future__ import annotations

from typing import Any, Optional


class NutriClinicError(Exception):
    status_code = 500


class ValidationError(NutriClinicError):
    """Caller-supplied parameter outside its allowed range."""

    status_code = 400


class NotFoundError(NutriClinicError):
    """Requested patient or recipe does not exist."""

    status_code = 404


class ConflictError(NutriClinicError):
    """A patient with the same CPF was stored concurrently."""

    status_code = 409


class UpstreamError(NutriClinicError):
    """FatSecret call failed: transport error, non-2xx status or error envelope."""

    status_code = 502

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        code: Any = None,
        method: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.method = method
