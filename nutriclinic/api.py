# -*- coding: utf-8 -*-
"""
Clinical nutrition backend API.

Patients and their intake forms, FatSecret food search and recipe
recommendations filtered against each patient's dietary preferences.
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .app_db import init_app_db
from .config import settings
from .deps import close_fatsecret_client
from .errors import NutriClinicError, UpstreamError
from .foods.api import router as foods_router
from .forms.api import router as forms_router
from .patients.api import router as patients_router
from .recipes.api import legacy_router as recipes_legacy_router
from .recipes.api import router as recipes_router

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="NutriClinic",
    description="Patient intake forms and FatSecret recipe recommendations",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.app_db_path)


@app.on_event("shutdown")
def _shutdown_close_client() -> None:
    close_fatsecret_client()


# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.app_db_path)


@app.exception_handler(NutriClinicError)
async def _nutriclinic_error_handler(request: Request, exc: NutriClinicError) -> JSONResponse:
    if isinstance(exc, UpstreamError):
        logger.error("%s %s failed upstream: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


app.include_router(patients_router)
app.include_router(forms_router)
app.include_router(recipes_router)
app.include_router(recipes_legacy_router)
app.include_router(foods_router)


@app.get("/health")
def health() -> dict:
    return {"ok": True}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    host = os.environ.get("NUTRICLINIC_HOST") or os.environ.get("HOST") or "127.0.0.1"
    port_raw = os.environ.get("NUTRICLINIC_PORT") or os.environ.get("PORT") or "8000"
    try:
        port = int(port_raw)
    except ValueError:
        port = 8000

    uvicorn.run("nutriclinic.api:app", host=host, port=port, reload=False)
