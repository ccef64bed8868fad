# -*- coding: utf-8 -*-
"""Intake forms — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from ..deps import get_fatsecret_client
from ..fatsecret.client import FatSecretClient
from .models import FormSubmitRequest, FormSubmitResponse
from .service import submit_form

router = APIRouter(prefix="/forms", tags=["Forms"])


@router.post("", response_model=FormSubmitResponse, summary="Submit an intake form (creates the patient if needed)")
def submit_form_api(
    request: FormSubmitRequest,
    response: Response,
    client: FatSecretClient = Depends(get_fatsecret_client),
):
    patient, created = submit_form(
        client,
        cpf=request.cpf,
        name=request.name,
        form_data=request.form.model_dump(exclude_none=True),
    )
    if created:
        response.status_code = 201
        message = "Patient created and form added"
    else:
        message = "Form added"
    return FormSubmitResponse(message=message, is_new_patient=created, patient=patient)
