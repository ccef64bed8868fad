# -*- coding: utf-8 -*-
"""Intake forms — Pydantic models.

The consultation form (anthropometry, exams, eating habits, ...) is stored as
submitted; no field of it is interpreted by the backend.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..patients.models import Patient


class IntakeForm(BaseModel):
    model_config = ConfigDict(extra="allow")


class FormSubmitRequest(BaseModel):
    # The consultation frontend posts {cpf, nome, forms}.
    model_config = ConfigDict(populate_by_name=True)

    cpf: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=256, alias="nome")
    form: IntakeForm = Field(default_factory=IntakeForm, alias="forms")


class FormSubmitResponse(BaseModel):
    message: str
    is_new_patient: bool
    patient: Patient
