# -*- coding: utf-8 -*-
"""Patients — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..recipes.models import RecipeEntry


class StoredForm(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    created_at: str


class Patient(BaseModel):
    id: str
    cpf: str
    name: str
    fatsecret_user_id: Optional[str] = None
    created_at: str
    forms: List[StoredForm] = Field(default_factory=list)
    recipes: List[RecipeEntry] = Field(default_factory=list)


class PatientResponse(BaseModel):
    patient: Patient


class PatientsResponse(BaseModel):
    count: int
    patients: List[Patient]


class PatientFormsRecipesResponse(BaseModel):
    forms: List[StoredForm]
    recipes: List[RecipeEntry]


class PatientRecipeResponse(BaseModel):
    message: str = "Recipe found"
    recipe: RecipeEntry

