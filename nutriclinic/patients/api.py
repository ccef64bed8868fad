# -*- coding: utf-8 -*-
"""Patients — API endpoints (read-only; patients are created through /forms)."""

from __future__ import annotations

from fastapi import APIRouter, Query

from ..errors import NotFoundError
from .models import (
    PatientFormsRecipesResponse,
    PatientRecipeResponse,
    PatientResponse,
    PatientsResponse,
)
from .storage import get_patient, get_patient_forms_and_recipes, get_patient_recipe, list_patients

router = APIRouter(prefix="/users", tags=["Patients"])


@router.get("", response_model=PatientsResponse, summary="List patients")
def list_patients_api(cpf: str | None = Query(default=None, description="Filter by CPF")):
    patients = list_patients(cpf=cpf)
    return PatientsResponse(count=len(patients), patients=patients)


@router.get("/{patient_id}", response_model=PatientResponse, summary="Get a patient")
def get_patient_api(patient_id: str):
    patient = get_patient(patient_id)
    if not patient:
        raise NotFoundError("Patient not found")
    return PatientResponse(patient=patient)


@router.get("/{patient_id}/forms-recipes", response_model=PatientFormsRecipesResponse, summary="Forms and recipes of a patient")
@router.get("/{patient_id}/forms-receitas", response_model=PatientFormsRecipesResponse, include_in_schema=False)
def get_patient_forms_recipes_api(patient_id: str):
    forms, recipes = get_patient_forms_and_recipes(patient_id)
    return PatientFormsRecipesResponse(forms=forms, recipes=recipes)


@router.get("/{patient_id}/recipes/{entry_id}", response_model=PatientRecipeResponse, summary="A stored recipe of a patient")
@router.get("/{patient_id}/receita/{entry_id}", response_model=PatientRecipeResponse, include_in_schema=False)
def get_patient_recipe_api(patient_id: str, entry_id: str):
    return PatientRecipeResponse(recipe=get_patient_recipe(patient_id, entry_id))
