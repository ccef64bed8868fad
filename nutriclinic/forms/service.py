# -*- coding: utf-8 -*-
"""Intake forms — submission flow (find-or-create patient, FatSecret profile)."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Tuple

from ..config import settings
from ..errors import ConflictError, UpstreamError
from ..fatsecret.client import FatSecretClient
from ..patients.models import Patient
from ..patients.storage import append_form, create_patient, get_patient_by_cpf, new_form

logger = logging.getLogger(__name__)


def _link_fatsecret_profile(client: FatSecretClient, user_id: str) -> None:
    try:
        result = client.create_profile(user_id)
    except UpstreamError as exc:
        # The patient is still stored; only the upstream profile link is missing.
        logger.warning("FatSecret profile.create failed for %s: %s", user_id, exc, exc_info=True)
        return
    if result.credentials is None:
        logger.info("FatSecret profile %s created without credentials", user_id)
        return
    if settings.fatsecret_adopt_profile_credentials:
        client.credential_store.rotate(result.credentials)
        logger.info("FatSecret profile %s created; signing credentials rotated", user_id)


def submit_form(
    client: FatSecretClient,
    *,
    cpf: str,
    name: str,
    form_data: Dict[str, Any],
) -> Tuple[Patient, bool]:
    """Store an intake form; returns ``(patient, created)``."""
    form = new_form(form_data)
    patient = get_patient_by_cpf(cpf)
    if patient:
        return append_form(patient.id, form), False

    user_id = os.urandom(16).hex()
    _link_fatsecret_profile(client, user_id)
    try:
        patient = create_patient(cpf=cpf, name=name, fatsecret_user_id=user_id, forms=[form])
    except ConflictError:
        # Another submission stored this CPF while the profile was being created.
        existing = get_patient_by_cpf(cpf)
        if existing is None:
            raise
        logger.warning("Patient with CPF %s created concurrently; appending form to %s", cpf, existing.id)
        return append_form(existing.id, form), False
    logger.info("Created patient %s with first intake form", patient.id)
    return patient, True
