# -*- coding: utf-8 -*-
"""Patients — SQLite storage (patient documents with ordered forms and recipes)."""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..errors import ConflictError, NotFoundError
from ..recipes.models import RecipeEntry
from .models import Patient, StoredForm


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def new_form(form_data: Dict[str, Any]) -> StoredForm:
    """Stamp a submitted form with a fresh id and creation time."""
    payload = {k: v for k, v in form_data.items() if k not in {"id", "created_at"}}
    return StoredForm(id=str(uuid4()), created_at=_utc_now(), **payload)


def _load_forms(conn: sqlite3.Connection, patient_id: str) -> List[StoredForm]:
    rows = conn.execute(
        "SELECT id, payload_json, created_at FROM intake_forms WHERE patient_id = ? ORDER BY seq ASC",
        (patient_id,),
    ).fetchall()
    forms: List[StoredForm] = []
    for row in rows:
        try:
            payload = json.loads(row["payload_json"] or "{}")
        except ValueError:
            payload = {}
        forms.append(StoredForm(id=row["id"], created_at=row["created_at"], **payload))
    return forms


def _row_to_recipe(row: sqlite3.Row) -> RecipeEntry:
    try:
        preferences = json.loads(row["preferences_json"] or "{}")
    except ValueError:
        preferences = {}
    return RecipeEntry(
        id=row["id"],
        recipe_id=row["recipe_id"],
        name=row["name"],
        description=row["description"] or "",
        calories_per_serving=row["calories_per_serving"],
        created_at=row["created_at"],
        preferences=preferences,
    )


def _load_recipes(conn: sqlite3.Connection, patient_id: str) -> List[RecipeEntry]:
    rows = conn.execute(
        "SELECT * FROM patient_recipes WHERE patient_id = ? ORDER BY seq ASC",
        (patient_id,),
    ).fetchall()
    return [_row_to_recipe(r) for r in rows]


def _row_to_patient(conn: sqlite3.Connection, row: sqlite3.Row) -> Patient:
    return Patient(
        id=row["id"],
        cpf=row["cpf"],
        name=row["name"],
        fatsecret_user_id=row["fatsecret_user_id"],
        created_at=row["created_at"],
        forms=_load_forms(conn, row["id"]),
        recipes=_load_recipes(conn, row["id"]),
    )


def _insert_form(conn: sqlite3.Connection, patient_id: str, form: StoredForm) -> None:
    payload = form.model_dump(exclude={"id", "created_at"})
    conn.execute(
        "INSERT INTO intake_forms (id, patient_id, payload_json, created_at) VALUES (?, ?, ?, ?)",
        (form.id, patient_id, json.dumps(payload, ensure_ascii=False), form.created_at),
    )


def list_patients(cpf: Optional[str] = None) -> List[Patient]:
    sql = "SELECT * FROM patients"
    params: list[Any] = []
    if cpf:
        sql += " WHERE cpf = ?"
        params.append(cpf)
    sql += " ORDER BY created_at ASC"
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
        return [_row_to_patient(conn, r) for r in rows]


def get_patient(patient_id: str) -> Optional[Patient]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM patients WHERE id = ?", (patient_id,)).fetchone()
        return _row_to_patient(conn, row) if row else None


def get_patient_by_cpf(cpf: str) -> Optional[Patient]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM patients WHERE cpf = ?", (cpf,)).fetchone()
        return _row_to_patient(conn, row) if row else None


def create_patient(
    *,
    cpf: str,
    name: str,
    fatsecret_user_id: Optional[str],
    forms: Iterable[StoredForm] = (),
) -> Patient:
    patient_id = str(uuid4())
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        try:
            conn.execute(
                "INSERT INTO patients (id, cpf, name, fatsecret_user_id, created_at) VALUES (?, ?, ?, ?, ?)",
                (patient_id, cpf, name, fatsecret_user_id, now),
            )
        except sqlite3.IntegrityError as exc:
            raise ConflictError(f"Patient with CPF {cpf} already exists") from exc
        for form in forms:
            _insert_form(conn, patient_id, form)
        row = conn.execute("SELECT * FROM patients WHERE id = ?", (patient_id,)).fetchone()
        return _row_to_patient(conn, row)


def append_form(patient_id: str, form: StoredForm) -> Patient:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM patients WHERE id = ?", (patient_id,)).fetchone()
        if not row:
            raise NotFoundError("Patient not found")
        _insert_form(conn, patient_id, form)
        return _row_to_patient(conn, row)


def append_recipes(patient_id: str, entries: Iterable[RecipeEntry]) -> None:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT id FROM patients WHERE id = ?", (patient_id,)).fetchone()
        if not row:
            raise NotFoundError("Patient not found")
        conn.executemany(
            """
            INSERT INTO patient_recipes (
                id, patient_id, recipe_id, name, description, calories_per_serving, preferences_json, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    e.id,
                    patient_id,
                    e.recipe_id,
                    e.name,
                    e.description,
                    e.calories_per_serving,
                    json.dumps(e.preferences, ensure_ascii=False),
                    e.created_at,
                )
                for e in entries
            ],
        )


def get_patient_forms_and_recipes(patient_id: str) -> Tuple[List[StoredForm], List[RecipeEntry]]:
    patient = get_patient(patient_id)
    if not patient:
        raise NotFoundError("Patient not found")
    return patient.forms, patient.recipes


def get_patient_recipe(patient_id: str, entry_id: str) -> RecipeEntry:
    with db_conn(settings.app_db_path) as conn:
        if not conn.execute("SELECT id FROM patients WHERE id = ?", (patient_id,)).fetchone():
            raise NotFoundError("Patient not found")
        row = conn.execute(
            "SELECT * FROM patient_recipes WHERE patient_id = ? AND id = ?",
            (patient_id, entry_id),
        ).fetchone()
    if not row:
        raise NotFoundError("Recipe not found")
    return _row_to_recipe(row)
