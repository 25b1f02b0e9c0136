# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from typing import Any, Dict, List

from ebsite.core.errors import NotFound
from ebsite.core.utils import new_id, utcnow_iso
from ebsite.infra.db import execute, fetch_all

NEW_LEAD_COLUMNS = [
    "id",
    "name",
    "phone",
    "email",
    "cityInterest",
    "operationType",
    "budget",
    "message",
    "status",
    "createdAt",
]


def create_lead(*, path: str, data: Dict[str, Any]) -> str:
    """Store a contact-form submission as a new lead (status 'nuevo')."""
    name = str(data.get("name") or "").strip()
    phone = str(data.get("phone") or "").strip()
    if not name:
        raise ValueError("El campo 'name' es obligatorio.")
    if not phone:
        raise ValueError("El campo 'phone' es obligatorio.")

    row = {
        "id": new_id(),
        "name": name,
        "phone": phone,
        "email": data.get("email") or None,
        "cityInterest": data.get("cityInterest"),
        "operationType": data.get("operationType"),
        "budget": data.get("budget") or None,
        "message": data.get("message") or None,
        "status": "nuevo",
        "createdAt": utcnow_iso(),
    }
    cols = ", ".join(NEW_LEAD_COLUMNS)
    marks = ", ".join("?" for _ in NEW_LEAD_COLUMNS)
    execute(path, f"INSERT INTO leads ({cols}) VALUES ({marks})", [row[c] for c in NEW_LEAD_COLUMNS])
    return row["id"]


def list_leads(*, path: str) -> List[Dict[str, Any]]:
    return fetch_all(path, "SELECT * FROM leads ORDER BY createdAt DESC")


def update_lead(*, path: str, lead_id: str, fields: Dict[str, Any]) -> None:
    """Update status and/or notes. Only keys present in `fields` are touched."""
    allowed = {k: v for k, v in fields.items() if k in ("status", "notes")}
    if not allowed:
        return
    assignments = ", ".join(f"{k} = ?" for k in allowed)
    n = execute(path, f"UPDATE leads SET {assignments} WHERE id = ?", list(allowed.values()) + [lead_id])
    if n == 0:
        raise NotFound(lead_id)


def delete_lead(*, path: str, lead_id: str) -> None:
    execute(path, "DELETE FROM leads WHERE id = ?", (lead_id,))
