# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import json
from typing import Any, Dict, List

from ebsite.core.errors import NotFound
from ebsite.core.utils import as_list, new_id, utcnow_iso
from ebsite.infra.db import execute, fetch_all, fetch_one

COLUMNS = [
    "id",
    "title",
    "city",
    "zone",
    "price",
    "currency",
    "valuation",
    "type",
    "status",
    "bedrooms",
    "bathrooms",
    "parking",
    "description",
    "amenities",
    "videoUrl",
    "mapsLink",
    "images",
    "isPublished",
    "createdAt",
]

EDITABLE = [c for c in COLUMNS if c not in ("id", "createdAt")]


def _to_api(row: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    out["amenities"] = as_list(row.get("amenities"))
    out["images"] = as_list(row.get("images"))
    out["isPublished"] = row.get("isPublished") == 1
    return out


def _to_row(data: Dict[str, Any]) -> Dict[str, Any]:
    row = dict(data)
    row["amenities"] = json.dumps(data.get("amenities") or [], ensure_ascii=False)
    row["images"] = json.dumps(data.get("images") or [], ensure_ascii=False)
    row["isPublished"] = 1 if data.get("isPublished") else 0
    row["valuation"] = data.get("valuation") or None
    row["videoUrl"] = data.get("videoUrl") or None
    row["mapsLink"] = data.get("mapsLink") or None
    return row


def list_properties(*, path: str, published_only: bool) -> List[Dict[str, Any]]:
    sql = "SELECT * FROM properties"
    if published_only:
        sql += " WHERE isPublished = 1"
    sql += " ORDER BY createdAt DESC"
    return [_to_api(r) for r in fetch_all(path, sql)]


def get_property(*, path: str, property_id: str) -> Dict[str, Any]:
    row = fetch_one(path, "SELECT * FROM properties WHERE id = ?", (property_id,))
    if row is None:
        raise NotFound(property_id)
    return _to_api(row)


def save_property(*, path: str, data: Dict[str, Any]) -> str:
    """Insert or replace a property. Returns its id (generated when absent)."""
    row = _to_row(data)
    row["id"] = data.get("id") or new_id()
    row["createdAt"] = data.get("createdAt") or utcnow_iso()

    cols = ", ".join(COLUMNS)
    marks = ", ".join("?" for _ in COLUMNS)
    execute(
        path,
        f"INSERT OR REPLACE INTO properties ({cols}) VALUES ({marks})",
        [row.get(c) for c in COLUMNS],
    )
    return row["id"]


def update_property(*, path: str, property_id: str, data: Dict[str, Any]) -> None:
    row = _to_row(data)
    assignments = ", ".join(f"{c} = ?" for c in EDITABLE)
    n = execute(
        path,
        f"UPDATE properties SET {assignments} WHERE id = ?",
        [row.get(c) for c in EDITABLE] + [property_id],
    )
    if n == 0:
        raise NotFound(property_id)


def delete_property(*, path: str, property_id: str) -> None:
    execute(path, "DELETE FROM properties WHERE id = ?", (property_id,))
