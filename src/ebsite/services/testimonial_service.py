# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Testimonials live in the key-value store as JSON under `comment:<id>`.

Visitors submit them unapproved; the admin approves or soft-deletes them.
Deleted entries are kept so the admin list doubles as an audit trail.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any, Dict, List

from ebsite.core.errors import NotFound
from ebsite.core.utils import new_id, utcnow_iso
from ebsite.infra.kv_store import KeyValueStore

KEY_PREFIX = "comment:"

NAME_MAX = 60
TEXT_MAX = 500

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


def _key(comment_id: str) -> str:
    return f"{KEY_PREFIX}{comment_id}"


def _leading_int(raw: Any) -> int:
    """Integer prefix of `raw`, e.g. "4.5" -> 4 and "3 estrellas" -> 3. 0 when there is none."""
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, (int, float)):
        return int(raw) if math.isfinite(raw) else 0
    m = _INT_PREFIX.match(str(raw)) if raw is not None else None
    return int(m.group(0)) if m else 0


def _text(raw: Any) -> str:
    # non-strings count as empty and fail the length checks below
    return raw.strip() if isinstance(raw, str) else ""


def _clamp_rating(raw: Any) -> int:
    rating = _leading_int(raw)
    if not rating:
        rating = 5
    return min(max(rating, 1), 5)


def _load_all(store: KeyValueStore) -> List[Dict[str, Any]]:
    out = []
    for k in store.list_keys(KEY_PREFIX):
        raw = store.get(k)
        if raw:
            out.append(json.loads(raw))
    out.sort(key=lambda c: c.get("createdAt") or "", reverse=True)
    return out


def list_public(*, store: KeyValueStore) -> List[Dict[str, Any]]:
    return [c for c in _load_all(store) if c.get("approved") is True and c.get("status") != "deleted"]


def list_all(*, store: KeyValueStore) -> List[Dict[str, Any]]:
    return _load_all(store)


def submit(*, store: KeyValueStore, data: Dict[str, Any]) -> str:
    name = _text(data.get("name"))[:NAME_MAX]
    text = _text(data.get("text"))[:TEXT_MAX]
    rating = _clamp_rating(data.get("rating"))

    if len(name) < 2:
        raise ValueError("Nombre muy corto")
    if len(text) < 10:
        raise ValueError("Comentario muy corto")

    comment = {
        "id": new_id(),
        "name": name,
        "text": text,
        "rating": rating,
        "approved": False,
        "status": "visible",
        "createdAt": utcnow_iso(),
    }
    store.put(_key(comment["id"]), json.dumps(comment, ensure_ascii=False))
    return comment["id"]


def _get(store: KeyValueStore, comment_id: str) -> Dict[str, Any]:
    raw = store.get(_key(comment_id))
    if not raw:
        raise NotFound(comment_id)
    return json.loads(raw)


def set_approved(*, store: KeyValueStore, comment_id: str, approved: bool | None) -> None:
    comment = _get(store, comment_id)
    if approved is not None:
        comment["approved"] = approved
    store.put(_key(comment_id), json.dumps(comment, ensure_ascii=False))


def soft_delete(*, store: KeyValueStore, comment_id: str) -> None:
    comment = _get(store, comment_id)
    comment["status"] = "deleted"
    comment["approved"] = False
    store.put(_key(comment_id), json.dumps(comment, ensure_ascii=False))
