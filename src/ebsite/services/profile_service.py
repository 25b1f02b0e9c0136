# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from typing import Any, Dict

from ebsite.core.errors import NotFound
from ebsite.infra.db import PROFILE_FIELDS, execute, fetch_one


def get_profile(*, path: str) -> Dict[str, Any]:
    cols = ", ".join(PROFILE_FIELDS)
    row = fetch_one(path, f"SELECT {cols} FROM profile WHERE id = 1")
    if row is None:
        raise NotFound("profile")
    return row


def update_profile(*, path: str, data: Dict[str, Any]) -> None:
    assignments = ", ".join(f"{k} = ?" for k in PROFILE_FIELDS)
    execute(
        path,
        f"UPDATE profile SET {assignments} WHERE id = 1",
        [data.get(k) for k in PROFILE_FIELDS],
    )
