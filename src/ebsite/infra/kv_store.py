# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Minimal key-value store used for testimonials.

Same contract as a hosted KV namespace: string keys, string values, prefix
listing. Backed by the `kv` table of the site database.
"""

from __future__ import annotations

from typing import List, Optional

from ebsite.infra.db import connect


class KeyValueStore:
    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def get(self, key: str) -> Optional[str]:
        with connect(self.db_path) as conn:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        return row["value"] if row is not None else None

    def put(self, key: str, value: str) -> None:
        with connect(self.db_path) as conn:
            conn.execute(
                "INSERT INTO kv (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )

    def list_keys(self, prefix: str = "") -> List[str]:
        # LIKE would treat '_' and '%' in the prefix as wildcards
        with connect(self.db_path) as conn:
            rows = conn.execute(
                "SELECT key FROM kv WHERE substr(key, 1, ?) = ? ORDER BY key",
                (len(prefix), prefix),
            ).fetchall()
        return [r["key"] for r in rows]
