# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Sequence

import yaml

logger = logging.getLogger(__name__)

PROFILE_FIELDS = [
    "displayName",
    "heroTitle",
    "heroSub",
    "profilePic",
    "bioShort",
    "bioLong",
    "whatsapp",
    "email",
    "instagram",
    "facebook",
]

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS properties (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    city TEXT,
    zone TEXT,
    price REAL,
    currency TEXT,
    valuation REAL,
    type TEXT,
    status TEXT,
    bedrooms INTEGER,
    bathrooms REAL,
    parking INTEGER,
    description TEXT,
    amenities TEXT DEFAULT '[]',
    videoUrl TEXT,
    mapsLink TEXT,
    images TEXT DEFAULT '[]',
    isPublished INTEGER DEFAULT 0,
    createdAt TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS leads (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    phone TEXT NOT NULL,
    email TEXT,
    cityInterest TEXT,
    operationType TEXT,
    budget TEXT,
    message TEXT,
    status TEXT DEFAULT 'nuevo',
    notes TEXT,
    createdAt TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS profile (
    id INTEGER PRIMARY KEY CHECK (id = 1),
    displayName TEXT,
    heroTitle TEXT,
    heroSub TEXT,
    profilePic TEXT,
    bioShort TEXT,
    bioLong TEXT,
    whatsapp TEXT,
    email TEXT,
    instagram TEXT,
    facebook TEXT
);

CREATE TABLE IF NOT EXISTS kv (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


@contextmanager
def connect(db_path: str) -> Iterator[sqlite3.Connection]:
    """Open a connection, commit on success, roll back on error, always close."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetch_all(db_path: str, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
    with connect(db_path) as conn:
        return [dict(r) for r in conn.execute(sql, params).fetchall()]


def fetch_one(db_path: str, sql: str, params: Sequence[Any] = ()) -> Optional[Dict[str, Any]]:
    with connect(db_path) as conn:
        row = conn.execute(sql, params).fetchone()
        return dict(row) if row is not None else None


def execute(db_path: str, sql: str, params: Sequence[Any] = ()) -> int:
    """Run a write statement and return the affected row count."""
    with connect(db_path) as conn:
        return conn.execute(sql, params).rowcount


def load_profile_seed(path: str) -> Dict[str, str]:
    p = Path(path)
    if not p.exists():
        logger.warning("Profile seed not found: %s", p)
        return {}
    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        return {}
    return {k: str(raw.get(k) or "") for k in PROFILE_FIELDS}


def init_db(db_path: str, *, profile_seed_path: Optional[str] = None) -> None:
    """Create tables if needed and seed the single profile row."""
    parent = Path(db_path).parent
    parent.mkdir(parents=True, exist_ok=True)

    with connect(db_path) as conn:
        conn.executescript(SCHEMA_SQL)
        has_profile = conn.execute("SELECT 1 FROM profile WHERE id = 1").fetchone()
        if has_profile is None:
            seed = load_profile_seed(profile_seed_path) if profile_seed_path else {}
            cols = ", ".join(PROFILE_FIELDS)
            marks = ", ".join("?" for _ in PROFILE_FIELDS)
            conn.execute(
                f"INSERT INTO profile (id, {cols}) VALUES (1, {marks})",
                [seed.get(k, "") for k in PROFILE_FIELDS],
            )
            logger.info("Seeded profile row from %s", profile_seed_path or "(empty)")
