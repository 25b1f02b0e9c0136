# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

BASE_DIR = Path(__file__).resolve().parent

DEFAULT_DB_PATH = "data/eb.sqlite3"
DEFAULT_PROFILE_SEED = str(BASE_DIR / "data" / "profile.yml")


def _env(name: str) -> Optional[str]:
    """Environment value, with blank treated as unset."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw


def env_bool(name: str, default: bool = False) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once at startup and injected into the app.

    Rotating SESSION_SECRET or ADMIN_CODE requires a restart.
    """

    session_secret: Optional[str] = None
    admin_code: Optional[str] = None
    db_path: str = DEFAULT_DB_PATH
    profile_seed_path: str = DEFAULT_PROFILE_SEED
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            session_secret=_env("SESSION_SECRET"),
            admin_code=_env("ADMIN_CODE"),
            db_path=_env("EB_DB_PATH") or DEFAULT_DB_PATH,
            profile_seed_path=_env("EB_PROFILE_SEED") or DEFAULT_PROFILE_SEED,
            log_level=(_env("EB_LOG_LEVEL") or "INFO").upper(),
        )
