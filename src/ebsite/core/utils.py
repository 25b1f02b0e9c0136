# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from typing import Any, List


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow_iso() -> str:
    """UTC timestamp in the `2024-01-31T12:00:00.000Z` shape the front-end sorts on."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def as_list(value: Any) -> List[Any]:
    """Decode a JSON-array column. Lists pass through; blanks and junk become []."""
    if isinstance(value, list):
        return value
    if not value:
        return []
    try:
        out = json.loads(value)
    except (TypeError, ValueError):
        return []
    return out if isinstance(out, list) else []
