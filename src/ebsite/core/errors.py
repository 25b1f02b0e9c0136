# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations


class NotFound(LookupError):
    """Record id with no matching row/key. Mapped to 404 by the app."""
