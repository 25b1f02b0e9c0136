# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Admin authentication.

This package provides:
- HMAC-SHA256 signing/verification (itsdangerous)
- The `<session_id>.<hex>` cookie token codec
- Stateless signed session cookies (mint, verify, clear)
"""
