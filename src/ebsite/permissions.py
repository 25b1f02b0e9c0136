# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from ebsite.auth.errors import AuthError, ConfigurationError, SessionRejected
from ebsite.auth.session import COOKIE_NAME, verify_session
from ebsite.config import Settings

logger = logging.getLogger(__name__)

ADMIN_PREFIX = "/api/admin"

# The only admin path reachable without a session. Do not add entries here.
LOGIN_PATH = "/api/admin/login"


def is_admin_path(path: str) -> bool:
    return path == ADMIN_PREFIX or path.startswith(ADMIN_PREFIX + "/")


def settings_for(request: Request) -> Settings:
    return request.app.state.settings


def is_authenticated(request: Request) -> bool:
    """True when the request carries a genuine session cookie.

    Raises ConfigurationError when SESSION_SECRET is unset.
    """
    try:
        verify_session(settings_for(request), request.cookies.get(COOKIE_NAME))
    except SessionRejected:
        return False
    return True


def auth_error_response(exc: AuthError) -> JSONResponse:
    body = {"error": exc.public_message}
    if isinstance(exc, SessionRejected):
        body["authenticated"] = False
    return JSONResponse(body, status_code=exc.status_code)


async def session_guard(request: Request, call_next):
    """HTTP middleware gating everything under /api/admin except the login endpoint."""
    path = request.url.path
    if not is_admin_path(path) or path == LOGIN_PATH:
        return await call_next(request)

    try:
        verify_session(settings_for(request), request.cookies.get(COOKIE_NAME))
    except ConfigurationError as e:
        logger.error("SESSION_SECRET is not configured; refusing %s %s", request.method, path)
        return auth_error_response(e)
    except SessionRejected as e:
        logger.info("Rejected %s %s: %s", request.method, path, type(e).__name__)
        return auth_error_response(e)

    return await call_next(request)
