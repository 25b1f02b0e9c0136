# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import hmac
import uuid
from typing import Optional

from starlette.responses import Response

from ebsite.auth import token as token_codec
from ebsite.auth.errors import AuthenticationFailure, ConfigurationError, SessionRejected
from ebsite.auth.signer import Signer
from ebsite.config import Settings

COOKIE_NAME = "eb_session"
MAX_AGE_SECONDS = 7 * 24 * 60 * 60  # 604800


def new_session_id() -> str:
    return str(uuid.uuid4())


def cookie_settings() -> dict:
    return {"path": "/", "httponly": True, "secure": True, "samesite": "strict"}


def require_secret(settings: Settings) -> str:
    if not settings.session_secret:
        raise ConfigurationError()
    return settings.session_secret


def check_access_code(settings: Settings, candidate: Optional[str]) -> None:
    """Raise unless `candidate` equals the configured ADMIN_CODE exactly.

    Both values must be configured first: an unset code never matches an unset
    candidate.
    """
    if not settings.session_secret or not settings.admin_code:
        raise ConfigurationError(
            "Error de configuración: Faltan variables de entorno (ADMIN_CODE o SESSION_SECRET)"
        )
    if not isinstance(candidate, str):
        raise AuthenticationFailure()
    if not hmac.compare_digest(candidate.encode("utf-8"), settings.admin_code.encode("utf-8")):
        raise AuthenticationFailure()


def mint_session(settings: Settings) -> str:
    """Return a fresh cookie value `<uuid>.<hmac hex>`."""
    signer = Signer(require_secret(settings))
    sid = new_session_id()
    return token_codec.encode(sid, signer.sign(sid))


def verify_session(settings: Settings, cookie_value: Optional[str]) -> None:
    """Raise SessionRejected (or ConfigurationError) unless the cookie is genuine."""
    signer = Signer(require_secret(settings))
    if not cookie_value:
        raise SessionRejected("Acceso denegado")
    tok = token_codec.decode(cookie_value)
    if not signer.verify(tok.session_id, tok.signature):
        raise SessionRejected()


def set_session_cookie(response: Response, cookie_value: str) -> None:
    response.set_cookie(COOKIE_NAME, cookie_value, max_age=MAX_AGE_SECONDS, **cookie_settings())


def clear_session_cookie(response: Response) -> None:
    response.set_cookie(COOKIE_NAME, "", max_age=0, **cookie_settings())
