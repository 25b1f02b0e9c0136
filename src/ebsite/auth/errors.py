# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations


class AuthError(Exception):
    """Base class. `status_code` and `public_message` are what the client sees."""

    status_code = 500
    public_message = "Error de autenticación"

    def __init__(self, public_message: str | None = None) -> None:
        if public_message is not None:
            self.public_message = public_message
        super().__init__(self.public_message)


class ConfigurationError(AuthError):
    """SESSION_SECRET or ADMIN_CODE missing. Always fails closed."""

    status_code = 500
    public_message = "Configuración de servidor incompleta"


class AuthenticationFailure(AuthError):
    status_code = 401
    public_message = "Código de acceso incorrecto"


class SessionRejected(AuthError):
    """Missing cookie, malformed token or bad signature."""

    status_code = 401
    public_message = "Sesión inválida o expirada"


class MalformedToken(SessionRejected):
    pass
