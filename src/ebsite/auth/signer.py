# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import hashlib
from typing import Optional, Union

from itsdangerous.signer import HMACAlgorithm

from ebsite.auth.errors import ConfigurationError

_HMAC = HMACAlgorithm(hashlib.sha256)

BytesLike = Union[str, bytes]


def _to_bytes(value: BytesLike) -> bytes:
    if isinstance(value, bytes):
        return value
    return str(value).encode("utf-8")


def _key(secret: Optional[BytesLike]) -> bytes:
    if not secret:
        raise ConfigurationError()
    return _to_bytes(secret)


def sign(secret: Optional[BytesLike], message: BytesLike) -> bytes:
    """HMAC-SHA256 of `message` under `secret` (32 raw bytes)."""
    return _HMAC.get_signature(_key(secret), _to_bytes(message))


def verify(secret: Optional[BytesLike], message: BytesLike, signature: bytes) -> bool:
    """Constant-time check of `signature` against a fresh MAC of `message`."""
    return _HMAC.verify_signature(_key(secret), _to_bytes(message), bytes(signature))


class Signer:
    """Binds the process-wide secret once so callers don't pass it around."""

    def __init__(self, secret: Optional[BytesLike]) -> None:
        self._key = _key(secret)

    def sign(self, message: BytesLike) -> bytes:
        return sign(self._key, message)

    def verify(self, message: BytesLike, signature: bytes) -> bool:
        return verify(self._key, message, signature)
