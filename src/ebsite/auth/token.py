# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Cookie wire format for session tokens: `<session_id>.<lowercase hex signature>`."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ebsite.auth.errors import MalformedToken

SEPARATOR = "."

_HEX_PAIRS = re.compile(r"(?:[0-9a-fA-F]{2})+")


@dataclass(frozen=True)
class SessionToken:
    session_id: str
    signature: bytes


def encode(session_id: str, signature: bytes) -> str:
    return f"{session_id}{SEPARATOR}{bytes(signature).hex()}"


def decode(wire: str) -> SessionToken:
    """Parse a cookie value. Any defect raises MalformedToken and nothing else."""
    if not isinstance(wire, str):
        raise MalformedToken()

    parts = wire.split(SEPARATOR)
    if len(parts) != 2:
        raise MalformedToken()

    session_id, sig_hex = parts
    if not session_id:
        raise MalformedToken()
    # fullmatch also rejects empty and odd-length input
    if not _HEX_PAIRS.fullmatch(sig_hex):
        raise MalformedToken()

    return SessionToken(session_id=session_id, signature=bytes.fromhex(sig_hex))
