"""Random helpers: coin flips and version 4 UUIDs."""

from __future__ import annotations

import secrets
import uuid


def random_bool() -> bool:
    """Return True or False with equal probability."""
    return secrets.randbits(1) == 1


def generate_uuid() -> str:
    """Return a random version 4 UUID in lowercase hyphenated form."""
    return str(uuid.UUID(bytes=secrets.token_bytes(16), version=4))