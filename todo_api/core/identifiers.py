"""Identifier generation and validation (RFC 4122 textual form)."""

from __future__ import annotations

import re
import uuid
from typing import Any

# Versions 1-8, RFC 4122 variant, plus the nil and max UUIDs
_UUID_RE = re.compile(
    r"^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000"
    r"|ffffffff-ffff-ffff-ffff-ffffffffffff)$",
    re.IGNORECASE,
)


def new_identifier() -> str:
    return str(uuid.uuid4())


def is_valid_identifier(value: Any) -> bool:
    """Return True only for a hyphenated UUID string. Never raises."""
    if not isinstance(value, str):
        return False
    return _UUID_RE.fullmatch(value) is not None
