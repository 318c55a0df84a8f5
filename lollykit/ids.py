"""Random identifiers."""

from __future__ import annotations

import uuid


def make_uuid() -> str:
    """A random version 4 UUID in canonical lower-case text form."""
    return str(uuid.uuid4())