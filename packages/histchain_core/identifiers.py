"""Commit identifier generation for histchain.

Identifiers are random UUIDs, so no counter or generator state is shared
between histories.

Execution Context:
    Library module - imported by histchain_core.models and scenario replay

Dependencies:
    - uuid: Random identifier generation

Metadata:
    Version: 0.1.0
    Author: histchain Team
"""
from __future__ import annotations

import uuid


# ---- Identifier Functions -----------------------------------------------------------------------------------


def generate_commit_id() -> str:
    """Generate a unique commit ID.

    Returns:
        Canonical UUID4 string (e.g. '1b4e28ba-2fa1-11d2-883f-0016d3cca427').
    """
    return str(uuid.uuid4())


def is_commit_id(
        value: object,
) -> bool:
    """Check whether a value looks like a generated commit ID.

    Args:
        value: Candidate identifier.

    Returns:
        True if value is a canonical UUID string.
    """
    if not isinstance(value, str):
        return False

    try:
        return str(uuid.UUID(value)) == value
    except ValueError:
        return False
