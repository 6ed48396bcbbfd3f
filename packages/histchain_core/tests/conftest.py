"""Shared test configuration and fixtures for histchain_core tests.

Provides:
- Empty and populated CommitHistory fixtures.
- A helper for checking chain integrity after mutations.
"""
from __future__ import annotations

import pytest

from histchain_core.history import CommitHistory


# ---------------------------------------------------------------------------
# History fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def history() -> CommitHistory:
    """Empty history."""
    return CommitHistory("repo")


@pytest.fixture
def abc_history() -> tuple[CommitHistory, dict[str, str]]:
    """History with 'a', 'b', 'c' committed in order (c newest).

    Returns:
        The history and a message -> commit ID mapping.
    """
    hist = CommitHistory("repo")
    ids = {message: hist.commit(message) for message in ("a", "b", "c")}
    return hist, ids


def assert_chain_intact(hist: CommitHistory) -> None:
    """Assert the chain is acyclic with unique IDs."""
    seen: set[int] = set()
    ids: set[str] = set()
    current = hist.head
    while current is not None:
        assert id(current) not in seen, "cycle in commit chain"
        assert current.id not in ids, "duplicate commit ID"
        seen.add(id(current))
        ids.add(current.id)
        current = current.previous


@pytest.fixture
def chain_check():
    """Expose assert_chain_intact as a fixture."""
    return assert_chain_intact
