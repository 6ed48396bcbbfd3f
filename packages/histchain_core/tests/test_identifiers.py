"""Tests for commit identifier generation."""
from __future__ import annotations

import uuid

import pytest

from histchain_core.identifiers import generate_commit_id
from histchain_core.identifiers import is_commit_id


class TestGenerateCommitId:
    """Tests for generate_commit_id."""

    def test_canonical_uuid4(self) -> None:
        """Test IDs are canonical version 4 UUID strings."""
        commit_id = generate_commit_id()
        parsed = uuid.UUID(commit_id)
        assert parsed.version == 4
        assert str(parsed) == commit_id

    def test_unique(self) -> None:
        """Test repeated calls do not collide."""
        ids = {generate_commit_id() for _ in range(1000)}
        assert len(ids) == 1000


class TestIsCommitId:
    """Tests for is_commit_id."""

    def test_generated_id(self) -> None:
        """Test generated IDs are recognised."""
        assert is_commit_id(generate_commit_id())

    @pytest.mark.parametrize(
        "value",
        [
            "c1",
            "",
            "1B4E28BA-2FA1-11D2-883F-0016D3CCA427",
            "1b4e28ba2fa111d2883f0016d3cca427",
            None,
            42,
        ],
    )
    def test_rejects_non_canonical(self, value: object) -> None:
        """Test labels, non-canonical forms and non-strings are rejected."""
        assert not is_commit_id(value)
