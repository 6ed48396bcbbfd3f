"""Tests for data models module.

Tests the Commit record (creation, immutability, squash factory,
rendering) and HistoryConfig (dict conversion, file load/save).

Execution Context:
    Test module - run via pytest

Dependencies:
    - pytest: Test framework
    - histchain_core.models: Module under test
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from histchain_core.identifiers import is_commit_id
from histchain_core.models import Commit
from histchain_core.models import HistoryConfig


# ---- Fixtures ------------------------------------------------------------------------------------------------


@pytest.fixture
def two_commits() -> tuple[Commit, Commit]:
    """Older and newer commit linked together."""
    older = Commit(id="older-id", message="older")
    newer = Commit(id="newer-id", message="newer", previous=older)
    return older, newer


# ---- Commit Tests -------------------------------------------------------------------------------------------


class TestCommit:
    """Tests for Commit dataclass."""

    def test_create_generates_id(self) -> None:
        """Test create assigns a UUID."""
        commit = Commit.create("message")
        assert is_commit_id(commit.id)
        assert commit.message == "message"
        assert commit.previous is None

    def test_create_links_previous(self, two_commits) -> None:
        """Test create keeps the given previous commit."""
        _, newer = two_commits
        commit = Commit.create("next", previous=newer)
        assert commit.previous is newer

    def test_id_immutable(self, two_commits) -> None:
        """Test id cannot be reassigned."""
        older, _ = two_commits
        with pytest.raises(AttributeError):
            older.id = "other"

    def test_message_immutable(self, two_commits) -> None:
        """Test message cannot be reassigned."""
        older, _ = two_commits
        with pytest.raises(AttributeError):
            older.message = "other"

    def test_previous_mutable(self, two_commits) -> None:
        """Test previous link can be rewritten."""
        _, newer = two_commits
        newer.previous = None
        assert newer.previous is None

    def test_equality_is_identity(self) -> None:
        """Test commits with equal fields are distinct."""
        assert Commit(id="x", message="m") != Commit(id="x", message="m")

    def test_repr_omits_previous(self, two_commits) -> None:
        """Test repr does not walk the chain."""
        _, newer = two_commits
        assert repr(newer) == "Commit(id='newer-id', message='newer')"

    def test_render(self, two_commits) -> None:
        """Test log line format."""
        older, _ = two_commits
        assert older.render() == "older-id: older"

    def test_to_dict(self, two_commits) -> None:
        """Test dict form references previous by ID."""
        older, newer = two_commits
        assert newer.to_dict() == {"id": "newer-id", "message": "newer", "previous": "older-id"}
        assert older.to_dict()["previous"] is None


class TestSquashed:
    """Tests for Commit.squashed."""

    def test_message(self, two_commits) -> None:
        """Test combined message lists newer then older."""
        older, newer = two_commits
        merged = Commit.squashed(newer, older)
        assert merged.message == "SQUASHED: newer/older"

    def test_previous_skips_pair(self, two_commits) -> None:
        """Test merged commit points past the older commit."""
        older, newer = two_commits
        root = Commit(id="root-id", message="root")
        older.previous = root
        merged = Commit.squashed(newer, older)
        assert merged.previous is root

    def test_fresh_id(self, two_commits) -> None:
        """Test merged commit has its own ID."""
        older, newer = two_commits
        merged = Commit.squashed(newer, older)
        assert merged.id not in (older.id, newer.id)


# ---- HistoryConfig Tests ------------------------------------------------------------------------------------


class TestHistoryConfig:
    """Tests for HistoryConfig."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = HistoryConfig()
        assert config.name == "history"
        assert config.log_limit == 10
        assert config.log_level == "WARNING"

    def test_from_dict_partial(self) -> None:
        """Test missing keys fall back to defaults."""
        config = HistoryConfig.from_dict({"name": "work", "log_level": "debug"})
        assert config.name == "work"
        assert config.log_limit == 10
        assert config.log_level == "DEBUG"

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Test config survives a save/load cycle."""
        path = tmp_path / "histchain.json"
        HistoryConfig(name="saved", log_limit=3, log_level="INFO").save(path)

        assert json.loads(path.read_text())["log_limit"] == 3
        assert HistoryConfig.load(path) == HistoryConfig(name="saved", log_limit=3, log_level="INFO")

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """Test missing file raises RuntimeError."""
        with pytest.raises(RuntimeError, match="Failed to load config"):
            HistoryConfig.load(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path: Path) -> None:
        """Test malformed JSON raises RuntimeError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(RuntimeError):
            HistoryConfig.load(path)
