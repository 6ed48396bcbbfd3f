"""Data models for histchain.

Defines the commit record chained together by a CommitHistory and the
configuration consumed by the command-line front end.

Execution Context:
    Library module - imported by other histchain_core modules

Dependencies:
    - dataclasses: Data class decorators
    - histchain_core.identifiers: Commit ID generation

Metadata:
    Version: 0.1.0
    Author: histchain Team
"""
from __future__ import annotations

import json
from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Any

from histchain_core.identifiers import generate_commit_id


# ---- Constants ----------------------------------------------------------------------------------------------


SQUASH_PREFIX = "SQUASHED: "
IMMUTABLE_FIELDS = ("id", "message")


# ---- Data Model Classes -------------------------------------------------------------------------------------


@dataclass(eq=False)
class Commit:
    """Single node in a linear, newest-first commit chain.

    Attributes:
        id: Unique commit identifier. Fixed at creation.
        message: Commit message. Fixed at creation.
        previous: Chronologically preceding commit (None for the oldest).
    """

    id: str
    message: str
    previous: Commit | None = field(default=None, repr=False)

    def __setattr__(
            self,
            name: str,
            value: Any,
    ) -> None:
        if name in IMMUTABLE_FIELDS and name in self.__dict__:
            msg = f"Commit.{name} cannot be reassigned"
            raise AttributeError(msg)
        super().__setattr__(name, value)

    @classmethod
    def create(
            cls,
            message: str,
            previous: Commit | None = None,
    ) -> Commit:
        """Create a new commit with a freshly generated ID.

        Args:
            message: Commit message.
            previous: Commit this one follows.

        Returns:
            New Commit instance.
        """
        return cls(
            id=generate_commit_id(),
            message=message,
            previous=previous,
        )

    @classmethod
    def squashed(
            cls,
            newer: Commit,
            older: Commit,
    ) -> Commit:
        """Create the commit replacing two adjacent commits.

        The result takes the place of both: its previous link is whatever
        followed the older commit.

        Args:
            newer: The more recent of the two commits.
            older: The commit directly preceding newer.

        Returns:
            New Commit with a combined message.
        """
        return cls.create(
            message=f"{SQUASH_PREFIX}{newer.message}/{older.message}",
            previous=older.previous,
        )

    def render(
            self,
    ) -> str:
        """Format commit as a single log line."""
        return f"{self.id}: {self.message}"

    def to_dict(
            self,
    ) -> dict[str, Any]:
        """Convert commit to a flat dictionary.

        Returns:
            Dictionary with the previous commit referenced by ID.
        """
        return {
            "id": self.id,
            "message": self.message,
            "previous": self.previous.id if self.previous else None,
        }


@dataclass
class HistoryConfig:
    """Settings for the histchain command-line tools.

    Attributes:
        name: Name given to new histories.
        log_limit: Default number of commits shown by log output.
        log_level: Logging level name (e.g. 'DEBUG', 'WARNING').
    """

    name: str = "history"
    log_limit: int = 10
    log_level: str = "WARNING"

    def to_dict(
            self,
    ) -> dict[str, Any]:
        """Convert config to dictionary for JSON serialization.

        Returns:
            Dictionary representation.
        """
        return asdict(self)

    @classmethod
    def from_dict(
            cls,
            data: dict[str, Any],
    ) -> HistoryConfig:
        """Create config from dictionary.

        Missing keys fall back to defaults.

        Args:
            data: Dictionary with config fields.

        Returns:
            HistoryConfig instance.
        """
        defaults = cls()
        return cls(
            name=data.get("name", defaults.name),
            log_limit=int(data.get("log_limit", defaults.log_limit)),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
        )

    def save(
            self,
            config_path: Path,
    ) -> None:
        """Save config to file.

        Args:
            config_path: Path to JSON config file.
        """
        config_path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def load(
            cls,
            config_path: Path,
    ) -> HistoryConfig:
        """Load config from file.

        Args:
            config_path: Path to JSON config file.

        Returns:
            HistoryConfig instance.

        Raises:
            RuntimeError: If config file cannot be loaded.
        """
        try:
            data = json.loads(Path(config_path).read_text())
            return cls.from_dict(data)
        except Exception as file_error:
            msg = f"Failed to load config from {config_path}: {file_error}"
            raise RuntimeError(msg) from file_error
