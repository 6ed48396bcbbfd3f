"""Linear commit history management for histchain.

Holds a singly linked, newest-first chain of commits and provides the
operations that query and rewrite it: commit, reset, drop and squash.

Execution Context:
    Library module - imported by scenario replay and CLI commands

Dependencies:
    - histchain_core.models: Commit record

Metadata:
    Version: 0.1.0
    Author: histchain Team
"""
from __future__ import annotations

import logging
from typing import Iterator

from histchain_core.models import Commit

logger = logging.getLogger(__name__)


# ---- Exceptions ---------------------------------------------------------------------------------------------


class InvalidArgument(ValueError):
    """Raised when an operation receives an unusable argument."""


# ---- CommitHistory Class ------------------------------------------------------------------------------------


class CommitHistory:
    """Named, linear chain of commits ordered newest-first.

    Missing IDs and empty chains are reported through return values;
    only bad arguments raise.

    Attributes:
        head: Most recent commit, or None when the history is empty.
    """

    def __init__(
            self,
            name: str,
    ) -> None:
        """Create an empty history.

        Args:
            name: Label identifying the history.

        Raises:
            InvalidArgument: If name is missing or empty.
        """
        if not isinstance(name, str) or not name:
            msg = "History name must be a non-empty string"
            raise InvalidArgument(msg)

        self._name = name
        self.head: Commit | None = None

    @property
    def name(
            self,
    ) -> str:
        """Name of the history."""
        return self._name

    # ---- Queries --------------------------------------------------------------------------------------------

    def get_head_id(
            self,
    ) -> str | None:
        """Get ID of the most recent commit.

        Returns:
            Commit ID or None if no commits.
        """
        return self.head.id if self.head else None

    def describe(
            self,
    ) -> str:
        """Summarize the history and its head commit.

        Returns:
            '{name} - No commits' or '{name} - Current head: {id}: {message}'.
        """
        if self.head is None:
            return f"{self._name} - No commits"
        return f"{self._name} - Current head: {self.head.render()}"

    def contains(
            self,
            target_id: str,
    ) -> bool:
        """Check whether a commit is reachable from HEAD.

        Args:
            target_id: Commit identifier.

        Returns:
            True if a commit with that ID is in the chain.
        """
        return self.get_commit(target_id) is not None

    def get_commit(
            self,
            target_id: str,
    ) -> Commit | None:
        """Find a commit by ID.

        Args:
            target_id: Commit identifier.

        Returns:
            Commit object or None if not found.
        """
        for commit in self.iter_commits():
            if commit.id == target_id:
                return commit
        return None

    def iter_commits(
            self,
    ) -> Iterator[Commit]:
        """Iterate over commits from HEAD back to the oldest."""
        current = self.head
        while current is not None:
            yield current
            current = current.previous

    def log(
            self,
            limit: int | None = None,
    ) -> list[Commit]:
        """Get commit history starting from HEAD.

        Args:
            limit: Maximum number of commits to return (all if None).

        Returns:
            List of commits in reverse chronological order.

        Raises:
            InvalidArgument: If limit is not positive.
        """
        if limit is not None:
            _require_positive(limit, "limit")

        commits = []
        for commit in self.iter_commits():
            if limit is not None and len(commits) >= limit:
                break
            commits.append(commit)
        return commits

    def get_history(
            self,
            n: int,
    ) -> str:
        """Render up to n commits as newline-separated log lines.

        Args:
            n: Maximum number of commits to include.

        Returns:
            '{id}: {message}' lines, newest first. Empty if no commits.

        Raises:
            InvalidArgument: If n is not positive.
        """
        _require_positive(n, "n")
        return "\n".join(commit.render() for commit in self.log(limit=n))

    @property
    def depth(
            self,
    ) -> int:
        """Number of commits in the chain."""
        return sum(1 for _ in self.iter_commits())

    def is_empty(
            self,
    ) -> bool:
        """Check whether the history has no commits."""
        return self.head is None

    # ---- Mutations ------------------------------------------------------------------------------------------

    def commit(
            self,
            message: str,
    ) -> str:
        """Record a new commit on top of HEAD.

        Args:
            message: Commit message (any text).

        Returns:
            ID of the new commit.
        """
        self.head = Commit.create(message, previous=self.head)
        logger.debug(f"{self._name}: committed {self.head.id}")
        return self.head.id

    def reset(
            self,
            n: int,
    ) -> None:
        """Move HEAD back by n commits.

        Commits stepped over are discarded. Resetting past the oldest
        commit leaves the history empty.

        Args:
            n: Number of commits to move back.

        Raises:
            InvalidArgument: If n is not positive.
        """
        _require_positive(n, "n")

        target = self.head
        steps = 0
        while target is not None and steps < n:
            target = target.previous
            steps += 1

        self.head = target
        logger.debug(f"{self._name}: reset {steps} commit(s), head is now {self.get_head_id()}")

    def drop(
            self,
            target_id: str,
    ) -> bool:
        """Remove a single commit from the chain.

        Args:
            target_id: ID of the commit to remove.

        Returns:
            True if the commit was found and removed.
        """
        if self.head is None:
            return False

        if self.head.id == target_id:
            self.head = self.head.previous
            logger.debug(f"{self._name}: dropped head {target_id}")
            return True

        current = self.head
        while current.previous is not None:
            if current.previous.id == target_id:
                current.previous = current.previous.previous
                logger.debug(f"{self._name}: dropped {target_id}")
                return True
            current = current.previous

        logger.debug(f"{self._name}: drop found no commit {target_id}")
        return False

    def squash(
            self,
            target_id: str,
    ) -> bool:
        """Merge a commit with the one before it.

        Both commits are replaced by a single new commit whose message is
        'SQUASHED: {newer}/{older}'.

        Args:
            target_id: ID of the newer of the two commits.

        Returns:
            True if the commits were merged. False if the history has fewer
            than two commits, the ID is unknown, or it names the oldest commit.
        """
        if self.head is None or self.head.previous is None:
            return False

        if self.head.id == target_id:
            self.head = Commit.squashed(self.head, self.head.previous)
            logger.debug(f"{self._name}: squashed head {target_id} into {self.head.id}")
            return True

        current = self.head
        while current.previous is not None and current.previous.previous is not None:
            if current.previous.id == target_id:
                merged = Commit.squashed(current.previous, current.previous.previous)
                current.previous = merged
                logger.debug(f"{self._name}: squashed {target_id} into {merged.id}")
                return True
            current = current.previous

        logger.debug(f"{self._name}: squash found no mergeable commit {target_id}")
        return False

    # ---- Python Protocols -----------------------------------------------------------------------------------

    def __len__(
            self,
    ) -> int:
        return self.depth

    def __iter__(
            self,
    ) -> Iterator[Commit]:
        return self.iter_commits()

    def __contains__(
            self,
            target_id: object,
    ) -> bool:
        return isinstance(target_id, str) and self.contains(target_id)

    def __str__(
            self,
    ) -> str:
        return self.describe()

    def __repr__(
            self,
    ) -> str:
        return f"CommitHistory(name={self._name!r}, head={self.get_head_id()!r})"


# ---- Module Functions ---------------------------------------------------------------------------------------


def _require_positive(
        value: int,
        label: str,
) -> None:
    """Raise InvalidArgument unless value is a positive integer.

    Args:
        value: Value to check.
        label: Argument name used in the error message.

    Raises:
        InvalidArgument: If value is not an int greater than zero.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        msg = f"{label} must be a positive integer, got {value!r}"
        raise InvalidArgument(msg)
