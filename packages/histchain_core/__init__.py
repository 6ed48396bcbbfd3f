"""histchain Core Library.

Provides an in-memory linear commit history: a named, newest-first chain
of commits that can be extended, truncated, pruned and squashed.

Execution Context:
    Library package - imported by CLI and other applications

Dependencies:
    - Standard library only

Metadata:
    Version: 0.1.0
    Author: histchain Team
"""
from __future__ import annotations

from histchain_core.history import CommitHistory
from histchain_core.history import InvalidArgument
from histchain_core.identifiers import generate_commit_id
from histchain_core.models import Commit
from histchain_core.models import HistoryConfig

__version__ = "0.1.0"

__all__ = [
    "Commit",
    "CommitHistory",
    "HistoryConfig",
    "InvalidArgument",
    "generate_commit_id",
    "__version__",
]
