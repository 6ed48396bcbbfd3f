"""Tests for histchain_core package exports."""
from __future__ import annotations

import histchain_core
from histchain_core.history import CommitHistory
from histchain_core.history import InvalidArgument


def test_version() -> None:
    """Test package version is exposed."""
    assert histchain_core.__version__ == "0.1.0"


def test_public_names() -> None:
    """Test re-exported names point at their implementations."""
    assert histchain_core.CommitHistory is CommitHistory
    assert histchain_core.InvalidArgument is InvalidArgument
    for name in histchain_core.__all__:
        assert hasattr(histchain_core, name)


def test_end_to_end_abc() -> None:
    """Test a, b, c history through the package namespace."""
    hist = histchain_core.CommitHistory("demo")
    id_a = hist.commit("a")
    id_b = hist.commit("b")
    id_c = hist.commit("c")

    assert hist.get_history(2) == f"{id_c}: c\n{id_b}: b"
    assert hist.squash(id_c) is True
    assert hist.head.message == "SQUASHED: c/b"
    assert len(hist) == 2
    assert hist.contains(id_a)
