"""Shared test fixtures — sample status and diff-index output."""

from __future__ import annotations

import pytest

from autocommit.git.models import FileChange


@pytest.fixture
def status_lines() -> list[str]:
    """``git status --short`` output covering every action."""
    return [
        "A  docs/intro.md",
        "M  src/app.py",
        "M  src/util.py",
        "D  old.txt",
        "R  notes.txt -> todo.txt",
    ]


@pytest.fixture
def diff_index_lines() -> list[str]:
    """``git diff-index --name-status -M`` output covering every action."""
    return [
        "A\tdocs/intro.md",
        "M\tsrc/app.py",
        "D\told.txt",
        "R100\tmain.py\tsrc/main.py",
        "R087\tsrc/a.py\tlib/b.py",
    ]


@pytest.fixture
def make_change():
    """Factory for FileChange records."""

    def _make(x: str, from_: str = "foo.txt", to: str = "") -> FileChange:
        return FileChange(x=x, y=" ", to=to, from_=from_)

    return _make
