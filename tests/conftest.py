from __future__ import annotations

import pytest

from svcs.models import Repository
from svcs.repo_utils import init_repository


@pytest.fixture(autouse=True)
def _isolate_home(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep repository discovery from walking out of the test directory."""

    monkeypatch.setenv("HOME", str(tmp_path))


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A working tree with a couple of files, used as the current directory."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "a.txt").write_text("hello")
    (project / "docs").mkdir()
    (project / "docs" / "notes.md").write_text("# Notes")
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def repo(project) -> Repository:
    return init_repository(project)
