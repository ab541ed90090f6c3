"""Pytest configuration shared by the git_fixture test suite."""
from __future__ import annotations

import os
import re
from pathlib import Path

import pytest

from git_fixture.runner import reset_version_probe
from tests.fixtures import ScriptedProcess


FAKE_GIT = "/opt/fake/bin/git"
HASH_RE = re.compile(r"^[0-9a-f]{40}$")


@pytest.fixture(autouse=True)
def isolated_git_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user and system git configuration out of fixture repositories."""

    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)
    monkeypatch.delenv("GIT_DIR", raising=False)
    monkeypatch.delenv("GIT_WORK_TREE", raising=False)
    monkeypatch.delenv("GIT_INDEX_FILE", raising=False)


@pytest.fixture(autouse=True)
def fresh_version_probe():
    reset_version_probe()
    yield
    reset_version_probe()


@pytest.fixture()
def scripted(monkeypatch: pytest.MonkeyPatch) -> ScriptedProcess:
    """Route the runner's process calls to a scripted fake git."""

    process = ScriptedProcess()
    monkeypatch.setattr("git_fixture.runner.run_process", process)
    monkeypatch.setattr("git_fixture.runner.git_executable", lambda: FAKE_GIT)
    return process


def is_commit_hash(value: str) -> bool:
    return bool(HASH_RE.match(value))


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")
