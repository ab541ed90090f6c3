"""Pytest plugin exposing git fixture helpers.

Enable it from a ``conftest.py`` with ``pytest_plugins = ["git_fixture.plugin"]``.
"""
from __future__ import annotations

import logging
from pathlib import Path

import pygit2
import pytest

from .errors import GitFatalError
from .executor import ExecutionContext
from .helpers import GitExecutor

logger = logging.getLogger(__name__)


@pytest.fixture()
def git_context(tmp_path: Path) -> ExecutionContext:
    """Working-directory context rooted in the test's temporary directory."""
    return ExecutionContext(tmp_path)


@pytest.fixture()
def git_executor(git_context: ExecutionContext) -> GitExecutor:
    return GitExecutor(git_context)


@pytest.fixture()
def git_repo(git_executor: GitExecutor) -> pygit2.Repository:
    """Empty repository on branch ``main``; the context is moved into it."""
    repo_dir = git_executor.context.child("repo")
    repo_dir.mkdir(parents=True, exist_ok=True)
    git_executor.context.cd(repo_dir)
    return git_executor.init()


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo):
    yield
    if call.excinfo is not None and call.excinfo.errisinstance(GitFatalError):
        reason = f"{item.nodeid}: {call.excinfo.value}"
        logger.error("Aborting test run after fatal git error in %s", reason)
        item.session.shouldstop = reason


__all__ = ["git_context", "git_executor", "git_repo"]
