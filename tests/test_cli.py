"""End-to-end tests for the git_fixture CLI."""
from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pygit2

from tests.conftest import is_commit_hash

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def run_cli(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    cmd = [sys.executable, "-m", "git_fixture", *args]
    return subprocess.run(
        cmd,
        cwd=str(cwd) if cwd else None,
        capture_output=True,
        text=True,
        env={**os.environ, "PYTHONPATH": str(PROJECT_ROOT)},
    )


def test_tac_prints_commit_hash(git_repo: pygit2.Repository) -> None:
    result = run_cli("tac", "a.txt", "--repo", git_repo.workdir)

    assert result.returncode == 0, result.stderr or result.stdout
    commit_hash = result.stdout.strip()
    assert is_commit_hash(commit_hash)
    assert str(git_repo.head.target) == commit_hash


def test_modify_and_last(git_repo: pygit2.Repository) -> None:
    run_cli("tac", "a.txt", "--repo", git_repo.workdir)
    modified = run_cli("modify", "a.txt", "--repo", git_repo.workdir)
    last = run_cli("last", cwd=Path(git_repo.workdir))

    assert modified.returncode == 0, modified.stderr
    assert last.stdout.strip() == modified.stdout.strip()


def test_run_keeps_quoted_message(git_repo: pygit2.Repository) -> None:
    Path(git_repo.workdir, "notes.md").write_text("hi\n", encoding="utf-8")
    run_cli("run", "add .", "--repo", git_repo.workdir)

    result = run_cli("run", "commit -q -m 'quoted cli message'", "--repo", git_repo.workdir)

    assert result.returncode == 0, result.stderr or result.stdout
    assert git_repo[git_repo.head.target].message.strip() == "quoted cli message"


def test_run_failure_exit_code(git_repo: pygit2.Repository) -> None:
    result = run_cli("run", "checkout does-not-exist", "--repo", git_repo.workdir)

    assert result.returncode == 1
    assert "does-not-exist" in result.stderr


def test_run_ignore_exit_code(git_repo: pygit2.Repository) -> None:
    result = run_cli(
        "run", "checkout does-not-exist", "--repo", git_repo.workdir, "--ignore-exit-code"
    )

    assert result.returncode == 0
    assert "does-not-exist" in result.stdout


def test_repo_from_environment(git_repo: pygit2.Repository, monkeypatch) -> None:
    monkeypatch.setenv("REPO_PATH", git_repo.workdir)

    result = run_cli("tac", "env.txt")

    assert result.returncode == 0, result.stderr
    assert str(git_repo.head.target) == result.stdout.strip()


def test_run_unbalanced_quotes_exit_code(git_repo: pygit2.Repository) -> None:
    result = run_cli("run", "commit -m 'unterminated", "--repo", git_repo.workdir)

    assert result.returncode == 1
    assert "No closing quotation" in result.stderr
    assert "Traceback" not in result.stderr
