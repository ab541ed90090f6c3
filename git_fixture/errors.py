"""Exceptions raised while driving the git executable."""
from __future__ import annotations

from typing import List, Sequence


class ExecutionError(Exception):
    """A command exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, output: str) -> None:
        self.command: List[str] = list(command)
        self.returncode = returncode
        self.output = output
        super().__init__(
            f"Command {' '.join(self.command)!r} exited with {returncode}:\n{output}"
        )


class GitFatalError(BaseException):
    """Unrecoverable failure that should abort the whole test run.

    Derives from ``BaseException`` so ``except Exception`` blocks inside
    tests cannot swallow it.
    """


class GitExecutableNotFoundError(GitFatalError):
    """No usable git executable could be located."""


__all__ = ["ExecutionError", "GitFatalError", "GitExecutableNotFoundError"]
