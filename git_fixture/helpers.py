"""Convenience commands for building repository fixtures."""
from __future__ import annotations

import logging
import random
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pygit2

from .executor import ExecutionContext
from .files import TestFile
from .runner import GitRunner

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class GitIdentity:
    """Author/committer identity written into fixture repositories."""

    name: str = "Fixture Bot"
    email: str = "fixture@example.com"


DEFAULT_IDENTITY = GitIdentity()


def _random_content() -> str:
    return "content" + str(random.random())


class GitExecutor:
    """Git helpers bound to one :class:`ExecutionContext`.

    Every helper is a straight composition of :meth:`git` calls, so the
    retry behaviour of :class:`GitRunner` applies throughout.
    """

    def __init__(self, context: Optional[ExecutionContext] = None) -> None:
        self.context = context if context is not None else ExecutionContext()
        self.runner = GitRunner(self.context)

    def git(self, command: str, ignore_non_zero_exit_code: bool = False) -> str:
        return self.runner.git(command, ignore_non_zero_exit_code)

    def git_in(self, repository: Optional[pygit2.Repository], command: str) -> str:
        """Run ``command`` from the root of ``repository`` when one is given."""
        if repository is not None:
            self.cd(repository)
        return self.git(command)

    def git_format(self, template: str, *args: str) -> str:
        return self.git(template % args)

    def cd(self, repository: pygit2.Repository) -> Path:
        return self.context.cd_repository(repository)

    def init(self, identity: GitIdentity = DEFAULT_IDENTITY, branch: str = "main") -> pygit2.Repository:
        """Initialise a repository in the current directory and open it."""
        self.git("init -q")
        self.git(f"checkout -q -b {branch}")
        self.git("config user.name " + shlex.quote(identity.name))
        self.git("config user.email " + shlex.quote(identity.email))
        logger.info("Initialised fixture repository at %s", self.context.cwd)
        return pygit2.Repository(str(self.context.cwd))

    def add(self, path: str = ".") -> None:
        self.git("add --verbose " + path)

    def add_commit(self, message: str) -> str:
        self.add()
        return self.commit(message)

    def checkout(self, *params: str) -> None:
        self.git("checkout " + " ".join(params))

    def commit(self, message: str) -> str:
        """Commit the index and return the new commit hash."""
        self.git("commit -m " + shlex.quote(message))
        return self.last()

    def tac(self, file: str) -> str:
        """Touch, add and commit: create ``file`` and commit it."""
        self.context.touch(file, _random_content())
        return self.add_commit("touched " + file)

    def modify(self, file: str) -> str:
        self.context.overwrite(file, _random_content())
        return self.add_commit("modified " + file)

    def last(self) -> str:
        return self.git("log -1 --pretty=%H")

    def log(self, *params: str) -> str:
        return self.git("log " + " ".join(params))

    def mv(self, from_path: PathLike, to_path: PathLike) -> None:
        # Paths are passed through unquoted.
        self.git(f"mv {from_path} {to_path}")

    def file(self, file_name: str) -> TestFile:
        return TestFile(self.context.child(file_name), self)


__all__ = ["DEFAULT_IDENTITY", "GitExecutor", "GitIdentity"]
