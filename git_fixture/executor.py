"""Process execution and working-directory bookkeeping for git fixtures."""
from __future__ import annotations

import contextlib
import logging
import shlex
import subprocess
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

import pygit2

from .errors import ExecutionError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def split_command_in_parameters(command: str) -> List[str]:
    """Split a command line into arguments, keeping quoted text together."""
    return shlex.split(command)


def run_process(
    workdir: Path,
    argv: Sequence[str],
    ignore_non_zero_exit_code: bool = False,
) -> str:
    """Run ``argv`` in ``workdir`` and return its combined, stripped output.

    stderr is folded into stdout so callers can inspect git's diagnostics the
    same way regardless of the exit status. A non-zero exit raises
    :class:`ExecutionError` unless ``ignore_non_zero_exit_code`` is set.
    """
    result = subprocess.run(
        list(argv),
        cwd=str(workdir),
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=False,
    )
    output = (result.stdout or "").strip()
    if result.returncode != 0:
        if not ignore_non_zero_exit_code:
            raise ExecutionError(argv, result.returncode, output)
        logger.debug("Ignoring exit code %s of %s", result.returncode, argv[1:])
    return output


class ExecutionContext:
    """Explicit "current directory" shared by the runner and its helpers."""

    def __init__(self, cwd: Optional[PathLike] = None) -> None:
        self._cwd = Path(cwd).resolve() if cwd is not None else Path.cwd()

    @property
    def cwd(self) -> Path:
        return self._cwd

    def __repr__(self) -> str:
        return f"ExecutionContext(cwd={str(self._cwd)!r})"

    def cd(self, path: PathLike) -> Path:
        """Change the current directory; relative paths resolve against it."""
        target = (self._cwd / path).resolve()
        if not target.is_dir():
            raise NotADirectoryError(f"Cannot cd into '{target}': not a directory")
        self._cwd = target
        return target

    def cd_repository(self, repository: pygit2.Repository) -> Path:
        workdir = repository.workdir
        if not workdir:
            raise ValueError(f"Repository at '{repository.path}' is bare")
        return self.cd(workdir)

    @contextlib.contextmanager
    def pushd(self, path: PathLike) -> Iterator[Path]:
        previous = self._cwd
        try:
            yield self.cd(path)
        finally:
            self._cwd = previous

    def child(self, name: PathLike) -> Path:
        return self._cwd / name

    def touch(self, name: PathLike, content: str = "") -> Path:
        """Create a new file below the current directory."""
        target = self.child(name)
        if target.exists():
            raise AssertionError(f"File {target} shouldn't exist yet")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    def overwrite(self, name: PathLike, content: str) -> Path:
        target = self.child(name)
        if not target.exists():
            raise AssertionError(f"File {target} should exist")
        target.write_text(content, encoding="utf-8")
        return target


__all__ = [
    "ExecutionContext",
    "run_process",
    "split_command_in_parameters",
]
