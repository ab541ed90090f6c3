"""Chainable handle for a single file inside a fixture repository."""
from __future__ import annotations

import shlex
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .helpers import GitExecutor


class TestFile:
    """A file path plus the helpers fixtures usually need for it."""

    __test__ = False

    def __init__(self, path: Path, executor: "GitExecutor") -> None:
        self._path = path
        self._executor = executor

    @property
    def path(self) -> Path:
        return self._path

    def __repr__(self) -> str:
        return f"TestFile({str(self._path)!r})"

    def append(self, content: str) -> "TestFile":
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("ab") as handle:
            handle.write(content.encode("utf-8"))
        return self

    def write(self, content: str) -> "TestFile":
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_bytes(content.encode("utf-8"))
        return self

    def create(self, content: str) -> "TestFile":
        """Write ``content`` to a file that must not exist yet."""
        self.assert_not_exists()
        return self.write(content)

    def assert_not_exists(self) -> "TestFile":
        if self.exists():
            raise AssertionError(f"File {self._path} should not exist")
        return self

    def add(self) -> "TestFile":
        self._executor.add(shlex.quote(str(self._path)))
        return self

    def exists(self) -> bool:
        return self._path.exists()


__all__ = ["TestFile"]
