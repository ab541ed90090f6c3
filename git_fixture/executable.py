"""Locate the git executable used by the fixtures."""
from __future__ import annotations

import functools
import logging
import os
import shutil
from typing import Optional

from .errors import GitExecutableNotFoundError

logger = logging.getLogger(__name__)

GIT_EXECUTABLE_ENV = "GIT_FIXTURE_EXECUTABLE"


def find_git_executable() -> Optional[str]:
    """Return the explicit override if it exists, else whatever is on PATH."""

    override = os.environ.get(GIT_EXECUTABLE_ENV, "").strip()
    if override:
        if os.path.isfile(override):
            return override
        logger.warning(
            "%s points to '%s', which is not a file; falling back to PATH.",
            GIT_EXECUTABLE_ENV,
            override,
        )
    return shutil.which("git")


@functools.lru_cache(maxsize=None)
def git_executable() -> str:
    """Resolve the git executable once per process."""

    path = find_git_executable()
    if not path:
        raise GitExecutableNotFoundError(
            f"git executable not found; install git or set {GIT_EXECUTABLE_ENV}."
        )
    logger.debug("Using git executable: %s", path)
    return path


__all__ = ["GIT_EXECUTABLE_ENV", "find_git_executable", "git_executable"]
