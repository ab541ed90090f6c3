"""Run git commands, retrying around transient index.lock contention."""
from __future__ import annotations

import logging
import threading
from typing import Optional

from .errors import ExecutionError, GitFatalError
from .executable import git_executable
from .executor import ExecutionContext, run_process, split_command_in_parameters

logger = logging.getLogger(__name__)

MAX_RETRIES = 3
INDEX_LOCK_MARKERS = ("fatal", "Unable to create", ".git/index.lock")


def is_index_lock_file_error(output: str) -> bool:
    """Return True when git failed because another process held index.lock."""
    return all(marker in output for marker in INDEX_LOCK_MARKERS)


class _VersionProbe:
    """Runs ``git version`` once per process, before the first real command."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False

    def ensure(self, runner: "GitRunner") -> None:
        if self._done:
            return
        with self._lock:
            if self._done:
                return
            self._done = True
            version = runner.call_git("version", ignore_non_zero_exit_code=True)
            logger.info("Using %s", version)

    def reset(self) -> None:
        with self._lock:
            self._done = False


_VERSION_PROBE = _VersionProbe()


def reset_version_probe() -> None:
    """Forget that ``git version`` already ran. Only meant for tests."""
    _VERSION_PROBE.reset()


class GitRunner:
    """Executes git commands against an :class:`ExecutionContext`."""

    def __init__(self, context: ExecutionContext) -> None:
        self.context = context

    def git(self, command: str, ignore_non_zero_exit_code: bool = False) -> str:
        """Run ``git <command>`` in the context's current directory.

        Args:
            command: Everything after ``git``; quoted substrings stay intact.
            ignore_non_zero_exit_code: Return the output of a failing command
                instead of raising :class:`ExecutionError`.

        Returns:
            Combined stdout/stderr of the command, stripped.

        Raises:
            ExecutionError: The command failed for a reason other than index
                lock contention and failures were not ignored.
            GitFatalError: Index lock contention persisted for every attempt.
        """
        _VERSION_PROBE.ensure(self)
        return self.call_git(command, ignore_non_zero_exit_code)

    def call_git(self, command: str, ignore_non_zero_exit_code: bool = False) -> str:
        """Run a command with the retry loop but without the version probe."""
        last_error: Optional[ExecutionError] = None
        for attempt in range(MAX_RETRIES):
            workdir = self.context.cwd
            logger.debug("[%s] # git %s", workdir.name, command)
            argv = [git_executable(), *split_command_in_parameters(command)]
            try:
                output = run_process(workdir, argv, ignore_non_zero_exit_code)
                if not is_index_lock_file_error(output):
                    return output
            except ExecutionError as error:
                output = error.output
                if not is_index_lock_file_error(output):
                    raise
                last_error = error

            logger.info("Index lock file error, attempt #%s: %s", attempt, output)

        raise GitFatalError(
            f"fatal error during execution of Git command: {command}"
        ) from last_error


__all__ = [
    "MAX_RETRIES",
    "GitRunner",
    "is_index_lock_file_error",
    "reset_version_probe",
]
