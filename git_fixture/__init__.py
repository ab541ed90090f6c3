"""Git Fixture package."""
from importlib.metadata import version

from .errors import ExecutionError, GitExecutableNotFoundError, GitFatalError
from .executable import find_git_executable, git_executable
from .executor import ExecutionContext, run_process, split_command_in_parameters
from .files import TestFile
from .helpers import DEFAULT_IDENTITY, GitExecutor, GitIdentity
from .runner import MAX_RETRIES, GitRunner, is_index_lock_file_error

__all__ = [
    "DEFAULT_IDENTITY",
    "MAX_RETRIES",
    "ExecutionContext",
    "ExecutionError",
    "GitExecutableNotFoundError",
    "GitExecutor",
    "GitFatalError",
    "GitIdentity",
    "GitRunner",
    "TestFile",
    "find_git_executable",
    "git_executable",
    "is_index_lock_file_error",
    "run_process",
    "split_command_in_parameters",
]

try:
    __version__ = version("git-fixture")
except Exception:  # pragma: no cover - local dev fallback
    __version__ = "0.0.0"
