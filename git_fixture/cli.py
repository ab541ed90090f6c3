"""Git Fixture Typer CLI.

Lets shell scripts prepare repository fixtures with the same retrying git
runner the pytest helpers use.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .errors import ExecutionError, GitFatalError
from .executor import ExecutionContext
from .helpers import GitExecutor

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Prepare throwaway git repositories for integration tests.",
)

REPO_OPTION_HELP = "Repository working directory (defaults to the current directory)."


def _repo_option() -> Optional[Path]:
    return typer.Option(
        None,
        "--repo",
        envvar="REPO_PATH",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        help=REPO_OPTION_HELP,
    )


def _executor(repo: Optional[Path]) -> GitExecutor:
    return GitExecutor(ExecutionContext(repo))


def _guarded(action, *args: str) -> str:
    """Invoke a helper, translating git failures into exit codes."""
    try:
        return action(*args)
    except ExecutionError as error:
        logger.error("Git command failed (exit %s):\n%s", error.returncode, error.output)
        raise typer.Exit(code=1) from error
    except (AssertionError, ValueError) as error:
        logger.error("%s", error)
        raise typer.Exit(code=1) from error
    except GitFatalError as error:
        logger.error("%s", error)
        raise typer.Exit(code=2) from error


@app.command(name="run")
def run(
    command: str = typer.Argument(..., help="Arguments after 'git', e.g. \"commit -m 'msg'\"."),
    repo: Optional[Path] = _repo_option(),
    ignore_exit_code: bool = typer.Option(
        False,
        "--ignore-exit-code",
        help="Print the output of a failing command instead of exiting with 1.",
    ),
) -> None:
    """Run a git command with index.lock retries."""
    executor = _executor(repo)
    output = _guarded(lambda cmd: executor.git(cmd, ignore_exit_code), command)
    if output:
        typer.echo(output)


@app.command(name="tac")
def tac(
    file: str = typer.Argument(..., help="File to create and commit."),
    repo: Optional[Path] = _repo_option(),
) -> None:
    """Create FILE with random content, commit it, and print the hash."""
    typer.echo(_guarded(_executor(repo).tac, file))


@app.command(name="modify")
def modify(
    file: str = typer.Argument(..., help="Tracked file to rewrite and commit."),
    repo: Optional[Path] = _repo_option(),
) -> None:
    """Rewrite FILE with random content, commit it, and print the hash."""
    typer.echo(_guarded(_executor(repo).modify, file))


@app.command(name="last")
def last(repo: Optional[Path] = _repo_option()) -> None:
    """Print the hash of the most recent commit."""
    typer.echo(_guarded(_executor(repo).last))


def main() -> None:
    """Entry point for tooling that expects a callable main."""
    app()
