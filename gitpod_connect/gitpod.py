"""Thin wrappers around the gitpod CLI."""

from __future__ import annotations

import subprocess
from typing import Iterable

from . import render
from .exceptions import ToolError, ToolNotFound
from .models import EnvironmentRecord
from .parsing import parse_environment_list

GITPOD_BINARY = "gitpod"
INSTALL_HINT = "Please install it first: https://www.gitpod.io/docs/flex/integrations/cli"


def run_gitpod(args: Iterable[str], *, verbose: bool = False) -> subprocess.CompletedProcess[str]:
    """Execute a gitpod command and wait for it to finish.

    The exit status is left to the caller; the CLI signals failure through
    its diagnostic output.
    """

    cmd = [GITPOD_BINARY, *args]
    if verbose:
        render.show_command(cmd)
    try:
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        raise ToolNotFound(GITPOD_BINARY, INSTALL_HINT) from None


def list_environments(*, verbose: bool = False) -> list[EnvironmentRecord]:
    proc = run_gitpod(["environment", "list"], verbose=verbose)
    stdout = proc.stdout or ""
    stderr = proc.stderr or ""
    # warnings on stderr are fine as long as the listing came through
    if stderr.strip() and not stdout.strip():
        raise ToolError(proc.args, proc.returncode, stderr)
    return parse_environment_list(stdout)


def start_environment(environment_id: str, *, verbose: bool = False) -> None:
    proc = run_gitpod(["environment", "start", environment_id], verbose=verbose)
    stderr = proc.stderr or ""
    if "error" in stderr:
        raise ToolError(proc.args, proc.returncode, stderr)
