"""Open an SSH shell or a remote editor session to an environment."""

from __future__ import annotations

import shutil
import subprocess

from . import render
from .exceptions import EditorNotFound, ToolNotFound
from .models import EditorChoice, host_for

SSH_BINARY = "ssh"
EDITOR_PREFERENCE = (EditorChoice.code, EditorChoice.cursor)

_INSTALL_STEPS = {
    EditorChoice.code: "In VS Code run 'Shell Command: Install 'code' command in PATH'.",
    EditorChoice.cursor: "In Cursor run 'Shell Command: Install 'cursor' command in PATH'.",
}


def is_available(command: str) -> bool:
    return shutil.which(command) is not None


def resolve_editor(requested: EditorChoice | None = None) -> EditorChoice:
    """Pick the editor to launch.

    An explicit request is the only candidate checked. Otherwise the first
    available editor from EDITOR_PREFERENCE wins.
    """

    if requested is not None:
        if is_available(requested.value):
            return requested
        raise EditorNotFound(
            f"Editor '{requested.value}' not found on PATH. {_INSTALL_STEPS[requested]}"
        )
    for candidate in EDITOR_PREFERENCE:
        if is_available(candidate.value):
            return candidate
    names = " or ".join(f"'{candidate.value}'" for candidate in EDITOR_PREFERENCE)
    steps = " ".join(_INSTALL_STEPS[candidate] for candidate in EDITOR_PREFERENCE)
    raise EditorNotFound(f"Neither {names} was found on PATH. {steps}")


def editor_command(editor: EditorChoice, environment_id: str, folder: str) -> list[str]:
    return [editor.value, "--remote", f"ssh-remote+{host_for(environment_id)}", folder]


def connect_ssh(environment_id: str, *, verbose: bool = False) -> int:
    """Run an interactive ssh session and return the exit code to use."""

    cmd = [SSH_BINARY, host_for(environment_id)]
    render.show_connecting(" ".join(cmd))
    if verbose:
        render.show_command(cmd)
    try:
        proc = subprocess.run(cmd, check=False)
    except FileNotFoundError:
        raise ToolNotFound(SSH_BINARY, "Install an OpenSSH client and try again.") from None
    # negative return codes mean the session ended on a signal
    return proc.returncode if proc.returncode > 0 else 0


def connect_editor(
    environment_id: str,
    folder: str,
    editor: EditorChoice,
    *,
    verbose: bool = False,
) -> None:
    """Launch the editor detached from this process without waiting on it."""

    cmd = editor_command(editor, environment_id, folder)
    render.show_connecting(f"{editor.value} {cmd[2]}")
    if verbose:
        render.show_command(cmd)
    try:
        subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except FileNotFoundError:
        raise ToolNotFound(editor.value, _INSTALL_STEPS[editor]) from None
