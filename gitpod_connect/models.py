"""Dataclasses shared across modules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

HOST_SUFFIX = "gitpod.environment"

_REPO_NAME_PATTERN = re.compile(r"/([^/]+)\.git$")


def repo_name_from_url(url: str) -> str:
    """Return the repository name from a clone URL, or the URL itself."""

    match = _REPO_NAME_PATTERN.search(url)
    if match:
        return match.group(1)
    return url


def host_for(environment_id: str) -> str:
    return f"{environment_id}.{HOST_SUFFIX}"


class EditorChoice(str, Enum):
    """Editors that support `--remote ssh-remote+<host>`."""

    code = "code"
    cursor = "cursor"


@dataclass(frozen=True)
class EnvironmentRecord:
    """One row of `gitpod environment list`."""

    id: str
    repository_url: str
    branch: str
    resource_class: str
    phase: str

    @property
    def repo_name(self) -> str:
        return repo_name_from_url(self.repository_url)

    @property
    def display_name(self) -> str:
        return f"{self.repo_name} [{self.branch}]"

    @property
    def is_running(self) -> bool:
        return self.phase.lower() == "running"
