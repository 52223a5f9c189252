"""High-level orchestration for environment operations."""

from __future__ import annotations

from dataclasses import dataclass

from rich.markup import escape

from . import gitpod, render
from .models import EnvironmentRecord


@dataclass
class EnvironmentService:
    verbose: bool = False

    def list_environments(self) -> list[EnvironmentRecord]:
        return gitpod.list_environments(verbose=self.verbose)

    def ensure_running(self, record: EnvironmentRecord) -> None:
        """Start the environment unless it already reports a running phase.

        Completion of the start command is taken as readiness; the phase is
        not polled again afterwards.
        """

        if record.is_running:
            return
        phase = record.phase or "not running"
        render.info(f"Environment {escape(record.id)} is {escape(phase)}. Starting...")
        gitpod.start_environment(record.id, verbose=self.verbose)
        render.success(f"Started {escape(record.display_name)}")
